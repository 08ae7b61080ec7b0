# app/main.py
import uvicorn

from app.api import create_app
from app.utils.settings import DISCOUNT_RATE, NTH_ORDER_FOR_COUPON, PORT
from app.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()

logger.info(f"Shop service ready: coupon every {NTH_ORDER_FOR_COUPON} orders, discount {DISCOUNT_RATE:.0%}")

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
