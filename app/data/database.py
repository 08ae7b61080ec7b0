# app/data/database.py
from typing import Iterator

from app.data.seed import build_catalog, catalog_from_payload
from app.data.store import InMemoryStore
from app.services.product_client import ProductClient
from app.utils.settings import DISCOUNT_RATE, NTH_ORDER_FOR_COUPON, PRODUCT_SERVICE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


def load_catalog():
    if not PRODUCT_SERVICE_URL:
        logger.info("PRODUCT_SERVICE_URL not set, using seed catalog")
        return build_catalog()
    payload = ProductClient(PRODUCT_SERVICE_URL).fetch_catalog()
    catalog = catalog_from_payload(payload)
    logger.info(f"Loaded {len(catalog)} products from {PRODUCT_SERVICE_URL}")
    return catalog


store = InMemoryStore(
    nth_order=NTH_ORDER_FOR_COUPON,
    discount_rate=DISCOUNT_RATE,
    products=load_catalog(),
)


def get_store() -> Iterator[InMemoryStore]:
    yield store


def reset_store() -> None:
    store.reset()
