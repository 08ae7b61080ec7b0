# app/utils/settings.py
import os
from dotenv import load_dotenv

from app.exceptions import ConfigError

load_dotenv()


def parse_coupon_settings(nth_raw: str, rate_raw: str) -> tuple[int, float]:
    """Waliduje konfiguracje kuponow, bledna wartosc zatrzymuje start aplikacji."""
    try:
        nth = int(nth_raw)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid NTH_ORDER_FOR_COUPON config: {nth_raw!r}")
    if nth <= 0:
        raise ConfigError(f"Invalid NTH_ORDER_FOR_COUPON config: {nth_raw!r}")

    try:
        rate = float(rate_raw)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid DISCOUNT_RATE config: {rate_raw!r}")
    # NaN fails both comparisons
    if not 0 < rate < 1:
        raise ConfigError(f"Invalid DISCOUNT_RATE config: {rate_raw!r}; expected 0 < rate < 1")

    return nth, rate


NTH_ORDER_FOR_COUPON, DISCOUNT_RATE = parse_coupon_settings(
    os.getenv("NTH_ORDER_FOR_COUPON", "3"),
    os.getenv("DISCOUNT_RATE", "0.10"),
)
PORT = int(os.getenv("PORT", 8000))
PRODUCT_SERVICE_URL = os.getenv("PRODUCT_SERVICE_URL", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
