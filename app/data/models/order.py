from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple


@dataclass(frozen=True)
class OrderItem:
    product_id: str
    qty: int


@dataclass(frozen=True)
class Order:
    id: str
    user_id: str
    items: Tuple[OrderItem, ...]
    subtotal: int
    discount_amount: int
    total: int
    coupon_code: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
