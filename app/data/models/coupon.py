from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class Coupon:
    code: str
    created_for_order_number: int
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    used: bool = False
    used_by_order_id: Optional[str] = None
    used_at: Optional[datetime] = None

    def mark_used(self, order_id: str) -> None:
        # jedyne przejscie stanu: unused -> used
        self.used = True
        self.used_by_order_id = order_id
        self.used_at = datetime.now(timezone.utc)
