# app/services/stats_service.py
from typing import Any, Dict

from app.data.store import InMemoryStore
from app.repos.coupon_repo import CouponRepo
from app.repos.order_repo import OrderRepo


class StatsService:
    def __init__(self, store: InMemoryStore):
        self.store = store
        self.orders = OrderRepo(store)
        self.coupons = CouponRepo(store)

    def stats(self) -> Dict[str, Any]:
        """Statystyki liczone od zera z historii zamowien, bez efektow ubocznych."""
        with self.store.lock:
            orders = self.orders.list_orders()
            return {
                "order_count": self.orders.count(),
                "total_items_purchased": sum(i.qty for o in orders for i in o.items),
                "total_purchase_amount": sum(o.total for o in orders),
                "total_discount_amount": sum(o.discount_amount for o in orders),
                "coupons": self.coupons.list_coupons(),
            }
