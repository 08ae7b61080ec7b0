# app/repos/order_repo.py
from typing import List

from app.data.models import Order, User
from app.data.store import InMemoryStore


class OrderRepo:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def create_order(self, user: User, order: Order) -> Order:
        self.store.orders.append(order)
        user.orders.append(order)
        self.store.order_count += 1
        return order

    def get_order(self, order_id: str) -> Order | None:
        for order in self.store.orders:
            if order.id == order_id:
                return order
        return None

    def list_orders(self) -> List[Order]:
        return list(self.store.orders)

    def count(self) -> int:
        return self.store.order_count
