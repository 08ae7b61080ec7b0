# app/repos/cart_repo.py
from typing import Iterable

from app.data.models import CartItem, Product, User
from app.data.store import InMemoryStore


class CartRepo:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_product(self, product_id: str) -> Product | None:
        return self.store.products.get(product_id)

    def get_cart_item(self, user: User, product_id: str) -> CartItem | None:
        for item in user.cart:
            if item.product_id == product_id:
                return item
        return None

    def add_cart_item(self, user: User, item: CartItem) -> CartItem:
        user.cart.append(item)
        return item

    def clear_cart(self, user: User) -> None:
        user.cart = []

    def subtotal(self, items: Iterable[CartItem]) -> int:
        total = 0
        for item in items:
            product = self.get_product(item.product_id)
            if product is None:
                # produkt zniknal z katalogu po dodaniu do koszyka, pomijamy
                continue
            total += product.price * item.qty
        return total
