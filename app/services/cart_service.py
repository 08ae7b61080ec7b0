import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List

from app.data.models import CartItem
from app.data.store import InMemoryStore
from app.exceptions import NotFoundError, ValidationError
from app.repos.cart_repo import CartRepo
from app.repos.user_repo import UserRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def normalize_qty(qty: Any) -> int:
    """
    Ilosc musi byc liczba calkowita >= 1.
    None oznacza domyslne 1, "2" i 2.0 z JSONa sa akceptowane.
    """
    if qty is None:
        return 1

    invalid = ValidationError("Quantity must be a positive integer", code="INVALID_QTY")

    if isinstance(qty, bool):
        raise invalid

    if isinstance(qty, int):
        n = qty
    elif isinstance(qty, float):
        if not math.isfinite(qty) or not qty.is_integer():
            raise invalid
        n = int(qty)
    elif isinstance(qty, str):
        try:
            parsed = Decimal(qty.strip())
        except InvalidOperation:
            raise invalid
        if not parsed.is_finite() or parsed != parsed.to_integral_value():
            raise invalid
        n = int(parsed)
    else:
        raise invalid

    if n <= 0:
        raise invalid
    return n


class CartService:
    """
    Use case'y dla domeny cart
    commands (add_item) modyfikuja stan
    query (view_cart) tylko odczyt
    """

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.repo = CartRepo(store)
        self.users = UserRepo(store)

    #query - odczyt
    def view_cart(self, user_id: str) -> Dict[str, Any]:
        with self.store.lock:
            user = self.users.get_or_create_user(user_id)

            items = [
                {
                    "product_id": i.product_id,
                    "qty": i.qty,
                    "product": self.repo.get_product(i.product_id),
                }
                for i in user.cart
            ]
            total = self.repo.subtotal(user.cart)

        return {
            "user_id": user_id,
            "items": items,
            "total": total,
        }

    #commands
    def add_item(self, user_id: str, product_id: str | None, qty: Any = None) -> List[CartItem]:
        if not product_id:
            raise ValidationError("productId is required", code="PRODUCT_ID_REQUIRED")

        with self.store.lock:
            if self.repo.get_product(product_id) is None:
                raise NotFoundError("Product not found", code="PRODUCT_NOT_FOUND")

            quantity = normalize_qty(qty)
            user = self.users.get_or_create_user(user_id)

            # Sprawdz czy produkt juz jest w koszyku
            existing_item = self.repo.get_cart_item(user, product_id)

            if existing_item:
                logger.info(
                    f"Produkt {product_id} już jest w koszyku {user_id}, zwiekszam ilosc "
                    f"z {existing_item.qty} do {existing_item.qty + quantity}"
                )
                existing_item.qty += quantity
            else:
                logger.info(f"Dodaje nowy produkt {product_id} do koszyka {user_id}")
                self.repo.add_cart_item(user, CartItem(product_id=product_id, qty=quantity))

            return [CartItem(product_id=i.product_id, qty=i.qty) for i in user.cart]
