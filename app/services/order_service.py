# app/services/order_service.py
import uuid
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from app.data.models import Order, OrderItem
from app.data.store import InMemoryStore
from app.exceptions import ConflictError, NotFoundError, PreconditionError
from app.repos.cart_repo import CartRepo
from app.repos.coupon_repo import CouponRepo
from app.repos.order_repo import OrderRepo
from app.repos.user_repo import UserRepo
from app.services.coupon_service import CouponService
from app.utils.logging import get_logger

logger = get_logger(__name__)


def compute_discount(subtotal: int, rate: float) -> int:
    """Rabat zaokraglony do najblizszej liczby calkowitej, nigdy wiekszy niz subtotal."""
    discount = (Decimal(subtotal) * Decimal(str(rate))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return min(int(discount), subtotal)


@dataclass(frozen=True)
class CheckoutResult:
    order: Order
    effective_discount_rate: float


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Checkout zamienia koszyk (+ opcjonalny kupon) w niezmienne zamowienie.
    """

    def __init__(self, store: InMemoryStore, coupon_service: CouponService | None = None):
        self.store = store
        self.repo = OrderRepo(store)
        self.carts = CartRepo(store)
        self.users = UserRepo(store)
        self.coupon_repo = CouponRepo(store)
        self.coupons = coupon_service or CouponService(store)

    def checkout(self, user_id: str, coupon_code: str | None = None) -> CheckoutResult:
        """
        Use Case: Tworzenie zamówienia z koszyka.

        1. Waliduje kupon (jesli podany)
        2. Oblicza subtotal po aktualnych cenach katalogu
        3. Nalicza rabat
        4. Tworzy zamówienie, zuzywa kupon, czysci koszyk, podbija licznik
        5. Ewentualnie wydaje nowy kupon (co N-te zamowienie)

        Wszystkie bledy sa wykrywane przed jakakolwiek zmiana stanu, a caly
        use case wykonuje sie pod jednym lockiem store'a.
        """
        with self.store.lock:
            coupon = None
            if coupon_code:
                coupon = self.coupon_repo.get_by_code(coupon_code)

                if coupon is None:
                    raise NotFoundError("Invalid coupon code", code="INVALID_COUPON", status_code=400)

                if coupon.used:
                    logger.warning(f"User {user_id} tried to reuse coupon {coupon.code}")
                    raise ConflictError(
                        "Coupon has already been used", code="COUPON_ALREADY_USED", status_code=400
                    )

            # checkout nie tworzy uzytkownika
            user = self.users.get_user(user_id)
            if user is None or not user.cart:
                raise PreconditionError("Cart is empty", code="CART_EMPTY")

            subtotal = self.carts.subtotal(user.cart)
            if subtotal <= 0:
                raise PreconditionError("Cart total must be positive", code="INVALID_CART_TOTAL")

            rate = self.store.discount_rate if coupon else 0
            discount_amount = compute_discount(subtotal, rate) if coupon else 0

            order = Order(
                id=str(uuid.uuid4()),
                user_id=user_id,
                items=tuple(OrderItem(product_id=i.product_id, qty=i.qty) for i in user.cart),
                subtotal=subtotal,
                discount_amount=discount_amount,
                total=subtotal - discount_amount,
                coupon_code=coupon.code if coupon else None,
            )

            if coupon:
                coupon.mark_used(order.id)
                logger.info(f"Coupon {coupon.code} used by order {order.id}")

            self.repo.create_order(user, order)
            self.carts.clear_cart(user)

            logger.info(
                f"Order {order.id} placed by {user_id}: subtotal={subtotal} "
                f"discount={discount_amount} total={order.total} (order #{self.store.order_count})"
            )

            self.coupons.maybe_issue_for_nth_order()

        return CheckoutResult(order=order, effective_discount_rate=rate)

    def get_order(self, order_id: str) -> Order:
        """
        Use Case: Pobranie zamówienia (Query).
        """
        with self.store.lock:
            order = self.repo.get_order(order_id)

        if not order:
            raise NotFoundError("Order not found", code="ORDER_NOT_FOUND")

        return order

    def list_user_orders(self, user_id: str) -> List[Order]:
        with self.store.lock:
            user = self.users.get_user(user_id)
            return list(user.orders) if user else []
