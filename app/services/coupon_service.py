# app/services/coupon_service.py
import secrets
import string
from dataclasses import replace
from typing import Callable, List

from app.data.models import Coupon
from app.data.store import InMemoryStore
from app.exceptions import ConflictError, PreconditionError
from app.repos.coupon_repo import CouponRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

CODE_PREFIX = "C-"
CODE_LENGTH = 8
CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_coupon_code() -> str:
    return CODE_PREFIX + "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))


class CouponService:
    """
    Rejestr kuponow i polityka "co N-te zamowienie".

    Kupon powstaje gdy order_count > 0, order_count % N == 0 i nie ma
    zadnego niewykorzystanego kuponu, wiec w obiegu jest maksymalnie jeden.
    """

    def __init__(
        self,
        store: InMemoryStore,
        code_generator: Callable[[], str] = generate_coupon_code,
    ):
        self.store = store
        self.repo = CouponRepo(store)
        self.code_generator = code_generator

    def lookup(self, code: str | None) -> Coupon | None:
        with self.store.lock:
            coupon = self.repo.get_by_code(code)
            return replace(coupon) if coupon else None

    def list_coupons(self) -> List[Coupon]:
        with self.store.lock:
            return self.repo.list_coupons()

    def maybe_issue_for_nth_order(self) -> Coupon | None:
        """Automatyczna polityka, wolana po kazdym udanym checkoucie."""
        with self.store.lock:
            count = self.store.order_count
            if count == 0 or count % self.store.nth_order != 0:
                return None
            if self.repo.has_unused():
                logger.info(f"Order #{count} hit coupon interval but an unused coupon exists, skipping")
                return None
            return self._create_coupon()

    def admin_issue(self) -> Coupon:
        """Ta sama polityka co automatyczna, ale kazdy niespelniony warunek to blad."""
        with self.store.lock:
            count = self.store.order_count
            n = self.store.nth_order

            if count == 0:
                raise PreconditionError("No orders placed yet", code="NO_ORDERS")

            if count % n != 0:
                raise PreconditionError(
                    f"Coupon is available only after every {n}th order",
                    code="NOT_NTH_ORDER",
                )

            if self.repo.has_unused():
                raise ConflictError("An unused coupon already exists", code="UNUSED_COUPON_EXISTS")

            return self._create_coupon()

    def _create_coupon(self) -> Coupon:
        code = self.code_generator()
        while self.repo.code_exists(code):
            code = self.code_generator()

        coupon = self.repo.add(
            Coupon(code=code, created_for_order_number=self.store.order_count)
        )
        logger.info(f"Coupon {coupon.code} issued for order #{coupon.created_for_order_number}")
        return replace(coupon)
