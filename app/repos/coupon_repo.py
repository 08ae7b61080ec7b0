# app/repos/coupon_repo.py
from dataclasses import replace
from typing import List

from app.data.models import Coupon
from app.data.store import InMemoryStore


class CouponRepo:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_by_code(self, code: str | None) -> Coupon | None:
        if not code:
            return None
        for coupon in self.store.coupons:
            if coupon.code == code:
                return coupon
        return None

    def code_exists(self, code: str) -> bool:
        return self.get_by_code(code) is not None

    def has_unused(self) -> bool:
        return any(not c.used for c in self.store.coupons)

    def add(self, coupon: Coupon) -> Coupon:
        self.store.coupons.append(coupon)
        return coupon

    def list_coupons(self) -> List[Coupon]:
        # kopie, zmiany stanu kuponu tylko pod lockiem store'a
        return [replace(c) for c in self.store.coupons]
