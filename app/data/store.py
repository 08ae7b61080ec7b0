# app/data/store.py
import threading
from typing import Dict, List, Mapping, Optional

from app.data.models import Coupon, Order, Product, User
from app.data.seed import build_catalog


class InMemoryStore:
    """
    Caly stan aplikacji w pamieci procesu, zamiast bazy danych.

    Jeden RLock chroni wszystkie kolekcje i licznik zamowien. Checkout,
    dodawanie do koszyka i wydawanie kuponow wykonuja sie pod tym lockiem,
    wiec zaden kupon nie zostanie uzyty dwa razy, a order_count rosnie
    dokladnie o 1 na zamowienie.
    """

    def __init__(
        self,
        nth_order: int,
        discount_rate: float,
        products: Optional[Mapping[str, Product]] = None,
    ):
        self.nth_order = nth_order
        self.discount_rate = discount_rate
        self.lock = threading.RLock()
        self._seed_products = dict(products) if products is not None else build_catalog()
        self._init_state()

    def _init_state(self) -> None:
        self.products: Dict[str, Product] = dict(self._seed_products)
        self.users: Dict[str, User] = {}
        self.orders: List[Order] = []
        self.coupons: List[Coupon] = []
        self.order_count = 0

    def reset(self) -> None:
        """Tylko dla testow: przywraca katalog startowy i czysci reszte."""
        with self.lock:
            self._init_state()
