import itertools

import pytest
from fastapi.testclient import TestClient

from app.api import create_app
from app.data.database import get_store
from app.data.store import InMemoryStore
from app.services.cart_service import CartService
from app.services.coupon_service import CouponService
from app.services.order_service import OrderService
from app.services.stats_service import StatsService


@pytest.fixture(scope='function')
def store():
    """Fresh in-memory store with the seed catalog, N=3, 10% discount."""
    return InMemoryStore(nth_order=3, discount_rate=0.10)


@pytest.fixture(scope='function')
def code_generator():
    """Deterministic coupon codes: C-TEST0001, C-TEST0002, ..."""
    counter = itertools.count(1)
    return lambda: f"C-TEST{next(counter):04d}"


@pytest.fixture(scope='function')
def cart_service(store):
    return CartService(store)


@pytest.fixture(scope='function')
def coupon_service(store, code_generator):
    return CouponService(store, code_generator=code_generator)


@pytest.fixture(scope='function')
def order_service(store, coupon_service):
    return OrderService(store, coupon_service=coupon_service)


@pytest.fixture(scope='function')
def stats_service(store):
    return StatsService(store)


@pytest.fixture(scope='function')
def place_order(cart_service, order_service):
    """Add one item for a user and check out, returning the CheckoutResult."""
    def _place(user_id, product_id='p1', qty=1, coupon_code=None):
        cart_service.add_item(user_id, product_id, qty)
        return order_service.checkout(user_id, coupon_code)
    return _place


@pytest.fixture(scope='function')
def app(store):
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    return app


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return TestClient(app)
