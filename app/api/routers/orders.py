# app/api/routers/orders.py
from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from app.data.database import get_store
from app.data.store import InMemoryStore
from app.domain.schemas import CheckoutIn, CheckoutOut, OrderOut
from app.services.order_service import OrderService

router = APIRouter(tags=["orders"])


def get_service(store: InMemoryStore = Depends(get_store)):
    return OrderService(store)


@router.post("/checkout/{user_id}", response_model=CheckoutOut, status_code=201)
def checkout(
    user_id: str,
    payload: Optional[CheckoutIn] = Body(None),
    svc: OrderService = Depends(get_service),
):
    """
    Tworzy zamówienie z koszyka, opcjonalnie z kuponem rabatowym.
    """
    coupon_code = payload.coupon_code if payload else None
    return svc.checkout(user_id, coupon_code)


@router.get("/orders/{order_id}", response_model=OrderOut)
def get_order(order_id: str, svc: OrderService = Depends(get_service)):
    """
    Pobiera szczegóły zamówienia.
    """
    return svc.get_order(order_id)


@router.get("/users/{user_id}/orders", response_model=List[OrderOut])
def list_user_orders(user_id: str, svc: OrderService = Depends(get_service)):
    return svc.list_user_orders(user_id)
