#app/api/routers/carts.py
from fastapi import APIRouter, Depends

from app.data.database import get_store
from app.data.store import InMemoryStore
from app.domain.schemas import AddItemOut, CartOut, ItemIn
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(store: InMemoryStore = Depends(get_store)):
    return CartService(store)


@router.get("/{user_id}", response_model=CartOut)
def get_cart(user_id: str, svc: CartService = Depends(get_service)):
    return svc.view_cart(user_id)


@router.post("/{user_id}/items", response_model=AddItemOut)
def add_item(user_id: str, payload: ItemIn, svc: CartService = Depends(get_service)):
    cart = svc.add_item(user_id=user_id, product_id=payload.product_id, qty=payload.qty)
    return {"cart": cart}
