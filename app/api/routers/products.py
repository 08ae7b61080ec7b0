from typing import List

from fastapi import APIRouter, Depends

from app.data.database import get_store
from app.data.store import InMemoryStore
from app.domain.schemas import ProductOut

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
def list_products(store: InMemoryStore = Depends(get_store)):
    return list(store.products.values())
