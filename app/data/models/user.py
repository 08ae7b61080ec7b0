from dataclasses import dataclass, field
from typing import List

from app.data.models.cart_item import CartItem
from app.data.models.order import Order


@dataclass
class User:
    id: str
    cart: List[CartItem] = field(default_factory=list)
    orders: List[Order] = field(default_factory=list)
