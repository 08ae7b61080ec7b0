from dataclasses import dataclass


@dataclass
class CartItem:
    product_id: str
    qty: int
