# app/domain/schemas.py
from pydantic import AliasGenerator, BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, List, Optional
from datetime import datetime


class ItemIn(BaseModel):
    """Dodanie produktu do koszyka. Walidacja wartosci w CartService."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: Optional[str] = Field(None, alias="productId", description="ID produktu")
    qty: Any = Field(None, description="Ilość produktu, domyślnie 1")


class CheckoutIn(BaseModel):
    """Checkout z opcjonalnym kodem kuponu."""

    model_config = ConfigDict(populate_by_name=True)

    coupon_code: Optional[str] = Field(None, alias="couponCode")


class ApiOut(BaseModel):
    """Odpowiedzi w camelCase (productId, discountAmount), jak wejscie."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class ProductOut(ApiOut):
    id: str
    name: str
    price: int


class CartItemOut(ApiOut):
    product_id: str
    qty: int


class CartLineOut(ApiOut):
    product_id: str
    qty: int
    product: Optional[ProductOut] = None


class CartOut(ApiOut):
    """Koszyk z danymi produktow i policzonym totalem."""

    user_id: str
    items: List[CartLineOut]
    total: int


class AddItemOut(ApiOut):
    cart: List[CartItemOut]
    message: str = "Item added to cart"


class OrderItemOut(ApiOut):
    product_id: str
    qty: int


class OrderOut(ApiOut):
    id: str
    user_id: str
    items: List[OrderItemOut]
    subtotal: int
    discount_amount: int
    total: int
    coupon_code: Optional[str] = None
    created_at: datetime


class CheckoutOut(ApiOut):
    order: OrderOut
    effective_discount_rate: float


class CouponOut(ApiOut):
    code: str
    created_at: datetime
    used: bool
    used_by_order_id: Optional[str] = None
    used_at: Optional[datetime] = None
    created_for_order_number: int


class StatsOut(ApiOut):
    order_count: int
    total_items_purchased: int
    total_purchase_amount: int
    total_discount_amount: int
    coupons: List[CouponOut]
