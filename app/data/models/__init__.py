#import wszystkich modeli, reszta kodu importuje z app.data.models

from app.data.models.product import Product
from app.data.models.cart_item import CartItem
from app.data.models.coupon import Coupon
from app.data.models.order import Order, OrderItem
from app.data.models.user import User

__all__ = ["Product", "CartItem", "Coupon", "Order", "OrderItem", "User"]
