# app/data/seed.py
from typing import Dict, Iterable, Mapping

from app.data.models import Product

# ceny w najmniejszej jednostce waluty
SEED_PRODUCTS = (
    Product(id="p1", name="T-shirt", price=500),
    Product(id="p2", name="Mug", price=250),
    Product(id="p3", name="Sticker Pack", price=100),
)


def build_catalog(products: Iterable[Product] = SEED_PRODUCTS) -> Dict[str, Product]:
    return {p.id: p for p in products}


def catalog_from_payload(payload: Iterable[Mapping]) -> Dict[str, Product]:
    """Katalog z odpowiedzi product-service (lista dictow id/name/price)."""
    products = []
    for raw in payload:
        price = raw["price"]
        # cena w groszach, bez cichego obcinania 199.99 -> 199
        if isinstance(price, bool) or not isinstance(price, int):
            raise ValueError(f"Product {raw['id']} has non-integer price {price!r}")
        if price < 0:
            raise ValueError(f"Product {raw['id']} has negative price")
        products.append(Product(id=str(raw["id"]), name=str(raw["name"]), price=price))
    return build_catalog(products)
