# product_service/main.py
from fastapi import FastAPI, HTTPException

from app.data.seed import SEED_PRODUCTS

app = FastAPI(title="Product Service (dev mock)")


PRODUCTS = {
    p.id: {"id": p.id, "name": p.name, "price": p.price}
    for p in SEED_PRODUCTS
}


@app.get("/products")
def list_products():
    return list(PRODUCTS.values())


@app.get("/products/{product_id}")
def get_product(product_id: str):
    product = PRODUCTS.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
