from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: int  # najmniejsza jednostka waluty (grosze, centy)
