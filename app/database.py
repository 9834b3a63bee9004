import uuid
from typing import Any, Dict, Iterable, List, Optional

from .errors import NotFoundError

# This file holds the in-memory product collection.

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]

PRODUCT_NOT_FOUND = "Product not found"


class ProductStore:
    """Ordered in-memory product list. The only thing that mutates it.

    Records are plain dicts keyed by wire names. Insertion order is kept and
    is the default list order.
    """

    def __init__(self, products: Optional[Iterable[Dict[str, Any]]] = None):
        seed = SEED_PRODUCTS if products is None else products
        self._products: List[Dict[str, Any]] = [dict(p) for p in seed]

    def __len__(self) -> int:
        return len(self._products)

    def _index(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p["id"] == product_id:
                return i
        raise NotFoundError(PRODUCT_NOT_FOUND)

    def _new_id(self) -> str:
        taken = {p["id"] for p in self._products}
        pid = str(uuid.uuid4())
        while pid in taken:
            pid = str(uuid.uuid4())
        return pid

    def list(self) -> List[Dict[str, Any]]:
        return list(self._products)

    def get(self, product_id: str) -> Dict[str, Any]:
        return self._products[self._index(product_id)]

    def insert(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        product = {k: v for k, v in fields.items() if k != "id"}
        product = {"id": self._new_id(), **product}
        self._products.append(product)
        return product

    def update(self, product_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        i = self._index(product_id)
        changes = {k: v for k, v in fields.items() if k != "id"}
        self._products[i] = {**self._products[i], **changes}
        return self._products[i]

    def delete(self, product_id: str) -> Dict[str, Any]:
        return self._products.pop(self._index(product_id))
