from typing import Any, Dict, List, Optional

from .core import compute_stats, query_products
from .database import ProductStore
from .models import ProductIn, ProductUpdate, product_fields

# This file contains the core logic for all API endpoints.
# Errors are never handled here; they propagate to app.errors.

WELCOME_MESSAGE = "Welcome to the Product API! Go to /api/products to see all products."


async def welcome_logic() -> str:
    return WELCOME_MESSAGE


# Product endpoints
async def list_products_logic(
    store: ProductStore,
    search: Optional[str] = None,
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> List[Dict[str, Any]]:
    return query_products(store.list(), search=search, category=category, page=page, limit=limit)


async def product_stats_logic(store: ProductStore) -> Dict[str, Any]:
    return compute_stats(store.list())


async def get_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    return store.get(product_id)


async def create_product_logic(store: ProductStore, payload: ProductIn) -> Dict[str, Any]:
    return store.insert(product_fields(payload))


async def update_product_logic(store: ProductStore, product_id: str, payload: ProductUpdate) -> Dict[str, Any]:
    return store.update(product_id, product_fields(payload))


async def delete_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    deleted = store.delete(product_id)
    return {"message": "Product deleted", "product": deleted}
