# app/main.py
import logging
from typing import List, Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import Settings, get_settings
from .database import ProductStore
from .errors import register_error_handlers
from .handlers import (
    create_product_logic, delete_product_logic, get_product_logic,
    list_products_logic, product_stats_logic, update_product_logic, welcome_logic,
)
from .logging_config import configure_logging
from .models import DeletedProduct, Product, ProductIn, ProductStats, ProductUpdate

logger = logging.getLogger(__name__)
request_logger = logging.getLogger("app.requests")

UNAUTHORIZED_MESSAGE = "Unauthorized - Invalid API Key"

router = APIRouter()


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


# ---------------------------
# Routes
# ---------------------------
@router.get("/", response_class=PlainTextResponse)
async def welcome():
    return await welcome_logic()


@router.get("/api/products", response_model=List[Product])
async def list_products(
    search: Optional[str] = None,
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    return await list_products_logic(store, search=search, category=category, page=page, limit=limit)


# Starlette matches in registration order: this must stay above /{product_id}
@router.get("/api/products/stats", response_model=ProductStats)
async def product_stats(store: ProductStore = Depends(get_store)):
    return await product_stats_logic(store)


@router.get("/api/products/{product_id}", response_model=Product)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await get_product_logic(store, product_id)


@router.post("/api/products", status_code=status.HTTP_201_CREATED, response_model=Product)
async def create_product(payload: ProductIn, store: ProductStore = Depends(get_store)):
    return await create_product_logic(store, payload)


@router.put("/api/products/{product_id}", response_model=Product)
async def update_product(product_id: str, payload: ProductUpdate, store: ProductStore = Depends(get_store)):
    return await update_product_logic(store, product_id, payload)


@router.delete("/api/products/{product_id}", response_model=DeletedProduct)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await delete_product_logic(store, product_id)


# ---------------------------
# Middleware
# ---------------------------
def _install_middleware(app: FastAPI, settings: Settings) -> None:
    # last added runs first: request log, CORS, api key check, then routing

    @app.middleware("http")
    async def require_api_key(request: Request, call_next):
        if request.headers.get("x-api-key") != settings.api_key:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"message": UNAUTHORIZED_MESSAGE},
            )
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        request_logger.info("%s %s", request.method, url)
        return await call_next(request)


# ---------------------------
# App factory
# ---------------------------
def create_app(store: Optional[ProductStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.project_name)
    app.state.store = store if store is not None else ProductStore()
    app.state.settings = settings

    register_error_handlers(app)
    _install_middleware(app, settings)
    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
