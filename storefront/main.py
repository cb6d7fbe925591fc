# storefront/main.py
import logging
import os
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .database import CatalogStore
from .logging_utils import setup_logging
from .models import Category, ErrorBody, Health, Statistics
from .sdk import (
    create_order_logic, get_product_logic, list_categories_logic,
    list_orders_logic, list_products_logic, statistics_logic
)
from .settings import Settings, settings as default_settings

logger = logging.getLogger("storefront.main")

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

router = APIRouter()

# ---------------------------
# Dependencies
# ---------------------------
def get_store(request: Request) -> CatalogStore:
    return request.app.state.store

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

# ---------------------------
# Health
# ---------------------------
@router.get("/health", response_model=Health)
async def health():
    return Health()

# ---------------------------
# Product endpoints
# ---------------------------
@router.get("/products")
async def list_products(
    store: CatalogStore = Depends(get_store),
    cfg: Settings = Depends(get_settings),
):
    return await list_products_logic(store, live=cfg.products_live_reload)

@router.get("/products/{product_id}", responses={404: {"model": ErrorBody}})
async def get_product(product_id: str, store: CatalogStore = Depends(get_store)):
    return await get_product_logic(store, product_id)

# ---------------------------
# Category endpoints
# ---------------------------
@router.get("/categories", response_model=List[Category])
async def list_categories(store: CatalogStore = Depends(get_store)):
    return await list_categories_logic(store)

# ---------------------------
# Order endpoints
# ---------------------------
@router.get("/orders")
async def list_orders(store: CatalogStore = Depends(get_store)):
    return await list_orders_logic(store)

@router.post("/orders", status_code=201, responses={400: {"model": ErrorBody}})
async def create_order(
    payload: Any = Body(None),
    store: CatalogStore = Depends(get_store),
    cfg: Settings = Depends(get_settings),
):
    return await create_order_logic(store, payload, allow_client_id=cfg.allow_client_order_id)

# ---------------------------
# Statistics
# ---------------------------
@router.get("/statistics", response_model=Statistics)
async def statistics(store: CatalogStore = Depends(get_store)):
    return await statistics_logic(store)

# ---------------------------
# Error shapes
# ---------------------------
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )

async def validation_error_handler(request: Request, exc: RequestValidationError):
    # only POST /api/orders takes a body; a non-JSON body lands here
    message = "Invalid order payload" if request.url.path == "/api/orders" else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})

async def not_found(path: str):
    if path == "api" or path.startswith("api/"):
        raise HTTPException(status_code=404, detail="API route not found")
    raise HTTPException(status_code=404, detail="Not found")

async def admin_redirect():
    return RedirectResponse(url="/admin/", status_code=301)

# ---------------------------
# App factory
# ---------------------------
def create_app(cfg: Optional[Settings] = None, store: Optional[CatalogStore] = None) -> FastAPI:
    cfg = cfg or default_settings
    if store is None:
        store = CatalogStore(cfg.products_path, cfg.orders_path)

    app = FastAPI(title="storefront-api (JSON file catalog)")
    app.state.settings = cfg
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[cfg.cors_origin] if cfg.cors_origin else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(router, prefix="/api")

    if os.path.isdir(cfg.admin_path):
        app.add_api_route("/admin", admin_redirect, methods=["GET", "HEAD"], include_in_schema=False)
        app.mount("/admin", StaticFiles(directory=cfg.admin_path, html=True), name="admin")
    else:
        logger.info("Admin directory %s not found; /admin is not served", cfg.admin_path)

    # must stay last so real routes and the admin mount match first
    app.add_api_route("/{path:path}", not_found, methods=ALL_METHODS, include_in_schema=False)

    logger.info("storefront-api ready with %d products, %d orders", len(store.products), len(store.orders))
    return app


setup_logging(default_settings.log_level)
app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
