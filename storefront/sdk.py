import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import HTTPException
from pydantic import ValidationError

from .core import (
    OrderIn, _make_order_dict, build_categories, build_statistics, epoch_millis,
    product_key
)
from .database import CatalogStore, StoreReadError

# This file contains the core logic for all API endpoints.

logger = logging.getLogger("storefront.sdk")

# Product endpoints
async def list_products_logic(store: CatalogStore, live: bool = False):
    if not live:
        return store.products
    try:
        return store.read_products_live()
    except StoreReadError as e:
        logger.error("Live products read failed: %s", e)
        raise HTTPException(status_code=500, detail="Failed to read products")

async def get_product_logic(store: CatalogStore, product_id: str):
    for p in store.products:
        if isinstance(p, dict) and product_key(p.get("id")) == product_id:
            return p
    raise HTTPException(status_code=404, detail="Product not found")

# Category endpoints
async def list_categories_logic(store: CatalogStore) -> List[Dict[str, Any]]:
    return build_categories(store.products)

# Order endpoints
async def list_orders_logic(store: CatalogStore):
    return store.orders

async def create_order_logic(store: CatalogStore, payload: Any, allow_client_id: bool = True):
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Invalid order payload")
    try:
        OrderIn.model_validate(payload)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Invalid order payload")

    now = datetime.now(timezone.utc)
    order = _make_order_dict(payload, now)
    if "id" in payload:
        if allow_client_id:
            logger.warning("Order body supplied its own id %r; keeping it", payload["id"])
        else:
            logger.warning("Ignoring client supplied order id %r", payload["id"])
            order["id"] = f"order-{epoch_millis(now)}"

    if not store.add_order(order):
        # in-memory create succeeded; durability gap is logged by the store
        logger.warning("Order %s accepted without being written to disk", order["id"])
    logger.info("Created order %s with %d items", order["id"], len(order["items"]))
    return order

# Statistics
async def statistics_logic(store: CatalogStore):
    return build_statistics(store.products, store.orders)
