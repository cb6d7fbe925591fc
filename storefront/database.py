import json
import logging
import os
from typing import Any, Dict, List

# This file holds the JSON-file backed collections and their in-memory mirrors.

logger = logging.getLogger("storefront.database")


class StoreReadError(Exception):
    """Raised by strict reads when a collection file cannot be used."""


def read_records(path: str) -> List[Any]:
    """
    Strict read of an array-shaped JSON document.
    Raises StoreReadError on any I/O or format problem.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except OSError as e:
        raise StoreReadError(f"cannot read {path}: {e}") from e

    if not raw.strip():
        raise StoreReadError(f"{path} is empty")
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise StoreReadError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise StoreReadError(f"{path} does not contain a JSON array")
    return data


def load_records(path: str) -> List[Any]:
    """
    Forgiving read used at startup: any problem yields an empty list.
    """
    if not os.path.exists(path):
        logger.info("No data file at %s, starting empty", path)
        return []
    try:
        return read_records(path)
    except StoreReadError as e:
        logger.warning("Treating collection as empty: %s", e)
        return []


def persist_records(path: str, records: List[Any]) -> bool:
    """
    Overwrite `path` with the whole list. Returns False (after logging) when
    the write fails; the caller's in-memory list stays authoritative.
    """
    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        with open(path, "w", encoding="utf-8") as f:
            f.write(payload)
    except (OSError, TypeError, ValueError) as e:
        logger.error("Failed to persist %d records to %s: %s", len(records), path, e)
        return False
    return True


class CatalogStore:
    def __init__(self, products_path: str, orders_path: str):
        self.products_path = os.path.abspath(products_path)
        self.orders_path = os.path.abspath(orders_path)
        self.products: List[Dict[str, Any]] = load_records(self.products_path)
        self.orders: List[Dict[str, Any]] = load_records(self.orders_path)
        self.persist_failures = 0
        logger.info(
            "Loaded %d products from %s and %d orders from %s",
            len(self.products), self.products_path, len(self.orders), self.orders_path,
        )

    def read_products_live(self) -> List[Any]:
        return read_records(self.products_path)

    def add_order(self, order: Dict[str, Any]) -> bool:
        self.orders.insert(0, order)
        ok = persist_records(self.orders_path, self.orders)
        if not ok:
            self.persist_failures += 1
            logger.error(
                "Order %s kept in memory only (%d unpersisted writes so far)",
                order.get("id"), self.persist_failures,
            )
        return ok
