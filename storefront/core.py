import json
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

UNCATEGORIZED = "Uncategorized"
ORDER_STATUS_PROCESSING = "processing"

# Anything that is not a-z, 0-9 or a Cyrillic letter becomes a separator
_SLUG_SEPARATORS = re.compile(r"[^a-z0-9\u0400-\u04ff]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Numeric strings accepted for order totals: plain decimals with an optional
# exponent, or unsigned 0x/0o/0b integers. No underscores, no "inf"/"nan".
_DECIMAL = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")
_PREFIXED_INT = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$")
_PREFIX_BASES = {"x": 16, "o": 8, "b": 2}


class OrderIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    items: List[Any] = Field(..., min_length=1)


def slugify(name: Any) -> str:
    slug = _SLUG_SEPARATORS.sub("-", str(name).lower())
    return slug.strip("-")


def _category_name(product: Any) -> Any:
    if isinstance(product, dict):
        return product.get("category") or UNCATEGORIZED
    return UNCATEGORIZED


def _make_category_dict(name: Any) -> Dict[str, Any]:
    return {
        "id": slugify(name),
        "name": name,
        "description": "",
        "image": None,
    }


def build_categories(products: List[Any]) -> List[Dict[str, Any]]:
    seen: Dict[Any, Dict[str, Any]] = {}
    for p in products:
        name = _category_name(p)
        # JSON text keeps 1, 1.0 and true apart and handles lists/dicts
        key = json.dumps(name, sort_keys=True, ensure_ascii=False)
        if key not in seen:
            seen[key] = _make_category_dict(name)
    return list(seen.values())


def product_key(value: Any) -> Optional[str]:
    """String form used to match a product id against a path segment."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_number(value: Any) -> float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        return _parse_numeric_text(value)
    return 0


def _parse_numeric_text(value: str) -> float:
    text = value.strip()
    if not text:
        return 0
    prefixed = _PREFIXED_INT.match(text)
    if prefixed:
        base = _PREFIX_BASES[prefixed.group(1).lower()]
        try:
            return int(prefixed.group(2), base)
        except ValueError:
            return 0
    if not _DECIMAL.match(text):
        return 0
    number = float(text)
    return number if math.isfinite(number) else 0


def build_statistics(products: List[Any], orders: List[Any]) -> Dict[str, Any]:
    total_sales = 0
    pending = 0
    for o in orders:
        if not isinstance(o, dict):
            continue
        total_sales += to_number(o.get("total"))
        if o.get("status") == ORDER_STATUS_PROCESSING:
            pending += 1
    return {
        "totalProducts": len(products),
        "totalOrders": len(orders),
        "totalSales": total_sales,
        "pendingOrders": pending,
    }


def iso_timestamp(moment: datetime) -> str:
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def epoch_millis(moment: datetime) -> int:
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def _make_order_dict(payload: Dict[str, Any], now: datetime) -> Dict[str, Any]:
    stamp = iso_timestamp(now)
    order = {
        "id": f"order-{epoch_millis(now)}",
        "status": ORDER_STATUS_PROCESSING,
        "createdAt": stamp,
        "updatedAt": stamp,
        "isViewed": False,
    }
    order.update(payload)
    return order
