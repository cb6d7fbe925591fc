# sdk/pystore.py
import requests
import httpx
from typing import Any, Dict, List, Optional
from urllib.parse import quote

class StoreClient:
    def __init__(self, base_url: str = "http://localhost:8080", timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout

    def _get(self, path: str):
        r = self.session.get(f"{self.base_url}{path}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    @staticmethod
    def _order_payload(items: List[Any], total: Optional[float] = None, **extra) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"items": items}
        if total is not None:
            payload["total"] = total
        payload.update(extra)
        return payload

    def health(self):
        return self._get("/api/health")

    # Catalog
    def list_products(self):
        return self._get("/api/products")

    def get_product(self, product_id: str):
        return self._get(f"/api/products/{quote(str(product_id), safe='')}")

    def list_categories(self):
        return self._get("/api/categories")

    # Orders
    def list_orders(self):
        return self._get("/api/orders")

    def create_order(self, items: List[Any], total: Optional[float] = None, **extra):
        payload = self._order_payload(items, total, **extra)
        r = self.session.post(f"{self.base_url}/api/orders", json=payload, timeout=self.timeout)
        # do not r.raise_for_status() — callers may want to inspect 400
        return r

    async def create_order_async(self, items: List[Any], total: Optional[float] = None, **extra):
        payload = self._order_payload(items, total, **extra)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.post(f"{self.base_url}/api/orders", json=payload)
            return r

    def statistics(self):
        return self._get("/api/statistics")


if __name__ == "__main__":
    import argparse
    import json
    from rich import print

    parser = argparse.ArgumentParser(description="PyStore CLI")
    parser.add_argument("--base-url", default="http://127.0.0.1:8080", help="API base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("health", help="Check the backend is up")
    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    subparsers.add_parser("list-categories", help="List categories derived from products")
    subparsers.add_parser("list-orders", help="List submitted orders, newest first")

    po = subparsers.add_parser("place-order", help="Submit an order")
    po.add_argument("--items", required=True, help='JSON list of items, e.g. \'[{"id": 1, "qty": 2}]\'')
    po.add_argument("--total", type=float, help="Order total")

    subparsers.add_parser("statistics", help="Show order and catalog counters")

    args = parser.parse_args()
    c = StoreClient(base_url=args.base_url)

    if args.command == "health":
        print(c.health())
    elif args.command == "list-products":
        print(c.list_products())
    elif args.command == "get-product":
        print(c.get_product(args.product_id))
    elif args.command == "list-categories":
        print(c.list_categories())
    elif args.command == "list-orders":
        print(c.list_orders())
    elif args.command == "place-order":
        r = c.create_order(json.loads(args.items), args.total)
        print(r.status_code, r.json())
    elif args.command == "statistics":
        print(c.statistics())
