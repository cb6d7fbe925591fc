#!/usr/bin/env python
from sdk.pystore import StoreClient

def main():
    c = StoreClient(base_url="http://127.0.0.1:8080")

    # -----------------------------
    # Health
    # -----------------------------
    print("Checking backend...")
    print(c.health())

    # -----------------------------
    # Catalog
    # -----------------------------
    print("\nListing products...")
    products = c.list_products()
    print(products)

    print("\nListing categories...")
    print(c.list_categories())

    if products:
        first_id = products[0].get("id")
        print(f"\nFetching product {first_id}...")
        print(c.get_product(first_id))

    # -----------------------------
    # Orders
    # -----------------------------
    print("\nSubmitting an order...")
    items = [{"id": products[0].get("id"), "qty": 2}] if products else [{"id": 1, "qty": 2}]
    r = c.create_order(items, total=19.99, customer={"name": "Alice"})
    print(r.status_code, r.json())

    print("\nSubmitting an order without items (expect 400)...")
    r = c.create_order([])
    print(r.status_code, r.json())

    print("\nRecent orders...")
    print(c.list_orders()[:3])

    # -----------------------------
    # Statistics
    # -----------------------------
    print("\nStatistics...")
    print(c.statistics())

if __name__ == "__main__":
    main()
