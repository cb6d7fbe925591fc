import asyncio
from sdk.pystore import StoreClient

async def submit(client, n):
    try:
        r = await client.create_order_async([{"id": n, "qty": 1}], total=n * 10)
        if r.status_code == 201:
            print(f"✅ order {n} stored as {r.json()['id']}")
        else:
            print(f"⚠️  order {n} rejected: {r.status_code} {r.text}")
    except Exception as e:
        print(f"❌ order {n} failed: {e}")

async def main():
    c = StoreClient(base_url="http://127.0.0.1:8080")

    before = c.statistics()
    print(f"Before: {before}")

    await asyncio.gather(*(submit(c, n) for n in range(1, 11)))

    after = c.statistics()
    print(f"After: {after}")
    print(f"New orders: {after['totalOrders'] - before['totalOrders']}")

if __name__ == "__main__":
    asyncio.run(main())
