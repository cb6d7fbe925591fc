# tests/test_orders.py
import re

from storefront.database import load_records

ORDER_ID = re.compile(r"^order-\d+$")
ISO_MILLIS = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def test_create_order_success(client, data_dir):
    body = {"items": [{"id": 1, "qty": 2}], "total": 19.99}
    r = client.post("/api/orders", json=body)
    assert r.status_code == 201
    order = r.json()
    assert ORDER_ID.match(order["id"])
    assert order["status"] == "processing"
    assert order["isViewed"] is False
    assert ISO_MILLIS.match(order["createdAt"])
    assert order["createdAt"] == order["updatedAt"]
    assert order["items"] == body["items"]
    assert order["total"] == 19.99
    assert list(order)[:5] == ["id", "status", "createdAt", "updatedAt", "isViewed"]

def test_created_order_is_first_on_disk(client, data_dir):
    first = client.post("/api/orders", json={"items": [{"id": 1}]}).json()
    second = client.post("/api/orders", json={"items": [{"id": 3}], "total": 4}).json()

    reloaded = load_records(str(data_dir / "orders.json"))
    assert reloaded[0] == second
    assert reloaded[1] == first
    assert client.get("/api/orders").json() == reloaded

def test_extra_fields_pass_through_and_override_defaults(client):
    body = {"items": ["sku-1"], "customer": {"name": "Ann"}, "status": "paid"}
    order = client.post("/api/orders", json=body).json()
    assert order["customer"] == {"name": "Ann"}
    assert order["status"] == "paid"

def test_invalid_payloads_are_rejected(client, orders_on_disk):
    bad_bodies = [
        {"items": []},
        {"total": 5},
        {"items": "not-a-list"},
        {"items": None},
        {"items": {"id": 1}},
        [{"id": 1}],
        "items",
    ]
    for body in bad_bodies:
        r = client.post("/api/orders", json=body)
        assert r.status_code == 400, body
        assert r.json() == {"error": "Invalid order payload"}
    assert orders_on_disk() is None
    assert client.get("/api/orders").json() == []

def test_missing_or_malformed_body_is_rejected(client, orders_on_disk):
    r = client.post("/api/orders")
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid order payload"}

    r = client.post("/api/orders", content=b"{oops", headers={"content-type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid order payload"}

    r = client.post("/api/orders", content=b"items=1", headers={"content-type": "text/plain"})
    assert r.status_code == 400
    assert orders_on_disk() is None

def test_rejected_order_leaves_existing_file_untouched(client, data_dir):
    client.post("/api/orders", json={"items": [1]})
    before = (data_dir / "orders.json").read_text(encoding="utf-8")
    client.post("/api/orders", json={"items": []})
    assert (data_dir / "orders.json").read_text(encoding="utf-8") == before

def test_client_id_is_kept_by_default(client):
    order = client.post("/api/orders", json={"id": "my-order", "items": [1]}).json()
    assert order["id"] == "my-order"

def test_client_id_can_be_forbidden(make_client):
    client = make_client(allow_client_order_id=False)
    order = client.post("/api/orders", json={"id": "my-order", "items": [1]}).json()
    assert ORDER_ID.match(order["id"])

def test_persist_failure_still_reports_created(make_client, data_dir):
    (data_dir / "orders.json").mkdir()
    client = make_client()
    r = client.post("/api/orders", json={"items": [1], "total": 3})
    assert r.status_code == 201
    assert client.get("/api/orders").json() == [r.json()]
    assert client.app.state.store.persist_failures == 1

def test_orders_survive_restart(make_client):
    created = make_client().post("/api/orders", json={"items": [1], "total": 7}).json()
    restarted = make_client()
    assert restarted.get("/api/orders").json() == [created]
    assert restarted.get("/api/statistics").json()["totalSales"] == 7
