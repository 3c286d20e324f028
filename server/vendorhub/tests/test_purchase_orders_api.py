import vendorhub.purchasing.service as purchasing_service
from vendorhub.routers.purchase_orders import DUPLICATE_PO_DETAIL


def create_vendor(client, name="Acme Supply"):
    response = client.post("/api/vendors", json={"name": name})
    assert response.status_code == 201
    return response.json()["data"]


def create_product(client, vendor_id, name="Bolt", unit_price="10.00"):
    response = client.post(
        f"/api/vendors/{vendor_id}/products",
        json={"name": name, "sku": f"SKU-{name}", "unit_price": unit_price},
    )
    assert response.status_code == 201
    return response.json()["data"]


def create_po(client, vendor_id, product_id, po_number="PO-1", qty=3, unit_price="10.00", **extra):
    payload = {
        "vendor_id": vendor_id,
        "po_number": po_number,
        "order_date": "2024-03-01",
        "items": [{"product_id": product_id, "qty": qty, "unit_price": unit_price}],
    }
    payload.update(extra)
    return client.post("/api/purchase-orders", json=payload)


def test_create_and_fetch_purchase_order(client):
    vendor = create_vendor(client)
    product = create_product(client, vendor["id"])

    response = create_po(client, vendor["id"], product["id"])

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Purchase order created successfully"
    po = body["data"]
    assert po["status"] == "draft"
    assert po["vendor_name"] == "Acme Supply"
    assert po["total"] == 30.0
    assert po["items"][0]["product_name"] == "Bolt"
    assert po["items"][0]["sku"] == "SKU-Bolt"
    assert po["items"][0]["line_total"] == 30.0

    fetched = client.get(f"/api/purchase-orders/{po['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["po_number"] == "PO-1"


def test_create_purchase_order_error_statuses(client):
    vendor = create_vendor(client)
    other_vendor = create_vendor(client, name="Other Vendor")
    product = create_product(client, vendor["id"])
    foreign_product = create_product(client, other_vendor["id"], name="Nut")

    missing = client.post("/api/purchase-orders", json={"po_number": "PO-1"})
    assert missing.status_code == 400
    assert missing.json() == {"success": False, "message": "Vendor ID is required"}

    unknown_vendor = create_po(client, 9999, product["id"])
    assert unknown_vendor.status_code == 404
    assert unknown_vendor.json()["message"] == "Vendor not found"

    foreign = create_po(client, vendor["id"], foreign_product["id"])
    assert foreign.status_code == 400
    assert "does not belong to this vendor" in foreign.json()["message"]

    assert create_po(client, vendor["id"], product["id"]).status_code == 201
    duplicate = create_po(client, vendor["id"], product["id"])
    assert duplicate.status_code == 409
    assert duplicate.json()["message"] == (
        "Purchase order number 'PO-1' already exists. Please use a different PO number."
    )

    listing = client.get("/api/purchase-orders").json()
    assert listing["pagination"]["total"] == 1


def test_list_purchase_orders_by_vendor_and_status(client):
    vendor = create_vendor(client)
    other_vendor = create_vendor(client, name="Other Vendor")
    product = create_product(client, vendor["id"])
    other_product = create_product(client, other_vendor["id"], name="Gear")
    create_po(client, vendor["id"], product["id"], po_number="PO-1")
    create_po(client, vendor["id"], product["id"], po_number="PO-2", status="submitted")
    create_po(client, other_vendor["id"], other_product["id"], po_number="PO-3")

    body = client.get("/api/purchase-orders", params={"vendorId": vendor["id"], "limit": 1}).json()
    assert [po["po_number"] for po in body["data"]] == ["PO-2"]
    assert body["pagination"] == {"page": 1, "limit": 1, "total": 2, "totalPages": 2}

    body = client.get("/api/purchase-orders", params={"vendorId": "all", "status": "draft"}).json()
    assert sorted(po["po_number"] for po in body["data"]) == ["PO-1", "PO-3"]

    bad_vendor = client.get("/api/purchase-orders", params={"vendorId": "abc"})
    assert bad_vendor.status_code == 400
    assert bad_vendor.json()["success"] is False


def test_update_header_and_replace_items(client):
    vendor = create_vendor(client)
    bolt = create_product(client, vendor["id"])
    nut = create_product(client, vendor["id"], name="Nut", unit_price="0.25")
    po = create_po(client, vendor["id"], bolt["id"]).json()["data"]

    updated = client.put(
        f"/api/purchase-orders/{po['id']}",
        json={"status": "received", "order_date": "2024-03-10", "notes": "Dock 4"},
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["status"] == "received"
    assert updated.json()["data"]["notes"] == "Dock 4"

    replaced = client.put(
        f"/api/purchase-orders/{po['id']}/items",
        json={"items": [{"product_id": nut["id"], "qty": 8, "unit_price": "0.25"}]},
    )
    assert replaced.status_code == 200
    items = replaced.json()["data"]
    assert len(items) == 1
    assert items[0]["product_id"] == nut["id"]
    assert items[0]["line_total"] == 2.0

    empty = client.put(f"/api/purchase-orders/{po['id']}/items", json={"items": []})
    assert empty.status_code == 400
    assert empty.json()["message"] == "At least one item is required"
    assert client.get(f"/api/purchase-orders/{po['id']}").json()["data"]["total"] == 2.0


def test_delete_purchase_order_and_missing_lookups(client):
    vendor = create_vendor(client)
    product = create_product(client, vendor["id"])
    po = create_po(client, vendor["id"], product["id"]).json()["data"]

    deleted = client.delete(f"/api/purchase-orders/{po['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True, "message": "Purchase order deleted successfully"}

    missing = client.get(f"/api/purchase-orders/{po['id']}")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Purchase order not found"
    assert client.delete(f"/api/purchase-orders/{po['id']}").status_code == 404


def test_duplicate_number_caught_by_unique_constraint_returns_409(client, monkeypatch):
    vendor = create_vendor(client)
    product = create_product(client, vendor["id"])
    assert create_po(client, vendor["id"], product["id"]).status_code == 201

    monkeypatch.setattr(purchasing_service, "po_number_exists", lambda db, po_number: False)
    duplicate = create_po(client, vendor["id"], product["id"])

    assert duplicate.status_code == 409
    assert duplicate.json() == {"success": False, "message": DUPLICATE_PO_DETAIL}
    assert client.get("/api/purchase-orders").json()["pagination"]["total"] == 1


def test_update_header_with_unknown_status_returns_400(client):
    vendor = create_vendor(client)
    product = create_product(client, vendor["id"])
    po = create_po(client, vendor["id"], product["id"]).json()["data"]

    response = client.put(f"/api/purchase-orders/{po['id']}", json={"status": "bogus", "order_date": "2024-03-02"})

    assert response.status_code == 400
    assert response.json()["message"] == "Status must be one of: draft, submitted, received"
    assert client.get(f"/api/purchase-orders/{po['id']}").json()["data"]["status"] == "draft"


def test_create_purchase_order_with_overlong_number_returns_400(client):
    vendor = create_vendor(client)
    product = create_product(client, vendor["id"])

    response = create_po(client, vendor["id"], product["id"], po_number="X" * 80)

    assert response.status_code == 400
    assert response.json()["message"] == "PO number must be at most 50 characters"
