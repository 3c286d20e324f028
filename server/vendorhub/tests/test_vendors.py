from vendorhub.models import Contact, Product, PurchaseOrder, PurchaseOrderItem


def create_vendor(client, **overrides):
    payload = {"name": "Northwind", "city": "Austin", "state": "TX"}
    payload.update(overrides)
    response = client.post("/api/vendors", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


def test_create_vendor_defaults_to_active(client):
    response = client.post("/api/vendors", json={"name": "Northwind", "notes": ""})

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Vendor created successfully"
    assert body["data"]["status"] == "active"
    assert body["data"]["notes"] is None


def test_create_vendor_requires_name(client):
    response = client.post("/api/vendors", json={"name": "   "})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Vendor name is required"}

    missing = client.post("/api/vendors", json={})
    assert missing.status_code == 400
    assert missing.json()["success"] is False
    assert "name" in missing.json()["message"]


def test_list_vendors_search_status_and_pagination(client):
    create_vendor(client, name="Northwind")
    create_vendor(client, name="Southwind", status="inactive")
    create_vendor(client, name="Contoso")

    body = client.get("/api/vendors", params={"search": "wind"}).json()
    assert [vendor["name"] for vendor in body["data"]] == ["Southwind", "Northwind"]

    body = client.get("/api/vendors", params={"status": "inactive"}).json()
    assert [vendor["name"] for vendor in body["data"]] == ["Southwind"]

    body = client.get("/api/vendors", params={"page": 2, "limit": 2}).json()
    assert [vendor["name"] for vendor in body["data"]] == ["Northwind"]
    assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "totalPages": 2}


def test_update_and_get_vendor(client):
    vendor = create_vendor(client)

    response = client.put(f"/api/vendors/{vendor['id']}", json={"name": "Northwind Traders", "status": "inactive"})
    assert response.status_code == 200
    assert response.json()["message"] == "Vendor updated successfully"

    fetched = client.get(f"/api/vendors/{vendor['id']}").json()["data"]
    assert fetched["name"] == "Northwind Traders"
    assert fetched["status"] == "inactive"
    assert fetched["city"] is None

    assert client.get("/api/vendors/9999").status_code == 404
    assert client.put("/api/vendors/9999", json={"name": "Ghost"}).json()["message"] == "Vendor not found"


def test_delete_vendor_cascades_to_dependents(client, app):
    vendor = create_vendor(client)
    client.post(f"/api/vendors/{vendor['id']}/contacts", json={"name": "Ada"})
    product = client.post(
        f"/api/vendors/{vendor['id']}/products",
        json={"name": "Bolt", "unit_price": "1.50"},
    ).json()["data"]
    po = client.post(
        "/api/purchase-orders",
        json={
            "vendor_id": vendor["id"],
            "po_number": "PO-77",
            "order_date": "2024-05-01",
            "items": [{"product_id": product["id"], "qty": 4, "unit_price": "1.50"}],
        },
    )
    assert po.status_code == 201

    response = client.delete(f"/api/vendors/{vendor['id']}")
    assert response.status_code == 200
    assert response.json()["message"] == "Vendor deleted successfully"

    with app.state.database.session() as db:
        assert db.query(Contact).count() == 0
        assert db.query(Product).count() == 0
        assert db.query(PurchaseOrder).count() == 0
        assert db.query(PurchaseOrderItem).count() == 0
    assert client.get(f"/api/vendors/{vendor['id']}").status_code == 404


def test_contacts_crud(client):
    vendor = create_vendor(client)

    created = client.post(
        f"/api/vendors/{vendor['id']}/contacts",
        json={"name": "Ada", "email": "ada@example.com", "role": "Buyer"},
    )
    assert created.status_code == 201
    contact = created.json()["data"]
    assert contact["vendor_id"] == vendor["id"]

    listing = client.get(f"/api/vendors/{vendor['id']}/contacts").json()["data"]
    assert [row["name"] for row in listing] == ["Ada"]

    updated = client.put(f"/api/contacts/{contact['id']}", json={"name": "Ada L.", "phone": "555-0100"})
    assert updated.json()["data"]["phone"] == "555-0100"
    assert updated.json()["data"]["email"] is None

    assert client.delete(f"/api/contacts/{contact['id']}").status_code == 200
    missing = client.delete(f"/api/contacts/{contact['id']}")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Contact not found"
    assert client.get("/api/vendors/9999/contacts").status_code == 404


def test_products_crud_and_referenced_delete(client):
    vendor = create_vendor(client)

    created = client.post(
        f"/api/vendors/{vendor['id']}/products",
        json={"name": "Bolt", "sku": "B-1", "unit_price": "0.10"},
    )
    assert created.status_code == 201
    product = created.json()["data"]
    assert product["active"] is True
    assert product["unit_price"] == 0.1

    negative = client.post(f"/api/vendors/{vendor['id']}/products", json={"name": "Nut", "unit_price": "-1"})
    assert negative.status_code == 400

    updated = client.put(
        f"/api/products/{product['id']}",
        json={"name": "Bolt M6", "unit_price": "0.12", "active": False},
    )
    assert updated.json()["data"]["active"] is False

    client.post(
        "/api/purchase-orders",
        json={
            "vendor_id": vendor["id"],
            "po_number": "PO-5",
            "order_date": "2024-05-01",
            "items": [{"product_id": product["id"], "qty": 1, "unit_price": "0.12"}],
        },
    )
    conflict = client.delete(f"/api/products/{product['id']}")
    assert conflict.status_code == 409
    assert conflict.json()["message"] == "Cannot delete product because it is referenced by purchase orders."

    spare = client.post(f"/api/vendors/{vendor['id']}/products", json={"name": "Spare", "unit_price": "0"}).json()
    assert client.delete(f"/api/products/{spare['data']['id']}").status_code == 200
    assert client.get(f"/api/vendors/{vendor['id']}/products").json()["data"][0]["name"] == "Bolt M6"
