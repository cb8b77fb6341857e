import pytest

from storefront.core.security import SecurityUtils

@pytest.mark.parametrize("path", [
    "/api/admin/sales",
    "/api/admin/reservations",
    "/api/admin/inventory",
    "/api/admin/inventory/summary",
    "/api/admin/rewards",
])
async def test_admin_endpoints_require_token(client, path):
    r = await client.get(path)
    assert r.status_code == 401
    assert r.headers["WWW-Authenticate"] == "Bearer"

    r = await client.get(path, headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401

async def test_non_admin_role_is_forbidden(client):
    token = SecurityUtils.create_access_token({"sub": "viewer", "uid": 99, "role": "viewer"})
    r = await client.get("/api/admin/sales", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403

async def test_login(client):
    r = await client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Login successful"
    assert body["user"]["username"] == "admin"
    assert body["user"]["role"] == "admin"
    assert body["tokenType"] == "bearer"
    assert SecurityUtils.decode_token(body["accessToken"])["sub"] == "admin"

async def test_login_failures(client):
    r = await client.post("/api/admin/login", json={"username": "admin", "password": "wrong-password"})
    assert r.status_code == 401
    assert r.json()["error_code"] == "INVALID_CREDENTIALS"

    r = await client.post("/api/admin/login", json={"username": "nobody", "password": "admin123"})
    assert r.status_code == 401

    r = await client.post("/api/admin/login", json={"username": "ab", "password": "admin123"})
    assert r.status_code == 422

async def test_sales_crud(client, admin_headers):
    r = await client.get("/api/admin/sales", headers=admin_headers)
    assert len(r.json()) == 6

    r = await client.get("/api/admin/sales", params={"search": "SiSi"}, headers=admin_headers)
    assert {s["customer"] for s in r.json()} == {"Shelby", "Regina"}

    r = await client.post("/api/admin/sales", json={
        "customer": "Nova",
        "item": "MOMO",
        "qty": 1,
        "pricePaid": "42.5",
        "pickupDate": "7/1/2025",
    }, headers=admin_headers)
    assert r.status_code == 201
    sale = r.json()
    assert sale["pricePaid"] == "42.50"

    r = await client.get(f"/api/admin/sales/{sale['id']}", headers=admin_headers)
    assert r.json()["customer"] == "Nova"

    r = await client.patch(f"/api/admin/sales/{sale['id']}", json={"notes": "picked up"}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["notes"] == "picked up"
    assert r.json()["customer"] == "Nova"

    r = await client.patch(f"/api/admin/sales/{sale['id']}", json={"customer": None}, headers=admin_headers)
    assert r.status_code == 422

    r = await client.delete(f"/api/admin/sales/{sale['id']}", headers=admin_headers)
    assert r.status_code == 200
    r = await client.get(f"/api/admin/sales/{sale['id']}", headers=admin_headers)
    assert r.status_code == 404
    r = await client.delete(f"/api/admin/sales/{sale['id']}", headers=admin_headers)
    assert r.status_code == 404

async def test_reservations(client, admin_headers):
    r = await client.get("/api/admin/reservations", headers=admin_headers)
    assert len(r.json()) == 6

    r = await client.post("/api/admin/reservations", json={
        "customer": "Nova",
        "item": "MOMO",
        "pricePaid": "50.00",
        "dateSold": "07/2025",
    }, headers=admin_headers)
    assert r.status_code == 201
    assert r.json()["qty"] == 1

async def test_inventory(client, admin_headers):
    r = await client.get("/api/admin/inventory/summary", headers=admin_headers)
    assert r.json() == {"total": 12, "lowStock": 8, "soldOut": 4}

    r = await client.get("/api/admin/inventory", params={"search": "coconut"}, headers=admin_headers)
    [coconut] = r.json()
    assert coconut["displayStatus"] == "Shipping"
    assert coconut["resellPrice"] == "60.00"

    r = await client.post("/api/admin/inventory", json={"item": "MOMO", "stock": 1}, headers=admin_headers)
    assert r.status_code == 201
    created = r.json()
    assert created["status"] == "Available"
    assert created["displayStatus"] == "Low stock"

    r = await client.patch(f"/api/admin/inventory/{created['id']}", json={"stock": 0}, headers=admin_headers)
    assert r.json()["displayStatus"] == "Sold out"

    r = await client.post("/api/admin/inventory", json={"item": "MOMO", "stock": -1}, headers=admin_headers)
    assert r.status_code == 422

async def test_reward_toggle(client, admin_headers):
    r = await client.get("/api/admin/rewards", headers=admin_headers)
    assert len(r.json()) == 5

    r = await client.patch("/api/admin/rewards/1", json={"isActive": False}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["isActive"] is False

    r = await client.get("/api/game/rewards")
    assert 1 not in [rw["id"] for rw in r.json()]

    r = await client.patch("/api/admin/rewards/999", json={"isActive": True}, headers=admin_headers)
    assert r.status_code == 404

@pytest.mark.parametrize("price", ["42.555", "123456789012.5"])
async def test_money_must_fit_two_decimal_places(client, admin_headers, price):
    r = await client.post("/api/admin/sales", json={
        "customer": "Nova",
        "item": "MOMO",
        "pricePaid": price,
    }, headers=admin_headers)
    assert r.status_code == 422

    r = await client.post("/api/admin/inventory", json={
        "item": "MOMO",
        "retailPrice": price,
    }, headers=admin_headers)
    assert r.status_code == 422

async def test_inventory_item_reads_back_unchanged(client, admin_headers):
    payload = {
        "order": "PO-77",
        "type": "MAC",
        "item": "PEACH OOLONG",
        "retailPrice": "30.00",
        "resellPrice": "57.25",
        "stock": 3,
        "status": "Available",
        "track": "1Z999",
        "notes": "back shelf",
    }
    r = await client.post("/api/admin/inventory", json=payload, headers=admin_headers)
    assert r.status_code == 201
    created = r.json()

    r = await client.get(f"/api/admin/inventory/{created['id']}", headers=admin_headers)
    assert r.status_code == 200
    fetched = r.json()

    for key, value in payload.items():
        assert fetched[key] == value
    generated = {"createdAt", "updatedAt"}
    assert {k: v for k, v in fetched.items() if k not in generated} == \
        {k: v for k, v in created.items() if k not in generated}

async def test_oversized_record_ids_are_rejected(client, admin_headers):
    huge = 2**63
    for path in ("sales", "reservations", "inventory"):
        r = await client.get(f"/api/admin/{path}/{huge}", headers=admin_headers)
        assert r.status_code == 422
        r = await client.delete(f"/api/admin/{path}/{huge}", headers=admin_headers)
        assert r.status_code == 422

    r = await client.patch(f"/api/admin/rewards/{huge}", json={"isActive": True}, headers=admin_headers)
    assert r.status_code == 422

    r = await client.post("/api/admin/inventory", json={"item": "MOMO", "stock": huge}, headers=admin_headers)
    assert r.status_code == 422
