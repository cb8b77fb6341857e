HEADERS = {"X-Session-ID": "s1"}

async def test_wishlist_flow(client):
    r = await client.post("/api/wishlist", json={"productId": 2}, headers=HEADERS)
    assert r.status_code == 201
    item_id = r.json()["id"]

    r = await client.post("/api/wishlist", json={"productId": 2}, headers=HEADERS)
    assert r.status_code == 200
    assert r.json()["id"] == item_id

    r = await client.get("/api/wishlist/check/2", headers=HEADERS)
    assert r.json() == {"isInWishlist": True}

    r = await client.get("/api/wishlist", headers=HEADERS)
    items = r.json()
    assert len(items) == 1
    assert items[0]["product"]["name"] == "Stress Relief Ball"

    r = await client.delete("/api/wishlist/2", headers=HEADERS)
    assert r.status_code == 200
    assert r.json()["removed"] is True

    r = await client.delete("/api/wishlist/2", headers=HEADERS)
    assert r.status_code == 200
    assert r.json()["removed"] is False

    r = await client.get("/api/wishlist/check/2", headers=HEADERS)
    assert r.json() == {"isInWishlist": False}

async def test_wishlist_rejects_unknown_product(client):
    r = await client.post("/api/wishlist", json={"productId": 999}, headers=HEADERS)
    assert r.status_code == 422

async def test_wishlist_rejects_oversized_product_ids(client):
    huge = 2**63
    r = await client.post("/api/wishlist", json={"productId": huge}, headers=HEADERS)
    assert r.status_code == 422
    r = await client.get(f"/api/wishlist/check/{huge}", headers=HEADERS)
    assert r.status_code == 422
    r = await client.delete(f"/api/wishlist/{huge}", headers=HEADERS)
    assert r.status_code == 422
