import pytest

from storefront.core.database import get_db
from storefront.main import app

async def test_list_products(client):
    r = await client.get("/api/products")
    assert r.status_code == 200
    products = r.json()
    assert len(products) == 8
    cat = products[0]
    assert cat["name"] == "Kawaii Cat Squishy"
    assert cat["price"] == "12.99"
    assert cat["originalPrice"] == "16.99"
    assert cat["inStock"] is True
    assert cat["tags"] == ["cat", "kawaii", "stress-relief"]
    assert products[2]["originalPrice"] is None

async def test_featured_products(client):
    r = await client.get("/api/products/featured")
    assert r.status_code == 200
    assert {p["name"] for p in r.json()} == {
        "Kawaii Cat Squishy",
        "Stress Relief Ball",
        "Slow Rise Panda",
        "Magic Unicorn",
        "Mini Collection Set",
    }

async def test_products_by_category(client):
    r = await client.get("/api/products/category/kawaii")
    assert r.status_code == 200
    assert len(r.json()) == 3

    r = await client.get("/api/products/category/all")
    assert len(r.json()) == 8

    r = await client.get("/api/products/category/toys")
    assert r.status_code == 422
    assert r.json()["error_code"] == "INVALID_CATEGORY"

async def test_search_products(client):
    r = await client.get("/api/products/search", params={"q": "  THERAPY "})
    assert r.status_code == 200
    assert {p["name"] for p in r.json()} == {"Stress Relief Ball", "Therapy Putty"}

    # Tags are searched too
    r = await client.get("/api/products/search", params={"q": "slow-rise"})
    assert [p["name"] for p in r.json()] == ["Slow Rise Panda"]

    r = await client.get("/api/products/search", params={"q": "zzz"})
    assert r.json() == []

@pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}, {"q": "x" * 101}])
async def test_search_rejects_bad_queries(client, params):
    r = await client.get("/api/products/search", params=params)
    assert r.status_code == 422

async def test_get_product(client):
    r = await client.get("/api/products/4")
    assert r.status_code == 200
    assert r.json()["name"] == "Magic Unicorn"

    r = await client.get("/api/products/999")
    assert r.status_code == 404
    assert r.json()["detail"] == "Product not found"

@pytest.mark.parametrize("product_id", ["0", "1000000", "abc"])
async def test_get_product_rejects_bad_ids(client, product_id):
    r = await client.get(f"/api/products/{product_id}")
    assert r.status_code == 422

async def test_health_and_root(client):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"
    assert "X-Request-ID" in r.headers

    r = await client.get("/health/detailed")
    assert r.json()["components"]["database"]["status"] == "healthy"

    r = await client.get("/")
    assert r.json()["docs"] == "/api/docs"

@pytest.mark.parametrize("q", [",", "[", '"', '", "'])
async def test_search_punctuation_does_not_match_tag_encoding(client, q):
    r = await client.get("/api/products/search", params={"q": q})
    assert r.status_code == 200
    assert r.json() == []

async def test_search_matches_whole_tag_values(client):
    # Only present as tags, not in any name or description
    r = await client.get("/api/products/search", params={"q": "variety"})
    assert [p["name"] for p in r.json()] == ["Mini Collection Set"]

    r = await client.get("/api/products/search", params={"q": "SCENTED"})
    assert [p["name"] for p in r.json()] == ["Slow Rise Panda"]

async def test_detailed_health_hides_database_errors(client):
    class BrokenSession:
        async def execute(self, *args, **kwargs):
            raise RuntimeError("could not connect to server at 10.0.0.5:5432")

    async def broken_db():
        yield BrokenSession()

    app.dependency_overrides[get_db] = broken_db

    r = await client.get("/health/detailed")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "unhealthy"
    assert body["components"]["database"]["status"] == "unhealthy"
    assert "10.0.0.5" not in r.text
