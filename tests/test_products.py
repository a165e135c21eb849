"""
Tests for the products catalog API.
"""

import pytest

REQUIRED_FIELDS = ["category", "name", "cost", "currency", "rating", "manufacturer"]


def create(client, headers, payload):
    response = client.post("/api/products", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_product(client, admin_headers, make_product):
    product = create(client, admin_headers, make_product())

    assert product["id"] > 0
    assert product["name"] == "Test Charger 50kW"
    assert product["cost"] == 42000
    assert product["maintenanceCost"] == 1500
    assert product["neviEligible"] is True
    assert product["documents"] == ["a.pdf", "b.pdf"]
    assert product["origin"] == "USA"
    assert product["manufacturedIn"] == "USA"
    assert "createdAt" in product and "updatedAt" in product


def test_create_product_requires_admin(client, make_product):
    response = client.post("/api/products", json=make_product())
    assert response.status_code == 401
    assert response.json() == {"error": "Admin authentication required"}
    assert client.get("/api/products").json() == []


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_missing_required_field_rejected(client, admin_headers, make_product, field):
    payload = make_product()
    del payload[field]

    response = client.post("/api/products", json=payload, headers=admin_headers)
    assert response.status_code == 400
    assert field in response.json()["error"]
    assert client.get("/api/products").json() == []


def test_invalid_numeric_rejected(client, admin_headers, make_product):
    response = client.post(
        "/api/products", json=make_product(cost="not a number"), headers=admin_headers
    )
    assert response.status_code == 400
    assert "cost" in response.json()["error"]


def test_numeric_strings_and_blanks(client, admin_headers, make_product):
    """Form-style input: numeric strings are parsed, blanks mean 'not provided'."""
    product = create(client, admin_headers, make_product(
        cost="1999.50", efficiency="", lifetime="10", maintenanceCost=None, documents=None
    ))
    assert product["cost"] == 1999.5
    assert product["efficiency"] is None
    assert product["lifetime"] == 10
    assert product["maintenanceCost"] is None
    assert product["documents"] == []


def test_get_product(client, admin_headers, make_product):
    created = create(client, admin_headers, make_product())

    response = client.get(f"/api/products/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_get_missing_product(client):
    response = client.get("/api/products/12345")
    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


def test_update_product(client, admin_headers, make_product):
    created = create(client, admin_headers, make_product())

    response = client.put(
        f"/api/products/{created['id']}",
        json=make_product(name="Renamed", cost=100, documents=["c.pdf"], manufacturedIn="Canada"),
        headers=admin_headers,
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["id"] == created["id"]
    assert updated["name"] == "Renamed"
    assert updated["cost"] == 100
    assert updated["documents"] == ["c.pdf"]
    assert updated["manufacturedIn"] == "Canada"


def test_update_missing_product(client, admin_headers, make_product):
    response = client.put("/api/products/999", json=make_product(), headers=admin_headers)
    assert response.status_code == 404


def test_update_requires_admin(client, admin_headers, make_product):
    created = create(client, admin_headers, make_product())
    response = client.put(f"/api/products/{created['id']}", json=make_product(name="X"))
    assert response.status_code == 401


def test_delete_product_twice(client, admin_headers, make_product):
    created = create(client, admin_headers, make_product())

    response = client.delete(f"/api/products/{created['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Product deleted successfully", "id": created["id"]}

    response = client.delete(f"/api/products/{created['id']}", headers=admin_headers)
    assert response.status_code == 404


def test_manufacturer_filter_case_insensitive(client, admin_headers, make_product):
    create(client, admin_headers, make_product(name="A", manufacturer="ChargePoint"))
    create(client, admin_headers, make_product(name="B", manufacturer="ABB"))

    response = client.get("/api/products", params={"manufacturer": "chargepoint"})
    assert [p["name"] for p in response.json()] == ["A"]


def test_filters(client, admin_headers, make_product):
    create(client, admin_headers, make_product(name="Wallbox", manufacturedIn="USA", neviEligible=False))
    create(client, admin_headers, make_product(name="Terra", manufacturer="ABB", manufacturedIn="Finland"))
    create(client, admin_headers, make_product(name="Sicharge", manufacturer="Siemens",
                                               manufacturedIn="Germany", category="DC Charger"))

    def names(**params):
        return sorted(p["name"] for p in client.get("/api/products", params=params).json())

    assert names(origin=["finland", "germany"]) == ["Sicharge", "Terra"]
    assert names(search="abb") == ["Terra"]
    assert names(search="wall") == ["Wallbox"]
    assert names(neviEligible="false") == ["Wallbox"]
    assert names(category="dc charger") == ["Sicharge"]


def test_default_order_newest_first(client, admin_headers, make_product):
    for name in ("First", "Second", "Third"):
        create(client, admin_headers, make_product(name=name))

    names = [p["name"] for p in client.get("/api/products").json()]
    assert names == ["Third", "Second", "First"]


def test_sort_by_cost_and_rating(client, admin_headers, make_product):
    create(client, admin_headers, make_product(name="Mid", cost=500, rating="4.2/5"))
    create(client, admin_headers, make_product(name="Cheap", cost=100, rating="4.8/5"))
    create(client, admin_headers, make_product(name="Pricey", cost=900, rating="3.9/5"))

    response = client.get("/api/products", params={"sort": "cost"})
    assert [p["name"] for p in response.json()] == ["Cheap", "Mid", "Pricey"]

    response = client.get("/api/products", params={"sort": "rating", "order": "desc"})
    assert [p["name"] for p in response.json()] == ["Cheap", "Mid", "Pricey"]


def test_unknown_sort_field(client):
    response = client.get("/api/products", params={"sort": "colour"})
    assert response.status_code == 400
    assert "colour" in response.json()["error"]


def test_pagination(client, admin_headers, make_product):
    for i in range(5):
        create(client, admin_headers, make_product(name=f"Charger {i}", cost=i))

    response = client.get("/api/products", params={"sort": "cost", "page": 2, "pageSize": 2})
    assert response.status_code == 200
    assert response.headers["X-Total-Count"] == "5"
    assert [p["name"] for p in response.json()] == ["Charger 2", "Charger 3"]


def test_facets(client, admin_headers, make_product):
    create(client, admin_headers, make_product(name="A", manufacturer="Tesla", manufacturedIn="USA"))
    create(client, admin_headers, make_product(name="B", manufacturer="ABB", manufacturedIn="Finland"))
    create(client, admin_headers, make_product(name="C", manufacturer="ABB", manufacturedIn=None))

    assert client.get("/api/products/manufacturers").json() == ["ABB", "Tesla"]
    assert client.get("/api/products/origins").json() == ["Finland", "USA"]
    assert client.get("/api/products/categories").json() == [
        {"id": "evcharger", "name": "EV Charger", "description": "EV Charger products"}
    ]


def test_products_by_category(client, admin_headers, make_product):
    create(client, admin_headers, make_product(name="A"))
    create(client, admin_headers, make_product(name="B", category="Battery"))

    response = client.get("/api/products/category/ev charger")
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["A"]


def test_snake_case_list_params(client, admin_headers, make_product):
    """nevi_eligible and page_size work in both spellings."""
    create(client, admin_headers, make_product(name="Yes", cost=1, neviEligible=True))
    create(client, admin_headers, make_product(name="No", cost=2, neviEligible=False))
    for i in range(3):
        create(client, admin_headers, make_product(name=f"Extra {i}", cost=10 + i))

    response = client.get("/api/products", params={"nevi_eligible": "false"})
    assert [p["name"] for p in response.json()] == ["No"]

    response = client.get("/api/products", params={"sort": "cost", "page": 1, "page_size": 2})
    assert [p["name"] for p in response.json()] == ["Yes", "No"]
    assert response.headers["X-Total-Count"] == "5"


def test_page_size_bounds(client):
    assert client.get("/api/products", params={"page": 1, "page_size": 0}).status_code == 400
    assert client.get("/api/products", params={"page": 1, "pageSize": 101}).status_code == 400
