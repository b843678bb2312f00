"""
Tests for the product endpoints.
"""

from app.models.product import Product


def _product_params(**overrides) -> dict:
    """Helper: query parameters for creating a product."""
    params = {
        "name": "Bolt",
        "productCategory": "Hardware",
        "productQuantity": 500,
        "productUnit": "pcs",
    }
    params.update(overrides)
    return params


class TestAddProduct:
    """Test POST /products/add."""

    def test_add_returns_confirmation_text(self, client):
        response = client.post("/products/add", params=_product_params())

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Product with the name Bolt saved!"

    def test_added_product_has_no_warehouse(self, client, db_session):
        client.post("/products/add", params=_product_params())

        product = db_session.query(Product).one()
        assert product.name == "Bolt"
        assert product.warehouse_id is None

    def test_negative_quantity_and_empty_name_are_accepted(self, client):
        response = client.post(
            "/products/add", params=_product_params(name="", productQuantity=-3)
        )

        assert response.status_code == 200
        assert client.get("/products/all").json()[0]["productQuantity"] == -3

    def test_non_integer_quantity_is_rejected(self, client, db_session):
        response = client.post(
            "/products/add", params=_product_params(productQuantity="many")
        )

        assert response.status_code == 422
        assert db_session.query(Product).count() == 0

    def test_missing_parameter_is_rejected(self, client):
        params = _product_params()
        del params["productUnit"]

        response = client.post("/products/add", params=params)

        assert response.status_code == 422

    def test_add_from_form_body(self, client):
        response = client.post("/products/add", data=_product_params())

        assert response.status_code == 200
        assert response.text == "Product with the name Bolt saved!"
        product = client.get("/products/all").json()[0]
        assert product["productCategory"] == "Hardware"
        assert product["productQuantity"] == 500
        assert product["productUnit"] == "pcs"

    def test_form_body_and_query_string_are_merged(self, client):
        params = _product_params()
        query = {"name": params.pop("name")}

        response = client.post("/products/add", params=query, data=params)

        assert response.status_code == 200
        assert client.get("/products/all").json()[0]["name"] == "Bolt"

    def test_non_integer_quantity_in_form_is_rejected(self, client, db_session):
        response = client.post(
            "/products/add", data=_product_params(productQuantity="many")
        )

        assert response.status_code == 422
        assert db_session.query(Product).count() == 0

    def test_missing_parameter_in_form_is_rejected(self, client):
        params = _product_params()
        del params["name"]

        response = client.post("/products/add", data=params)

        assert response.status_code == 422


class TestListProducts:
    """Test GET /products/all."""

    def test_empty(self, client):
        response = client.get("/products/all")

        assert response.status_code == 200
        assert response.json() == []

    def test_contains_submitted_fields(self, client):
        client.post("/products/add", params=_product_params())

        products = client.get("/products/all").json()

        assert len(products) == 1
        assert products[0]["name"] == "Bolt"
        assert products[0]["productCategory"] == "Hardware"
        assert products[0]["productQuantity"] == 500
        assert products[0]["productUnit"] == "pcs"

    def test_warehouse_reference_is_not_serialized(self, client):
        client.post("/warehouse/add", params={
            "name": "Central", "address": "1 Main St", "postalCode": 1010,
            "city": "Vienna", "country": "Austria",
        })
        client.post("/warehouse/1/addProduct", params=_product_params())

        product = client.get("/products/all").json()[0]

        assert set(product) == {
            "id", "name", "productCategory", "productQuantity", "productUnit"
        }

    def test_insertion_order(self, client):
        for name in ["Bolt", "Nut", "Washer"]:
            client.post("/products/add", params=_product_params(name=name))

        names = [p["name"] for p in client.get("/products/all").json()]

        assert names == ["Bolt", "Nut", "Washer"]


class TestGetProduct:
    """Test GET /products/{id}."""

    def test_found(self, client):
        client.post("/products/add", params=_product_params(name="Nut"))
        product_id = client.get("/products/all").json()[0]["id"]

        response = client.get(f"/products/{product_id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Nut"
        assert response.json()["id"] == product_id

    def test_unknown_id_returns_null(self, client):
        response = client.get("/products/999")

        assert response.status_code == 200
        assert response.json() is None

    def test_non_integer_id_is_rejected(self, client):
        response = client.get("/products/abc")

        assert response.status_code == 422
