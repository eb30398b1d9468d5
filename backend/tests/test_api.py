from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError as PydanticValidationError

from api.products import _parse_params
from database import get_db
from dependencies import get_basket_repository
from exceptions import ValidationError
from main import app
from repositories.basket_repository import BasketRepository


@pytest.fixture
def redis_client():
    return AsyncMock()


@pytest.fixture
def client(db_session, redis_client):
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_basket_repository] = lambda: BasketRepository(redis_client)
    yield TestClient(app)
    app.dependency_overrides.clear()


# Products

def test_list_products_second_page(client, catalog):
    response = client.get("/api/products", params={"pageIndex": 2, "pageSize": 5})

    assert response.status_code == 200
    body = response.json()
    assert body["pageIndex"] == 2
    assert body["pageSize"] == 5
    assert body["count"] == 12
    assert [p["name"] for p in body["data"]] == [f"Product {n:02d}" for n in range(6, 11)]


def test_list_products_clamps_page_size(client, catalog):
    body = client.get("/api/products", params={"pageSize": 50}).json()

    assert body["pageSize"] == 10
    assert len(body["data"]) == 10


def test_list_products_flattens_brand_and_type(client, catalog):
    body = client.get("/api/products", params={"brandId": 2, "typeId": 1, "sort": "PriceDesc"}).json()

    assert body["count"] == 3
    assert [p["name"] for p in body["data"]] == ["Product 02", "Product 04", "Product 06"]
    first = body["data"][0]
    assert first["productBrand"] == "React"
    assert first["productType"] == "Boards"
    assert first["pictureUrl"].endswith("images/products/p2.png")


@pytest.mark.parametrize("params", [{"pageIndex": 0}, {"pageSize": 0}, {"pageIndex": -3}])
def test_list_products_rejects_non_positive_paging(client, catalog, params):
    response = client.get("/api/products", params=params)

    assert response.status_code == 400
    body = response.json()
    assert body["statusCode"] == 400
    assert body["message"] == "Bad Request"
    assert body["errors"]


def test_list_products_rejects_malformed_ids(client, catalog):
    response = client.get("/api/products", params={"brandId": "abc"})

    assert response.status_code == 400
    assert response.json()["errors"]


def test_parse_params_chains_pydantic_error():
    with pytest.raises(ValidationError) as excinfo:
        _parse_params(page_index=0, page_size=5)

    assert isinstance(excinfo.value.__cause__, PydanticValidationError)
    assert excinfo.value.errors and excinfo.value.errors[0].startswith("page")


def test_get_product(client, catalog):
    product_id = catalog["Product 03"]

    response = client.get(f"/api/products/{product_id}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == product_id
    assert body["productBrand"] == "Angular"
    assert body["productType"] == "Boards"


def test_get_missing_product_is_404(client, catalog):
    response = client.get("/api/products/9999")

    assert response.status_code == 404
    assert response.json() == {"statusCode": 404, "message": "Product doesn't exist."}


def test_list_brands_and_types(client, catalog):
    brands = client.get("/api/products/brands").json()
    types = client.get("/api/products/types").json()

    assert sorted(b["name"] for b in brands) == ["Angular", "React"]
    assert sorted(t["name"] for t in types) == ["Boards", "Boots"]


def test_unknown_route_uses_api_response_shape(client):
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.json() == {"statusCode": 404, "message": "Not Found"}


# Basket

def test_get_unknown_basket_returns_empty_basket(client, redis_client):
    redis_client.get.return_value = None

    response = client.get("/api/basket/abc")

    assert response.status_code == 200
    assert response.json() == {"id": "abc", "items": []}


def test_create_basket(client, redis_client):
    payload = {"id": "b1", "items": [{"id": 1, "productName": "Hat", "price": 10, "quantity": 2}]}
    redis_client.set.return_value = True
    redis_client.get.return_value = (
        '{"id":"b1","items":[{"id":1,"productName":"Hat","pictureUrl":"","price":10.0,'
        '"quantity":2,"brand":"","type":""}]}'
    )

    response = client.post("/api/basket", json=payload)

    assert response.status_code == 200
    assert response.json()["items"][0]["productName"] == "Hat"


def test_create_basket_refused_is_400(client, redis_client):
    redis_client.set.return_value = False

    response = client.post("/api/basket", json={"id": "b1", "items": []})

    assert response.status_code == 400
    assert response.json()["statusCode"] == 400


def test_create_basket_with_invalid_item_is_400(client, redis_client):
    response = client.post("/api/basket", json={"id": "b1", "items": [{"id": 1, "productName": "Hat", "price": 1, "quantity": 0}]})

    assert response.status_code == 400
    redis_client.set.assert_not_awaited()


def test_delete_basket(client, redis_client):
    redis_client.delete.return_value = 1

    response = client.delete("/api/basket/b1")

    assert response.status_code == 200
    assert response.json() is True
