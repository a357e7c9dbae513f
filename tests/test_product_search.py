from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from gateway.domain.products.schemas import ProductSearchArguments
from gateway.domain.products.service import filter_products
from gateway.services.product_catalog import Product


def _product(product_id: int, title: str, price: str, inventory: int) -> Product:
    return Product.model_validate(
        {
            "id": product_id,
            "title": title,
            "variants": [{"id": product_id * 10, "price": price, "inventory_quantity": inventory}],
        }
    )


PRODUCTS = [
    _product(1, "Blue Coffee Mug", "9.99", 5),
    _product(2, "Red Tea Cup", "4.50", 0),
    _product(3, "Coffee Beans 1kg", "24.00", 12),
]


def _ids(products: list[Product]) -> list[int]:
    return [p.id for p in products]


def test_no_filters_keeps_everything() -> None:
    assert _ids(filter_products(PRODUCTS, ProductSearchArguments())) == [1, 2, 3]


def test_name_is_case_insensitive_substring() -> None:
    args = ProductSearchArguments(name="coffee")

    assert _ids(filter_products(PRODUCTS, args)) == [1, 3]


def test_price_bounds_are_inclusive() -> None:
    args = ProductSearchArguments(min_price=Decimal("4.50"), max_price=Decimal("9.99"))

    assert _ids(filter_products(PRODUCTS, args)) == [1, 2]


def test_available_requires_stock() -> None:
    assert _ids(filter_products(PRODUCTS, ProductSearchArguments(available=True))) == [1, 3]


def test_filters_combine() -> None:
    args = ProductSearchArguments(name="coffee", max_price=Decimal("10"), available=True)

    assert _ids(filter_products(PRODUCTS, args)) == [1]


def test_price_filter_skips_products_without_variants() -> None:
    bare = Product.model_validate({"id": 9, "title": "Gift card", "variants": []})

    assert filter_products([bare], ProductSearchArguments(min_price=Decimal("0"))) == []


def test_inverted_price_range_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ProductSearchArguments(min_price=Decimal("10"), max_price=Decimal("1"))


class TestProductRoutes:
    def test_search(self, shopify, test_client) -> None:
        shopify.add_product(1, title="Blue Coffee Mug", price="9.99", inventory=5)
        shopify.add_product(2, title="Red Tea Cup", price="4.50", inventory=0)

        response = test_client.get("/products", params={"name": "mug"})

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body] == [1]
        assert body[0]["vendor"] == "Test Vendor"

    def test_search_rejects_inverted_range(self, test_client) -> None:
        response = test_client.get("/products", params={"min_price": "10", "max_price": "1"})

        assert response.status_code == 400

    def test_get_product(self, shopify, test_client) -> None:
        shopify.add_product(42, title="Coffee Mug")

        response = test_client.get("/products/42")

        assert response.status_code == 200
        assert response.json()["title"] == "Coffee Mug"

    def test_get_missing_product(self, test_client) -> None:
        assert test_client.get("/products/42").status_code == 404

    def test_first_variant(self, shopify, test_client) -> None:
        shopify.add_product(42, variant_id=1001)

        response = test_client.get("/products/variant/42")

        assert response.status_code == 200
        assert response.json() == {"variantId": 1001}

    def test_catalog_down(self, shopify, test_client) -> None:
        shopify.status_override = 502

        response = test_client.get("/products")

        assert response.status_code == 503

    @pytest.mark.parametrize(
        "params, field",
        [({"min_price": "abc"}, "min_price"), ({"available": "maybe"}, "available")],
    )
    def test_malformed_query_is_bad_request(self, test_client, params, field) -> None:
        response = test_client.get("/products", params=params)

        assert response.status_code == 400
        assert response.json()["detail"].startswith(f"Invalid {field}")
