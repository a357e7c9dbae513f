"""Shared fixtures: an in-memory Shopify service behind httpx.MockTransport."""
from __future__ import annotations

import json
import re
from typing import Any, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from gateway.config import UpstreamConfig
from gateway.dependencies import (
    get_draft_order_service,
    get_order_service,
    get_product_catalog,
    get_promo_service,
)
from gateway.main import app
from gateway.services.draft_order_service import DraftOrderService
from gateway.services.order_service import OrderService
from gateway.services.product_catalog import ProductCatalog
from gateway.services.promo_service import PromoService

_PRODUCT_PATH = re.compile(r"^/api/products/(\d+)$")
_ORDER_PATH = re.compile(r"^/api/orders/(\d+)$")
_PRICE_RULE_PATH = re.compile(r"^/api/promo/PriceRules/(\d+)$")
_DISCOUNTS_PATH = re.compile(r"^/api/promo/Discounts/(\d+)$")


class FakeShopifyApi:
    """Serves products, orders, promos and draft orders the way the Shopify service does."""

    def __init__(self) -> None:
        self.products: dict[int, dict[str, Any]] = {}
        self.orders: list[dict[str, Any]] = []
        self.price_rules: dict[int, dict[str, Any]] = {}
        self.discount_codes: dict[int, list[dict[str, Any]]] = {}
        self.draft_orders: list[dict[str, Any]] = []
        self.requests: list[httpx.Request] = []
        self.fail_with: Optional[type[httpx.HTTPError]] = None
        self.status_override: Optional[int] = None

    def add_product(
        self,
        product_id: int,
        title: str = "Widget",
        variant_id: int = 1001,
        price: str = "9.99",
        inventory: int = 5,
    ) -> dict[str, Any]:
        product = {
            "id": product_id,
            "title": title,
            "vendor": "Test Vendor",
            "variants": [
                {
                    "id": variant_id,
                    "title": "Default Title",
                    "price": price,
                    "inventory_quantity": inventory,
                }
            ],
        }
        self.products[product_id] = product
        return product

    def set_inventory(self, product_id: int, inventory: int) -> None:
        self.products[product_id]["variants"][0]["inventory_quantity"] = inventory

    def add_price_rule(self, price_rule_id: int, title: str = "SPRING10", value: str = "-10.0") -> None:
        self.price_rules[price_rule_id] = {
            "id": price_rule_id,
            "title": title,
            "value_type": "percentage",
            "value": value,
        }
        self.discount_codes[price_rule_id] = []

    def add_discount_code(self, price_rule_id: int, discount_id: int, code: str) -> None:
        self.discount_codes[price_rule_id].append(
            {"id": discount_id, "code": code, "price_rule_id": price_rule_id, "usage_count": 0}
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with("upstream failure", request=request)
        if self.status_override is not None:
            return httpx.Response(self.status_override, json={"message": "upstream error"})

        path = request.url.path
        if path == "/api/products":
            return httpx.Response(200, json=list(self.products.values()))
        if path == "/api/orders":
            return httpx.Response(200, json={"orders": self.orders})
        if path == "/api/draftorder" and request.method == "POST":
            return self._create_draft_order(request)
        if path == "/api/promo/PriceRules":
            return httpx.Response(200, json=list(self.price_rules.values()))

        match = _PRICE_RULE_PATH.match(path)
        if match:
            rule = self.price_rules.get(int(match.group(1)))
            if rule is None:
                return httpx.Response(404, json={"message": "Error fetching price rule"})
            return httpx.Response(200, json=rule)

        match = _DISCOUNTS_PATH.match(path)
        if match:
            codes = self.discount_codes.get(int(match.group(1)))
            if codes is None:
                return httpx.Response(404, json={"message": "Error fetching discounts"})
            return httpx.Response(200, json={"discount_codes": codes})

        match = _PRODUCT_PATH.match(path)
        if match:
            product = self.products.get(int(match.group(1)))
            if product is None:
                return httpx.Response(404, json={"message": "404 Not Found"})
            return httpx.Response(200, json=product)

        match = _ORDER_PATH.match(path)
        if match:
            order_id = int(match.group(1))
            for order in self.orders:
                if order["id"] == order_id:
                    return httpx.Response(200, json=order)
            return httpx.Response(404, json={"message": "404 Not Found"})

        return httpx.Response(404)

    def _create_draft_order(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        line_items = body.get("line_items") or []
        if any(item["variant_id"] not in self._variant_ids() for item in line_items):
            return httpx.Response(
                400, json={"message": "draft_order: Required parameter missing or invalid"}
            )
        self.draft_orders.append(body)
        return httpx.Response(200, json=f"https://shop.test/invoices/{len(self.draft_orders)}")

    def _variant_ids(self) -> set[int]:
        return {v["id"] for p in self.products.values() for v in p["variants"]}


@pytest.fixture
def shopify() -> FakeShopifyApi:
    return FakeShopifyApi()


@pytest.fixture
def upstream_config() -> UpstreamConfig:
    return UpstreamConfig(base_url="http://shopify.test", timeout=1.0)


@pytest.fixture
def http_client(shopify: FakeShopifyApi) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(shopify.handler))


@pytest.fixture
def catalog(http_client: httpx.AsyncClient, upstream_config: UpstreamConfig) -> ProductCatalog:
    return ProductCatalog(http_client, upstream_config)


@pytest.fixture
def order_service(http_client: httpx.AsyncClient, upstream_config: UpstreamConfig) -> OrderService:
    return OrderService(http_client, upstream_config)


@pytest.fixture
def draft_order_service(
    http_client: httpx.AsyncClient, upstream_config: UpstreamConfig
) -> DraftOrderService:
    return DraftOrderService(http_client, upstream_config)


@pytest.fixture
def promo_service(http_client: httpx.AsyncClient, upstream_config: UpstreamConfig) -> PromoService:
    return PromoService(http_client, upstream_config)


@pytest.fixture
def test_client(
    catalog: ProductCatalog,
    order_service: OrderService,
    draft_order_service: DraftOrderService,
    promo_service: PromoService,
):
    app.dependency_overrides[get_product_catalog] = lambda: catalog
    app.dependency_overrides[get_order_service] = lambda: order_service
    app.dependency_overrides[get_draft_order_service] = lambda: draft_order_service
    app.dependency_overrides[get_promo_service] = lambda: promo_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
