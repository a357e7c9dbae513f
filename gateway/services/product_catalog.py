"""Product catalog client - products, variants and live inventory"""

import logging
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ProductNotFoundError, UpstreamUnavailableError
from .upstream import UpstreamClient

logger = logging.getLogger(__name__)


class ProductVariant(BaseModel):
    """A purchasable SKU of a product"""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int
    title: Optional[str] = None
    price: Decimal = Decimal("0")
    inventory_quantity: int = Field(
        default=0,
        validation_alias=AliasChoices("inventory_quantity", "inventoryQuantity"),
    )


class Product(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int
    title: str = ""
    variants: list[ProductVariant] = Field(default_factory=list)

    @property
    def first_variant(self) -> Optional[ProductVariant]:
        return self.variants[0] if self.variants else None

    def find_variant(self, variant_id: int) -> Optional[ProductVariant]:
        return next((v for v in self.variants if v.id == variant_id), None)


class ProductCatalog(UpstreamClient):
    """Reads products from the Shopify service. Never cached: inventory must be live."""

    service_name = "product catalog"

    async def get_product_by_id(self, product_id: int) -> Product:
        response = await self._get(f"/api/products/{product_id}")
        if response.status_code == 404:
            logger.info(f"Product {product_id} not found in catalog")
            raise ProductNotFoundError(product_id)
        self._raise_for_unavailable(response)

        try:
            return Product.model_validate(self._json(response))
        except ValidationError as e:
            logger.error(f"❌ Catalog returned an unreadable product {product_id}: {e}")
            raise UpstreamUnavailableError() from e

    async def get_first_variant(self, product_id: int) -> tuple[Product, ProductVariant]:
        """Fetch a product and the variant carts operate on"""
        product = await self.get_product_by_id(product_id)
        variant = product.first_variant
        if variant is None:
            logger.warning(f"Product {product_id} has no variants")
            raise ProductNotFoundError(
                product_id, "No variants available for the specified product."
            )
        return product, variant

    async def get_first_variant_id(self, product_id: int) -> int:
        _, variant = await self.get_first_variant(product_id)
        return variant.id

    async def list_products(self) -> list[Product]:
        response = await self._get("/api/products")
        self._raise_for_unavailable(response)

        payload = self._json(response)
        # Accept both a bare list and Shopify's {"products": [...]} envelope
        if isinstance(payload, dict):
            payload = payload.get("products", [])
        try:
            return [Product.model_validate(item) for item in payload]
        except (TypeError, ValidationError) as e:
            logger.error(f"❌ Catalog returned an unreadable product list: {e}")
            raise UpstreamUnavailableError() from e
