"""Product service - catalog pass-through with in-memory search"""

import logging

from ...services.product_catalog import Product, ProductCatalog
from .schemas import ProductSearchArguments

logger = logging.getLogger(__name__)


def matches_product(product: Product, args: ProductSearchArguments) -> bool:
    name = args.name.strip().lower()
    if name and name not in product.title.lower():
        return False

    if args.min_price is not None or args.max_price is not None:
        variant = product.first_variant
        if variant is None:
            return False
        if args.min_price is not None and variant.price < args.min_price:
            return False
        if args.max_price is not None and variant.price > args.max_price:
            return False

    if args.available and not any(v.inventory_quantity > 0 for v in product.variants):
        return False

    return True


def filter_products(products: list[Product], args: ProductSearchArguments) -> list[Product]:
    """Keep upstream order; every set filter must match"""
    return [p for p in products if matches_product(p, args)]


class ProductService:
    def __init__(self, catalog: ProductCatalog):
        self.catalog = catalog

    async def search_products(self, args: ProductSearchArguments) -> list[Product]:
        products = await self.catalog.list_products()
        matched = filter_products(products, args)
        logger.info(f"🔎 Product search matched {len(matched)} of {len(products)}")
        return matched

    async def get_product(self, product_id: int) -> Product:
        return await self.catalog.get_product_by_id(product_id)

    async def get_first_variant_id(self, product_id: int) -> int:
        return await self.catalog.get_first_variant_id(product_id)
