"""
Cart service - the two cart variants and their state transitions.

Both services are pure over the cart value they are given: inputs are never
mutated, and a failed precondition raises before any new state is built, so
a failed operation leaves the stored cookie untouched.
"""

import logging

from ...exceptions import (
    CartLineNotFoundError,
    InsufficientStockError,
    InvalidArgumentError,
    OutOfStockError,
    ProductNotFoundError,
)
from ...services.product_catalog import ProductCatalog
from .schemas import CartLine

logger = logging.getLogger(__name__)


def _require_positive(product_id: int) -> None:
    if product_id <= 0:
        raise InvalidArgumentError("Invalid product ID format.")


class CookieCartService:
    """Gateway-local cart: productId -> quantity, no inventory checks"""

    def __init__(self, catalog: ProductCatalog):
        self.catalog = catalog

    async def add(self, cart: dict[int, int], product_id: int) -> dict[int, int]:
        """Add one unit after confirming the product exists upstream"""
        _require_positive(product_id)
        await self.catalog.get_first_variant_id(product_id)

        updated = dict(cart)
        updated[product_id] = updated.get(product_id, 0) + 1
        logger.info(f"🛒 Product {product_id} quantity now {updated[product_id]}")
        return updated

    def remove(self, cart: dict[int, int], product_id: int) -> dict[int, int]:
        if product_id not in cart:
            raise CartLineNotFoundError(product_id)

        updated = dict(cart)
        del updated[product_id]
        logger.info(f"🛒 Product {product_id} removed from cart")
        return updated

    def add_by_one(self, cart: dict[int, int], product_id: int) -> dict[int, int]:
        if product_id not in cart:
            raise CartLineNotFoundError(product_id)

        updated = dict(cart)
        updated[product_id] += 1
        return updated

    def remove_by_one(self, cart: dict[int, int], product_id: int) -> dict[int, int]:
        if product_id not in cart:
            raise CartLineNotFoundError(product_id)

        updated = dict(cart)
        updated[product_id] -= 1
        if updated[product_id] <= 0:
            del updated[product_id]
        return updated


class DelegatedCartService:
    """Cart of snapshotted lines keyed by variantId, stock-checked against the live catalog"""

    def __init__(self, catalog: ProductCatalog):
        self.catalog = catalog

    @staticmethod
    def _find(lines: list[CartLine], variant_id: int) -> int:
        for index, line in enumerate(lines):
            if line.variant_id == variant_id:
                return index
        raise CartLineNotFoundError(variant_id)

    @staticmethod
    def _with_quantity(lines: list[CartLine], index: int, quantity: int) -> list[CartLine]:
        updated = list(lines)
        if quantity <= 0:
            del updated[index]
        else:
            updated[index] = lines[index].model_copy(update={"quantity": quantity})
        return updated

    async def add(self, lines: list[CartLine], product_id: int) -> list[CartLine]:
        _require_positive(product_id)
        product, variant = await self.catalog.get_first_variant(product_id)

        inventory = variant.inventory_quantity
        if inventory <= 0:
            logger.warning(f"⚠️ Product {product_id} is out of stock")
            raise OutOfStockError(product_id)

        try:
            index = self._find(lines, variant.id)
        except CartLineNotFoundError:
            new_line = CartLine(
                product_id=product_id,
                product_title=product.title,
                variant_id=variant.id,
                price=variant.price,
                quantity=1,
            )
            logger.info(f"🛒 Variant {variant.id} (product {product_id}) added to cart")
            return [*lines, new_line]

        current = lines[index].quantity
        if current >= inventory:
            logger.warning(f"⚠️ Variant {variant.id}: {current} in cart, {inventory} in stock")
            raise InsufficientStockError(variant.id, inventory)

        logger.info(f"🛒 Variant {variant.id} quantity now {current + 1}")
        return self._with_quantity(lines, index, current + 1)

    def remove(self, lines: list[CartLine], variant_id: int) -> list[CartLine]:
        index = self._find(lines, variant_id)
        logger.info(f"🛒 Variant {variant_id} removed from cart")
        return self._with_quantity(lines, index, 0)

    async def increment_by_one(self, lines: list[CartLine], variant_id: int) -> list[CartLine]:
        index = self._find(lines, variant_id)
        line = lines[index]

        product = await self.catalog.get_product_by_id(line.product_id)
        variant = product.find_variant(variant_id)
        if variant is None:
            logger.warning(f"⚠️ Variant {variant_id} no longer exists on product {line.product_id}")
            raise ProductNotFoundError(line.product_id, "Variant not found for the specified product.")

        if line.quantity >= variant.inventory_quantity:
            logger.warning(
                f"⚠️ Variant {variant_id}: {line.quantity} in cart, "
                f"{variant.inventory_quantity} in stock"
            )
            raise InsufficientStockError(variant_id, variant.inventory_quantity)

        return self._with_quantity(lines, index, line.quantity + 1)

    def decrement_by_one(self, lines: list[CartLine], variant_id: int) -> list[CartLine]:
        index = self._find(lines, variant_id)
        return self._with_quantity(lines, index, lines[index].quantity - 1)
