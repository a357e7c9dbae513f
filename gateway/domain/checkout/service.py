"""Checkout service - builds draft order line items from cart lines"""

import logging

from ...exceptions import InvalidArgumentError
from ...services.draft_order_service import DraftOrderLineItem, DraftOrderService
from ..cart.schemas import CartLine

logger = logging.getLogger(__name__)


class CheckoutService:
    def __init__(self, draft_orders: DraftOrderService):
        self.draft_orders = draft_orders

    async def create_draft_order(self, lines: list[CartLine]) -> str:
        """Submit one line item per cart line and return the invoice URL"""
        if not lines:
            logger.warning("Draft order requested for an empty cart")
            raise InvalidArgumentError("Cart is empty.")

        line_items = [
            DraftOrderLineItem(variant_id=line.variant_id, quantity=line.quantity) for line in lines
        ]
        return await self.draft_orders.create_draft_order(line_items)
