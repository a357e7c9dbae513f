"""Draft order client - hands a cart to the Shopify service for checkout"""

import logging

from pydantic import BaseModel

from ..exceptions import InvalidArgumentError, NotFoundError, UpstreamUnavailableError
from .upstream import UpstreamClient

logger = logging.getLogger(__name__)


class DraftOrderLineItem(BaseModel):
    variant_id: int
    quantity: int


class DraftOrderService(UpstreamClient):
    """
    Creates Shopify draft orders.

    The Shopify service answers a successful create with the draft's invoice
    URL, either as a bare JSON string or as an object carrying ``invoice_url``.
    """

    service_name = "draft order service"

    async def create_draft_order(self, line_items: list[DraftOrderLineItem]) -> str:
        payload = {"line_items": [item.model_dump() for item in line_items]}
        response = await self._post("/api/draftorder", payload)

        if response.status_code == 400:
            message = self._upstream_message(response, "Draft order was rejected.")
            logger.warning(f"Draft order rejected upstream: {message}")
            raise InvalidArgumentError(message)
        if response.status_code == 404:
            raise NotFoundError(self._upstream_message(response, "Draft order target not found."))
        self._raise_for_unavailable(response)

        body = self._json(response)
        if isinstance(body, dict):
            body = body.get("invoice_url")
        if not isinstance(body, str) or not body:
            logger.error(f"❌ Draft order created without an invoice URL: {response.text[:200]}")
            raise UpstreamUnavailableError()

        logger.info(f"✅ Draft order created with {len(line_items)} line items")
        return body
