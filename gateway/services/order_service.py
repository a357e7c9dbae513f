"""Order client - read-only access to orders held by the Shopify service"""

import logging
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..exceptions import OrderNotFoundError, UpstreamUnavailableError
from .upstream import UpstreamClient

logger = logging.getLogger(__name__)


class OrderCustomer(BaseModel):
    model_config = ConfigDict(extra="allow")

    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class Order(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    financial_status: Optional[str] = None
    fulfillment_status: Optional[str] = None
    total_price: Optional[str] = None
    customer: Optional[OrderCustomer] = None


class OrderService(UpstreamClient):
    service_name = "order service"

    async def list_orders(self) -> list[Order]:
        response = await self._get("/api/orders")
        self._raise_for_unavailable(response)

        payload = self._json(response)
        if isinstance(payload, dict):
            payload = payload.get("orders", [])
        try:
            return [Order.model_validate(item) for item in payload]
        except (TypeError, ValidationError) as e:
            logger.error(f"❌ Order service returned an unreadable order list: {e}")
            raise UpstreamUnavailableError() from e

    async def get_order_by_id(self, order_id: int) -> Order:
        response = await self._get(f"/api/orders/{order_id}")
        if response.status_code == 404:
            raise OrderNotFoundError(order_id)
        self._raise_for_unavailable(response)

        try:
            return Order.model_validate(self._json(response))
        except ValidationError as e:
            logger.error(f"❌ Order service returned an unreadable order {order_id}: {e}")
            raise UpstreamUnavailableError() from e
