"""Order router - read-only proxy to the order service"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...dependencies import get_order_service
from ...services.order_service import OrderService
from ...shared.validators import validate_resource_id
from .schemas import OrderSearchArguments
from .service import OrderQueryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["Orders"])


def get_order_query_service(
    orders: OrderService = Depends(get_order_service),
) -> OrderQueryService:
    """Dependency injection for OrderQueryService"""
    return OrderQueryService(orders)


@router.get("")
async def get_orders(
    service: OrderQueryService = Depends(get_order_query_service),
    customer_name: str = Query(""),
    status: str = Query("", description="Financial or fulfillment status"),
    date_before: Optional[datetime] = Query(None, description="ISO-8601, exclusive"),
    date_after: Optional[datetime] = Query(None, description="ISO-8601, exclusive"),
):
    """List orders matching the optional filters"""
    args = OrderSearchArguments(
        customer_name=customer_name,
        status=status,
        date_before=date_before,
        date_after=date_after,
    )
    logger.info(f"Order search: {args.model_dump(exclude_defaults=True)}")
    orders = await service.search_orders(args)
    return [o.model_dump(mode="json") for o in orders]


@router.get("/{order_id}")
async def get_order(
    order_id: str,
    service: OrderQueryService = Depends(get_order_query_service),
):
    parsed_id = validate_resource_id(order_id, "order ID")
    logger.info(f"Fetching order {parsed_id}")
    order = await service.get_order(parsed_id)
    return order.model_dump(mode="json")
