"""Order service - order pass-through with in-memory search"""

import logging

from ...services.order_service import Order, OrderService
from ...shared.validators import ensure_aware
from .schemas import OrderSearchArguments

logger = logging.getLogger(__name__)


def matches_order(order: Order, args: OrderSearchArguments) -> bool:
    customer_name = args.customer_name.strip().lower()
    if customer_name:
        full_name = order.customer.full_name.lower() if order.customer else ""
        if customer_name not in full_name:
            return False

    status = args.status.strip().lower()
    if status:
        statuses = {
            (order.financial_status or "").lower(),
            (order.fulfillment_status or "").lower(),
        }
        if status not in statuses:
            return False

    if args.date_before is not None or args.date_after is not None:
        if order.created_at is None:
            return False
        created_at = ensure_aware(order.created_at)
        if args.date_before is not None and not created_at < ensure_aware(args.date_before):
            return False
        if args.date_after is not None and not created_at > ensure_aware(args.date_after):
            return False

    return True


def filter_orders(orders: list[Order], args: OrderSearchArguments) -> list[Order]:
    return [o for o in orders if matches_order(o, args)]


class OrderQueryService:
    def __init__(self, orders: OrderService):
        self.orders = orders

    async def search_orders(self, args: OrderSearchArguments) -> list[Order]:
        orders = await self.orders.list_orders()
        matched = filter_orders(orders, args)
        logger.info(f"🔎 Order search matched {len(matched)} of {len(orders)}")
        return matched

    async def get_order(self, order_id: int) -> Order:
        return await self.orders.get_order_by_id(order_id)
