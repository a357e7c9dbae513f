"""Checkout router - POST /draftorder from the delegated cart cookie"""

import logging

from fastapi import APIRouter, Depends, Request

from ...dependencies import get_draft_order_service
from ...services.draft_order_service import DraftOrderService
from ..cart.cookie_store import read_lines
from .schemas import DraftOrderResponse
from .service import CheckoutService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/draftorder", tags=["Checkout"])


def get_checkout_service(
    draft_orders: DraftOrderService = Depends(get_draft_order_service),
) -> CheckoutService:
    """Dependency injection for CheckoutService"""
    return CheckoutService(draft_orders)


@router.post("", response_model=DraftOrderResponse)
async def create_draft_order(
    request: Request,
    service: CheckoutService = Depends(get_checkout_service),
):
    """
    Create a draft order from the current cart lines.

    The cart cookie is left as it is; the client clears it once the invoice
    is paid.
    """
    lines = read_lines(request)
    logger.info(f"Creating draft order from {len(lines)} cart lines")
    invoice_url = await service.create_draft_order(lines)
    return DraftOrderResponse(invoice_url=invoice_url)
