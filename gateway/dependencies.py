"""FastAPI providers for the process-wide upstream clients built in the lifespan"""

from fastapi import Request

from .services.draft_order_service import DraftOrderService
from .services.order_service import OrderService
from .services.product_catalog import ProductCatalog
from .services.promo_service import PromoService


def get_product_catalog(request: Request) -> ProductCatalog:
    return request.app.state.product_catalog


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service


def get_draft_order_service(request: Request) -> DraftOrderService:
    return request.app.state.draft_order_service


def get_promo_service(request: Request) -> PromoService:
    return request.app.state.promo_service
