"""Cart routers - FastAPI endpoints for both cart variants"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...dependencies import get_product_catalog
from ...services.product_catalog import ProductCatalog
from ...shared.validators import validate_resource_id
from .cookie_store import lines_to_json, quantities_to_json, read_lines, read_quantities, write_cart
from .schemas import CartLine
from .service import CookieCartService, DelegatedCartService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cart", tags=["Cart"])
proxy_router = APIRouter(prefix="/proxycart", tags=["Cart"])


def get_cookie_cart_service(
    catalog: ProductCatalog = Depends(get_product_catalog),
) -> CookieCartService:
    """Dependency injection for CookieCartService"""
    return CookieCartService(catalog)


def get_delegated_cart_service(
    catalog: ProductCatalog = Depends(get_product_catalog),
) -> DelegatedCartService:
    """Dependency injection for DelegatedCartService"""
    return DelegatedCartService(catalog)


def _quantities_response(cart: dict[int, int]) -> JSONResponse:
    payload = quantities_to_json(cart)
    logger.info(f"Cookie cart now holds {len(payload)} products")
    response = JSONResponse(content=payload)
    write_cart(response, payload)
    return response


def _lines_response(lines: list[CartLine]) -> JSONResponse:
    payload = lines_to_json(lines)
    logger.info(f"Delegated cart now holds {len(payload)} lines")
    response = JSONResponse(content=payload)
    write_cart(response, payload)
    return response


# ============================================================================
# COOKIE CART (productId -> quantity)
# ============================================================================


@router.get("")
async def get_cart(request: Request):
    """Current cart as {productId: quantity}"""
    return quantities_to_json(read_quantities(request))


@router.post("/add/{product_id}")
async def add_to_cart(
    product_id: str,
    request: Request,
    service: CookieCartService = Depends(get_cookie_cart_service),
):
    """Add one unit of a product; the product must exist in the catalog"""
    parsed_id = validate_resource_id(product_id)
    cart = await service.add(read_quantities(request), parsed_id)
    return _quantities_response(cart)


@router.post("/remove/{product_id}")
async def remove_from_cart(
    product_id: str,
    request: Request,
    service: CookieCartService = Depends(get_cookie_cart_service),
):
    parsed_id = validate_resource_id(product_id)
    return _quantities_response(service.remove(read_quantities(request), parsed_id))


@router.post("/addbyone/{product_id}")
async def add_by_one(
    product_id: str,
    request: Request,
    service: CookieCartService = Depends(get_cookie_cart_service),
):
    parsed_id = validate_resource_id(product_id)
    return _quantities_response(service.add_by_one(read_quantities(request), parsed_id))


@router.post("/removebyone/{product_id}")
async def remove_by_one(
    product_id: str,
    request: Request,
    service: CookieCartService = Depends(get_cookie_cart_service),
):
    parsed_id = validate_resource_id(product_id)
    return _quantities_response(service.remove_by_one(read_quantities(request), parsed_id))


# ============================================================================
# DELEGATED CART (lines keyed by variantId, stock-checked)
# ============================================================================


@proxy_router.get("")
async def get_proxy_cart(request: Request):
    """Current cart lines"""
    return lines_to_json(read_lines(request))


@proxy_router.post("/add/{product_id}")
async def add_to_proxy_cart(
    product_id: str,
    request: Request,
    service: DelegatedCartService = Depends(get_delegated_cart_service),
):
    """Add the product's first variant, or one more unit of it if stock allows"""
    parsed_id = validate_resource_id(product_id)
    lines = await service.add(read_lines(request), parsed_id)
    return _lines_response(lines)


@proxy_router.post("/remove/{variant_id}")
async def remove_from_proxy_cart(
    variant_id: str,
    request: Request,
    service: DelegatedCartService = Depends(get_delegated_cart_service),
):
    parsed_id = validate_resource_id(variant_id, "variant ID")
    return _lines_response(service.remove(read_lines(request), parsed_id))


@proxy_router.post("/addbyone/{variant_id}")
async def add_by_one_to_proxy_cart(
    variant_id: str,
    request: Request,
    service: DelegatedCartService = Depends(get_delegated_cart_service),
):
    """Increment a line after re-checking live inventory"""
    parsed_id = validate_resource_id(variant_id, "variant ID")
    lines = await service.increment_by_one(read_lines(request), parsed_id)
    return _lines_response(lines)


@proxy_router.post("/removebyone/{variant_id}")
async def remove_by_one_from_proxy_cart(
    variant_id: str,
    request: Request,
    service: DelegatedCartService = Depends(get_delegated_cart_service),
):
    parsed_id = validate_resource_id(variant_id, "variant ID")
    return _lines_response(service.decrement_by_one(read_lines(request), parsed_id))
