"""Product router - read-only proxy to the product catalog"""

import logging
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError

from ...dependencies import get_product_catalog
from ...exceptions import InvalidArgumentError
from ...services.product_catalog import ProductCatalog
from ...shared.validators import validate_resource_id
from .schemas import FirstVariantResponse, ProductSearchArguments
from .service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


def get_product_service(
    catalog: ProductCatalog = Depends(get_product_catalog),
) -> ProductService:
    """Dependency injection for ProductService"""
    return ProductService(catalog)


@router.get("")
async def get_products(
    service: ProductService = Depends(get_product_service),
    name: str = Query("", description="Case-insensitive title fragment"),
    min_price: Optional[Decimal] = Query(None),
    max_price: Optional[Decimal] = Query(None),
    available: bool = Query(False, description="Only products with stock"),
):
    """List catalog products matching the optional filters"""
    try:
        args = ProductSearchArguments(
            name=name, min_price=min_price, max_price=max_price, available=available
        )
    except ValidationError as e:
        raise InvalidArgumentError(e.errors()[0]["msg"]) from None

    logger.info(f"Product search: {args.model_dump(exclude_defaults=True)}")
    products = await service.search_products(args)
    return [p.model_dump(mode="json") for p in products]


@router.get("/variant/{product_id}", response_model=FirstVariantResponse)
async def get_first_variant(
    product_id: str,
    service: ProductService = Depends(get_product_service),
):
    """First variant id of a product, the unit carts operate on"""
    parsed_id = validate_resource_id(product_id)
    return FirstVariantResponse(variantId=await service.get_first_variant_id(parsed_id))


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
):
    parsed_id = validate_resource_id(product_id)
    product = await service.get_product(parsed_id)
    return product.model_dump(mode="json")
