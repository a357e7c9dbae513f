"""Promo router - read-only proxy to the promo endpoints of the Shopify service"""

from fastapi import APIRouter, Depends

from ...dependencies import get_promo_service
from ...services.promo_service import PromoService
from ...shared.validators import validate_resource_id

router = APIRouter(prefix="/promos", tags=["Promos"])


@router.get("/pricerules")
async def get_price_rules(service: PromoService = Depends(get_promo_service)):
    rules = await service.list_price_rules()
    return [rule.model_dump(mode="json") for rule in rules]


@router.get("/pricerules/{price_rule_id}")
async def get_price_rule(
    price_rule_id: str,
    service: PromoService = Depends(get_promo_service),
):
    parsed_id = validate_resource_id(price_rule_id, "price rule ID")
    rule = await service.get_price_rule(parsed_id)
    return rule.model_dump(mode="json")


@router.get("/discounts/{price_rule_id}")
async def get_discount_codes(
    price_rule_id: str,
    service: PromoService = Depends(get_promo_service),
):
    """Discount codes issued under one price rule"""
    parsed_id = validate_resource_id(price_rule_id, "price rule ID")
    codes = await service.list_discount_codes(parsed_id)
    return [code.model_dump(mode="json") for code in codes]
