"""Promo client - read-only price rules and discount codes"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..exceptions import PriceRuleNotFoundError, UpstreamUnavailableError
from .upstream import UpstreamClient

logger = logging.getLogger(__name__)


class PriceRule(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    title: Optional[str] = None
    value_type: Optional[str] = None
    value: Optional[str] = None
    starts_at: Optional[str] = None
    ends_at: Optional[str] = None


class DiscountCode(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    code: str
    price_rule_id: Optional[int] = None
    usage_count: int = 0


def _unwrap(payload: Any, key: str) -> Any:
    """Lists may come bare or wrapped in a Shopify-style envelope"""
    if isinstance(payload, dict):
        return payload.get(key, payload.get("items", []))
    return payload


class PromoService(UpstreamClient):
    service_name = "promo service"

    async def list_price_rules(self) -> list[PriceRule]:
        response = await self._get("/api/promo/PriceRules")
        self._raise_for_unavailable(response)
        return self._validate_list(PriceRule, _unwrap(self._json(response), "price_rules"))

    async def get_price_rule(self, price_rule_id: int) -> PriceRule:
        response = await self._get(f"/api/promo/PriceRules/{price_rule_id}")
        if response.status_code == 404:
            raise PriceRuleNotFoundError(price_rule_id)
        self._raise_for_unavailable(response)

        try:
            return PriceRule.model_validate(self._json(response))
        except ValidationError as e:
            logger.error(f"❌ Promo service returned an unreadable price rule {price_rule_id}: {e}")
            raise UpstreamUnavailableError() from e

    async def list_discount_codes(self, price_rule_id: int) -> list[DiscountCode]:
        response = await self._get(f"/api/promo/Discounts/{price_rule_id}")
        # The Shopify service answers 404 for a rule it does not know
        if response.status_code == 404:
            raise PriceRuleNotFoundError(price_rule_id)
        self._raise_for_unavailable(response)
        return self._validate_list(DiscountCode, _unwrap(self._json(response), "discount_codes"))

    @staticmethod
    def _validate_list(model: type[BaseModel], payload: Any) -> list:
        try:
            return [model.model_validate(item) for item in payload]
        except (TypeError, ValidationError) as e:
            logger.error(f"❌ Promo service returned an unreadable {model.__name__} list: {e}")
            raise UpstreamUnavailableError() from e
