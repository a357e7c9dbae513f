"""Product domain schemas"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, model_validator


class ProductSearchArguments(BaseModel):
    """Filters applied to the full product list fetched from the catalog"""

    name: str = ""
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    available: bool = False

    @model_validator(mode="after")
    def check_price_range(self):
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise ValueError("min_price cannot be greater than max_price")
        return self


class FirstVariantResponse(BaseModel):
    variantId: int
