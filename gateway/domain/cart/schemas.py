"""Cart domain schemas - Pydantic models for cart lines"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# Prices go over the wire as JSON numbers
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CartLine(BaseModel):
    """One variant in a delegated cart; title and price are snapshotted at add-time"""

    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(alias="productId")
    product_title: str = Field(default="", alias="productTitle")
    variant_id: int = Field(alias="variantId")
    price: JsonDecimal = Decimal("0")
    quantity: int = 1
