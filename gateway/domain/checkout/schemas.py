from pydantic import BaseModel, ConfigDict, Field


class DraftOrderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    invoice_url: str = Field(alias="invoiceUrl")
