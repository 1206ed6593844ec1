"""Tax models"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from checkbox_api.models.base import ApiModel


class Tax(ApiModel):
    """Tax rate configured for the organization"""

    id: str = Field(..., description="Tax ID")
    code: int = Field(..., description="Tax code referenced by goods")
    label: Optional[str] = Field(None, description="Tax name")
    symbol: Optional[str] = Field(None, description="Tax letter printed on receipts")
    rate: Optional[float] = Field(None, description="Tax percentage")
    extra_rate: Optional[float] = Field(None, description="Additional tax percentage")
    included: Optional[bool] = Field(None, description="Tax is included in the price")
    no_vat: Optional[bool] = Field(None, description="Not a VAT payer")
    created_at: Optional[datetime] = Field(None, description="Creation date")
    updated_at: Optional[datetime] = Field(None, description="Last update date")


class ReceiptTax(Tax):
    """Tax amount charged on a receipt"""

    value: Optional[int] = Field(None, description="Tax amount in kopecks")
    extra_value: Optional[int] = Field(None, description="Additional tax amount in kopecks")
