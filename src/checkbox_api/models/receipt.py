"""Receipt models

Money amounts are integers in kopecks and quantities are integers in
thousandths of a unit, as the API defines them.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from checkbox_api.models.base import ApiModel
from checkbox_api.models.pagination import PaginationMeta
from checkbox_api.models.tax import ReceiptTax


class ReceiptType(str, Enum):
    """Receipt type"""
    SELL = "SELL"
    RETURN = "RETURN"
    SERVICE_IN = "SERVICE_IN"
    SERVICE_OUT = "SERVICE_OUT"
    SERVICE_CURRENCY = "SERVICE_CURRENCY"
    CASH_WITHDRAWAL = "CASH_WITHDRAWAL"


class PaymentType(str, Enum):
    """Payment method"""
    CASH = "CASH"
    CASHLESS = "CASHLESS"
    CARD = "CARD"


class DiscountType(str, Enum):
    DISCOUNT = "DISCOUNT"
    EXTRA_CHARGE = "EXTRA_CHARGE"


class DiscountMode(str, Enum):
    PERCENT = "PERCENT"
    VALUE = "VALUE"


class Discount(ApiModel):
    """Discount or extra charge"""

    type: DiscountType = Field(..., description="Discount or extra charge")
    mode: DiscountMode = Field(..., description="Percent or fixed amount")
    value: float = Field(..., description="Percent, or amount in kopecks")
    name: Optional[str] = Field(None, description="Label printed on the receipt")
    tax_code: Optional[int] = Field(None, description="Tax code the discount applies to")


class Good(ApiModel):
    """Sold product"""

    code: str = Field(..., description="Product code")
    name: str = Field(..., description="Product name")
    price: int = Field(..., description="Unit price in kopecks")
    barcode: Optional[str] = Field(None, description="Product barcode")
    header: Optional[str] = Field(None, description="Text printed above the item")
    footer: Optional[str] = Field(None, description="Text printed below the item")
    uktzed: Optional[str] = Field(None, description="Commodity classification code")
    tax: Optional[List[int]] = Field(None, description="Tax codes applied to the product")


class GoodItem(ApiModel):
    """Receipt line item"""

    good: Good = Field(..., description="Product")
    quantity: int = Field(..., description="Quantity in thousandths")
    is_return: Optional[bool] = Field(None, description="Line is a return")
    discounts: Optional[List[Discount]] = Field(None, description="Line discounts")


class Payment(ApiModel):
    """Receipt payment"""

    type: PaymentType = Field(PaymentType.CASH, description="Payment method")
    value: int = Field(..., description="Payment amount in kopecks")
    label: Optional[str] = Field(None, description="Payment label")


class Delivery(ApiModel):
    """Electronic receipt delivery"""

    email: Optional[str] = None
    emails: Optional[List[str]] = None
    phone: Optional[str] = None


class SellReceipt(ApiModel):
    """Sell receipt request body"""

    goods: List[GoodItem] = Field(..., min_length=1, description="Line items")
    payments: List[Payment] = Field(..., min_length=1, description="Payments")
    id: Optional[str] = Field(None, description="Client-generated receipt ID")
    cashier_name: Optional[str] = Field(None, description="Cashier name printed on the receipt")
    departament: Optional[str] = Field(None, description="Department")
    delivery: Optional[Delivery] = Field(None, description="Electronic delivery")
    discounts: Optional[List[Discount]] = Field(None, description="Receipt-level discounts")
    header: Optional[str] = Field(None, description="Receipt header text")
    footer: Optional[str] = Field(None, description="Receipt footer text")
    barcode: Optional[str] = Field(None, description="Receipt barcode")


class Receipt(ApiModel):
    """Issued fiscal receipt"""

    id: str = Field(..., description="Receipt ID")
    type: Optional[ReceiptType] = Field(None, description="Receipt type")
    transaction: Optional[Dict[str, Any]] = Field(None, description="Fiscalization transaction")
    serial: Optional[int] = Field(None, description="Serial number within the shift")
    status: Optional[str] = Field(None, description="Receipt status")
    goods: Optional[List[GoodItem]] = Field(None, description="Line items")
    payments: Optional[List[Payment]] = Field(None, description="Payments")
    discounts: Optional[List[Discount]] = Field(None, description="Receipt-level discounts")
    taxes: Optional[List[ReceiptTax]] = Field(None, description="Taxes charged")
    total_sum: Optional[int] = Field(None, description="Total in kopecks")
    total_payment: Optional[int] = Field(None, description="Amount paid in kopecks")
    total_rest: Optional[int] = Field(None, description="Change in kopecks")
    round_sum: Optional[int] = Field(None, description="Rounding in kopecks")
    fiscal_code: Optional[str] = Field(None, description="Fiscal code from the tax service")
    fiscal_date: Optional[datetime] = Field(None, description="Fiscalization date")
    delivered_at: Optional[datetime] = Field(None, description="Delivery date")
    header: Optional[str] = None
    footer: Optional[str] = None
    barcode: Optional[str] = None
    is_created_offline: Optional[bool] = None
    is_sent_dps: Optional[bool] = None
    sent_dps_at: Optional[datetime] = None
    tax_url: Optional[str] = Field(None, description="Receipt lookup URL at the tax service")
    created_at: Optional[datetime] = Field(None, description="Creation date")
    updated_at: Optional[datetime] = Field(None, description="Last update date")


class Receipts(ApiModel):
    """Page of receipts"""

    meta: Optional[PaginationMeta] = None
    results: List[Receipt] = Field(..., description="Receipts")
