"""Models module initialization"""

from checkbox_api.models.base import ApiModel
from checkbox_api.models.pagination import PaginationMeta
from checkbox_api.models.cashier import Cashier, CashierAccessToken
from checkbox_api.models.cash_register import (
    CashRegister,
    CashRegisterInfo,
    CashRegisters,
)
from checkbox_api.models.shift import Shift, Shifts, ShiftStatus
from checkbox_api.models.tax import Tax, ReceiptTax
from checkbox_api.models.receipt import (
    Delivery,
    Discount,
    DiscountMode,
    DiscountType,
    Good,
    GoodItem,
    Payment,
    PaymentType,
    Receipt,
    Receipts,
    ReceiptType,
    SellReceipt,
)
from checkbox_api.models.query_params import (
    QueryParams,
    encode_query,
    ShiftsQueryParams,
    CashRegistersQueryParams,
    ReceiptsQueryParams,
)

__all__ = [
    "ApiModel",
    "PaginationMeta",
    "Cashier",
    "CashierAccessToken",
    "CashRegister",
    "CashRegisterInfo",
    "CashRegisters",
    "Shift",
    "Shifts",
    "ShiftStatus",
    "Tax",
    "ReceiptTax",
    "Delivery",
    "Discount",
    "DiscountMode",
    "DiscountType",
    "Good",
    "GoodItem",
    "Payment",
    "PaymentType",
    "Receipt",
    "Receipts",
    "ReceiptType",
    "SellReceipt",
    "QueryParams",
    "encode_query",
    "ShiftsQueryParams",
    "CashRegistersQueryParams",
    "ReceiptsQueryParams",
]
