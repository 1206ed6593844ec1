"""
Checkbox API SDK for Python

Main entry point for the SDK
"""

from checkbox_api.client import CheckboxClient
from checkbox_api.exceptions import (
    CheckboxError,
    CheckboxErrorCategory,
    TransportError,
    EmptyResponseError,
    InvalidCredentialsError,
    ValidationError,
    MappingError,
    InvalidConfigurationError,
    ApiError,
)

# HTTP Client
from checkbox_api.client import (
    HttpClient,
    HttpMethod,
    HttpResponse,
    HttpAuditEntry,
    ContentKind,
    Operation,
    OperationSpec,
    Routes,
    build_url,
    decode_response,
)

# Configuration
from checkbox_api.config import (
    CheckboxConfig,
    CheckboxEnvironment,
    ConfigLoader,
    ConfigValidator,
    CHECKBOX_BASE_URLS,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)

# Models
from checkbox_api.models import (
    Cashier,
    CashRegister,
    CashRegisterInfo,
    CashRegisters,
    CashRegistersQueryParams,
    Delivery,
    Discount,
    Good,
    GoodItem,
    Payment,
    PaymentType,
    Receipt,
    Receipts,
    ReceiptsQueryParams,
    ReceiptTax,
    ReceiptType,
    SellReceipt,
    Shift,
    Shifts,
    ShiftsQueryParams,
    ShiftStatus,
    Tax,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "CheckboxClient",
    # HTTP Client
    "HttpClient",
    "HttpMethod",
    "HttpResponse",
    "HttpAuditEntry",
    "ContentKind",
    "Operation",
    "OperationSpec",
    "Routes",
    "build_url",
    "decode_response",
    # Exceptions
    "CheckboxError",
    "CheckboxErrorCategory",
    "TransportError",
    "EmptyResponseError",
    "InvalidCredentialsError",
    "ValidationError",
    "MappingError",
    "InvalidConfigurationError",
    "ApiError",
    # Configuration
    "CheckboxConfig",
    "CheckboxEnvironment",
    "ConfigLoader",
    "ConfigValidator",
    "CHECKBOX_BASE_URLS",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    # Models
    "Cashier",
    "CashRegister",
    "CashRegisterInfo",
    "CashRegisters",
    "CashRegistersQueryParams",
    "Delivery",
    "Discount",
    "Good",
    "GoodItem",
    "Payment",
    "PaymentType",
    "Receipt",
    "Receipts",
    "ReceiptsQueryParams",
    "ReceiptTax",
    "ReceiptType",
    "SellReceipt",
    "Shift",
    "Shifts",
    "ShiftsQueryParams",
    "ShiftStatus",
    "Tax",
]
