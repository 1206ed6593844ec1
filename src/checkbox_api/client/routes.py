"""
Route table and URL builder for the Checkbox API

Each operation is described once: HTTP method, path template, the kind of
content a successful response carries, and whether an empty body is an
error. The response decoder reads the same table.
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote, urlencode

from checkbox_api.config.checkbox_config import is_valid_base_url
from checkbox_api.exceptions import InvalidConfigurationError
from checkbox_api.models.query_params import QueryParams, encode_query


API_PREFIX = "/api/v1"


class HttpMethod(str, Enum):
    """HTTP method types supported"""
    GET = "GET"
    POST = "POST"


class ContentKind(str, Enum):
    """What a successful response body contains"""
    JSON = "json"
    BINARY = "binary"
    TEXT = "text"


@dataclass(frozen=True)
class OperationSpec:
    """Static description of one API operation"""
    method: HttpMethod
    path: str
    content_kind: ContentKind = ContentKind.JSON
    requires_content: bool = False
    content_type: str = "application/json"

    @property
    def is_passthrough(self) -> bool:
        return self.content_kind is not ContentKind.JSON


class Operation(str, Enum):
    """Checkbox API operations"""
    SIGN_IN_CASHIER = "sign_in_cashier"
    SIGN_IN_CASHIER_PIN_CODE = "sign_in_cashier_pin_code"
    SIGN_OUT_CASHIER = "sign_out_cashier"
    GET_CASHIER_PROFILE = "get_cashier_profile"
    GET_CASHIER_SHIFT = "get_cashier_shift"
    PING_TAX_SERVICE = "ping_tax_service"
    GET_SHIFTS = "get_shifts"
    CREATE_SHIFT = "create_shift"
    GET_SHIFT = "get_shift"
    CLOSE_SHIFT = "close_shift"
    GET_CASH_REGISTERS = "get_cash_registers"
    GET_CASH_REGISTER = "get_cash_register"
    GET_CASH_REGISTER_INFO = "get_cash_register_info"
    GET_RECEIPTS = "get_receipts"
    GET_RECEIPT = "get_receipt"
    CREATE_SELL_RECEIPT = "create_sell_receipt"
    GET_RECEIPT_PDF = "get_receipt_pdf"
    GET_RECEIPT_HTML = "get_receipt_html"
    GET_RECEIPT_TEXT = "get_receipt_text"
    GET_RECEIPT_QR_CODE = "get_receipt_qr_code"
    GET_ALL_TAXES = "get_all_taxes"


OPERATIONS: Dict[Operation, OperationSpec] = {
    # Cashier
    Operation.SIGN_IN_CASHIER: OperationSpec(
        HttpMethod.POST, "/cashier/signin", requires_content=True
    ),
    Operation.SIGN_IN_CASHIER_PIN_CODE: OperationSpec(
        HttpMethod.POST, "/cashier/signinPinCode", requires_content=True
    ),
    Operation.SIGN_OUT_CASHIER: OperationSpec(HttpMethod.POST, "/cashier/signout"),
    Operation.GET_CASHIER_PROFILE: OperationSpec(HttpMethod.GET, "/cashier/me"),
    Operation.GET_CASHIER_SHIFT: OperationSpec(
        HttpMethod.GET, "/cashier/shift", requires_content=True
    ),
    Operation.PING_TAX_SERVICE: OperationSpec(
        HttpMethod.POST, "/cash-registers/ping-tax-service"
    ),
    # Shifts
    Operation.GET_SHIFTS: OperationSpec(HttpMethod.GET, "/shifts"),
    Operation.CREATE_SHIFT: OperationSpec(HttpMethod.POST, "/shifts"),
    Operation.GET_SHIFT: OperationSpec(HttpMethod.GET, "/shifts/{shift_id}"),
    Operation.CLOSE_SHIFT: OperationSpec(HttpMethod.POST, "/shifts/close"),
    # Cash registers
    Operation.GET_CASH_REGISTERS: OperationSpec(HttpMethod.GET, "/cash-registers"),
    Operation.GET_CASH_REGISTER: OperationSpec(
        HttpMethod.GET, "/cash-registers/{cash_register_id}"
    ),
    Operation.GET_CASH_REGISTER_INFO: OperationSpec(HttpMethod.GET, "/cash-registers/info"),
    # Receipts
    Operation.GET_RECEIPTS: OperationSpec(HttpMethod.GET, "/receipts"),
    Operation.GET_RECEIPT: OperationSpec(HttpMethod.GET, "/receipts/{receipt_id}"),
    Operation.CREATE_SELL_RECEIPT: OperationSpec(HttpMethod.POST, "/receipts/sell"),
    Operation.GET_RECEIPT_PDF: OperationSpec(
        HttpMethod.GET, "/receipts/{receipt_id}/pdf", content_kind=ContentKind.BINARY
    ),
    Operation.GET_RECEIPT_HTML: OperationSpec(
        HttpMethod.GET, "/receipts/{receipt_id}/html", content_kind=ContentKind.TEXT
    ),
    Operation.GET_RECEIPT_TEXT: OperationSpec(
        HttpMethod.GET, "/receipts/{receipt_id}/text", content_kind=ContentKind.TEXT
    ),
    Operation.GET_RECEIPT_QR_CODE: OperationSpec(
        HttpMethod.GET,
        "/receipts/{receipt_id}/qrcode",
        content_kind=ContentKind.BINARY,
        content_type="image/png",
    ),
    # Taxes
    Operation.GET_ALL_TAXES: OperationSpec(HttpMethod.GET, "/tax"),
}


QueryInput = Union[QueryParams, Mapping[str, Any], None]


def get_operation_spec(operation: Operation) -> OperationSpec:
    """Look up the table entry for an operation"""
    return OPERATIONS[operation]


def _query_items(query_params: QueryInput) -> Dict[str, Any]:
    if query_params is None:
        return {}
    if isinstance(query_params, QueryParams):
        return query_params.to_query()
    return encode_query(query_params)


def build_url(
    base_url: Optional[str],
    operation: Operation,
    path_params: Optional[Mapping[str, Any]] = None,
    query_params: QueryInput = None,
) -> str:
    """
    Build the absolute URL for an operation

    Args:
        base_url: API base URL, e.g. ``https://api.checkbox.in.ua``
        operation: Operation to call
        path_params: Values for placeholders in the path template
        query_params: Query object or mapping; ``None`` values are dropped

    Returns:
        URL with percent-encoded path segments and query string

    Raises:
        InvalidConfigurationError: If the base URL is missing or malformed,
            or a path parameter is missing
    """
    if not is_valid_base_url(base_url):
        raise InvalidConfigurationError(
            f"API base URL is missing or malformed: {base_url!r}",
            code="CONFIG_BASE_URL",
        )

    spec = OPERATIONS[operation]
    path_params = path_params or {}

    encoded: Dict[str, str] = {}
    for _, name, _, _ in string.Formatter().parse(spec.path):
        if name is None:
            continue
        value = path_params.get(name)
        if value is None or str(value) == "":
            raise InvalidConfigurationError(
                f"Missing path parameter '{name}' for {operation.value}",
                code="CONFIG_PATH_PARAM",
                details={"parameter": name},
            )
        encoded[name] = quote(str(value), safe="")

    url = f"{base_url.rstrip('/')}{API_PREFIX}{spec.path.format(**encoded)}"

    query = _query_items(query_params)
    if query:
        url = f"{url}?{urlencode(query, doseq=True)}"

    return url


class Routes:
    """URL builder bound to one base URL"""

    def __init__(self, base_url: Optional[str]) -> None:
        if not is_valid_base_url(base_url):
            raise InvalidConfigurationError(
                f"API base URL is missing or malformed: {base_url!r}",
                code="CONFIG_BASE_URL",
            )
        self.base_url = base_url.rstrip("/")

    def url(
        self,
        operation: Operation,
        path_params: Optional[Mapping[str, Any]] = None,
        query_params: QueryInput = None,
    ) -> str:
        return build_url(self.base_url, operation, path_params, query_params)

    def sign_in_cashier(self) -> str:
        return self.url(Operation.SIGN_IN_CASHIER)

    def sign_in_cashier_via_pin_code(self) -> str:
        return self.url(Operation.SIGN_IN_CASHIER_PIN_CODE)

    def sign_out_cashier(self) -> str:
        return self.url(Operation.SIGN_OUT_CASHIER)

    def get_cashier_profile(self) -> str:
        return self.url(Operation.GET_CASHIER_PROFILE)

    def get_cashier_shift(self) -> str:
        return self.url(Operation.GET_CASHIER_SHIFT)

    def ping_tax_service(self) -> str:
        return self.url(Operation.PING_TAX_SERVICE)

    def get_shifts(self, query_params: QueryInput = None) -> str:
        return self.url(Operation.GET_SHIFTS, query_params=query_params)

    def create_shift(self) -> str:
        return self.url(Operation.CREATE_SHIFT)

    def get_shift(self, shift_id: str) -> str:
        return self.url(Operation.GET_SHIFT, {"shift_id": shift_id})

    def close_shift(self) -> str:
        return self.url(Operation.CLOSE_SHIFT)

    def get_cash_registers(self, query_params: QueryInput = None) -> str:
        return self.url(Operation.GET_CASH_REGISTERS, query_params=query_params)

    def get_cash_register(self, cash_register_id: str) -> str:
        return self.url(Operation.GET_CASH_REGISTER, {"cash_register_id": cash_register_id})

    def get_cash_register_info(self) -> str:
        return self.url(Operation.GET_CASH_REGISTER_INFO)

    def get_receipts(self, query_params: QueryInput = None) -> str:
        return self.url(Operation.GET_RECEIPTS, query_params=query_params)

    def get_receipt(self, receipt_id: str) -> str:
        return self.url(Operation.GET_RECEIPT, {"receipt_id": receipt_id})

    def create_sell_receipt(self) -> str:
        return self.url(Operation.CREATE_SELL_RECEIPT)

    def get_receipt_pdf(self, receipt_id: str) -> str:
        return self.url(Operation.GET_RECEIPT_PDF, {"receipt_id": receipt_id})

    def get_receipt_html(self, receipt_id: str) -> str:
        return self.url(Operation.GET_RECEIPT_HTML, {"receipt_id": receipt_id})

    def get_receipt_text(self, receipt_id: str) -> str:
        return self.url(Operation.GET_RECEIPT_TEXT, {"receipt_id": receipt_id})

    def get_receipt_qr_code_image(self, receipt_id: str) -> str:
        return self.url(Operation.GET_RECEIPT_QR_CODE, {"receipt_id": receipt_id})

    def get_all_taxes(self) -> str:
        return self.url(Operation.GET_ALL_TAXES)
