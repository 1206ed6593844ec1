"""
Route Builder Unit Tests
"""

import pytest

from checkbox_api.client.routes import (
    ContentKind,
    HttpMethod,
    OPERATIONS,
    Operation,
    Routes,
    build_url,
)
from checkbox_api.exceptions import InvalidConfigurationError
from checkbox_api.models import (
    CashRegistersQueryParams,
    ReceiptsQueryParams,
    ShiftsQueryParams,
)


BASE_URL = "https://api.checkbox.in.ua"


class TestBuildUrl:
    """Tests for build_url"""

    def test_simple_route(self):
        """Should join base URL, API prefix and path"""
        url = build_url(BASE_URL, Operation.GET_CASHIER_PROFILE)
        assert url == "https://api.checkbox.in.ua/api/v1/cashier/me"

    def test_trailing_slash_in_base_url(self):
        """Should not produce a double slash"""
        url = build_url(BASE_URL + "/", Operation.GET_ALL_TAXES)
        assert url == "https://api.checkbox.in.ua/api/v1/tax"

    def test_path_params_are_percent_encoded(self):
        """Should encode reserved characters in path segments"""
        url = build_url(BASE_URL, Operation.GET_RECEIPT, {"receipt_id": "a/b c?"})
        assert url == "https://api.checkbox.in.ua/api/v1/receipts/a%2Fb%20c%3F"

    def test_missing_path_param(self):
        """Should fail when a path placeholder has no value"""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            build_url(BASE_URL, Operation.GET_SHIFT)

        assert exc_info.value.details == {"parameter": "shift_id"}

    @pytest.mark.parametrize("base_url", [None, "", "not-a-url", "ftp://host", "https://"])
    def test_invalid_base_url(self, base_url):
        """Should fail for a missing or malformed base URL"""
        with pytest.raises(InvalidConfigurationError):
            build_url(base_url, Operation.GET_ALL_TAXES)

    @pytest.mark.parametrize(
        "operation,params",
        [
            (Operation.GET_SHIFTS, ShiftsQueryParams()),
            (Operation.GET_CASH_REGISTERS, CashRegistersQueryParams()),
            (Operation.GET_RECEIPTS, ReceiptsQueryParams()),
        ],
    )
    def test_empty_query_params_produce_no_query_string(self, operation, params):
        """Should not append '?' when every query field is unset"""
        url = build_url(BASE_URL, operation, query_params=params)
        assert "?" not in url

    def test_query_omits_unset_fields(self):
        """Should only emit set fields"""
        url = build_url(
            BASE_URL,
            Operation.GET_RECEIPTS,
            query_params=ReceiptsQueryParams(fiscal_code="TEST-123", limit=10),
        )
        assert url.endswith("/receipts?fiscal_code=TEST-123&limit=10")
        assert "None" not in url
        assert "desc" not in url

    def test_query_booleans_and_lists(self):
        """Should encode booleans as true/false and lists as repeated keys"""
        url = build_url(
            BASE_URL,
            Operation.GET_SHIFTS,
            query_params=ShiftsQueryParams(statuses=["OPENED", "CLOSED"], desc=True),
        )
        assert url.endswith("/shifts?statuses=OPENED&statuses=CLOSED&desc=true")

    def test_query_values_are_encoded(self):
        """Should percent-encode query values"""
        url = build_url(
            BASE_URL,
            Operation.GET_CASH_REGISTERS,
            query_params=CashRegistersQueryParams(fiscal_number="40 00&1", in_use=False),
        )
        assert url.endswith("/cash-registers?in_use=false&fiscal_number=40+00%261")

    def test_mapping_query_drops_none(self):
        """Should accept a plain mapping and drop None values"""
        url = build_url(
            BASE_URL, Operation.GET_RECEIPTS, query_params={"serial": 5, "desc": None}
        )
        assert url.endswith("/receipts?serial=5")


class TestOperationTable:
    """Tests for the operation table"""

    def test_every_operation_is_described(self):
        assert set(OPERATIONS) == set(Operation)

    def test_passthrough_operations(self):
        """Should mark the four document endpoints as passthrough"""
        passthrough = {op for op, spec in OPERATIONS.items() if spec.is_passthrough}
        assert passthrough == {
            Operation.GET_RECEIPT_PDF,
            Operation.GET_RECEIPT_HTML,
            Operation.GET_RECEIPT_TEXT,
            Operation.GET_RECEIPT_QR_CODE,
        }
        assert OPERATIONS[Operation.GET_RECEIPT_PDF].content_kind is ContentKind.BINARY
        assert OPERATIONS[Operation.GET_RECEIPT_TEXT].content_kind is ContentKind.TEXT
        assert OPERATIONS[Operation.GET_RECEIPT_QR_CODE].content_type == "image/png"

    def test_operations_requiring_content(self):
        required = {op for op, spec in OPERATIONS.items() if spec.requires_content}
        assert required == {
            Operation.SIGN_IN_CASHIER,
            Operation.SIGN_IN_CASHIER_PIN_CODE,
            Operation.GET_CASHIER_SHIFT,
        }

    def test_write_operations_use_post(self):
        for operation in (
            Operation.SIGN_IN_CASHIER,
            Operation.SIGN_OUT_CASHIER,
            Operation.PING_TAX_SERVICE,
            Operation.CREATE_SHIFT,
            Operation.CLOSE_SHIFT,
            Operation.CREATE_SELL_RECEIPT,
        ):
            assert OPERATIONS[operation].method is HttpMethod.POST


class TestRoutes:
    """Tests for the bound Routes helper"""

    @pytest.fixture
    def routes(self) -> Routes:
        return Routes("https://dev-api.checkbox.in.ua")

    def test_rejects_invalid_base_url(self):
        with pytest.raises(InvalidConfigurationError):
            Routes("api.checkbox.in.ua")

    def test_named_routes(self, routes: Routes):
        prefix = "https://dev-api.checkbox.in.ua/api/v1"
        assert routes.sign_in_cashier() == f"{prefix}/cashier/signin"
        assert routes.sign_out_cashier() == f"{prefix}/cashier/signout"
        assert routes.get_cashier_shift() == f"{prefix}/cashier/shift"
        assert routes.create_shift() == f"{prefix}/shifts"
        assert routes.close_shift() == f"{prefix}/shifts/close"
        assert routes.get_shift("s-1") == f"{prefix}/shifts/s-1"
        assert routes.get_cash_register_info() == f"{prefix}/cash-registers/info"
        assert routes.create_sell_receipt() == f"{prefix}/receipts/sell"
        assert routes.get_receipt_qr_code_image("r-1") == f"{prefix}/receipts/r-1/qrcode"

    def test_list_routes_with_query(self, routes: Routes):
        url = routes.get_shifts(ShiftsQueryParams(limit=5, offset=10))
        assert url == "https://dev-api.checkbox.in.ua/api/v1/shifts?limit=5&offset=10"
