"""
Checkbox Client Unit Tests
"""

import json
from typing import Any, Optional
from unittest.mock import MagicMock, patch

import pytest

from checkbox_api.client import CheckboxClient, HttpClient, HttpMethod, HttpResponse
from checkbox_api.config import CheckboxConfig
from checkbox_api.exceptions import (
    ApiError,
    EmptyResponseError,
    InvalidConfigurationError,
    InvalidCredentialsError,
    MappingError,
    TransportError,
    ValidationError,
)
from checkbox_api.models import (
    Good,
    GoodItem,
    Payment,
    ReceiptsQueryParams,
    SellReceipt,
    ShiftsQueryParams,
)


PREFIX = "https://api.checkbox.in.ua/api/v1"


def make_response(
    status: int = 200,
    body: Optional[Any] = None,
    raw: Optional[bytes] = None,
) -> HttpResponse:
    content = raw if raw is not None else (b"" if body is None else json.dumps(body).encode())
    return HttpResponse(
        status=status,
        content=content,
        text=content.decode("utf-8", errors="replace"),
        headers={},
        duration=1,
        request_id="checkbox-test",
    )


@pytest.fixture
def config() -> CheckboxConfig:
    return CheckboxConfig(license_key="test-license-key", login="cashier", password="secret")


@pytest.fixture
def transport() -> MagicMock:
    return MagicMock(spec=HttpClient)


@pytest.fixture
def client(config: CheckboxConfig, transport: MagicMock) -> CheckboxClient:
    return CheckboxClient(config, http_client=transport)


def sent(transport: MagicMock, index: int = -1):
    """Return (method, url, headers, body) of a recorded send call"""
    return transport.send.call_args_list[index].args


class TestConstruction:
    """Tests for client construction"""

    def test_starts_signed_out(self, client: CheckboxClient):
        assert client.token is None
        assert client.is_signed_in is False

    def test_uses_environment_base_url(self, transport: MagicMock):
        client = CheckboxClient(
            CheckboxConfig(license_key="key", environment="dev"), http_client=transport
        )
        assert client.routes.base_url == "https://dev-api.checkbox.in.ua"

    def test_with_connect_timeout_returns_new_client(self, client: CheckboxClient):
        other = client.with_connect_timeout(12)
        try:
            assert other is not client
            assert other.config.connect_timeout == 12
            assert client.config.connect_timeout == 5.0
            assert other.token is None
        finally:
            other.close()

    def test_with_config_returns_new_client(self, client: CheckboxClient):
        other = client.with_config(CheckboxConfig(license_key="other-key"))
        try:
            assert other.config.license_key == "other-key"
        finally:
            other.close()

    def test_context_manager_closes_transport(self, config: CheckboxConfig, transport: MagicMock):
        with CheckboxClient(config, http_client=transport):
            pass
        transport.close.assert_called_once()


class TestSignIn:
    """Tests for cashier sign-in and session state"""

    def test_sign_in_stores_token(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"access_token": "tok-123", "type": "bearer"})

        token = client.sign_in_cashier()

        assert token == "tok-123"
        assert client.is_signed_in is True
        method, url, headers, body = sent(transport)
        assert method is HttpMethod.POST
        assert url == f"{PREFIX}/cashier/signin"
        assert "Authorization" not in headers
        assert body == {"login": "cashier", "password": "secret"}

    def test_token_attached_to_subsequent_calls(self, client: CheckboxClient, transport: MagicMock):
        transport.send.side_effect = [
            make_response(200, {"access_token": "tok-123"}),
            make_response(200, {"id": "c-1", "full_name": "Test Cashier"}),
        ]

        client.sign_in_cashier()
        client.get_cashier_profile()

        _, _, headers, _ = sent(transport)
        assert headers["Authorization"] == "Bearer tok-123"

    def test_re_sign_in_replaces_token(self, client: CheckboxClient, transport: MagicMock):
        transport.send.side_effect = [
            make_response(200, {"access_token": "first"}),
            make_response(200, {"access_token": "second"}),
            make_response(200, {"id": "c-1"}),
        ]

        client.sign_in_cashier()
        client.sign_in_cashier()
        client.get_cashier_profile()

        _, _, headers, _ = sent(transport)
        assert headers["Authorization"] == "Bearer second"

    def test_sign_in_null_body(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, raw=b"null")

        with pytest.raises(EmptyResponseError):
            client.sign_in_cashier()

        assert client.token is None

    def test_sign_in_bad_credentials(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(403, {"message": "bad creds"})

        with pytest.raises(InvalidCredentialsError) as exc_info:
            client.sign_in_cashier()

        assert str(exc_info.value) == "bad creds"
        assert client.token is None

    def test_sign_in_without_token_in_response(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"type": "bearer"})

        with pytest.raises(MappingError) as exc_info:
            client.sign_in_cashier()

        assert exc_info.value.field == "access_token"

    def test_sign_in_requires_credentials(self, transport: MagicMock):
        client = CheckboxClient(CheckboxConfig(license_key="key"), http_client=transport)

        with pytest.raises(InvalidConfigurationError):
            client.sign_in_cashier()

        transport.send.assert_not_called()

    def test_sign_in_via_pin_code(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"access_token": "pin-token"})

        assert client.sign_in_cashier_via_pin_code("1234") == "pin-token"
        _, url, _, body = sent(transport)
        assert url == f"{PREFIX}/cashier/signinPinCode"
        assert body == {"pin_code": "1234"}

    def test_sign_out_clears_token(self, client: CheckboxClient, transport: MagicMock):
        transport.send.side_effect = [
            make_response(200, {"access_token": "tok"}),
            make_response(200),
            make_response(200, [{"id": "t-1", "code": 1}]),
        ]

        client.sign_in_cashier()
        client.sign_out_cashier()
        client.get_all_taxes()

        assert client.token is None
        assert sent(transport, 1)[1] == f"{PREFIX}/cashier/signout"
        _, _, headers, _ = sent(transport)
        assert "Authorization" not in headers

    def test_failed_sign_out_keeps_token(self, client: CheckboxClient, transport: MagicMock):
        transport.send.side_effect = [
            make_response(200, {"access_token": "tok"}),
            make_response(500, {"message": "boom"}),
        ]

        client.sign_in_cashier()
        with pytest.raises(ApiError):
            client.sign_out_cashier()

        assert client.token == "tok"


class TestCashier:
    """Tests for cashier endpoints"""

    def test_get_cashier_profile(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"id": "c-1", "full_name": "Test Cashier"})

        cashier = client.get_cashier_profile()

        assert cashier.full_name == "Test Cashier"
        method, url, _, body = sent(transport)
        assert method is HttpMethod.GET
        assert url == f"{PREFIX}/cashier/me"
        assert body is None

    def test_get_cashier_shift(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"id": "s-1", "status": "OPENED"})

        shift = client.get_cashier_shift()

        assert shift.is_opened
        assert sent(transport)[1] == f"{PREFIX}/cashier/shift"

    def test_get_cashier_shift_without_shift(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, raw=b"null")

        with pytest.raises(EmptyResponseError):
            client.get_cashier_shift()

    def test_ping_tax_service(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"status": "DONE"})

        assert client.ping_tax_service() == {"status": "DONE"}
        method, url, _, _ = sent(transport)
        assert method is HttpMethod.POST
        assert url == f"{PREFIX}/cash-registers/ping-tax-service"

    def test_transport_error_propagates(self, client: CheckboxClient, transport: MagicMock):
        transport.send.side_effect = TransportError.timeout()

        with pytest.raises(TransportError):
            client.get_cashier_profile()


class TestShifts:
    """Tests for shift endpoints"""

    def test_get_shifts_with_query(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {
            "meta": {"limit": 10, "offset": 0},
            "results": [{"id": "s-1", "status": "CLOSED"}],
        })

        shifts = client.get_shifts(ShiftsQueryParams(statuses=["CLOSED"], limit=10))

        assert shifts.results[0].is_closed
        assert sent(transport)[1] == f"{PREFIX}/shifts?statuses=CLOSED&limit=10"

    def test_get_shifts_without_query(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"results": []})

        client.get_shifts()

        assert sent(transport)[1] == f"{PREFIX}/shifts"

    def test_create_shift(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(202, {"id": "s-2", "status": "CREATED"})

        shift = client.create_shift()

        assert shift.id == "s-2"
        method, url, _, _ = sent(transport)
        assert method is HttpMethod.POST
        assert url == f"{PREFIX}/shifts"

    def test_get_shift(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"id": "s-1"})

        client.get_shift("s-1")

        assert sent(transport)[1] == f"{PREFIX}/shifts/s-1"

    def test_close_shift(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(202, {
            "id": "s-1", "status": "CLOSING", "z_report": {"id": "z-1"}
        })

        shift = client.close_shift()

        assert shift.z_report == {"id": "z-1"}
        assert sent(transport)[1] == f"{PREFIX}/shifts/close"

    def test_close_shift_validation_error(self, client: CheckboxClient, transport: MagicMock):
        body = {"message": "Shift is not opened", "detail": [{"loc": ["shift"], "msg": "closed"}]}
        transport.send.return_value = make_response(422, body)

        with pytest.raises(ValidationError) as exc_info:
            client.close_shift()

        assert exc_info.value.details == body


class TestCashRegisters:
    """Tests for cash register endpoints"""

    def test_get_cash_registers(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"results": [{"id": "cr-1"}]})

        registers = client.get_cash_registers()

        assert registers.results[0].id == "cr-1"
        assert sent(transport)[1] == f"{PREFIX}/cash-registers"

    def test_get_cash_register(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"id": "cr-1", "fiscal_number": "4000000001"})

        register = client.get_cash_register("cr-1")

        assert register.fiscal_number == "4000000001"
        assert sent(transport)[1] == f"{PREFIX}/cash-registers/cr-1"

    def test_get_cash_register_info(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"id": "cr-1", "has_shift": False})

        info = client.get_cash_register_info()

        assert info.has_shift is False
        assert sent(transport)[1] == f"{PREFIX}/cash-registers/info"


class TestReceipts:
    """Tests for receipt endpoints"""

    def test_get_receipts(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"results": [{"id": "r-1", "type": "SELL"}]})

        receipts = client.get_receipts(ReceiptsQueryParams(desc=True))

        assert receipts.results[0].type == "SELL"
        assert sent(transport)[1] == f"{PREFIX}/receipts?desc=true"

    def test_get_receipt(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"id": "r-1", "total_sum": 4500})

        receipt = client.get_receipt("r-1")

        assert receipt.total_sum == 4500
        assert sent(transport)[1] == f"{PREFIX}/receipts/r-1"

    def test_create_sell_receipt(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(201, {
            "id": "r-1",
            "type": "SELL",
            "status": "CREATED",
            "total_sum": 4500,
            "unexpected_field": 1,
        })
        receipt = SellReceipt(
            goods=[GoodItem(good=Good(code="A-1", name="Coffee", price=4500), quantity=1000)],
            payments=[Payment(value=4500)],
        )

        result = client.create_sell_receipt(receipt)

        assert result.id == "r-1"
        method, url, _, body = sent(transport)
        assert method is HttpMethod.POST
        assert url == f"{PREFIX}/receipts/sell"
        assert body == {
            "goods": [{"good": {"code": "A-1", "name": "Coffee", "price": 4500}, "quantity": 1000}],
            "payments": [{"type": "CASH", "value": 4500}],
        }

    def test_create_sell_receipt_validation_error(
        self, client: CheckboxClient, transport: MagicMock
    ):
        body = {"errors": {"amount": ["required"]}}
        transport.send.return_value = make_response(422, body)
        receipt = SellReceipt(
            goods=[GoodItem(good=Good(code="A-1", name="Coffee", price=4500), quantity=1000)],
            payments=[Payment(value=4500)],
        )

        with pytest.raises(ValidationError) as exc_info:
            client.create_sell_receipt(receipt)

        assert exc_info.value.details == {"errors": {"amount": ["required"]}}

    def test_get_receipt_pdf(self, client: CheckboxClient, transport: MagicMock):
        pdf = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n"
        transport.send.return_value = make_response(200, raw=pdf)

        assert client.get_receipt_pdf("r-1") == pdf
        assert sent(transport)[1] == f"{PREFIX}/receipts/r-1/pdf"

    def test_get_receipt_pdf_error(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(404, {"message": "not found"})

        with pytest.raises(ValidationError) as exc_info:
            client.get_receipt_pdf("missing")

        assert exc_info.value.details == {"message": "not found"}

    def test_get_receipt_pdf_gateway_error(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(502, raw=b"<html>Bad Gateway</html>")

        with pytest.raises(ApiError) as exc_info:
            client.get_receipt_pdf("r-1")

        assert exc_info.value.status_code == 502
        assert exc_info.value.details == "<html>Bad Gateway</html>"

    def test_get_receipt_html(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, raw=b"<html>receipt</html>")

        assert client.get_receipt_html("r-1") == "<html>receipt</html>"
        assert sent(transport)[1] == f"{PREFIX}/receipts/r-1/html"

    def test_get_receipt_text(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, raw="ЧЕК\nСУМА 45.00".encode())

        assert client.get_receipt_text("r-1") == "ЧЕК\nСУМА 45.00"

    def test_get_receipt_qr_code_image(self, client: CheckboxClient, transport: MagicMock):
        png = b"\x89PNG\r\n\x1a\n\x00\x00"
        transport.send.return_value = make_response(200, raw=png)

        assert client.get_receipt_qr_code_image("r-1") == png
        _, url, headers, _ = sent(transport)
        assert url == f"{PREFIX}/receipts/r-1/qrcode"
        assert headers["Content-Type"] == "image/png"


class TestTaxes:
    """Tests for tax endpoints"""

    def test_get_all_taxes(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, [
            {"id": "t-1", "code": 1, "label": "VAT", "symbol": "A", "rate": 20.0},
        ])

        taxes = client.get_all_taxes()

        assert taxes[0].rate == 20.0
        assert sent(transport)[1] == f"{PREFIX}/tax"

    def test_get_all_taxes_invalid_payload(self, client: CheckboxClient, transport: MagicMock):
        transport.send.return_value = make_response(200, {"results": []})

        with pytest.raises(MappingError):
            client.get_all_taxes()


class TestRouting:
    """Facade methods take their URLs from the Routes helpers"""

    @pytest.mark.parametrize(
        "method, args, route",
        [
            ("get_shift", ("s-1",), "get_shift"),
            ("get_shifts", (None,), "get_shifts"),
            ("get_cash_register_info", (), "get_cash_register_info"),
            ("get_receipt_text", ("r-1",), "get_receipt_text"),
            ("get_receipt_qr_code_image", ("r-1",), "get_receipt_qr_code_image"),
            ("get_all_taxes", (), "get_all_taxes"),
        ],
    )
    def test_url_comes_from_route_helper(
        self, client: CheckboxClient, transport: MagicMock, method, args, route
    ):
        transport.send.side_effect = RuntimeError("stop")
        custom = "https://api.checkbox.in.ua/api/v1/routed"

        with patch.object(client.routes, route, return_value=custom) as helper:
            with pytest.raises(RuntimeError):
                getattr(client, method)(*args)

        helper.assert_called_once_with(*args)
        assert sent(transport)[1] == custom
