"""
Checkbox API client

One method per API operation. Every method builds the URL, sends the
request, decodes and classifies the response, and maps the payload onto a
model.

A client instance holds one cashier session (the bearer token set by
sign-in). It is not safe for concurrent use from multiple threads without
external synchronization; use one instance per session or thread.
"""

import logging
from typing import Any, Dict, List, Optional

from checkbox_api.client.http_client import HttpClient
from checkbox_api.client.response_decoder import decode_response
from checkbox_api.client.routes import Operation, Routes, get_operation_spec
from checkbox_api.config.checkbox_config import CheckboxConfig
from checkbox_api.exceptions import InvalidConfigurationError
from checkbox_api.models import (
    Cashier,
    CashierAccessToken,
    CashRegister,
    CashRegisterInfo,
    CashRegisters,
    CashRegistersQueryParams,
    Receipt,
    Receipts,
    ReceiptsQueryParams,
    SellReceipt,
    Shift,
    Shifts,
    ShiftsQueryParams,
    Tax,
)


logger = logging.getLogger(__name__)


class CheckboxClient:
    """
    Checkbox API facade

    Example:
        >>> config = CheckboxConfig(license_key="...", login="...", password="...")
        >>> with CheckboxClient(config) as client:
        ...     client.sign_in_cashier()
        ...     shift = client.create_shift()
    """

    def __init__(
        self,
        config: CheckboxConfig,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        """
        Create a new client

        Args:
            config: Resolved Checkbox configuration
            http_client: Optional transport, built from config when omitted

        Raises:
            InvalidConfigurationError: If the base URL or license key is
                missing or malformed
        """
        if not config.license_key:
            raise InvalidConfigurationError("license_key is required")

        self.config = config
        self.routes = Routes(config.get_resolved_base_url())
        self._http = http_client if http_client is not None else HttpClient(config)
        self._token: Optional[str] = None

    # Session state

    @property
    def token(self) -> Optional[str]:
        """Bearer token of the signed-in cashier"""
        return self._token

    @property
    def is_signed_in(self) -> bool:
        return self._token is not None

    def _headers(self, operation: Operation) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        spec = get_operation_spec(operation)
        if spec.content_type != "application/json":
            headers["Content-Type"] = spec.content_type
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _call(self, operation: Operation, url: str, body: Optional[Any] = None) -> Any:
        """Send, decode and classify one request"""
        spec = get_operation_spec(operation)
        response = self._http.send(spec.method, url, self._headers(operation), body)
        return decode_response(response, spec)

    def with_config(self, config: CheckboxConfig) -> "CheckboxClient":
        """Return a new client for another configuration"""
        return CheckboxClient(config)

    def with_connect_timeout(self, seconds: float) -> "CheckboxClient":
        """Return a new client with a different connect timeout"""
        return CheckboxClient(self.config.model_copy(update={"connect_timeout": seconds}))

    # Cashier

    def sign_in_cashier(self) -> str:
        """
        Sign in with the configured login and password

        Returns:
            Bearer token, also attached to all subsequent requests

        Raises:
            InvalidConfigurationError: If login or password is not configured
            EmptyResponseError: If the API returned no body
            InvalidCredentialsError: If the credentials were rejected
        """
        if not self.config.has_credentials:
            raise InvalidConfigurationError(
                "login and password are required to sign in",
                code="CONFIG_CREDENTIALS",
            )

        payload = self._call(
            Operation.SIGN_IN_CASHIER,
            self.routes.sign_in_cashier(),
            body={"login": self.config.login, "password": self.config.password},
        )
        self._token = CashierAccessToken.from_json(payload).access_token
        logger.info("Cashier signed in")
        return self._token

    def sign_in_cashier_via_pin_code(self, pin_code: str) -> str:
        """Sign in with a cashier PIN code bound to the license key"""
        if not pin_code:
            raise InvalidConfigurationError(
                "pin_code is required to sign in", code="CONFIG_CREDENTIALS"
            )

        payload = self._call(
            Operation.SIGN_IN_CASHIER_PIN_CODE,
            self.routes.sign_in_cashier_via_pin_code(),
            body={"pin_code": pin_code},
        )
        self._token = CashierAccessToken.from_json(payload).access_token
        logger.info("Cashier signed in with PIN code")
        return self._token

    def sign_out_cashier(self) -> None:
        """Sign out and drop the bearer token"""
        self._call(Operation.SIGN_OUT_CASHIER, self.routes.sign_out_cashier())
        self._token = None
        logger.info("Cashier signed out")

    def get_cashier_profile(self) -> Cashier:
        url = self.routes.get_cashier_profile()
        return Cashier.from_json(self._call(Operation.GET_CASHIER_PROFILE, url))

    def get_cashier_shift(self) -> Shift:
        """
        Get the signed-in cashier's current shift

        Raises:
            EmptyResponseError: If the cashier has no shift
        """
        url = self.routes.get_cashier_shift()
        return Shift.from_json(self._call(Operation.GET_CASHIER_SHIFT, url))

    def ping_tax_service(self) -> Any:
        """Check the tax service connection; returns the decoded payload"""
        return self._call(Operation.PING_TAX_SERVICE, self.routes.ping_tax_service())

    # Shifts

    def get_shifts(self, query_params: Optional[ShiftsQueryParams] = None) -> Shifts:
        url = self.routes.get_shifts(query_params)
        return Shifts.from_json(self._call(Operation.GET_SHIFTS, url))

    def create_shift(self) -> Shift:
        """Open a new shift on the license key's cash register"""
        return Shift.from_json(self._call(Operation.CREATE_SHIFT, self.routes.create_shift()))

    def get_shift(self, shift_id: str) -> Shift:
        url = self.routes.get_shift(shift_id)
        return Shift.from_json(self._call(Operation.GET_SHIFT, url))

    def close_shift(self) -> Shift:
        """Close the current shift; the returned shift carries the Z-report"""
        return Shift.from_json(self._call(Operation.CLOSE_SHIFT, self.routes.close_shift()))

    # Cash registers

    def get_cash_registers(
        self, query_params: Optional[CashRegistersQueryParams] = None
    ) -> CashRegisters:
        url = self.routes.get_cash_registers(query_params)
        return CashRegisters.from_json(self._call(Operation.GET_CASH_REGISTERS, url))

    def get_cash_register(self, cash_register_id: str) -> CashRegister:
        url = self.routes.get_cash_register(cash_register_id)
        return CashRegister.from_json(self._call(Operation.GET_CASH_REGISTER, url))

    def get_cash_register_info(self) -> CashRegisterInfo:
        url = self.routes.get_cash_register_info()
        return CashRegisterInfo.from_json(self._call(Operation.GET_CASH_REGISTER_INFO, url))

    # Receipts

    def get_receipts(self, query_params: Optional[ReceiptsQueryParams] = None) -> Receipts:
        url = self.routes.get_receipts(query_params)
        return Receipts.from_json(self._call(Operation.GET_RECEIPTS, url))

    def get_receipt(self, receipt_id: str) -> Receipt:
        url = self.routes.get_receipt(receipt_id)
        return Receipt.from_json(self._call(Operation.GET_RECEIPT, url))

    def create_sell_receipt(self, receipt: SellReceipt) -> Receipt:
        """
        Issue a sell receipt in the current shift

        Raises:
            ValidationError: If the API rejected the receipt; ``details``
                holds the field-level errors
        """
        payload = self._call(
            Operation.CREATE_SELL_RECEIPT,
            self.routes.create_sell_receipt(),
            body=receipt.to_json(),
        )
        return Receipt.from_json(payload)

    def get_receipt_pdf(self, receipt_id: str) -> bytes:
        url = self.routes.get_receipt_pdf(receipt_id)
        return self._call(Operation.GET_RECEIPT_PDF, url)

    def get_receipt_html(self, receipt_id: str) -> str:
        url = self.routes.get_receipt_html(receipt_id)
        return self._call(Operation.GET_RECEIPT_HTML, url)

    def get_receipt_text(self, receipt_id: str) -> str:
        url = self.routes.get_receipt_text(receipt_id)
        return self._call(Operation.GET_RECEIPT_TEXT, url)

    def get_receipt_qr_code_image(self, receipt_id: str) -> bytes:
        """Get the receipt QR code as PNG bytes"""
        url = self.routes.get_receipt_qr_code_image(receipt_id)
        return self._call(Operation.GET_RECEIPT_QR_CODE, url)

    # Taxes

    def get_all_taxes(self) -> List[Tax]:
        return Tax.list_from_json(self._call(Operation.GET_ALL_TAXES, self.routes.get_all_taxes()))

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self._http.close()

    def __enter__(self) -> "CheckboxClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
