"""
HTTP transport layer for the Checkbox API
Sends requests through a pooled requests session and returns status and
raw body. HTTP error statuses are returned, not raised; only
connection-level failures raise.
"""

import time
import uuid
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

import requests
from requests.adapters import HTTPAdapter
from requests.utils import get_encoding_from_headers

from checkbox_api.client.routes import HttpMethod
from checkbox_api.config.checkbox_config import CheckboxConfig
from checkbox_api.exceptions import TransportError


logger = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    """Raw HTTP response"""
    status: int
    content: bytes
    text: str
    headers: Dict[str, str]
    duration: int  # milliseconds
    request_id: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass
class HttpAuditEntry:
    """Audit log entry for HTTP requests"""
    timestamp: str
    request_id: str
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[Any] = None
    response: Optional[Dict[str, Any]] = None
    duration: int = 0
    success: bool = False
    error: Optional[str] = None


# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "authorization",
    "x-license-key",
    "license_key",
    "password",
    "access_token",
    "pin_code",
]


class HttpClient:
    """
    HTTP Client for the Checkbox API

    Features:
    - Connection keep-alive via session pooling
    - Request ID generation for traceability
    - Audit logging with secret redaction

    Example:
        >>> config = CheckboxConfig(license_key="...")
        >>> client = HttpClient(config)
        >>> response = client.send(HttpMethod.GET, "https://api.checkbox.in.ua/api/v1/tax")
        >>> print(response.status)
    """

    def __init__(
        self,
        config: CheckboxConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Create a new HTTP client instance

        Args:
            config: Resolved Checkbox configuration
            session: Optional pre-built session, mainly for tests
        """
        self.config = config
        self._audit_log_callback: Optional[Callable[[HttpAuditEntry], None]] = None
        self._session = session if session is not None else self._create_session()
        self._session.headers.update(self._default_headers())

    def _create_session(self) -> requests.Session:
        """Create requests session with connection pooling"""
        session = requests.Session()

        adapter = HTTPAdapter(
            pool_connections=10,
            pool_maxsize=10,
            max_retries=0,
        )

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _default_headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-License-Key": self.config.license_key,
        }
        if self.config.client_name:
            headers["X-Client-Name"] = self.config.client_name
        if self.config.client_version:
            headers["X-Client-Version"] = self.config.client_version
        return headers

    @property
    def timeout(self) -> Tuple[float, Optional[float]]:
        """(connect, read) timeout in seconds"""
        return (self.config.connect_timeout, self.config.read_timeout)

    def _generate_request_id(self) -> str:
        """Generate unique request ID for traceability"""
        timestamp = hex(int(time.time() * 1000))[2:]
        unique_id = uuid.uuid4().hex[:8]
        return f"checkbox-{timestamp}-{unique_id}"

    def _redact_sensitive_data(self, obj: Any) -> Any:
        """Redact sensitive data from object for logging"""
        if obj is None or isinstance(obj, str):
            return obj

        if isinstance(obj, list):
            return [self._redact_sensitive_data(item) for item in obj]

        if isinstance(obj, Mapping):
            redacted = {}
            for key, value in obj.items():
                lower_key = str(key).lower()
                is_sensitive = any(
                    field in lower_key for field in SENSITIVE_FIELDS
                )

                if is_sensitive:
                    redacted[key] = "[REDACTED]"
                elif isinstance(value, (Mapping, list)):
                    redacted[key] = self._redact_sensitive_data(value)
                else:
                    redacted[key] = value
            return redacted

        return obj

    def _normalize_error(self, error: requests.exceptions.RequestException) -> TransportError:
        """Map a requests exception onto TransportError"""
        if isinstance(error, requests.exceptions.Timeout):
            return TransportError.timeout(f"Request timed out: {error}", cause=error)

        # SSLError is a ConnectionError subclass, check it first
        if isinstance(error, requests.exceptions.SSLError):
            return TransportError.ssl_error(f"SSL/TLS error: {error}", cause=error)

        if isinstance(error, requests.exceptions.ConnectionError):
            return TransportError.connection_refused(f"Connection error: {error}", cause=error)

        return TransportError(f"Request error: {error}", cause=error)

    def _create_audit_entry(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[Any],
        request_id: str,
        start_time: float,
        response: Optional[requests.Response] = None,
        error: Optional[Exception] = None,
    ) -> HttpAuditEntry:
        """Create audit log entry"""
        duration = int((time.time() - start_time) * 1000)

        response_data = None
        if response is not None:
            try:
                response_body = response.json()
            except ValueError:
                response_body = response.text[:500] if response.text else None

            response_data = {
                "statusCode": response.status_code,
                "body": self._redact_sensitive_data(response_body),
            }

        return HttpAuditEntry(
            timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            request_id=request_id,
            method=method,
            url=url,
            headers=self._redact_sensitive_data(dict(headers)),
            body=self._redact_sensitive_data(body),
            response=response_data,
            duration=duration,
            success=error is None and response is not None and response.ok,
            error=str(error) if error else None,
        )

    @property
    def audit_enabled(self) -> bool:
        return bool(self.config.enable_audit_log and self._audit_log_callback)

    def _log_audit(self, **entry_fields: Any) -> None:
        """Build and log an audit entry; skipped entirely when auditing is off"""
        if not self.audit_enabled:
            return
        self._audit_log_callback(self._create_audit_entry(**entry_fields))

    @staticmethod
    def _fix_text_encoding(response: requests.Response) -> None:
        """Decode bodies as UTF-8 unless the server declared a charset"""
        content_type = response.headers.get("Content-Type", "")
        if "charset" in content_type.lower():
            response.encoding = get_encoding_from_headers(response.headers)
        else:
            response.encoding = "utf-8"

    def set_audit_log_callback(
        self, callback: Callable[[HttpAuditEntry], None]
    ) -> None:
        """Set audit log callback"""
        self._audit_log_callback = callback

    def send(
        self,
        method: Union[HttpMethod, str],
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[Any] = None,
    ) -> HttpResponse:
        """
        Send a request and return the raw response

        Args:
            method: HTTP method
            url: Absolute request URL
            headers: Headers merged over the session defaults
            body: JSON-serializable request body (optional)

        Returns:
            HttpResponse for any HTTP status

        Raises:
            TransportError: On timeout, TLS or connection failure
        """
        method_name = method.value if isinstance(method, HttpMethod) else str(method).upper()
        start_time = time.time()
        request_id = self._generate_request_id()

        request_headers = dict(self._session.headers)
        request_headers["X-Request-ID"] = request_id
        if headers:
            request_headers.update(headers)

        logger.debug(f"{method_name} {url} [{request_id}]")

        try:
            response = self._session.request(
                method_name,
                url,
                headers=request_headers,
                json=body,
                timeout=self.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.exceptions.RequestException as e:
            self._log_audit(
                method=method_name,
                url=url,
                headers=request_headers,
                body=body,
                request_id=request_id,
                start_time=start_time,
                error=e,
            )
            logger.warning(f"{method_name} {url} failed [{request_id}]: {e}")
            raise self._normalize_error(e) from e

        self._fix_text_encoding(response)

        self._log_audit(
            method=method_name,
            url=url,
            headers=request_headers,
            body=body,
            request_id=request_id,
            start_time=start_time,
            response=response,
        )

        duration = int((time.time() - start_time) * 1000)
        logger.debug(
            f"{method_name} {url} -> {response.status_code} in {duration}ms [{request_id}]"
        )

        return HttpResponse(
            status=response.status_code,
            content=response.content,
            text=response.text,
            headers=dict(response.headers),
            duration=duration,
            request_id=request_id,
        )

    @property
    def base_url(self) -> str:
        """Get base URL"""
        return self.config.get_resolved_base_url()

    @property
    def headers(self) -> Dict[str, str]:
        """Default headers sent with every request"""
        return dict(self._session.headers)

    def close(self) -> None:
        """Close the HTTP session"""
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
