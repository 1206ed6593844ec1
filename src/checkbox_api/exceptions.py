"""Exception classes for Checkbox API SDK"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class CheckboxErrorCategory(str, Enum):
    """Checkbox error category codes"""
    AUTH = "AUTH"
    VALIDATION = "VAL"
    NETWORK = "NET"
    RESPONSE = "RESP"
    MAPPING = "MAP"
    CONFIG = "CONFIG"
    API = "API"
    UNKNOWN = "UNKNOWN"


class CheckboxError(Exception):
    """
    Base exception for Checkbox API errors

    All errors in the SDK extend from this class.
    Provides consistent error handling and categorization.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.now(timezone.utc)
        self.category = self._determine_category(code)

    def _determine_category(self, code: Optional[str]) -> CheckboxErrorCategory:
        """Determine error category from code"""
        if not code:
            return CheckboxErrorCategory.UNKNOWN

        for category in CheckboxErrorCategory:
            if category is CheckboxErrorCategory.UNKNOWN:
                continue
            if code.startswith(category.value):
                return category

        return CheckboxErrorCategory.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "code": self.code,
            "status_code": self.status_code,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
            "details": self.details,
        }

    def has_code(self, code: str) -> bool:
        """Check if error has a specific code"""
        return self.code == code

    def is_category(self, category: CheckboxErrorCategory) -> bool:
        """Check if error belongs to a category"""
        return self.category == category

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [str(self)]

        if self.code:
            parts.insert(0, f"[{self.code}]")

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        return " ".join(parts)


class TransportError(CheckboxError):
    """
    Connection-level failure: DNS, TLS, timeout

    Raised only when no HTTP response was received at all.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        network_code: str = "NET10",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code=network_code, status_code=status_code, cause=cause)
        self.network_code = network_code

    @classmethod
    def timeout(
        cls, message: str = "Request timed out", cause: Optional[Exception] = None
    ) -> "TransportError":
        """Create a timeout error"""
        return cls(message, status_code=408, network_code="NET01", cause=cause)

    @classmethod
    def connection_refused(
        cls, message: str = "Connection refused", cause: Optional[Exception] = None
    ) -> "TransportError":
        """Create a connection refused error"""
        return cls(message, network_code="NET02", cause=cause)

    @classmethod
    def ssl_error(
        cls, message: str = "SSL/TLS error", cause: Optional[Exception] = None
    ) -> "TransportError":
        """Create an SSL error"""
        return cls(message, network_code="NET04", cause=cause)


class EmptyResponseError(CheckboxError):
    """Response body was empty where the endpoint must return content"""

    def __init__(
        self,
        message: str = "Request returned an empty response",
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, code="RESP01", status_code=status_code)


class InvalidCredentialsError(CheckboxError):
    """Credentials or token rejected by the API (HTTP 403)"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = 403,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message, code="AUTH01", status_code=status_code, details=details)


class ValidationError(CheckboxError):
    """
    Request rejected by API validation

    ``details`` holds the decoded response body exactly as the API sent it,
    including field-level error structures.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Any] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(
            message, code="VALIDATION_ERROR", status_code=status_code, details=details
        )
        self.field = field


class MappingError(CheckboxError):
    """Decoded payload cannot be mapped onto the target model"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Any] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code="MAP01", cause=cause, details=details)
        self.field = field


class InvalidConfigurationError(CheckboxError):
    """Configuration error"""

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class ApiError(CheckboxError):
    """Non-2xx response not covered by a more specific error"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message, code="API_ERROR", status_code=status_code, details=details)
