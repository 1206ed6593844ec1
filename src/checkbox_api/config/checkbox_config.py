"""
Checkbox API Configuration Types and Schema
Type-safe configuration objects for the Checkbox SDK
"""

from enum import Enum
from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator, model_validator


class CheckboxEnvironment(str, Enum):
    """Checkbox environment types"""
    PRODUCTION = "production"
    DEV = "dev"


# Base URLs for Checkbox environments
CHECKBOX_BASE_URLS = {
    CheckboxEnvironment.PRODUCTION: "https://api.checkbox.in.ua",
    CheckboxEnvironment.DEV: "https://dev-api.checkbox.in.ua",
}


class ConfigDefaults:
    """Default configuration values"""
    ENVIRONMENT = CheckboxEnvironment.PRODUCTION
    CONNECT_TIMEOUT = 5.0
    VERIFY_SSL = True
    ENABLE_AUDIT_LOG = False


# Environment variable mapping
ENV_VAR_MAPPING = {
    "CHECKBOX_ENVIRONMENT": "environment",
    "CHECKBOX_API_URL": "base_url",
    "CHECKBOX_LOGIN": "login",
    "CHECKBOX_PASSWORD": "password",
    "CHECKBOX_LICENSE_KEY": "license_key",
    "CHECKBOX_CLIENT_NAME": "client_name",
    "CHECKBOX_CLIENT_VERSION": "client_version",
    "CHECKBOX_CONNECT_TIMEOUT": "connect_timeout",
    "CHECKBOX_READ_TIMEOUT": "read_timeout",
    "CHECKBOX_VERIFY_SSL": "verify_ssl",
    "CHECKBOX_ENABLE_AUDIT_LOG": "enable_audit_log",
}


def is_valid_base_url(value: Optional[str]) -> bool:
    """Check that a base URL is an absolute HTTP/HTTPS URL with a host"""
    if not value:
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class CheckboxConfig(BaseModel):
    """
    Main Checkbox configuration class

    Immutable once created; use ``model_copy(update=...)`` to derive a
    variant.
    """

    # Required - API access
    license_key: str = Field(
        ...,
        description="Cash register license key sent with every request",
        min_length=1
    )

    # Optional - Cashier credentials (required for password sign-in)
    login: Optional[str] = Field(
        default=None,
        description="Cashier login"
    )
    password: Optional[str] = Field(
        default=None,
        description="Cashier password"
    )

    # Optional - Environment settings
    environment: CheckboxEnvironment = Field(
        default=ConfigDefaults.ENVIRONMENT,
        description="Environment: 'production' or 'dev'"
    )
    base_url: Optional[str] = Field(
        default=None,
        description="Override default base URL"
    )
    client_name: Optional[str] = Field(
        default=None,
        description="Value of the X-Client-Name header"
    )
    client_version: Optional[str] = Field(
        default=None,
        description="Value of the X-Client-Version header"
    )

    # Optional - Transport settings
    connect_timeout: float = Field(
        default=ConfigDefaults.CONNECT_TIMEOUT,
        description="Connect timeout in seconds",
        gt=0,
        le=300
    )
    read_timeout: Optional[float] = Field(
        default=None,
        description="Read timeout in seconds (None waits indefinitely)",
        gt=0,
        le=600
    )
    verify_ssl: bool = Field(
        default=ConfigDefaults.VERIFY_SSL,
        description="Verify TLS certificates"
    )

    # Optional - Audit logging
    enable_audit_log: bool = Field(
        default=ConfigDefaults.ENABLE_AUDIT_LOG,
        description="Enable audit logging"
    )

    model_config = {
        "str_strip_whitespace": True,
        "frozen": True,
    }

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate base_url is a valid URL"""
        if v is not None and v != "":
            if not is_valid_base_url(v):
                raise ValueError("base_url must be a valid HTTP/HTTPS URL")
            return v.rstrip("/")
        return None

    @model_validator(mode="before")
    @classmethod
    def set_default_base_url(cls, data):
        """Set default base_url based on environment if not provided"""
        if isinstance(data, dict) and not data.get("base_url"):
            environment = data.get("environment") or ConfigDefaults.ENVIRONMENT
            try:
                environment = CheckboxEnvironment(environment)
            except ValueError:
                return data
            data = {**data, "base_url": CHECKBOX_BASE_URLS[environment]}
        return data

    def get_resolved_base_url(self) -> str:
        """Get the resolved base URL"""
        return self.base_url or CHECKBOX_BASE_URLS[self.environment]

    @property
    def has_credentials(self) -> bool:
        """Whether login and password are both set"""
        return bool(self.login) and bool(self.password)
