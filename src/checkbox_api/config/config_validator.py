"""
Configuration Validator
Validates Checkbox configuration with clear error messages
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from checkbox_api.config.checkbox_config import CheckboxEnvironment, is_valid_base_url


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)


class ConfigValidator:
    """
    ConfigValidator class
    Provides comprehensive validation for Checkbox configuration
    """

    def __init__(self) -> None:
        self._errors: List[ValidationErrorDetail] = []

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate the entire configuration dictionary

        Args:
            config: Configuration dictionary to validate

        Returns:
            ValidationResult with any errors
        """
        self._errors = []

        self._validate_required(config)
        self._validate_formats(config)
        self._validate_credentials(config)
        self._validate_ranges(config)
        self._validate_environment(config)

        return ValidationResult(
            valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )

    def validate_or_raise(self, config: Dict[str, Any]) -> None:
        """
        Validate and raise if invalid

        Args:
            config: Configuration dictionary to validate

        Raises:
            InvalidConfigurationError: If configuration is invalid
        """
        from checkbox_api.exceptions import InvalidConfigurationError

        result = self.validate(config)
        if not result.valid:
            error_messages = "; ".join(
                f"{e.field}: {e.message}" for e in result.errors
            )
            raise InvalidConfigurationError(
                f"Configuration validation failed: {error_messages}",
                details=[{"field": e.field, "message": e.message} for e in result.errors],
            )

    def _validate_required(self, config: Dict[str, Any]) -> None:
        """Validate required fields are present and non-empty"""
        for field_name in ("license_key",):
            value = config.get(field_name)
            if value is None:
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} is required"
                ))
            elif isinstance(value, str) and value.strip() == "":
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} cannot be empty",
                    value=value
                ))

    def _validate_formats(self, config: Dict[str, Any]) -> None:
        """Validate field formats"""
        base_url = config.get("base_url")
        if base_url is not None and base_url != "":
            if not isinstance(base_url, str) or not is_valid_base_url(base_url):
                self._errors.append(ValidationErrorDetail(
                    field="base_url",
                    message="base_url must be a valid HTTP/HTTPS URL",
                    value=base_url
                ))

        for bool_field in ("verify_ssl", "enable_audit_log"):
            value = config.get(bool_field)
            if value is not None and not isinstance(value, bool):
                self._errors.append(ValidationErrorDetail(
                    field=bool_field,
                    message=f"{bool_field} must be a boolean",
                    value=value
                ))

    def _validate_credentials(self, config: Dict[str, Any]) -> None:
        """Login and password must be given together"""
        login = config.get("login")
        password = config.get("password")

        if login and not password:
            self._errors.append(ValidationErrorDetail(
                field="password",
                message="password is required when login is set"
            ))
        elif password and not login:
            self._errors.append(ValidationErrorDetail(
                field="login",
                message="login is required when password is set",
                value=login
            ))

    def _validate_ranges(self, config: Dict[str, Any]) -> None:
        """Validate numeric ranges"""
        connect_timeout = config.get("connect_timeout")
        if connect_timeout is not None:
            if (
                isinstance(connect_timeout, bool)
                or not isinstance(connect_timeout, (int, float))
                or connect_timeout <= 0
            ):
                self._errors.append(ValidationErrorDetail(
                    field="connect_timeout",
                    message="connect_timeout must be a positive number (seconds)",
                    value=connect_timeout
                ))
            elif connect_timeout > 300:
                self._errors.append(ValidationErrorDetail(
                    field="connect_timeout",
                    message="connect_timeout should not exceed 300 seconds",
                    value=connect_timeout
                ))

        read_timeout = config.get("read_timeout")
        if read_timeout is not None:
            if (
                isinstance(read_timeout, bool)
                or not isinstance(read_timeout, (int, float))
                or read_timeout <= 0
            ):
                self._errors.append(ValidationErrorDetail(
                    field="read_timeout",
                    message="read_timeout must be a positive number (seconds)",
                    value=read_timeout
                ))
            elif read_timeout > 600:
                self._errors.append(ValidationErrorDetail(
                    field="read_timeout",
                    message="read_timeout should not exceed 600 seconds",
                    value=read_timeout
                ))

    def _validate_environment(self, config: Dict[str, Any]) -> None:
        """Validate environment setting"""
        environment = config.get("environment")
        if environment is not None:
            valid_environments = [e.value for e in CheckboxEnvironment]
            env_value = (
                environment.value
                if isinstance(environment, CheckboxEnvironment)
                else environment
            )
            if env_value not in valid_environments:
                self._errors.append(ValidationErrorDetail(
                    field="environment",
                    message=f"environment must be one of: {', '.join(valid_environments)}",
                    value=environment
                ))
