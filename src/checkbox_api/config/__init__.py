"""
Configuration module
"""

from checkbox_api.config.checkbox_config import (
    CheckboxConfig,
    CheckboxEnvironment,
    CHECKBOX_BASE_URLS,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from checkbox_api.config.config_loader import ConfigLoader
from checkbox_api.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "CheckboxConfig",
    "CheckboxEnvironment",
    "CHECKBOX_BASE_URLS",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
