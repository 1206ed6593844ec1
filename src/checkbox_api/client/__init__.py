"""
HTTP Client module for Checkbox API SDK
"""

from checkbox_api.client.checkbox_client import CheckboxClient
from checkbox_api.client.http_client import (
    HttpClient,
    HttpResponse,
    HttpAuditEntry,
)
from checkbox_api.client.response_decoder import decode_response, parse_json
from checkbox_api.client.routes import (
    ContentKind,
    HttpMethod,
    Operation,
    OperationSpec,
    OPERATIONS,
    Routes,
    build_url,
    get_operation_spec,
)

__all__ = [
    "CheckboxClient",
    "HttpClient",
    "HttpResponse",
    "HttpAuditEntry",
    "decode_response",
    "parse_json",
    "ContentKind",
    "HttpMethod",
    "Operation",
    "OperationSpec",
    "OPERATIONS",
    "Routes",
    "build_url",
    "get_operation_spec",
]
