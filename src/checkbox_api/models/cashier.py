"""Cashier models"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from checkbox_api.models.base import ApiModel


class Cashier(ApiModel):
    """Cashier profile"""

    id: str = Field(..., description="Cashier ID")
    full_name: Optional[str] = Field(None, description="Cashier full name")
    nin: Optional[str] = Field(None, description="National identification number")
    key_id: Optional[str] = Field(None, description="Signing key ID")
    signature_type: Optional[str] = Field(
        None, description="Signature type (AGENT, CLOUD_SIGNATURE, TEST)"
    )
    permissions: Optional[Dict[str, Any]] = Field(None, description="Cashier permissions")
    created_at: Optional[datetime] = Field(None, description="Creation date")
    updated_at: Optional[datetime] = Field(None, description="Last update date")


class CashierAccessToken(ApiModel):
    """Sign-in response"""

    access_token: str = Field(..., min_length=1, description="Bearer token")
    token_type: Optional[str] = Field(None, description="Token type")
    type: Optional[str] = Field(None, description="Sign-in type")
