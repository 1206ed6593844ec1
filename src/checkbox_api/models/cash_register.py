"""Cash register models"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from checkbox_api.models.base import ApiModel
from checkbox_api.models.pagination import PaginationMeta


class CashRegister(ApiModel):
    """Registered cash register"""

    id: str = Field(..., description="Cash register ID")
    fiscal_number: Optional[str] = Field(None, description="Fiscal number assigned by the tax service")
    active: Optional[bool] = Field(None, description="Whether the register is active")
    number: Optional[str] = Field(None, description="Local register number")
    created_at: Optional[datetime] = Field(None, description="Creation date")
    updated_at: Optional[datetime] = Field(None, description="Last update date")


class CashRegisterInfo(CashRegister):
    """Cash register bound to the current license key"""

    title: Optional[str] = Field(None, description="Point of sale title")
    address: Optional[str] = Field(None, description="Point of sale address")
    offline_mode: Optional[bool] = Field(None, description="Register is in offline mode")
    stay_offline: Optional[bool] = Field(None, description="Register stays offline")
    has_shift: Optional[bool] = Field(None, description="Register has an open shift")
    documents_state: Optional[Dict[str, Any]] = Field(None, description="Document counters")


class CashRegisters(ApiModel):
    """Page of cash registers"""

    meta: Optional[PaginationMeta] = None
    results: List[CashRegister] = Field(..., description="Cash registers")
