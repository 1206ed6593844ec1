"""Shift models"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from checkbox_api.models.base import ApiModel
from checkbox_api.models.cash_register import CashRegister
from checkbox_api.models.cashier import Cashier
from checkbox_api.models.pagination import PaginationMeta


class ShiftStatus(str, Enum):
    """Shift lifecycle status"""
    CREATED = "CREATED"
    OPENING = "OPENING"
    OPENED = "OPENED"
    CLOSING = "CLOSING"
    CLOSED = "CLOSED"


class Shift(ApiModel):
    """Cash register working period"""

    id: str = Field(..., description="Shift ID")
    serial: Optional[int] = Field(None, description="Shift serial number")
    status: Optional[ShiftStatus] = Field(None, description="Shift status")
    z_report: Optional[Dict[str, Any]] = Field(None, description="Z-report issued at close")
    opened_at: Optional[datetime] = Field(None, description="Open date")
    closed_at: Optional[datetime] = Field(None, description="Close date")
    initial_transaction: Optional[Dict[str, Any]] = Field(None, description="Opening transaction")
    closing_transaction: Optional[Dict[str, Any]] = Field(None, description="Closing transaction")
    balance: Optional[Dict[str, Any]] = Field(None, description="Shift balance")
    taxes: Optional[List[Dict[str, Any]]] = Field(None, description="Shift tax totals")
    cash_register: Optional[CashRegister] = Field(None, description="Cash register")
    cashier: Optional[Cashier] = Field(None, description="Cashier")
    created_at: Optional[datetime] = Field(None, description="Creation date")
    updated_at: Optional[datetime] = Field(None, description="Last update date")

    @property
    def is_opened(self) -> bool:
        return self.status == ShiftStatus.OPENED

    @property
    def is_closed(self) -> bool:
        return self.status == ShiftStatus.CLOSED


class Shifts(ApiModel):
    """Page of shifts"""

    meta: Optional[PaginationMeta] = None
    results: List[Shift] = Field(..., description="Shifts")
