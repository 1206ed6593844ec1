"""Query parameter models for list endpoints"""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field


def encode_query(items: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Normalize query values for URL encoding

    ``None`` values and empty lists are dropped, booleans become
    ``"true"``/``"false"``, list items become strings.
    """
    query: Dict[str, Any] = {}
    for key, value in items.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            if value:
                query[key] = [str(v) for v in value]
        else:
            query[key] = value
    return query


class QueryParams(BaseModel):
    """
    Base for filter/pagination parameters

    Unset fields and empty lists are never sent.
    """

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    def to_query(self) -> Dict[str, Any]:
        """Return query parameters as a dict suitable for URL encoding"""
        return encode_query(self.model_dump(exclude_none=True))


class ShiftsQueryParams(QueryParams):
    """Filters for the shifts list"""

    statuses: Optional[List[str]] = Field(None, description="Shift statuses to include")
    desc: Optional[bool] = Field(None, description="Newest first")
    limit: Optional[int] = Field(None, ge=1, le=1000)
    offset: Optional[int] = Field(None, ge=0)


class CashRegistersQueryParams(QueryParams):
    """Filters for the cash registers list"""

    in_use: Optional[bool] = Field(None, description="Only registers with an open shift")
    fiscal_number: Optional[str] = Field(None, description="Fiscal number")
    limit: Optional[int] = Field(None, ge=1, le=1000)
    offset: Optional[int] = Field(None, ge=0)


class ReceiptsQueryParams(QueryParams):
    """Filters for the receipts list"""

    fiscal_code: Optional[str] = Field(None, description="Fiscal code")
    serial: Optional[int] = Field(None, description="Receipt serial number")
    desc: Optional[bool] = Field(None, description="Newest first")
    limit: Optional[int] = Field(None, ge=1, le=1000)
    offset: Optional[int] = Field(None, ge=0)
