"""Pagination metadata"""

from typing import Optional

from checkbox_api.models.base import ApiModel


class PaginationMeta(ApiModel):
    """Page window returned with list endpoints"""

    limit: Optional[int] = None
    offset: Optional[int] = None
