import math
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple

from fastapi import Query
from pydantic import BaseModel, Field
from sqlalchemy import asc, desc, or_
from sqlalchemy.orm import Query as SAQuery

from app.core.config import settings
from app.schemas.common import PaginationMeta


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class InvalidSortFieldError(ValueError):
    def __init__(self, field: str, allowed: Sequence[str]):
        self.field = field
        self.allowed = list(allowed)
        super().__init__(
            f"Cannot sort by '{field}', expected one of: {', '.join(self.allowed)}"
        )


class PageParams(BaseModel):
    page: int = Field(1, ge=1, description="Page number (starting from 1)")
    limit: int = Field(settings.default_page_size, ge=1, description="Rows per page")
    search: str = Field("", description="Substring matched against the searchable columns")
    sortBy: str = Field("created_at", description="Sort key")
    sortOrder: SortOrder = Field(SortOrder.DESC, description="ASC or DESC")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def paginate(
    query: SAQuery,
    params: PageParams,
    search_columns: Sequence[Any],
    sort_map: Dict[str, Any],
    id_column: Any,
) -> Tuple[List[Any], PaginationMeta]:
    """
    Apply search, sort and paging to ``query``.

    ``sort_map`` is the allow-list of public sort keys; the caller's sortBy
    is only ever used as a key into it. Rows that tie on the sort key are
    ordered by ``id_column`` so pages never overlap. Returns the page rows and the
    pagination metadata computed from the pre-paging count.
    """
    if params.sortBy not in sort_map:
        raise InvalidSortFieldError(params.sortBy, sort_map.keys())

    if params.search:
        query = query.filter(
            or_(*[column.contains(params.search, autoescape=True) for column in search_columns])
        )

    total = query.order_by(None).count()

    order_func = asc if params.sortOrder == SortOrder.ASC else desc
    rows = (
        query.order_by(order_func(sort_map[params.sortBy]), order_func(id_column))
        .offset(params.offset)
        .limit(params.limit)
        .all()
    )

    return rows, PaginationMeta(
        page=params.page,
        limit=params.limit,
        total=total,
        totalPages=total_pages(total, params.limit),
    )


def page_params(
    page: int = Query(1, ge=1, description="Page number (starting from 1)"),
    limit: int = Query(settings.default_page_size, ge=1, description="Rows per page"),
    search: str = Query("", description="Substring to look for"),
    sortBy: str = Query("created_at", description="Sort key"),
    sortOrder: SortOrder = Query(SortOrder.DESC, description="ASC or DESC"),
) -> PageParams:
    return PageParams(page=page, limit=limit, search=search, sortBy=sortBy, sortOrder=sortOrder)
