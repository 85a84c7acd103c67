"""SQLAlchemy 비동기 쿼리 페이지네이션

Usage::

    from alchemy_paginator import paginate_select

    result = await paginate_select(
        session, select(Content).order_by(Content.id), page=2, page_size=10
    )
"""

from alchemy_paginator.pagination import (
    DEFAULT_PAGE_SIZE,
    InvalidPaginationArgumentException,
    PageMeta,
    PaginationRequest,
    PaginationResult,
    QuerySource,
    SelectQuerySource,
    SequenceQuerySource,
    create_empty_result,
    paginate,
    paginate_request,
    paginate_select,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "paginate",
    "paginate_request",
    "paginate_select",
    "PaginationRequest",
    "PaginationResult",
    "PageMeta",
    "create_empty_result",
    "QuerySource",
    "SelectQuerySource",
    "SequenceQuerySource",
    "InvalidPaginationArgumentException",
]
