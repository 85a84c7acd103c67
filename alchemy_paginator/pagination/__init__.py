"""Pagination 도메인 모듈

정렬된 쿼리로부터 페이지 결과와 메타 정보를 계산하는 도메인입니다.

구조:
    - types.py: PaginationRequest, QuerySource 프로토콜
    - window.py: 페이지 수 / offset 계산 (순수 함수)
    - schemas.py: Pydantic 스키마 (PaginationResult, PageMeta)
    - repository.py: 데이터 소스 (SQLAlchemy Select, 메모리 시퀀스)
    - service.py: 페이지네이션 로직
    - exceptions.py: 도메인 예외
"""

from alchemy_paginator.pagination.exceptions import (
    InvalidPageException,
    InvalidPageSizeException,
    InvalidPaginationArgumentException,
    PaginationErrorCode,
)
from alchemy_paginator.pagination.repository import (
    SelectQuerySource,
    SequenceQuerySource,
)
from alchemy_paginator.pagination.schemas import (
    PageMeta,
    PaginationResult,
    create_empty_result,
)
from alchemy_paginator.pagination.service import (
    DEFAULT_PAGE_SIZE,
    paginate,
    paginate_request,
    paginate_select,
)
from alchemy_paginator.pagination.types import (
    PaginationRequest,
    Projection,
    QuerySource,
)
from alchemy_paginator.pagination.window import (
    PageWindow,
    calculate_offset,
    calculate_page_count,
    resolve_window,
)

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
    "Projection",
    "SelectQuerySource",
    "SequenceQuerySource",
    "PageWindow",
    "calculate_page_count",
    "calculate_offset",
    "resolve_window",
    "PaginationErrorCode",
    "InvalidPaginationArgumentException",
    "InvalidPageException",
    "InvalidPageSizeException",
]
