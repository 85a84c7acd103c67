"""Pagination 도메인 서비스

정렬된 데이터 소스로부터 요청 페이지의 결과와 메타 정보를 계산합니다.
count 1회, fetch 1회(전체 조회 시 fetch 1회)만 수행하며 상태를 갖지 않습니다.
"""

from typing import Optional

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from alchemy_paginator.core.config import settings
from alchemy_paginator.core.logging import get_logger
from alchemy_paginator.pagination.repository import SelectQuerySource
from alchemy_paginator.pagination.schemas import PaginationResult
from alchemy_paginator.pagination.types import (
    PaginationRequest,
    Projection,
    QuerySource,
    validate_page,
    validate_page_size,
)
from alchemy_paginator.pagination.window import resolve_window

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE: int = settings.default_page_size


async def paginate(
    source: QuerySource,
    page: int = 1,
    page_size: Optional[int] = DEFAULT_PAGE_SIZE,
    projection: Optional[Projection] = None,
) -> PaginationResult:
    """정렬된 데이터 소스 페이지네이션

    page_size가 None이면 전체 결과를 단일 페이지로 반환합니다.
    요청 페이지가 전체 페이지 수를 넘으면 마지막 페이지를 반환합니다.

    Args:
        source: 정렬된 데이터 소스 (count / fetch 제공)
        page: 요청 페이지 번호 (1부터 시작)
        page_size: 페이지 크기. None이면 전체 조회
        projection: 각 row에 적용할 변환 함수

    Returns:
        PaginationResult 인스턴스

    Raises:
        InvalidPaginationArgumentException: page 또는 page_size가 1 미만인 경우
    """
    validate_page(page)
    validate_page_size(page_size)

    if page_size is None:
        return await _fetch_all(source, projection)

    total_count = await source.count()
    window = resolve_window(total_count, page, page_size)

    logger.debug(
        "Page window resolved",
        extra={
            "requested_page": page,
            "page": window.page,
            "page_size": page_size,
            "page_count": window.page_count,
            "total_count": total_count,
        },
    )

    results = await source.fetch(
        offset=window.offset,
        limit=window.limit,
        projection=projection,
    )

    return PaginationResult(
        results=tuple(results),
        total_count=total_count,
        page=window.page,
        page_size=page_size,
        page_count=window.page_count,
    )


async def _fetch_all(
    source: QuerySource, projection: Optional[Projection]
) -> PaginationResult:
    """페이지 구분 없이 전체 조회"""
    results = await source.fetch(projection=projection)

    logger.debug(
        "Unpaged fetch completed", extra={"total_count": len(results)}
    )

    return PaginationResult(
        results=tuple(results),
        total_count=len(results),
        page=1,
        page_size=None,
        page_count=1,
    )


async def paginate_request(
    source: QuerySource,
    request: PaginationRequest,
    projection: Optional[Projection] = None,
) -> PaginationResult:
    """PaginationRequest 기반 페이지네이션"""
    return await paginate(
        source,
        page=request.page,
        page_size=request.page_size,
        projection=projection,
    )


async def paginate_select(
    session: AsyncSession,
    statement: Select,
    page: int = 1,
    page_size: Optional[int] = DEFAULT_PAGE_SIZE,
    projection: Optional[Projection] = None,
    scalars: bool = True,
) -> PaginationResult:
    """SQLAlchemy Select 페이지네이션

    Args:
        session: 비동기 세션 (트랜잭션 관리는 호출자 책임)
        statement: ORDER BY가 지정된 Select 문
        page: 요청 페이지 번호
        page_size: 페이지 크기. None이면 전체 조회
        projection: 각 row에 적용할 변환 함수
        scalars: True면 첫 번째 컬럼(엔티티)만, False면 Row 전체를 반환

    Returns:
        PaginationResult 인스턴스

    Example::

        result = await paginate_select(
            session,
            select(Content).order_by(Content.id),
            page=2,
            page_size=10,
            projection=ContentResponse.model_validate,
        )
    """
    source: SelectQuerySource = SelectQuerySource(
        session, statement, scalars=scalars
    )
    return await paginate(
        source, page=page, page_size=page_size, projection=projection
    )
