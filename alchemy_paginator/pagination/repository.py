"""Pagination 도메인 리포지토리

페이지네이션 대상 데이터를 count / fetch 하는 데이터 접근 계층입니다.
"""

from typing import Any, Generic, Optional, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from alchemy_paginator.core.logging import get_logger
from alchemy_paginator.pagination.types import Projection

logger = get_logger(__name__)

T = TypeVar("T")


def apply_projection(
    rows: Sequence[Any], projection: Optional[Projection] = None
) -> list[Any]:
    """조회된 row에 projection 적용 (순서 유지)"""
    if projection is None:
        return list(rows)
    return [projection(row) for row in rows]


def has_order_by(statement: Select) -> bool:
    """Select에 ORDER BY가 지정되어 있는지 확인"""
    # SQLAlchemy는 정렬 절을 조회하는 공개 API가 없어 내부 속성을 사용
    return bool(statement._order_by_clauses)


class SelectQuerySource(Generic[T]):
    """SQLAlchemy Select 기반 데이터 소스

    statement는 실행되지 않은 상태로 보관되며, count/fetch 시점에만
    세션을 통해 실행됩니다. 세션(트랜잭션) 관리는 호출자의 책임입니다.

    Example::

        source = SelectQuerySource(
            session, select(Content).order_by(Content.id)
        )
        result = await paginate(source, page=2, page_size=10)
    """

    def __init__(
        self,
        session: AsyncSession,
        statement: Select,
        scalars: bool = True,
    ):
        self.session = session
        self.statement = statement
        self.scalars = scalars

        if not has_order_by(statement):
            logger.warning(
                "Paginating a statement without ORDER BY; page contents "
                "are not guaranteed to be stable",
                extra={"statement": str(statement)},
            )

    async def count(self) -> int:
        """슬라이싱 이전의 전체 row 수 조회

        Returns:
            row 수
        """
        # ORDER BY는 count 결과에 영향이 없으므로 제거
        query = select(func.count()).select_from(
            self.statement.order_by(None).subquery()
        )

        result = await self.session.execute(query)
        return int(result.scalar_one())

    async def fetch(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        projection: Optional[Projection] = None,
    ) -> list[Any]:
        """row 목록 조회

        Args:
            offset: 건너뛸 row 수 (None이면 OFFSET 생략)
            limit: 조회할 최대 row 수 (None이면 LIMIT 생략)
            projection: 각 row에 적용할 변환 함수

        Returns:
            statement 순서대로 정렬된 row 목록
        """
        query = self.statement
        if offset is not None:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        rows = result.scalars().all() if self.scalars else result.all()
        return apply_projection(rows, projection)


class SequenceQuerySource(Generic[T]):
    """이미 정렬된 메모리 시퀀스 기반 데이터 소스

    테스트나 미리 계산된 목록을 페이지네이션할 때 사용합니다.
    """

    def __init__(self, items: Sequence[T]):
        self.items = items

    async def count(self) -> int:
        return len(self.items)

    async def fetch(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        projection: Optional[Projection] = None,
    ) -> list[Any]:
        start = offset or 0
        end = None if limit is None else start + limit
        return apply_projection(self.items[start:end], projection)
