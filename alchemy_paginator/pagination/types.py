"""페이지네이션 도메인 타입 정의"""

from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
    runtime_checkable,
)

from alchemy_paginator.core.config import settings
from alchemy_paginator.pagination.exceptions import (
    InvalidPageException,
    InvalidPageSizeException,
)

T_co = TypeVar("T_co", covariant=True)

# 조회된 각 row를 결과 항목으로 변환하는 함수
Projection = Callable[[Any], Any]


def validate_page(page: int) -> int:
    """페이지 번호 검증 (1 이상)"""
    if page < 1:
        raise InvalidPageException(page=page)
    return page


def validate_page_size(page_size: Optional[int]) -> Optional[int]:
    """페이지 크기 검증 (None 또는 1 이상)"""
    if page_size is not None and page_size < 1:
        raise InvalidPageSizeException(page_size=page_size)
    return page_size


@dataclass(frozen=True)
class PaginationRequest:
    """페이지네이션 요청

    Attributes:
        page: 요청 페이지 번호 (1부터 시작)
        page_size: 페이지 크기. None이면 페이지 구분 없이 전체 조회

    Example::

        request = PaginationRequest(page=2, page_size=10)
        result = await paginate_request(source, request)
    """

    page: int = 1
    page_size: Optional[int] = field(
        default_factory=lambda: settings.default_page_size
    )

    def __post_init__(self) -> None:
        validate_page(self.page)
        validate_page_size(self.page_size)

    @property
    def is_paged(self) -> bool:
        return self.page_size is not None


@runtime_checkable
class QuerySource(Protocol[T_co]):
    """정렬된 데이터 소스 (count / fetch 제공자)

    구현체는 항상 동일한 순서로 row를 반환해야 합니다.
    정렬되지 않은 소스의 페이지네이션 결과는 정의되지 않습니다.
    """

    async def count(self) -> int:
        """슬라이싱과 무관한 전체 row 수"""
        ...

    async def fetch(
        self,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
        projection: Optional[Projection] = None,
    ) -> Sequence[T_co]:
        """offset부터 최대 limit개 row를 소스 순서대로 조회

        offset/limit이 None이면 해당 단계를 생략하며,
        projection이 주어지면 각 row에 적용한 결과를 반환합니다.
        """
        ...
