"""페이지네이션 결과 스키마

Usage::

    from alchemy_paginator.pagination.schemas import create_empty_result

    result = create_empty_result(page_size=25)

Note:
    Generic 타입의 classmethod는 Pydantic에서 제한이 있으므로,
    빈 결과는 팩토리 함수(create_empty_result)로 생성합니다.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from alchemy_paginator.pagination.types import validate_page_size

T = TypeVar("T")


class PageMeta(BaseModel):
    """페이지네이션 메타 정보"""

    total: int = Field(..., description="전체 아이템 수")
    page: int = Field(..., description="현재 페이지")
    size: Optional[int] = Field(..., description="페이지 크기 (None이면 전체)")
    total_pages: int = Field(..., description="전체 페이지 수")
    has_next: bool = Field(..., description="다음 페이지 존재 여부")
    has_prev: bool = Field(..., description="이전 페이지 존재 여부")


class PaginationResult(BaseModel, Generic[T]):
    """페이지네이션 결과

    생성 이후에는 변경할 수 없습니다 (frozen, results는 tuple).

    Example::

        result = await paginate_select(session, select(User).order_by(User.id))
        for user in result.results:
            ...
        print(result.page, result.page_count, result.total_count)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    results: tuple[T, ...] = Field(
        default_factory=tuple, description="현재 페이지 아이템"
    )
    total_count: int = Field(..., ge=0, description="전체 아이템 수")
    page: int = Field(..., ge=1, description="실제로 제공된 페이지")
    page_size: Optional[int] = Field(
        default=None, ge=1, description="페이지 크기 (None이면 전체)"
    )
    page_count: int = Field(..., ge=1, description="전체 페이지 수")

    @model_validator(mode="after")
    def validate_page_range(self) -> "PaginationResult[T]":
        if self.page > self.page_count:
            raise ValueError(
                f"page ({self.page}) must not exceed "
                f"page_count ({self.page_count})"
            )
        return self

    @property
    def has_next(self) -> bool:
        return self.page < self.page_count

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def to_meta(self) -> PageMeta:
        """결과 목록을 제외한 메타 정보 반환"""
        return PageMeta(
            total=self.total_count,
            page=self.page,
            size=self.page_size,
            total_pages=self.page_count,
            has_next=self.has_next,
            has_prev=self.has_previous,
        )


def create_empty_result(page_size: Optional[int] = None) -> PaginationResult:
    """빈 페이지네이션 결과 생성 팩토리 함수

    조회할 소스가 없는 등 쿼리를 실행할 수 없을 때 사용합니다.

    Args:
        page_size: 페이지 크기 (그대로 결과에 반영)

    Returns:
        아이템이 없는 PaginationResult 인스턴스
    """
    return PaginationResult(
        results=(),
        total_count=0,
        page=1,
        page_size=validate_page_size(page_size),
        page_count=1,
    )
