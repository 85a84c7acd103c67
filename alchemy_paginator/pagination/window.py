"""페이지 윈도우 계산

count 결과와 page/page_size로부터 실제로 조회할 범위를 계산합니다.
I/O가 없는 순수 함수만 포함합니다.
"""

import math
from dataclasses import dataclass
from typing import Optional

from alchemy_paginator.pagination.types import validate_page, validate_page_size


@dataclass(frozen=True)
class PageWindow:
    """조회 범위

    Attributes:
        page: 실제로 제공할 페이지 (요청 페이지가 범위를 넘으면 마지막 페이지)
        page_count: 전체 페이지 수 (최소 1)
        offset: 조회 시작 위치. None이면 offset 단계 생략
        limit: 조회할 최대 row 수
    """

    page: int
    page_count: int
    offset: Optional[int]
    limit: int


def calculate_page_count(total_count: int, page_size: Optional[int]) -> int:
    """전체 페이지 수 계산

    Args:
        total_count: 전체 아이템 수
        page_size: 페이지 크기 (None이면 단일 페이지)

    Returns:
        전체 페이지 수. 아이템이 없어도 1
    """
    if page_size is None or total_count <= 0:
        return 1
    return max(1, math.ceil(total_count / page_size))


def calculate_offset(page: int, page_size: int) -> int:
    """1부터 시작하는 페이지 번호를 offset으로 변환"""
    return (page - 1) * page_size


def resolve_window(total_count: int, page: int, page_size: int) -> PageWindow:
    """조회 범위 계산

    요청 페이지가 전체 페이지 수를 넘으면 마지막 페이지로 보정합니다.
    전체 아이템이 한 페이지에 모두 들어가면 offset 단계를 생략합니다.

    Args:
        total_count: count로 얻은 전체 아이템 수
        page: 요청 페이지 번호
        page_size: 페이지 크기

    Returns:
        PageWindow 인스턴스

    Example::

        >>> resolve_window(total_count=100, page=11, page_size=10)
        PageWindow(page=10, page_count=10, offset=90, limit=10)
    """
    validate_page(page)
    validate_page_size(page_size)

    page_count = calculate_page_count(total_count, page_size)
    effective_page = min(page, page_count)

    offset: Optional[int] = calculate_offset(effective_page, page_size)
    if total_count < page_size:
        offset = None

    return PageWindow(
        page=effective_page,
        page_count=page_count,
        offset=offset,
        limit=page_size,
    )
