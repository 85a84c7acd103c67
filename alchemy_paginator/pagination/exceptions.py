"""Pagination 도메인 예외 정의"""

from enum import Enum

from alchemy_paginator.core.exceptions import BadRequestException


class PaginationErrorCode(str, Enum):
    """페이지네이션 도메인 에러 코드"""

    INVALID_PAGE = "INVALID_PAGE"
    INVALID_PAGE_SIZE = "INVALID_PAGE_SIZE"


class InvalidPaginationArgumentException(BadRequestException):
    """페이지 번호 또는 페이지 크기가 1 미만인 경우"""

    def __init__(
        self,
        message: str,
        error_code: str,
        detail: dict | None = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            detail=detail,
        )


class InvalidPageException(InvalidPaginationArgumentException):
    """페이지 번호가 1 미만인 경우"""

    def __init__(self, page: int):
        super().__init__(
            message="페이지 번호는 1 이상이어야 합니다.",
            error_code=PaginationErrorCode.INVALID_PAGE,
            detail={"page": page},
        )


class InvalidPageSizeException(InvalidPaginationArgumentException):
    """페이지 크기가 1 미만인 경우"""

    def __init__(self, page_size: int):
        super().__init__(
            message="페이지 크기는 1 이상이어야 합니다.",
            error_code=PaginationErrorCode.INVALID_PAGE_SIZE,
            detail={"page_size": page_size},
        )
