"""유틸리티 모듈"""

from alchemy_paginator.core.utils.pagination import PageParams

__all__ = [
    "PageParams",
]
