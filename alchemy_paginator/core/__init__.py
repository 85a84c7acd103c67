"""Core 모듈"""

from alchemy_paginator.core.config import settings
from alchemy_paginator.core.exceptions import (
    BadRequestException,
    BaseAPIException,
    ErrorCode,
)
from alchemy_paginator.core.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "ErrorCode",
    "BaseAPIException",
    "BadRequestException",
    "get_logger",
    "setup_logging",
]
