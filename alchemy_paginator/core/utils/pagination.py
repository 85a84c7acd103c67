"""페이지네이션 유틸리티"""

from typing import Optional

from fastapi import Query

from alchemy_paginator.core.config import settings
from alchemy_paginator.pagination.types import PaginationRequest


class PageParams:
    """페이지네이션 파라미터 의존성

    Example::

        from alchemy_paginator import paginate_select
        from alchemy_paginator.core.utils.pagination import PageParams

        @router.get("")
        async def get_contents(
            page_params: PageParams = Depends(),
            session: AsyncSession = Depends(get_db),
        ):
            return await paginate_select(
                session,
                select(Content).order_by(Content.id),
                page=page_params.page,
                page_size=page_params.size,
            )
    """

    def __init__(
        self,
        page: int = Query(1, ge=1, description="페이지 번호"),
        size: Optional[int] = Query(
            settings.default_page_size,
            ge=1,
            le=settings.max_page_size,
            description="페이지 크기",
        ),
    ):
        self.page = page
        self.size = size

    @property
    def skip(self) -> int:
        """오프셋 계산"""
        if self.size is None:
            return 0
        return (self.page - 1) * self.size

    @property
    def limit(self) -> Optional[int]:
        """리미트 (size와 동일)"""
        return self.size

    def to_request(self) -> PaginationRequest:
        """PaginationRequest로 변환"""
        return PaginationRequest(page=self.page, page_size=self.size)
