"""Pagination 리포지토리 단위 테스트"""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Integer, String, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from alchemy_paginator.pagination.repository import (
    SelectQuerySource,
    SequenceQuerySource,
    apply_projection,
    has_order_by,
)
from alchemy_paginator.pagination.service import paginate_select
from alchemy_paginator.pagination.types import QuerySource


class Base(DeclarativeBase):
    pass


class Article(Base):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(100))


def compile_sql(statement) -> str:
    return str(statement.compile(compile_kwargs={"literal_binds": True}))


@pytest.fixture
def mock_session():
    """Mock AsyncSession"""
    session = MagicMock()
    session.execute = AsyncMock()
    return session


def scalar_result(value):
    result = MagicMock()
    result.scalar_one.return_value = value
    return result


def rows_result(rows):
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    result.all.return_value = rows
    return result


class TestSelectQuerySourceCount:
    """count 쿼리 테스트"""

    @pytest.mark.asyncio
    async def test_count_wraps_statement_without_order_by(self, mock_session):
        """ORDER BY를 제거한 서브쿼리로 count"""
        mock_session.execute.return_value = scalar_result(42)
        source = SelectQuerySource(
            mock_session,
            select(Article).where(Article.id > 5).order_by(Article.id),
        )

        count = await source.count()

        assert count == 42
        sql = compile_sql(mock_session.execute.call_args.args[0])
        assert "count(*)" in sql
        assert "articles.id > 5" in sql
        assert "ORDER BY" not in sql

    @pytest.mark.asyncio
    async def test_count_error_propagates(self, mock_session):
        mock_session.execute.side_effect = OperationalError(
            "SELECT 1", {}, Exception("connection refused")
        )
        source = SelectQuerySource(
            mock_session, select(Article).order_by(Article.id)
        )

        with pytest.raises(OperationalError):
            await source.count()


class TestSelectQuerySourceFetch:
    """fetch 쿼리 테스트"""

    @pytest.mark.asyncio
    async def test_fetch_applies_offset_and_limit(self, mock_session):
        articles = [Article(id=21, title="a"), Article(id=22, title="b")]
        mock_session.execute.return_value = rows_result(articles)
        source = SelectQuerySource(
            mock_session, select(Article).order_by(Article.id)
        )

        rows = await source.fetch(offset=20, limit=10)

        assert rows == articles
        sql = compile_sql(mock_session.execute.call_args.args[0])
        assert "ORDER BY articles.id" in sql
        assert "LIMIT 10" in sql
        assert "OFFSET 20" in sql

    @pytest.mark.asyncio
    async def test_fetch_without_offset(self, mock_session):
        """offset이 None이면 OFFSET 생략"""
        mock_session.execute.return_value = rows_result([])
        source = SelectQuerySource(
            mock_session, select(Article).order_by(Article.id)
        )

        await source.fetch(limit=10)

        sql = compile_sql(mock_session.execute.call_args.args[0])
        assert "LIMIT 10" in sql
        assert "OFFSET" not in sql

    @pytest.mark.asyncio
    async def test_fetch_all(self, mock_session):
        mock_session.execute.return_value = rows_result([])
        source = SelectQuerySource(
            mock_session, select(Article).order_by(Article.id)
        )

        await source.fetch()

        sql = compile_sql(mock_session.execute.call_args.args[0])
        assert "LIMIT" not in sql
        assert "OFFSET" not in sql

    @pytest.mark.asyncio
    async def test_fetch_applies_projection(self, mock_session):
        articles = [Article(id=1, title="a"), Article(id=2, title="b")]
        mock_session.execute.return_value = rows_result(articles)
        source = SelectQuerySource(
            mock_session, select(Article).order_by(Article.id)
        )

        titles = await source.fetch(projection=lambda a: a.title)

        assert titles == ["a", "b"]

    @pytest.mark.asyncio
    async def test_fetch_rows_when_not_scalars(self, mock_session):
        """scalars=False면 Row 전체 반환"""
        result = rows_result([(1, "a")])
        mock_session.execute.return_value = result
        source = SelectQuerySource(
            mock_session,
            select(Article.id, Article.title).order_by(Article.id),
            scalars=False,
        )

        rows = await source.fetch()

        assert rows == [(1, "a")]
        result.all.assert_called_once()
        result.scalars.assert_not_called()

    def test_warns_without_order_by(self, mock_session, caplog):
        """ORDER BY 없는 statement는 경고"""
        with caplog.at_level(logging.WARNING):
            SelectQuerySource(mock_session, select(Article))

        assert "without ORDER BY" in caplog.text

    def test_no_warning_with_order_by(self, mock_session, caplog):
        with caplog.at_level(logging.WARNING):
            SelectQuerySource(mock_session, select(Article).order_by(Article.id))

        assert caplog.text == ""

    def test_implements_query_source_protocol(self, mock_session):
        source = SelectQuerySource(
            mock_session, select(Article).order_by(Article.id)
        )

        assert isinstance(source, QuerySource)


class TestPaginateSelect:
    """paginate_select 테스트 (Mock 세션)"""

    @pytest.mark.asyncio
    async def test_issues_count_then_bounded_fetch(self, mock_session):
        articles = [Article(id=i, title=str(i)) for i in range(91, 101)]
        mock_session.execute.side_effect = [
            scalar_result(100),
            rows_result(articles),
        ]

        result = await paginate_select(
            mock_session,
            select(Article).order_by(Article.id),
            page=11,
            page_size=10,
        )

        assert mock_session.execute.await_count == 2
        fetch_sql = compile_sql(mock_session.execute.call_args_list[1].args[0])
        assert "OFFSET 90" in fetch_sql
        assert result.page == 10
        assert result.page_count == 10
        assert result.total_count == 100
        assert [a.id for a in result.results] == list(range(91, 101))

    @pytest.mark.asyncio
    async def test_unpaged_issues_single_query(self, mock_session):
        articles = [Article(id=1, title="a")]
        mock_session.execute.return_value = rows_result(articles)

        result = await paginate_select(
            mock_session, select(Article).order_by(Article.id), page_size=None
        )

        assert mock_session.execute.await_count == 1
        assert result.total_count == 1
        assert result.page_size is None


class TestSequenceQuerySource:
    """메모리 데이터 소스 테스트"""

    @pytest.mark.asyncio
    async def test_count(self):
        assert await SequenceQuerySource("abcde").count() == 5

    @pytest.mark.asyncio
    async def test_fetch_slice(self):
        source = SequenceQuerySource(list("abcde"))

        assert await source.fetch(offset=1, limit=2) == ["b", "c"]

    @pytest.mark.asyncio
    async def test_fetch_limit_without_offset(self):
        source = SequenceQuerySource(list("abcde"))

        assert await source.fetch(limit=3) == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_fetch_past_end_is_empty(self):
        source = SequenceQuerySource(list("abc"))

        assert await source.fetch(offset=10, limit=5) == []

    def test_apply_projection_keeps_order(self):
        assert apply_projection([3, 1, 2], str) == ["3", "1", "2"]

    def test_apply_projection_without_projection_copies(self):
        rows = (1, 2)

        assert apply_projection(rows) == [1, 2]


class TestHasOrderBy:
    """ORDER BY 확인 테스트"""

    def test_ordered_statement(self):
        assert has_order_by(select(Article).order_by(Article.id)) is True

    def test_unordered_statement(self):
        assert has_order_by(select(Article)) is False

    def test_order_by_cleared(self):
        """order_by(None)으로 제거된 정렬"""
        statement = select(Article).order_by(Article.id).order_by(None)

        assert has_order_by(statement) is False
