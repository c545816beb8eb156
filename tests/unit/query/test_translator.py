"""
Tests for QueryTranslator.

The translator is checked against in-memory executors so that the page
arithmetic and the executor contract are tested without a database.
"""

from unittest.mock import AsyncMock

import pytest

from oillab.exceptions import StorageError, ValidationError
from oillab.query import (
    Condition,
    FilterOp,
    OrderTerm,
    QuerySpec,
    QueryTranslator,
    SortDirection,
    SortDirectiveSet,
)
from oillab.schemas.lubricant import (
    LubricantPaginateArgs,
    LubricantSort,
    lubricant_sort,
)
from tests.mocks.executor_mocks import ListExecutor, RecordingExecutor


@pytest.fixture
def translator():
    """
    Provides a lubricant translator with a page size limit of 100.

    Returns:
        QueryTranslator: Translator for lubricants
    """
    return QueryTranslator(lubricant_sort, max_per_page=100)


class TestTranslate:
    """Tests for QueryTranslator.translate."""

    def test_defaults(self, translator):
        """Test empty arguments list the first 12 rows by primary key."""
        spec = translator.translate(LubricantPaginateArgs())

        assert spec == QuerySpec(
            predicate=(),
            ordering=(OrderTerm(field="id", direction=SortDirection.ASC),),
            offset=0,
            limit=12,
        )

    def test_configured_default_page_size(self):
        """Test an omitted perPage uses the configured default."""
        translator = QueryTranslator(
            lubricant_sort, max_per_page=100, default_per_page=20
        )

        spec = translator.translate(LubricantPaginateArgs(page=3))

        assert spec.offset == 40
        assert spec.limit == 20

    def test_primary_key_breaks_ties(self, translator):
        """Test the primary key is appended after the caller's sort."""
        spec = translator.translate(
            LubricantPaginateArgs(
                sort=[LubricantSort.BRAND_ASC, LubricantSort.MODEL_DESC]
            )
        )

        assert spec.ordering == (
            OrderTerm(field="brand", direction=SortDirection.ASC),
            OrderTerm(field="model", direction=SortDirection.DESC),
            OrderTerm(field="id", direction=SortDirection.ASC),
        )

    def test_primary_key_not_repeated(self):
        """Test sorting on the primary key keeps the caller's direction."""
        translator = QueryTranslator(
            SortDirectiveSet("ThingSort", {"id": "id", "name": "name"}),
            max_per_page=100,
        )

        spec = translator.translate(
            LubricantPaginateArgs.model_construct(
                page=1, per_page=10, sort=["id_DESC"], filter=None
            )
        )

        assert spec.ordering == (
            OrderTerm(field="id", direction=SortDirection.DESC),
        )

    def test_filter_becomes_predicate(self, translator):
        """Test filter operators become AND-ed conditions."""
        args = LubricantPaginateArgs.model_validate(
            {
                "filter": {
                    "brand": {"equals": "Shell"},
                    "viscosity": {"endsWith": "40"},
                }
            }
        )

        spec = translator.translate(args)

        assert spec.predicate == (
            Condition(field="brand", op=FilterOp.EQUALS, value="Shell"),
            Condition(field="viscosity", op=FilterOp.ENDS_WITH, value="40"),
        )

    def test_translation_is_repeatable(self, translator):
        """Test the same arguments always give the same query."""
        args = LubricantPaginateArgs.model_validate(
            {
                "page": 2,
                "perPage": 5,
                "sort": ["viscosity_DESC"],
                "filter": {"id": {"in": [4, 2, 4]}},
            }
        )

        assert translator.translate(args) == translator.translate(args)

    def test_unknown_raw_sort_rejected(self, translator):
        """Test raw sort strings are validated for programmatic callers."""
        args = LubricantPaginateArgs.model_construct(
            page=1, per_page=12, sort=["price_ASC"], filter=None
        )

        with pytest.raises(ValidationError) as exc_info:
            translator.translate(args)

        assert exc_info.value.field == "sort"

    def test_page_size_above_limit_rejected(self, translator):
        """Test perPage above the configured limit is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            translator.translate(LubricantPaginateArgs(per_page=101))

        assert exc_info.value.field == "perPage"


class TestRun:
    """Tests for QueryTranslator.run."""

    @pytest.mark.asyncio
    async def test_executor_called_once_with_translated_query(self, translator):
        """Test count and rows come from one call with one predicate."""
        executor = RecordingExecutor(rows=["a"], total_count=1)
        args = LubricantPaginateArgs.model_validate(
            {"page": 2, "perPage": 3, "filter": {"brand": {"contains": "she"}}}
        )

        await translator.run(args, executor)

        spec = translator.translate(args)
        assert executor.calls == [
            {
                "predicate": spec.predicate,
                "ordering": spec.ordering,
                "offset": 3,
                "limit": 3,
            }
        ]

    @pytest.mark.asyncio
    async def test_invalid_args_never_reach_executor(self, translator):
        """Test validation happens before any storage access."""
        executor = RecordingExecutor()

        with pytest.raises(ValidationError):
            await translator.run(LubricantPaginateArgs(page=0), executor)

        assert executor.calls == []

    @pytest.mark.asyncio
    async def test_last_partial_page(self, translator):
        """Test 13 rows at 12 per page leave 1 row on page 2."""
        executor = ListExecutor(list(range(13)))

        page = await translator.run(
            LubricantPaginateArgs(page=2, per_page=12), executor
        )

        assert page.items == [12]
        assert page.total_count == 13
        assert page.total_pages == 2
        assert page.current_page == 2
        assert page.per_page == 12

    @pytest.mark.asyncio
    async def test_page_beyond_end(self, translator):
        """Test a page past the end is empty but reports the totals."""
        executor = ListExecutor(list(range(25)))

        page = await translator.run(
            LubricantPaginateArgs(page=9, per_page=12), executor
        )

        assert page.items == []
        assert page.total_count == 25
        assert page.total_pages == 3
        assert page.current_page == 9

    @pytest.mark.asyncio
    async def test_envelope_uses_default_page_size(self):
        """Test perPage in the envelope is the size actually used."""
        translator = QueryTranslator(
            lubricant_sort, max_per_page=100, default_per_page=5
        )

        page = await translator.run(
            LubricantPaginateArgs(), ListExecutor(list(range(7)))
        )

        assert page.per_page == 5
        assert page.items == [0, 1, 2, 3, 4]
        assert page.total_pages == 2

    @pytest.mark.asyncio
    async def test_oversized_result_rejected(self, translator):
        """Test an executor returning more rows than the limit is an error."""
        executor = RecordingExecutor(rows=list(range(4)), total_count=4)

        with pytest.raises(StorageError):
            await translator.run(LubricantPaginateArgs(per_page=3), executor)

    @pytest.mark.asyncio
    async def test_storage_error_propagates(self, translator):
        """Test executor failures reach the caller unchanged."""
        executor = AsyncMock()
        executor.execute.side_effect = StorageError("Database error occurred")

        with pytest.raises(StorageError, match="Database error occurred"):
            await translator.run(LubricantPaginateArgs(), executor)

        executor.execute.assert_awaited_once()
