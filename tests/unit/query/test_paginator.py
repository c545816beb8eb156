"""Tests for the page envelope."""

import pytest

from oillab.query import paginate
from oillab.schemas.response import MutationResponse


class TestPaginate:
    """Tests for paginate."""

    @pytest.mark.parametrize(
        "total_count,per_page,expected_pages",
        [
            (0, 12, 0),
            (1, 12, 1),
            (12, 12, 1),
            (13, 12, 2),
            (24, 12, 2),
            (25, 12, 3),
            (2**53 + 1, 1, 2**53 + 1),
            (2**60 + 1, 2, 2**59 + 1),
        ],
    )
    def test_total_pages_is_ceiling(self, total_count, per_page, expected_pages):
        """Test totalPages rounds up."""
        page = paginate([], total_count, 1, per_page)

        assert page.total_pages == expected_pages

    def test_rows_kept_in_order(self):
        """Test rows are passed through untouched."""
        page = paginate(["c", "a", "b"], 3, 1, 12)

        assert page.items == ["c", "a", "b"]

    def test_page_beyond_end_not_clamped(self):
        """Test a page past the end keeps its number and has no rows."""
        page = paginate([], 3, 5, 2)

        assert page.items == []
        assert page.current_page == 5
        assert page.total_pages == 2
        assert page.total_count == 3

    def test_serialized_with_camel_case_keys(self):
        """Test the envelope uses camelCase on the wire."""
        page = paginate([1, 2], 2, 1, 12)

        assert page.model_dump(by_alias=True) == {
            "items": [1, 2],
            "totalCount": 2,
            "totalPages": 1,
            "currentPage": 1,
            "perPage": 12,
        }

    def test_map_items_keeps_metadata(self):
        """Test converting items keeps order and counts."""
        page = paginate([1, 2, 3], 30, 4, 3)

        mapped = page.map_items(str)

        assert mapped.items == ["1", "2", "3"]
        assert mapped.total_count == 30
        assert mapped.total_pages == 10
        assert mapped.current_page == 4
        assert mapped.per_page == 3


class TestMutationResponse:
    """Tests for the mutation envelope."""

    def test_ok(self):
        """Test a successful mutation carries the record."""
        response = MutationResponse.ok({"id": 1})

        assert response.success is True
        assert response.record == {"id": 1}
        assert response.errors is None

    def test_fail(self):
        """Test a failed mutation carries every error."""
        response = MutationResponse.fail("first", "second")

        assert response.success is False
        assert response.record is None
        assert response.errors == ["first", "second"]
