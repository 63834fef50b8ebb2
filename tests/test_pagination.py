"""Tests for the pagination engine."""

import pytest

from core.exceptions import ValidationException
from core.pagination import page_count, paginate


class TestPageCount:
    """Tests for page_count."""

    @pytest.mark.parametrize("total,size,expected", [
        (0, 5, 0),
        (1, 5, 1),
        (5, 5, 1),
        (6, 5, 2),
        (12, 5, 3),
        (12, 1, 12),
    ])
    def test_ceiling(self, total, size, expected):
        """Test page count is the ceiling of rows over size."""
        assert page_count(total, size) == expected

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_page_size(self, size):
        """Test non-positive page sizes are rejected."""
        with pytest.raises(ValidationException) as exc:
            page_count(3, size)
        assert exc.value.field == "page_size"


class TestPaginate:
    """Tests for paginate."""

    def test_pages_of_twelve(self, sample_rows):
        """Test twelve rows split into 5, 5 and 2."""
        sizes = [len(paginate(sample_rows, p, 5).rows) for p in (1, 2, 3)]
        assert sizes == [5, 5, 2]

    def test_last_page_contents(self, sample_rows):
        """Test the short final page."""
        page = paginate(sample_rows, 3, 5)
        assert [r.name for r in page.rows] == ["kyc-service", "ledger"]
        assert page.total_pages == 3
        assert page.total_rows == 12

    def test_pages_concatenate_to_input(self, sample_rows):
        """Test every row appears exactly once, in order, across pages."""
        total = paginate(sample_rows, 1, 5).total_pages
        joined = [row for p in range(1, total + 1) for row in paginate(sample_rows, p, 5).rows]
        assert joined == sample_rows

    @pytest.mark.parametrize("page", [0, -2, 4, 99])
    def test_out_of_range_is_empty(self, sample_rows, page):
        """Test pages outside the valid range yield no rows."""
        result = paginate(sample_rows, page, 5)
        assert result.rows == ()
        assert result.total_pages == 3

    def test_empty_rows(self):
        """Test paginating nothing."""
        result = paginate([], 1, 5)
        assert result.rows == ()
        assert result.total_pages == 0
        assert result.total_rows == 0

    def test_invalid_page_size(self, sample_rows):
        """Test zero page size is rejected."""
        with pytest.raises(ValidationException):
            paginate(sample_rows, 1, 0)
