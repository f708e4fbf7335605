"""
Tests for helpers, result types, and logging setup
"""

import logging
import pytest
from unittest.mock import MagicMock
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from data.models import PagedResult, Result
from utils.exceptions import InvalidPaginationError
from utils.helpers import is_valid_url, page_range, safe_get
from utils.logger import CustomFormatter, get_logger, setup_file_logging


class TestPageRange:
    """Tests for page_range()."""

    def test_first_page(self):
        assert page_range(1, 10) == (0, 9)

    def test_later_page(self):
        assert page_range(3, 10) == (20, 29)

    def test_single_row_pages(self):
        assert page_range(5, 1) == (4, 4)

    @pytest.mark.parametrize("limit", [1, 3, 10, 25])
    def test_consecutive_pages_do_not_overlap(self, limit):
        rows_seen = set()
        for page in range(1, 20):
            first, last = page_range(page, limit)
            rows = set(range(first, last + 1))
            assert len(rows) == limit
            assert rows_seen.isdisjoint(rows)
            rows_seen |= rows

    def test_limit_above_cap(self):
        with pytest.raises(InvalidPaginationError, match="at most 100"):
            page_range(1, 101, max_limit=100)

    def test_limit_at_cap(self):
        assert page_range(2, 100, max_limit=100) == (100, 199)

    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (-1, 10), (1, -3), (1.5, 10), ("2", 10), (True, 10)])
    def test_invalid_values(self, page, limit):
        with pytest.raises(InvalidPaginationError):
            page_range(page, limit)


class TestIsValidUrl:
    """Tests for is_valid_url()."""

    def test_valid(self):
        assert is_valid_url("https://demo.supabase.co")

    def test_placeholder(self):
        assert not is_valid_url("YOUR_SUPABASE_URL")

    def test_empty(self):
        assert not is_valid_url("")


class TestSafeGet:
    """Tests for safe_get()."""

    def test_dict_path(self):
        assert safe_get({"users": {"username": "reader"}}, "users", "username") == "reader"

    def test_object_attribute(self):
        user = MagicMock(spec=["id"])
        user.id = "u-1"
        assert safe_get(user, "id") == "u-1"

    def test_missing_key_returns_default(self):
        assert safe_get({"a": 1}, "b", default="x") == "x"

    def test_missing_attribute_returns_default(self):
        assert safe_get(object(), "id") is None

    def test_none_returns_default(self):
        assert safe_get(None, "id", default=0) == 0


class TestResult:
    """Tests for the result pair types."""

    def test_success_unpacks(self):
        data, error = Result(data={"id": 1})
        assert data == {"id": 1}
        assert error is None

    def test_failure_is_not_ok(self):
        result = Result(error=ValueError("boom"))
        assert not result.ok
        assert result.data is None

    def test_paged_result_defaults(self):
        result = PagedResult(data=[])
        assert result.total == 0
        assert result.ok


class TestLogger:
    """Tests for the logger factory."""

    def test_loggers_share_blog_namespace(self):
        assert get_logger("services.post_service").name == "blog.services.post_service"
        assert get_logger().name == "blog"

    def test_console_handler_added_once(self):
        get_logger("a")
        get_logger("b")
        root = get_logger()
        console = [h for h in root.handlers
                   if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)]
        assert len(console) == 1

    def test_formatter_colours_by_level(self):
        record = logging.LogRecord("blog", logging.ERROR, __file__, 1, "failed", None, None)
        output = CustomFormatter().format(record)
        assert output.startswith(CustomFormatter.red)
        assert "failed" in output

    def test_setup_file_logging(self, tmp_path):
        log_file = tmp_path / "blog.log"
        root = setup_file_logging(str(log_file), logging.DEBUG)
        try:
            get_logger("tests").info("written to file")
            for handler in root.handlers:
                handler.flush()
            assert "written to file" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in list(root.handlers):
                if isinstance(handler, logging.FileHandler):
                    root.removeHandler(handler)
                    handler.close()
            root.setLevel(logging.INFO)
