"""Tests for the async error handling decorator"""

import asyncio
import logging

from vocab_lookup.exceptions import FetchError
from vocab_lookup.utils.error_handler import handle_errors_async


class TestHandleErrorsAsync:
    """Test logging and swallowing of coroutine errors"""

    def test_returns_result_when_no_error(self):
        """Test wrapped coroutine result is passed through"""

        @handle_errors_async()
        async def close_page():
            return "closed"

        assert asyncio.run(close_page()) == "closed"

    def test_unexpected_error_is_logged_and_swallowed(self, caplog):
        """Test unexpected errors are logged with the operation name"""

        @handle_errors_async(operation_name="browser_close")
        async def close_browser():
            raise RuntimeError("connection lost")

        with caplog.at_level(logging.ERROR):
            assert asyncio.run(close_browser()) is None

        assert "Unexpected error in browser_close: connection lost" in caplog.text

    def test_application_error_uses_given_level(self, caplog):
        """Test application errors are logged at the configured level"""

        @handle_errors_async(log_level=logging.WARNING)
        async def page_close():
            raise FetchError("https://example.com", "close", RuntimeError("gone"))

        with caplog.at_level(logging.WARNING):
            assert asyncio.run(page_close()) is None

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert "Application error in page_close" in record.getMessage()
