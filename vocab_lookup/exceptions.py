"""Custom exceptions for the vocabulary lookup service"""

from typing import Any


class VocabLookupError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class WordValidationError(VocabLookupError):
    """Raised when word validation fails"""

    def __init__(self, word: str, reason: str):
        super().__init__(
            f"Invalid word '{word}': {reason}", {"word": word, "reason": reason}
        )
        self.word = word
        self.reason = reason


class WordNotFoundError(VocabLookupError):
    """Raised when the dictionary page carries no usable entry"""

    def __init__(self, word: str, url: str | None = None):
        super().__init__(
            f"Word '{word}' not found in dictionary",
            {"word": word, "url": url},
        )
        self.word = word
        self.url = url


class FetchError(VocabLookupError):
    """Raised when a page cannot be fetched from the remote site"""

    def __init__(
        self, url: str, operation: str, original_error: Exception | None = None
    ):
        super().__init__(
            f"Failed to {operation} {url}",
            {
                "url": url,
                "operation": operation,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.url = url
        self.operation = operation
        self.original_error = original_error


class BrowserInitializationError(VocabLookupError):
    """Raised when the headless browser session cannot be started"""

    def __init__(self, browser_type: str, original_error: Exception | None = None):
        super().__init__(
            f"Failed to start {browser_type} browser session",
            {
                "browser_type": browser_type,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.browser_type = browser_type
        self.original_error = original_error


class ParseError(VocabLookupError):
    """Raised when parsing operations fail"""

    def __init__(self, parser_type: str, content_type: str, reason: str):
        super().__init__(
            f"Failed to parse {content_type} with {parser_type}: {reason}",
            {
                "parser_type": parser_type,
                "content_type": content_type,
                "reason": reason,
            },
        )
        self.parser_type = parser_type
        self.content_type = content_type
        self.reason = reason
