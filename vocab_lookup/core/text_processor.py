"""Text processing utilities for dictionary lookups"""

import re
from urllib.parse import quote

from .constants import TextConstants


class TextProcessor:
    """Handles text cleaning, validation and URL slug building"""

    WHITESPACE_RE = re.compile(TextConstants.WHITESPACE_PATTERN)
    VALID_WORD_RE = re.compile(TextConstants.VALID_WORD_PATTERN)

    @classmethod
    def is_valid_word(cls, word: str) -> bool:
        """Check if the input looks like a word or phrase"""
        if not word or not word.strip():
            return False

        word = word.strip()

        if not (
            TextConstants.MIN_WORD_LENGTH <= len(word) <= TextConstants.MAX_WORD_LENGTH
        ):
            return False

        # Reject paths
        if "/" in word or "\\" in word:
            return False

        return bool(cls.VALID_WORD_RE.match(word))

    @classmethod
    def clean_word(cls, word: str) -> str | None:
        """Clean and validate word input, preserving case"""
        if not word:
            return None

        word = cls.WHITESPACE_RE.sub(" ", word.strip())

        return word if cls.is_valid_word(word) else None

    @classmethod
    def clean_text(cls, text: str) -> str:
        """Trim and collapse whitespace"""
        if not text:
            return ""
        return cls.WHITESPACE_RE.sub(" ", text.strip())

    @classmethod
    def url_slug(cls, word: str) -> str:
        """Lowercase and hyphenate a word for definition page URLs.

        >>> TextProcessor.url_slug("Look  Up")
        'look-up'
        """
        slug = cls.WHITESPACE_RE.sub("-", word.strip().lower())
        return quote(slug, safe="")

    @classmethod
    def url_query(cls, text: str, lowercase: bool = False) -> str:
        """Percent-encode text for a query string parameter"""
        if lowercase:
            text = text.lower()
        return quote(text, safe="")
