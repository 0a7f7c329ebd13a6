"""Shared constants across the application"""


class DictionaryConstants:
    """Constants for dictionary page navigation and parsing"""

    # URL paths relative to the dictionary base URL
    DEFINITION_PATH = "/definition/english/{slug}"
    SEARCH_PATH = "/search/english/?q={query}"

    # Consent cookie that suppresses the cookie banner
    CONSENT_COOKIE_NAME = "cookieControl"
    CONSENT_COOKIE_VALUE = "false"

    # Resource types never fetched during lookups
    BLOCKED_RESOURCE_TYPES = frozenset(["image", "media", "font", "stylesheet"])

    # Page markers
    ENTRY_SELECTOR = ".entry"
    NO_RESULTS_SELECTOR = ".water-no-results"
    SEARCH_RESULT_LINK_SELECTOR = ".search-results a"

    # Headword fields
    PART_OF_SPEECH_SELECTOR = ".pos"
    PHONETIC_SELECTOR = ".phon"
    CEFR_SELECTOR = ".symbols-cefr"

    # Sense containers, tried in this order
    SENSE_SELECTORS = (".sense", ".senseGroup", ".sense_single")
    DEFINITION_SELECTOR = ".def"
    EXAMPLE_SELECTORS = (".examples .x", ".x-g .x")

    # Idioms
    IDIOM_GROUP_SELECTOR = ".idm-g"
    IDIOM_NAME_SELECTORS = (".idm", ".idm-l")

    EXTRA_EXAMPLES_SELECTOR = '.res-g [title="Extra examples"] .x-gs .x'

    # Pronunciation regions: (prefix, region selector)
    PRONUNCIATION_REGIONS = (("BrE", "[geo=br]"), ("NAmE", "[geo=n_am]"))
    AUDIO_ATTRIBUTE = "data-src-mp3"

    # Result messages
    NOT_FOUND_MESSAGE = "Word not found in dictionary"
    LOOKUP_FAILED_PREFIX = "Failed to look up word"


class TranslationConstants:
    """Constants for the translation page"""

    TRANSLATE_PATH = "/?sl={from_lang}&tl={to_lang}&text={text}&op=translate"
    OUTPUT_SELECTOR = ".ryNqvb"

    NOT_FOUND_MESSAGE = "Translation not found"
    ERROR_MESSAGE = "Error: Could not translate text"


class TextConstants:
    """Constants for text processing"""

    # Word validation constraints
    MIN_WORD_LENGTH = 1
    MAX_WORD_LENGTH = 50

    # Text cleaning patterns
    WHITESPACE_PATTERN = r"\s+"

    # At least one letter; letters, digits, spaces, hyphens, apostrophes, dots
    VALID_WORD_PATTERN = r"^(?=.*[^\W\d_])[\w\s\-'.]+$"
