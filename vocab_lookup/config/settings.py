"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_CHROME_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/118.0.0.0 Safari/537.36"
)


def _validate_http_url(v: str, name: str) -> str:
    if not v.startswith(("http://", "https://")):
        raise ValueError(f"{name} must start with http:// or https://")
    return v.rstrip("/")


class BrowserSettings(BaseSettings):
    """Headless browser configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    browser_type: str = Field(
        default="chromium", validation_alias=AliasChoices("BROWSER_TYPE")
    )
    headless: bool = Field(
        default=True, validation_alias=AliasChoices("BROWSER_HEADLESS")
    )
    # Host environments (containers, CI) commonly lack sandbox support
    launch_args: list[str] = Field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"],
        validation_alias=AliasChoices("BROWSER_LAUNCH_ARGS"),
    )
    default_timeout_ms: int = Field(
        default=10000, validation_alias=AliasChoices("BROWSER_DEFAULT_TIMEOUT_MS")
    )

    @field_validator("browser_type")
    @classmethod
    def validate_browser_type(cls, v: str) -> str:
        """Validate browser engine name"""
        valid = ["chromium", "firefox", "webkit"]
        if v.lower() not in valid:
            raise ValueError(f"Browser type must be one of: {valid}")
        return v.lower()

    @field_validator("default_timeout_ms")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Value must be positive")
        return v


class DictionarySettings(BaseSettings):
    """Dictionary site scraping configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    base_url: str = Field(
        default="https://www.oxfordlearnersdictionaries.com",
        validation_alias=AliasChoices("DICT_BASE_URL"),
    )
    user_agent: str = Field(
        default=_CHROME_USER_AGENT, validation_alias=AliasChoices("DICT_USER_AGENT")
    )
    navigation_timeout_ms: int = Field(
        default=15000, validation_alias=AliasChoices("DICT_NAVIGATION_TIMEOUT_MS")
    )
    search_settle_ms: int = Field(
        default=2000, validation_alias=AliasChoices("DICT_SEARCH_SETTLE_MS")
    )
    result_navigation_timeout_ms: int = Field(
        default=10000,
        validation_alias=AliasChoices("DICT_RESULT_NAVIGATION_TIMEOUT_MS"),
    )
    block_resources: bool = Field(
        default=True, validation_alias=AliasChoices("DICT_BLOCK_RESOURCES")
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL"""
        return _validate_http_url(v, "Dictionary base URL")

    @field_validator("navigation_timeout_ms", "result_navigation_timeout_ms")
    @classmethod
    def validate_positive_integers(cls, v: int) -> int:
        """Validate positive integer values"""
        if v <= 0:
            raise ValueError("Value must be positive")
        return v

    @field_validator("search_settle_ms")
    @classmethod
    def validate_settle(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Settle delay cannot be negative")
        return v


class TranslationSettings(BaseSettings):
    """Translation page scraping configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    base_url: str = Field(
        default="https://translate.google.com",
        validation_alias=AliasChoices("TRANSLATE_BASE_URL"),
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/89.0.4389.82 Safari/537.36"
        ),
        validation_alias=AliasChoices("TRANSLATE_USER_AGENT"),
    )
    navigation_timeout_ms: int = Field(
        default=30000, validation_alias=AliasChoices("TRANSLATE_NAVIGATION_TIMEOUT_MS")
    )
    marker_timeout_ms: int = Field(
        default=5000, validation_alias=AliasChoices("TRANSLATE_MARKER_TIMEOUT_MS")
    )
    settle_ms: int = Field(
        default=1000, validation_alias=AliasChoices("TRANSLATE_SETTLE_MS")
    )
    from_lang: str = Field(default="en", validation_alias=AliasChoices("TRANSLATE_FROM"))
    to_lang: str = Field(default="vi", validation_alias=AliasChoices("TRANSLATE_TO"))

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return _validate_http_url(v, "Translation base URL")

    @field_validator("navigation_timeout_ms", "marker_timeout_ms")
    @classmethod
    def validate_positive_integers(cls, v: int) -> int:
        """Validate positive integer values"""
        if v <= 0:
            raise ValueError("Value must be positive")
        return v

    @field_validator("settle_ms")
    @classmethod
    def validate_settle(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Settle delay cannot be negative")
        return v


class CacheSettings(BaseSettings):
    """Lookup cache configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    # None keeps the cache unbounded for the whole process lifetime
    max_entries: int | None = Field(
        default=None, validation_alias=AliasChoices("CACHE_MAX_ENTRIES")
    )
    enable_cache: bool = Field(
        default=True, validation_alias=AliasChoices("ENABLE_CACHE")
    )

    @field_validator("max_entries")
    @classmethod
    def validate_max_entries(cls, v: int | None) -> int | None:
        """Validate cache bound"""
        if v is not None and v <= 0:
            raise ValueError("Max entries must be positive")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        validation_alias=AliasChoices("LOG_FORMAT"),
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    browser: BrowserSettings = Field(default_factory=BrowserSettings)
    dictionary: DictionarySettings = Field(default_factory=DictionarySettings)
    translation: TranslationSettings = Field(default_factory=TranslationSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    debug: bool = Field(default=False, validation_alias=AliasChoices("DEBUG"))
    verbose: bool = Field(default=False, validation_alias=AliasChoices("VERBOSE"))


# Global settings instance
settings = AppSettings()
