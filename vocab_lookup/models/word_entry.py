"""Pydantic models for dictionary lookup results"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from ..core.constants import DictionaryConstants


class Pronunciation(BaseModel):
    """Regional pronunciation: IPA text and/or audio URL"""

    prefix: Literal["BrE", "NAmE"] = Field(description="Regional variant")
    ipa: str | None = Field(None, description="Phonetic spelling")
    audio: str | None = Field(None, description="MP3 audio URL")

    @field_validator("ipa", "audio")
    @classmethod
    def validate_optional_text(cls, v: str | None) -> str | None:
        if not v or not v.strip():
            return None
        return v.strip()

    @model_validator(mode="after")
    def validate_has_content(self) -> "Pronunciation":
        """A pronunciation needs at least one of ipa/audio"""
        if self.ipa is None and self.audio is None:
            raise ValueError("Pronunciation requires ipa or audio")
        return self


class Idiom(BaseModel):
    """Fixed expression documented under the headword"""

    name: str = Field(description="Idiom text")
    definitions: list[str] = Field(default=[], description="Idiom senses")
    examples: list[str] = Field(default=[], description="Idiom usage examples")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Idiom name cannot be empty")
        return v.strip()


class WordEntry(BaseModel):
    """Result of a dictionary lookup.

    Either a populated entry or an error entry. Error entries carry only
    ``word``, ``error`` and empty ``definitions``/``examples``.
    """

    word: str = Field(description="The queried term, as given by the caller")
    part_of_speech: str = Field(default="", description="Part of speech")
    phonetic_spelling: str = Field(default="", description="First phonetic spelling")
    definitions: list[str] = Field(default=[], description="One per sense")
    examples: list[str] = Field(default=[], description="Usage examples")
    idioms: list[Idiom] = Field(default=[], description="Idiom groups")
    pronunciations: list[Pronunciation] = Field(
        default=[], description="BrE then NAmE pronunciations"
    )
    level: str | None = Field(None, description="CEFR level")
    error: str | None = Field(None, description="Failure message")

    @model_validator(mode="after")
    def validate_error_exclusive(self) -> "WordEntry":
        """An error entry never carries usable content"""
        if self.error is not None and (
            self.definitions or self.examples or self.idioms or self.pronunciations
        ):
            raise ValueError("Error entries cannot carry definitions or examples")
        return self

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def not_found(cls, word: str) -> "WordEntry":
        return cls(word=word, error=DictionaryConstants.NOT_FOUND_MESSAGE)

    @classmethod
    def failure(cls, word: str, message: str) -> "WordEntry":
        return cls(word=word, error=message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase shape used by the desktop app"""
        if self.error is not None:
            return {
                "word": self.word,
                "error": self.error,
                "definitions": [],
                "examples": [],
            }
        data: dict[str, Any] = {
            "word": self.word,
            "partOfSpeech": self.part_of_speech,
            "phoneticSpelling": self.phonetic_spelling,
            "definitions": list(self.definitions),
            "examples": list(self.examples),
            "idioms": [idiom.model_dump() for idiom in self.idioms],
            "pronunciations": [p.model_dump() for p in self.pronunciations],
        }
        if self.level:
            data["level"] = self.level
        return data


class TranslationResult(BaseModel):
    """Result of a translation request"""

    original: str = Field(description="Source text")
    translation: str = Field(description="Translated text or fallback message")
    error: str | None = Field(None, description="Failure message")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
