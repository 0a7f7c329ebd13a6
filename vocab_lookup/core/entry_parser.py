"""Parse Oxford Learner's Dictionaries pages into WordEntry objects.

Extraction is a pure function of the fetched HTML. The site uses varying
markup for single-sense, multi-sense and grouped-sense entries, so senses
are collected by an ordered list of strategies whose results are
concatenated. Adding a strategy is enough to follow markup drift.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..exceptions import ParseError
from ..logging_config import get_logger
from ..models.word_entry import Idiom, Pronunciation, WordEntry
from .constants import DictionaryConstants, TranslationConstants
from .interfaces import EntryParserInterface
from .text_processor import TextProcessor

logger = get_logger(__name__)


@dataclass
class SenseHarvest:
    """Definitions and examples collected from a run of sense containers"""

    definitions: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)

    def extend(self, other: "SenseHarvest") -> None:
        self.definitions.extend(other.definitions)
        self.examples.extend(other.examples)


class SenseStrategy:
    """Collects senses from containers matching one CSS selector.

    A container contributes at most one definition and any number of
    examples. Only the definition and examples the container owns count:
    anything nested inside a deeper sense container belongs to that one.
    """

    def __init__(
        self,
        selector: str,
        container_selectors: Sequence[str] = DictionaryConstants.SENSE_SELECTORS,
        definition_selector: str = DictionaryConstants.DEFINITION_SELECTOR,
        example_selectors: Sequence[str] = DictionaryConstants.EXAMPLE_SELECTORS,
        excluded_ancestor: str | None = DictionaryConstants.IDIOM_GROUP_SELECTOR,
    ):
        self.selector = selector
        self.container_selectors = tuple(container_selectors)
        self.definition_selector = definition_selector
        self.example_selectors = tuple(example_selectors)
        self.excluded_ancestor = excluded_ancestor

    def __repr__(self) -> str:
        return f"SenseStrategy({self.selector!r})"

    def containers(self, scope: Tag) -> list[Tag]:
        found = scope.select(self.selector)
        if self.excluded_ancestor is None:
            return found
        return [
            el
            for el in found
            if not self._has_ancestor(el, self.excluded_ancestor, stop=scope)
        ]

    def harvest(self, scope: Tag) -> SenseHarvest:
        result = SenseHarvest()
        for container in self.containers(scope):
            definition = self._definition(container)
            if not definition:
                continue
            result.definitions.append(definition)
            result.examples.extend(self._examples(container))
        return result

    def _definition(self, container: Tag) -> str:
        for el in container.select(self.definition_selector):
            if self._owned_by(el, container):
                return TextProcessor.clean_text(el.get_text())
        return ""

    def _examples(self, container: Tag) -> list[str]:
        examples: list[str] = []
        for el in container.select(", ".join(self.example_selectors)):
            if not self._owned_by(el, container):
                continue
            text = TextProcessor.clean_text(el.get_text())
            if text:
                examples.append(text)
        return examples

    def _owned_by(self, el: Tag, container: Tag) -> bool:
        """True when no other sense container sits between el and container"""
        for parent in el.parents:
            if parent is container:
                return True
            if any(_matches(parent, s) for s in self.container_selectors):
                return False
        return False

    @staticmethod
    def _has_ancestor(el: Tag, selector: str, stop: Tag) -> bool:
        for parent in el.parents:
            if parent is stop:
                return False
            if _matches(parent, selector):
                return True
        return False


def _matches(el: Tag, selector: str) -> bool:
    """Match any CSS selector against a single element"""
    if not isinstance(el, Tag) or isinstance(el, BeautifulSoup):
        return False
    return el.css.match(selector)


def default_sense_strategies(
    excluded_ancestor: str | None = DictionaryConstants.IDIOM_GROUP_SELECTOR,
) -> list[SenseStrategy]:
    return [
        SenseStrategy(selector, excluded_ancestor=excluded_ancestor)
        for selector in DictionaryConstants.SENSE_SELECTORS
    ]


class EntryParser(EntryParserInterface):
    """Extracts structured word information from dictionary HTML"""

    def __init__(
        self,
        sense_strategies: Iterable[SenseStrategy] | None = None,
        idiom_strategies: Iterable[SenseStrategy] | None = None,
    ):
        self.sense_strategies = list(
            sense_strategies
            if sense_strategies is not None
            else default_sense_strategies()
        )
        # Inside an idiom group the idiom itself is the scope, nothing to exclude
        self.idiom_strategies = list(
            idiom_strategies
            if idiom_strategies is not None
            else default_sense_strategies(excluded_ancestor=None)
        )

    def load(self, content: str) -> BeautifulSoup:
        if not content or not content.strip():
            raise ParseError("html.parser", "page content", "document is empty")
        return BeautifulSoup(content, "html.parser")

    def has_entry(self, soup: BeautifulSoup) -> bool:
        return (
            soup.select_one(DictionaryConstants.ENTRY_SELECTOR) is not None
            and soup.select_one(DictionaryConstants.NO_RESULTS_SELECTOR) is None
        )

    def parse_entry(self, soup: BeautifulSoup, word: str) -> WordEntry:
        """Extract all fields for ``word`` from a page known to hold an entry"""
        senses = self.collect_senses(soup, self.sense_strategies)
        examples = senses.examples + self._extract_extra_examples(soup)

        return WordEntry(
            word=word,
            part_of_speech=self._first_text(
                soup, DictionaryConstants.PART_OF_SPEECH_SELECTOR
            ),
            phonetic_spelling=self._first_text(
                soup, DictionaryConstants.PHONETIC_SELECTOR
            ),
            definitions=senses.definitions,
            examples=examples,
            idioms=self._extract_idioms(soup),
            pronunciations=self._extract_pronunciations(soup),
            level=self._first_text(soup, DictionaryConstants.CEFR_SELECTOR) or None,
        )

    @staticmethod
    def collect_senses(scope: Tag, strategies: Iterable[SenseStrategy]) -> SenseHarvest:
        """Run strategies in order and concatenate their results"""
        harvest = SenseHarvest()
        for strategy in strategies:
            harvest.extend(strategy.harvest(scope))
        return harvest

    def _extract_idioms(self, soup: BeautifulSoup) -> list[Idiom]:
        idioms: list[Idiom] = []
        for group in soup.select(DictionaryConstants.IDIOM_GROUP_SELECTOR):
            name = ""
            for selector in DictionaryConstants.IDIOM_NAME_SELECTORS:
                name = self._first_text(group, selector)
                if name:
                    break
            if not name:
                logger.debug("Skipping idiom group without a name")
                continue
            senses = self.collect_senses(group, self.idiom_strategies)
            idioms.append(
                Idiom(
                    name=name,
                    definitions=senses.definitions,
                    examples=senses.examples
                    + self._extract_extra_examples(group, exclude_idioms=False),
                )
            )
        return idioms

    def _extract_extra_examples(
        self, scope: Tag, exclude_idioms: bool = True
    ) -> list[str]:
        # Duplicates of per-sense examples are kept as-is
        out: list[str] = []
        for el in scope.select(DictionaryConstants.EXTRA_EXAMPLES_SELECTOR):
            if exclude_idioms and SenseStrategy._has_ancestor(
                el, DictionaryConstants.IDIOM_GROUP_SELECTOR, stop=scope
            ):
                continue
            text = TextProcessor.clean_text(el.get_text())
            if text:
                out.append(text)
        return out

    def _extract_pronunciations(self, soup: BeautifulSoup) -> list[Pronunciation]:
        out: list[Pronunciation] = []
        for prefix, region in DictionaryConstants.PRONUNCIATION_REGIONS:
            ipa = self._first_text(
                soup, f"{region} {DictionaryConstants.PHONETIC_SELECTOR}"
            )
            audio_el = soup.select_one(
                f"{region} [{DictionaryConstants.AUDIO_ATTRIBUTE}]"
            )
            audio = self._attr(audio_el, DictionaryConstants.AUDIO_ATTRIBUTE)
            if ipa or audio:
                out.append(Pronunciation(prefix=prefix, ipa=ipa or None, audio=audio))
        return out

    def extract_translation(self, soup: BeautifulSoup) -> str:
        # Long translations are split across several output spans
        parts = [el.get_text() for el in soup.select(TranslationConstants.OUTPUT_SELECTOR)]
        return "".join(parts).strip()

    @staticmethod
    def _first_text(scope: Tag, selector: str) -> str:
        el = scope.select_one(selector)
        return TextProcessor.clean_text(el.get_text()) if el else ""

    @staticmethod
    def _attr(el: Tag | None, name: str) -> str | None:
        if el is None:
            return None
        value = el.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        if not value or not value.strip():
            return None
        return value.strip()
