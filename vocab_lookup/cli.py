"""Command line interface for the vocabulary lookup service"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from .config.settings import settings
from .core.dictionary_service import DictionaryService
from .core.factory import create_dictionary_service
from .core.text_processor import TextProcessor
from .exceptions import VocabLookupError, WordValidationError
from .logging_config import get_logger, setup_logging
from .models.word_entry import TranslationResult, WordEntry

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    prog_name = Path(sys.argv[0]).name
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description="Look up words on Oxford Learner's Dictionaries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vocab-lookup serendipity               # Look up a single word
  vocab-lookup run walk "look up"        # Several words and phrases
  vocab-lookup --json ephemeral          # Print the JSON entry
  vocab-lookup --translate "hello"       # Translate text (en -> vi)
  vocab-lookup --translate "hola" --from es --to en
        """,
    )

    parser.add_argument("words", nargs="*", help="Words or phrases to look up")

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )
    output_group.add_argument(
        "--cache-stats", action="store_true", help="Show cache statistics at the end"
    )

    translate_group = parser.add_argument_group("translation options")
    translate_group.add_argument("--translate", metavar="TEXT", help="Text to translate")
    translate_group.add_argument(
        "--from",
        dest="from_lang",
        default=settings.translation.from_lang,
        help=f"Source language (default: {settings.translation.from_lang})",
    )
    translate_group.add_argument(
        "--to",
        dest="to_lang",
        default=settings.translation.to_lang,
        help=f"Target language (default: {settings.translation.to_lang})",
    )

    log_group = parser.add_argument_group("logging options")
    log_group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    log_group.add_argument("--debug", action="store_true", help="Enable debug logging")
    log_group.add_argument("--log-file", type=Path, help="Write logs to file")

    return parser


def validate_words(words: list[str]) -> list[str]:
    """Keep valid words in order, logging the rejected ones"""
    valid: list[str] = []
    for token in words:
        cleaned = TextProcessor.clean_word(token)
        if cleaned is None:
            logger.error(str(WordValidationError(token, "Invalid word format")))
            continue
        valid.append(cleaned)
    return valid


def print_word_entry(entry: WordEntry) -> None:
    """Print a human readable entry"""
    print("\n" + "=" * 60)
    header = entry.word
    if entry.part_of_speech:
        header += f" ({entry.part_of_speech})"
    if entry.level:
        header += f" [{entry.level}]"
    print(header)
    print("=" * 60)

    if entry.error:
        print(f"❌ {entry.error}")
        return

    for p in entry.pronunciations:
        parts = [p.ipa or ""]
        if p.audio:
            parts.append(p.audio)
        print(f"🔊 {p.prefix}: {' '.join(x for x in parts if x)}")
    if not entry.pronunciations and entry.phonetic_spelling:
        print(f"🔊 {entry.phonetic_spelling}")

    print("\nDefinitions:")
    for i, definition in enumerate(entry.definitions, 1):
        print(f"  {i}. {definition}")

    if entry.examples:
        print("\nExamples:")
        for example in entry.examples:
            print(f"  - {example}")

    if entry.idioms:
        print("\nIdioms:")
        for idiom in entry.idioms:
            print(f"  * {idiom.name}")
            for definition in idiom.definitions:
                print(f"      {definition}")
            for example in idiom.examples:
                print(f"      - {example}")


def print_translation(result: TranslationResult) -> None:
    print(f"{result.original} -> {result.translation}")


async def run(args: argparse.Namespace, service: DictionaryService) -> int:
    """Run lookups/translation; returns the process exit code"""
    failed = 0
    payload: dict[str, object] = {}

    async with service:
        words = validate_words(args.words)
        if words:
            entries = await asyncio.gather(*(service.lookup_word(w) for w in words))
            failed += sum(1 for e in entries if e.is_error)
            if args.json:
                payload["entries"] = [e.to_dict() for e in entries]
            else:
                for entry in entries:
                    print_word_entry(entry)

        if args.translate:
            result = await service.translate_text(
                args.translate, args.from_lang, args.to_lang
            )
            if result.error:
                failed += 1
            if args.json:
                payload["translation"] = result.to_dict()
            else:
                print_translation(result)

    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))

    if args.cache_stats:
        stats = service.cache.get_stats()
        print("\n📊 CACHE STATISTICS")
        print("=" * 40)
        print(f"Total entries: {stats.total_entries}")
        print(f"Hits: {stats.hits}")
        print(f"Misses: {stats.misses}")
        print(f"Hit rate: {stats.hit_rate:.1f}%")
        print("=" * 40)

    if len(words) < len(args.words):
        failed += len(args.words) - len(words)
    return 1 if failed else 0


def main() -> None:
    """Main entry point for the CLI"""
    parser = create_parser()

    if len(sys.argv) == 1:
        parser.print_help()
        sys.exit(0)

    args = parser.parse_args()

    debug = args.debug or settings.debug
    verbose = args.verbose or settings.verbose
    log_level = "DEBUG" if (debug or verbose) else settings.logging.level
    log_file = args.log_file or settings.logging.file
    setup_logging(log_level, str(log_file) if log_file else None, settings.logging.format)

    if not args.words and not args.translate:
        parser.error("Provide words to look up and/or --translate TEXT")

    try:
        exit_code = asyncio.run(run(args, create_dictionary_service()))
    except VocabLookupError as e:
        logger.error(f"Application error: {e}")
        if debug:
            logger.exception("Full traceback:")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if debug or verbose:
            logger.exception("Full traceback:")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
