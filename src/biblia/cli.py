#!/usr/bin/env python3
"""
CLI for biblia - parse scripture references and transliterate Greek/Hebrew text.

Usage:
    biblia parse "Gen 1:1-3"                       # Print verse tokens
    biblia transliterate "ἐν ἀρχῇ"                  # Transliterate (script auto-detected)
    biblia transliterate "בְּרֵאשִׁית" --scheme punic
    biblia schemes                                 # List transliteration schemes
    biblia get-strongs G0024                       # Look up a Strong's entry
    biblia get-verses "John 3:16" --source verses.json --pretty
    biblia configure                               # Interactive configuration
"""

import argparse
import json
import logging
import shutil
import sys
from dataclasses import asdict
from typing import Optional

from .config import (
    ConfigurationError,
    data_dir_from_configuration,
    interactive_configure,
    read_configuration,
    schemes_from_configuration,
)
from .models import VerseResult
from .passage import PassageError, VerseFile, assemble
from .references import expand_to_tokens, parse_reference
from .strongs import Concordance
from .transliteration import (
    Scheme,
    Script,
    Transliterator,
    detect_script,
    list_schemes,
    transliterate,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Pretty Printing
# =============================================================================

def _rule(title: str, width: int, fill: str = "─") -> str:
    titled = f" {title} "
    padding = max(0, width - len(titled))
    left = padding // 2
    return fill * left + titled + fill * (padding - left)


def format_pretty(results: list[VerseResult], width: Optional[int] = None) -> str:
    """Render verse results as readable sections: translation, original, transcription, Strong's."""
    if not results:
        return ""

    width = width or shutil.get_terminal_size((80, 20)).columns
    book, chapter = results[0].verse.split(".")[:2]
    lines = ["", _rule(f"{book} {chapter}", width, "#"), "", _rule("Translation", width), ""]

    for result in results:
        lines.append(f"[{result.verse_number}] {result.translation}")

    if any(r.original for r in results):
        lines += ["", _rule("Original", width), ""]
        lines += [f"[{r.verse_number}] {r.original}" for r in results if r.original]

    if any(r.transcription for r in results):
        lines += ["", _rule("Transcription", width), ""]
        lines += [f"[{r.verse_number}] {r.transcription}" for r in results if r.transcription]

    if any(r.strongs for r in results):
        lines += ["", _rule("Strong's", width), ""]
        for result in results:
            if not result.strongs:
                continue
            lines.append(f"[{result.verse_number}] Codes: {', '.join(result.strongs.codes)}")
            if result.strongs.roots:
                lines.append(f"     Roots: {', '.join(result.strongs.roots)}")
            if result.strongs.translations:
                lines.append(f"     Definitions: {'; '.join(result.strongs.translations)}")
            lines.append("")

    return "\n".join(lines)


# =============================================================================
# Commands
# =============================================================================

def cmd_parse(args, configuration: dict) -> int:
    reference = parse_reference(args.reference)
    if reference is None:
        print(f"❌ Could not parse reference: {args.reference}", file=sys.stderr)
        return 1

    if reference.is_chapter:
        print(reference.chapter_id)
        return 0

    for token in expand_to_tokens(reference):
        print(token)
    return 0


def cmd_transliterate(args, configuration: dict) -> int:
    script = Script(args.script) if args.script else detect_script(args.text)
    if script is None:
        # Nothing to transliterate
        print(args.text)
        return 0

    scheme = Scheme.from_name(args.scheme) if args.scheme else schemes_from_configuration(configuration)[script]
    print(transliterate(args.text, script, scheme))
    return 0


def cmd_schemes(args, configuration: dict) -> int:
    for scheme in list_schemes():
        print(f"{scheme.name.lower():<10} ({scheme.value})")
    return 0


def cmd_get_strongs(args, configuration: dict) -> int:
    data_dir = args.data_dir or data_dir_from_configuration(configuration)
    entry = Concordance(data_dir).get_entry(args.code)

    if entry is None:
        print(f"❌ Strong's entry not found: {args.code}", file=sys.stderr)
        return 1

    print(json.dumps(asdict(entry), indent=2, ensure_ascii=False))
    return 0


def cmd_get_verses(args, configuration: dict) -> int:
    schemes = schemes_from_configuration(configuration)
    if args.scheme:
        scheme = Scheme.from_name(args.scheme)
        schemes = {Script.GREEK: scheme, Script.HEBREW: scheme}

    data_dir = args.data_dir or data_dir_from_configuration(configuration)
    source = VerseFile.load(args.source)

    results = assemble(
        args.reference,
        fetch_verse=source.fetch,
        list_verses=source.list_verses,
        concordance=None if args.filter else Concordance(data_dir),
        transliterator=Transliterator(schemes[Script.GREEK], schemes[Script.HEBREW]),
        include_strongs=not args.filter,
    )

    if not results:
        print(f"❌ No verses found for: {args.reference}", file=sys.stderr)
        return 1

    if args.pretty:
        print(format_pretty(results))
    else:
        print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
    return 0


def cmd_configure(args, configuration: dict) -> int:
    try:
        interactive_configure()
    except (EOFError, KeyboardInterrupt):
        print("\n❌ Configuration cancelled, nothing saved", file=sys.stderr)
        return 1
    return 0


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biblia",
        description="Parse scripture references and transliterate Greek and Hebrew text."
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Print the verse tokens of a reference")
    parse_cmd.add_argument("reference", help="e.g. 'Gen 1:1-3'")
    parse_cmd.set_defaults(func=cmd_parse)

    scheme_names = [scheme.name.lower() for scheme in Scheme]

    translit_cmd = subparsers.add_parser("transliterate", help="Transliterate Greek or Hebrew text")
    translit_cmd.add_argument("text")
    translit_cmd.add_argument(
        "--script",
        choices=[script.value for script in Script],
        help="Source script (default: detected from the text)"
    )
    translit_cmd.add_argument("--scheme", choices=scheme_names, help="Transliteration scheme")
    translit_cmd.set_defaults(func=cmd_transliterate)

    schemes_cmd = subparsers.add_parser("schemes", help="List transliteration schemes")
    schemes_cmd.set_defaults(func=cmd_schemes)

    strongs_cmd = subparsers.add_parser("get-strongs", help="Get a Strong's entry (e.g. G123, H1234)")
    strongs_cmd.add_argument("code")
    strongs_cmd.add_argument("--data-dir", help="Directory holding the Strong's data files")
    strongs_cmd.set_defaults(func=cmd_get_strongs)

    verses_cmd = subparsers.add_parser("get-verses", help="Show verses from a local verse file")
    verses_cmd.add_argument("reference", help="e.g. 'Genesis 1:1', 'Gen 1:1-3', 'Psalms 23'")
    verses_cmd.add_argument("--source", "-s", required=True, help="JSON file of verse texts")
    verses_cmd.add_argument("--data-dir", help="Directory holding the Strong's data files")
    verses_cmd.add_argument("--scheme", choices=scheme_names, help="Scheme for both scripts")
    verses_cmd.add_argument("--filter", action="store_true", help="Exclude Strong's concordance information")
    verses_cmd.add_argument("--pretty", action="store_true", help="Format output as a readable paragraph")
    verses_cmd.set_defaults(func=cmd_get_verses)

    configure_cmd = subparsers.add_parser("configure", help="Configure biblia settings interactively")
    configure_cmd.set_defaults(func=cmd_configure)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        configuration = read_configuration()
        return args.func(args, configuration)
    except (ConfigurationError, PassageError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        print(f"❌ Could not read file: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
