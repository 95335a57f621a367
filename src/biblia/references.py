"""
Scripture reference parsing.

Handles the common ways of writing a reference:
- Names or abbreviations: "Genesis 1:1", "GEN 1:1", "gen 1:1"
- Any of space, "." or ":" between parts: "Gen.1.1", "Gen 1 1", "Gen1:1"
- Numbered books: "1 John 3:16", "1John 3:16", "1JN 3:16", "John1 3:16"
- Verse ranges: "Genesis 1:1-3"
- Chapter-only: "Psalms 23" (expands to no tokens; list the chapter externally)
"""

import logging
import re
from typing import Optional

from .books import BOOK_ABBREVIATIONS, OLD_TESTAMENT_ABBREVIATIONS
from .models import ParsedReference, VerseToken

logger = logging.getLogger(__name__)


# =============================================================================
# Patterns
# =============================================================================

_DASH_RE = re.compile(r"\s*[-–—]\s*")
_SEPARATOR_RE = re.compile(r"[\s.:]+")

_NAME = r"(?P<name>[A-Za-z]+(?: [A-Za-z]+)*?)"
_NUMBER = r"0*[1-9]\d*"
_CHAPTER_AND_VERSES = (
    rf"(?P<chapter>{_NUMBER})"
    rf"(?: (?P<start>{_NUMBER})(?:-(?P<end>{_NUMBER}))?)?$"
)

# "1 John 3 16-18", "Gen1 1", "Song of Solomon 2"
LEADING_NUMERAL_RE = re.compile(rf"^(?:(?P<numeral>[1-3]) ?)?{_NAME} ?{_CHAPTER_AND_VERSES}")

# "John1 3 16"; only consulted when the leading form does not name a book
TRAILING_NUMERAL_RE = re.compile(rf"^{_NAME}(?P<numeral>[1-3]) {_CHAPTER_AND_VERSES}")

REFERENCE_PATTERNS = (LEADING_NUMERAL_RE, TRAILING_NUMERAL_RE)


# =============================================================================
# Book Resolution
# =============================================================================

def resolve_book(name: str) -> Optional[str]:
    """
    Resolve a book name or abbreviation to its canonical abbreviation.

    Exact match is tried first, then a case-insensitive scan over every key.

    Args:
        name: Book name (e.g., 'Genesis', '1 John') or abbreviation (e.g., 'GEN')

    Returns:
        The canonical abbreviation, or None if the name is unknown
    """
    if name in BOOK_ABBREVIATIONS:
        return BOOK_ABBREVIATIONS[name]

    lowered = name.lower()
    for key, abbreviation in BOOK_ABBREVIATIONS.items():
        if key.lower() == lowered:
            return abbreviation

    return None


def _resolve_candidates(numeral: Optional[str], name: str) -> Optional[str]:
    if not numeral:
        return resolve_book(name)

    # "1 John" is a name, "1JN" an abbreviation
    for candidate in (f"{numeral} {name}", f"{numeral}{name}"):
        book = resolve_book(candidate)
        if book:
            return book
    return None


def is_old_testament(book_abbr: str) -> bool:
    """Determine if a book abbreviation is in the Old Testament."""
    return book_abbr in OLD_TESTAMENT_ABBREVIATIONS


# =============================================================================
# Parsing
# =============================================================================

def normalize_reference(text: str) -> str:
    """Fold whitespace, '.' and ':' into single spaces and tighten ranges around '-'."""
    normalized = _DASH_RE.sub("-", text.strip())
    normalized = _SEPARATOR_RE.sub(" ", normalized)
    return normalized.strip()


def parse_reference(text: str) -> Optional[ParsedReference]:
    """
    Parse a scripture reference string.

    Args:
        text: The reference string to parse (e.g., 'Gen 1:1-3')

    Returns:
        ParsedReference, or None if the text is not a reference to a known book
    """
    if not text or not isinstance(text, str):
        return None

    normalized = normalize_reference(text)

    for pattern in REFERENCE_PATTERNS:
        match = pattern.match(normalized)
        if not match:
            continue

        book = _resolve_candidates(match.group("numeral"), match.group("name"))
        if book is None:
            continue

        start = match.group("start")
        end = match.group("end")
        return ParsedReference(
            book=book,
            chapter=int(match.group("chapter")),
            verse_start=int(start) if start else None,
            verse_end=int(end) if end else None,
            original=text,
        )

    logger.debug("Could not parse reference %r (normalized %r)", text, normalized)
    return None


def expand_to_tokens(reference: ParsedReference) -> list[VerseToken]:
    """
    Expand a parsed reference into verse tokens.

    A chapter-only reference yields no tokens; a reversed range yields no
    tokens either.

    Args:
        reference: The parsed reference

    Returns:
        Verse tokens in ascending verse order
    """
    if reference.verse_start is None:
        return []

    if reference.verse_end is None:
        return [VerseToken.build(reference.book, reference.chapter, reference.verse_start)]

    if reference.verse_end < reference.verse_start:
        logger.debug("Reversed verse range in %r", reference.original or reference.normalized)

    return [
        VerseToken.build(reference.book, reference.chapter, verse)
        for verse in range(reference.verse_start, reference.verse_end + 1)
    ]


def parse_verse_tokens(text: str) -> Optional[list[VerseToken]]:
    """Parse a reference and expand it in one step. Returns None if parsing fails."""
    reference = parse_reference(text)
    if reference is None:
        return None
    return expand_to_tokens(reference)
