"""
biblia - Resolves scripture references to verse tokens and transliterates Greek and Hebrew text.
"""

from .models import ParsedReference, VerseToken, StrongsEntry, StrongsAnnotation, VerseResult
from .books import Book, BIBLE_BOOKS
from .references import parse_reference, expand_to_tokens, is_old_testament, resolve_book
from .transliteration import (
    Scheme,
    Script,
    Transliterator,
    greek_to_latin,
    hebrew_to_latin,
    transliterate,
    list_schemes,
)
from .strongs import Concordance

__all__ = [
    "ParsedReference",
    "VerseToken",
    "StrongsEntry",
    "StrongsAnnotation",
    "VerseResult",
    "Book",
    "BIBLE_BOOKS",
    "parse_reference",
    "expand_to_tokens",
    "is_old_testament",
    "resolve_book",
    "Scheme",
    "Script",
    "Transliterator",
    "greek_to_latin",
    "hebrew_to_latin",
    "transliterate",
    "list_schemes",
    "Concordance",
]

__version__ = "0.1.0"
