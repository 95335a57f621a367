"""
Passage assembly: reference -> verse tokens -> per-verse results.

Verse text is supplied by the caller through a ``fetch_verse`` callable and
whole chapters are listed through a ``list_verses`` callable, so nothing here
performs I/O of its own apart from the optional local verse file.
"""

import json
import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from .models import StrongsAnnotation, VerseResult, VerseToken
from .references import expand_to_tokens, is_old_testament, parse_reference
from .strongs import Concordance
from .transliteration import Script, Transliterator, strip_accents

logger = logging.getLogger(__name__)

VerseLister = Callable[[str], Iterable[str]]
VerseFetcher = Callable[[VerseToken], Optional[tuple[Optional[str], str]]]


class PassageError(ValueError):
    """Raised when a reference cannot be turned into verses."""


# =============================================================================
# Tokens
# =============================================================================

def resolve_tokens(reference: str, list_verses: Optional[VerseLister] = None) -> list[VerseToken]:
    """
    Turn a reference into verse tokens, listing the chapter when no verse is given.

    Args:
        reference: Reference string, e.g. 'Gen 1:1-3' or 'Psalms 23'
        list_verses: Called with a chapter id ('PSA.23') for chapter-only references

    Returns:
        Verse tokens (empty for a reversed range)

    Raises:
        PassageError: If the reference does not parse or the chapter has no verses
    """
    parsed = parse_reference(reference)
    if parsed is None:
        raise PassageError(f"Failed to parse verse reference: {reference}")

    if not parsed.is_chapter:
        return expand_to_tokens(parsed)

    if list_verses is None:
        raise PassageError(f"Cannot list verses of chapter {parsed.chapter_id}")

    tokens = [VerseToken(verse) for verse in list_verses(parsed.chapter_id)]
    if not tokens:
        raise PassageError(f"No verses found in chapter: {parsed.chapter_id}")
    return tokens


def script_for(token: VerseToken) -> Script:
    """Hebrew for Old Testament verses, Greek otherwise."""
    return Script.HEBREW if is_old_testament(token.book) else Script.GREEK


# =============================================================================
# Verses
# =============================================================================

def annotate_strongs(
    token: VerseToken,
    concordance: Concordance,
    transliterator: Transliterator,
) -> StrongsAnnotation:
    """Collect a verse's Strong's codes with transliterated roots and definitions."""
    script = script_for(token)
    annotation = StrongsAnnotation()

    for code in concordance.codes_for(token):
        entry = concordance.get_entry(code)
        if entry is None:
            logger.debug("No lexicon entry for %s in %s", code, token)
            continue

        annotation.codes.append(entry.code)
        annotation.roots.append(
            transliterator.transliterate(strip_accents(entry.root), script).strip()
        )
        annotation.translations.append(entry.definition)

    return annotation


def build_verse(
    token: VerseToken,
    original: Optional[str],
    translation: str,
    concordance: Optional[Concordance] = None,
    transliterator: Optional[Transliterator] = None,
    include_strongs: bool = True,
) -> VerseResult:
    """
    Build the result for one verse.

    Args:
        token: Verse token
        original: Hebrew (OT) or Greek (NT) text, if available
        translation: Translated text
        concordance: Strong's data; no annotation is made without it
        transliterator: Schemes to use (default scheme for both scripts if omitted)
        include_strongs: False to leave Strong's data out

    Returns:
        VerseResult
    """
    transliterator = transliterator or Transliterator()

    original = original.strip() if original else None
    transcription = None
    if original:
        transcription = transliterator.transliterate(
            strip_accents(original), script_for(token)
        ).strip()

    strongs = None
    if include_strongs and concordance is not None:
        strongs = annotate_strongs(token, concordance, transliterator)

    return VerseResult(
        verse=str(token),
        original=original,
        transcription=transcription,
        translation=translation.strip(),
        strongs=strongs,
    )


def assemble(
    reference: str,
    fetch_verse: VerseFetcher,
    list_verses: Optional[VerseLister] = None,
    concordance: Optional[Concordance] = None,
    transliterator: Optional[Transliterator] = None,
    include_strongs: bool = True,
) -> list[VerseResult]:
    """
    Resolve a reference and build a result for every verse in it.

    Verses for which ``fetch_verse`` returns None are skipped.

    Raises:
        PassageError: If the reference cannot be resolved
    """
    results = []

    for token in resolve_tokens(reference, list_verses):
        fetched = fetch_verse(token)
        if fetched is None:
            logger.warning("No text for %s, skipping", token)
            continue

        original, translation = fetched
        results.append(build_verse(
            token,
            original,
            translation,
            concordance=concordance,
            transliterator=transliterator,
            include_strongs=include_strongs,
        ))

    return results


# =============================================================================
# Local Verse File
# =============================================================================

class VerseFile:
    """
    Verse texts from a JSON file: ``{"JHN.3.16": {"original": ..., "translation": ...}}``.

    Serves as both the verse fetcher and the chapter lister.
    """

    def __init__(self, verses: dict[str, dict]):
        self.verses = verses

    @classmethod
    def load(cls, path: Union[str, Path]) -> "VerseFile":
        with open(path, "r", encoding="utf-8") as f:
            verses = json.load(f)
        if not isinstance(verses, dict):
            raise PassageError(f"Verse file {path} is not a JSON object")
        return cls(verses)

    def fetch(self, token: VerseToken) -> Optional[tuple[Optional[str], str]]:
        verse = self.verses.get(str(token))
        if verse is None:
            return None
        return verse.get("original"), verse.get("translation", "")

    def list_verses(self, chapter_id: str) -> list[str]:
        """Tokens of the chapter present in the file, in verse order."""
        prefix = f"{chapter_id}."
        tokens = []
        for key in self.verses:
            try:
                token = VerseToken(key)
            except ValueError:
                continue
            if key.startswith(prefix):
                tokens.append(token)
        return sorted(tokens, key=lambda token: token.verse)
