"""Data models for verse references, concordance entries and verse results."""

import json
import re
from dataclasses import dataclass, field, asdict
from typing import Optional


VERSE_TOKEN_RE = re.compile(r"^([0-9A-Z]{3})\.([1-9]\d*)\.([1-9]\d*)$")


class VerseToken(str):
    """A canonical verse identifier of the form ``Book.Chapter.Verse`` (e.g. ``GEN.1.1``)."""

    def __new__(cls, value: str):
        match = VERSE_TOKEN_RE.match(value)
        if not match:
            raise ValueError(f"Not a verse token: {value!r}")
        token = super().__new__(cls, value)
        token._parts = match.groups()
        return token

    @classmethod
    def build(cls, book: str, chapter: int, verse: int) -> "VerseToken":
        return cls(f"{book}.{int(chapter)}.{int(verse)}")

    @property
    def book(self) -> str:
        return self._parts[0]

    @property
    def chapter(self) -> int:
        return int(self._parts[1])

    @property
    def verse(self) -> int:
        return int(self._parts[2])

    @property
    def chapter_id(self) -> str:
        return f"{self._parts[0]}.{self._parts[1]}"


@dataclass(frozen=True)
class ParsedReference:
    """A parsed scripture reference, before expansion into verse tokens."""

    book: str  # Canonical abbreviation, e.g. "GEN"
    chapter: int
    verse_start: Optional[int] = None  # None means the whole chapter
    verse_end: Optional[int] = None  # None means a single verse
    original: str = ""  # e.g., "Gen 1:1-3"

    @property
    def is_chapter(self) -> bool:
        """True when no verse was given and the whole chapter is meant."""
        return self.verse_start is None

    @property
    def chapter_id(self) -> str:
        """Identifier handed to a verse-listing collaborator, e.g. ``GEN.1``."""
        return f"{self.book}.{self.chapter}"

    @property
    def normalized(self) -> str:
        if self.is_chapter:
            return self.chapter_id
        if self.verse_end is not None:
            return f"{self.chapter_id}.{self.verse_start}-{self.verse_end}"
        return f"{self.chapter_id}.{self.verse_start}"


@dataclass(frozen=True)
class StrongsEntry:
    """A Strong's concordance lexicon entry."""

    code: str  # e.g., "G26", "H430"
    root: str  # Lemma in the original script
    definition: str  # KJV definition


@dataclass
class StrongsAnnotation:
    """Strong's codes of a verse with their transliterated roots and definitions."""

    codes: list[str] = field(default_factory=list)
    roots: list[str] = field(default_factory=list)
    translations: list[str] = field(default_factory=list)


@dataclass
class VerseResult:
    """Complete data for one verse: original text, transcription, translation, Strong's."""

    verse: str  # Verse token, e.g. "JHN.3.16"
    original: Optional[str]
    transcription: Optional[str]
    translation: str
    strongs: Optional[StrongsAnnotation] = None

    @property
    def verse_number(self) -> str:
        return self.verse.split(".")[-1]

    def to_dict(self) -> dict:
        """Convert to dictionary, leaving out Strong's data when it was filtered."""
        data = asdict(self)
        if self.strongs is None:
            del data["strongs"]
        return data

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
