"""The closed table of biblical books and their canonical abbreviations."""

from dataclasses import dataclass
from types import MappingProxyType


OLD_TESTAMENT = "old"
NEW_TESTAMENT = "new"


@dataclass(frozen=True)
class Book:
    """A book of the Bible."""

    abbreviation: str  # e.g., "GEN", "1JN" (the Book segment of a verse token)
    name: str  # e.g., "Genesis", "1 John"
    testament: str  # OLD_TESTAMENT or NEW_TESTAMENT

    @property
    def is_old_testament(self) -> bool:
        return self.testament == OLD_TESTAMENT


# =============================================================================
# Constants
# =============================================================================

_OLD_TESTAMENT_BOOKS = [
    ("GEN", "Genesis"), ("EXO", "Exodus"), ("LEV", "Leviticus"),
    ("NUM", "Numbers"), ("DEU", "Deuteronomy"), ("JOS", "Joshua"),
    ("JDG", "Judges"), ("RUT", "Ruth"), ("1SA", "1 Samuel"),
    ("2SA", "2 Samuel"), ("1KI", "1 Kings"), ("2KI", "2 Kings"),
    ("1CH", "1 Chronicles"), ("2CH", "2 Chronicles"), ("EZR", "Ezra"),
    ("NEH", "Nehemiah"), ("EST", "Esther"), ("JOB", "Job"),
    ("PSA", "Psalms"), ("PRO", "Proverbs"), ("ECC", "Ecclesiastes"),
    ("SNG", "Song of Solomon"), ("ISA", "Isaiah"), ("JER", "Jeremiah"),
    ("LAM", "Lamentations"), ("EZK", "Ezekiel"), ("DAN", "Daniel"),
    ("HOS", "Hosea"), ("JOL", "Joel"), ("AMO", "Amos"),
    ("OBA", "Obadiah"), ("JON", "Jonah"), ("MIC", "Micah"),
    ("NAM", "Nahum"), ("HAB", "Habakkuk"), ("ZEP", "Zephaniah"),
    ("HAG", "Haggai"), ("ZEC", "Zechariah"), ("MAL", "Malachi"),
]

_NEW_TESTAMENT_BOOKS = [
    ("MAT", "Matthew"), ("MRK", "Mark"), ("LUK", "Luke"),
    ("JHN", "John"), ("ACT", "Acts"), ("ROM", "Romans"),
    ("1CO", "1 Corinthians"), ("2CO", "2 Corinthians"), ("GAL", "Galatians"),
    ("EPH", "Ephesians"), ("PHP", "Philippians"), ("COL", "Colossians"),
    ("1TH", "1 Thessalonians"), ("2TH", "2 Thessalonians"),
    ("1TI", "1 Timothy"), ("2TI", "2 Timothy"), ("TIT", "Titus"),
    ("PHM", "Philemon"), ("HEB", "Hebrews"), ("JAS", "James"),
    ("1PE", "1 Peter"), ("2PE", "2 Peter"), ("1JN", "1 John"),
    ("2JN", "2 John"), ("3JN", "3 John"), ("JUD", "Jude"),
    ("REV", "Revelation"),
]

BIBLE_BOOKS: tuple[Book, ...] = tuple(
    [Book(abbr, name, OLD_TESTAMENT) for abbr, name in _OLD_TESTAMENT_BOOKS]
    + [Book(abbr, name, NEW_TESTAMENT) for abbr, name in _NEW_TESTAMENT_BOOKS]
)

OLD_TESTAMENT_ABBREVIATIONS = frozenset(
    book.abbreviation for book in BIBLE_BOOKS if book.is_old_testament
)


def _build_book_abbreviations() -> MappingProxyType:
    # Two entries per book: the name and the abbreviation both map to the abbreviation
    abbrevs = {}
    for book in BIBLE_BOOKS:
        abbrevs[book.name] = book.abbreviation
        abbrevs[book.abbreviation] = book.abbreviation
    return MappingProxyType(abbrevs)


BOOK_ABBREVIATIONS = _build_book_abbreviations()
