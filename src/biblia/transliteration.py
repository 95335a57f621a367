"""
Greek and Hebrew to Latin transliteration.

Two schemes are available, each with its own Greek and Hebrew table:
- punic: single letters where possible (θ stays θ, ב is "Bh")
- youngian: digraphs with tie bars (θ is "t͡h", ב is "bh")

Characters missing from a table are passed through unchanged.
"""

import re
import unicodedata
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional, Union


class Scheme(Enum):
    """Transliteration schemes."""

    PUNIC = "punic"
    YOUNGIAN = "betacode"

    @classmethod
    def from_name(cls, name: Union[str, "Scheme"]) -> "Scheme":
        """Look a scheme up by member name or value, ignoring case."""
        if isinstance(name, cls):
            return name

        key = str(name).strip().lower()
        for scheme in cls:
            if key in (scheme.name.lower(), scheme.value):
                return scheme

        valid = ", ".join(scheme.name.lower() for scheme in cls)
        raise ValueError(f"Unknown transliteration scheme: {name!r} (valid: {valid})")


class Script(Enum):
    """Source scripts."""

    GREEK = "greek"
    HEBREW = "hebrew"


DEFAULT_SCHEME = Scheme.YOUNGIAN

ROUGH_BREATHING = "\u0314"
DAGESH = "\u05BC"


# =============================================================================
# Greek Tables
# =============================================================================

_GREEK_PUNCTUATION = {
    "·": ";",
    "᾿": "'",
    "—": "-",
}

GREEK_TABLES = MappingProxyType({
    Scheme.PUNIC: MappingProxyType({
        "Α": "A", "α": "a",
        "Β": "B", "β": "b",
        "Γ": "G", "γ": "g",
        "Δ": "D", "δ": "d",
        "Ε": "E", "ε": "e",
        "Ζ": "Z", "ζ": "z",
        "Η": "H", "η": "h",
        "Θ": "Θ", "θ": "θ",
        "Ι": "I", "ι": "i",
        "Κ": "K", "κ": "k",
        "Λ": "L", "λ": "l",
        "Μ": "M", "μ": "m",
        "Ν": "N", "ν": "n",
        "Ξ": "X", "ξ": "x",
        "Ο": "O", "ο": "o",
        "Π": "P", "π": "p",
        "Ρ": "R", "ρ": "r",
        "Σ": "C", "σ": "c", "ς": "c",
        "Τ": "T", "τ": "t",
        "Υ": "Y", "υ": "y",
        "Φ": "f", "φ": "f",
        "Χ": "x", "χ": "x",
        "Ψ": "p͡s", "ψ": "p͡s",
        "Ω": "ó", "ω": "ó",
        **_GREEK_PUNCTUATION,
    }),
    Scheme.YOUNGIAN: MappingProxyType({
        "Α": "A", "α": "a",
        "Β": "B", "β": "b",
        "Γ": "G", "γ": "g",
        "Δ": "D", "δ": "d",
        "Ε": "E", "ε": "e",
        "Ζ": "Z", "ζ": "z",
        "Η": "É", "η": "e",
        "Θ": "T͡h", "θ": "t͡h",
        "Ι": "I", "ι": "i",
        "Κ": "K", "κ": "k",
        "Λ": "L", "λ": "l",
        "Μ": "M", "μ": "m",
        "Ν": "N", "ν": "n",
        "Ξ": "K͡s", "ξ": "k͡s",
        "Ο": "O", "ο": "o",
        "Π": "P", "π": "p",
        "Ρ": "R", "ρ": "r",
        "Σ": "S", "σ": "s", "ς": "ś",
        "Τ": "T", "τ": "t",
        "Υ": "U", "υ": "u",
        "Φ": "F", "φ": "f",
        "Χ": "K͡h", "χ": "k͡h",
        "Ψ": "P͡s", "ψ": "p͡s",
        "Ω": "Ó", "ω": "ó",
        **_GREEK_PUNCTUATION,
    }),
})


# =============================================================================
# Hebrew Tables
# =============================================================================

@dataclass(frozen=True)
class HebrewTable:
    """A scheme's Hebrew character map and the marks it drops before mapping."""

    characters: MappingProxyType
    stripped_marks: frozenset


_CANTILLATION = frozenset(chr(c) for c in range(0x0591, 0x05B0))
_UNTRANSCRIBED_POINTS = frozenset("\u05BD") | frozenset(chr(c) for c in range(0x05C1, 0x05C8))

_HEBREW_VOWELS = {
    DAGESH: ":",  # Gemination on letters without a fortition form
    "\u05B0": "ə",  # Shva
    "\u05B1": "ě'",  # Hataf Segol
    "\u05B2": "ā'",  # Hataf Patah
    "\u05B3": "â'",  # Hataf Qamats
    "\u05B4": "i",  # Hiriq
    "\u05B5": "ë",  # Tsere
    "\u05B6": "ě",  # Segol
    "\u05B7": "ā",  # Patah
    "\u05B8": "â",  # Qamats
    "\u05B9": "ȯ",  # Holam
    "\u05BE": "-",  # Maqaf
}

HEBREW_TABLES = MappingProxyType({
    Scheme.PUNIC: HebrewTable(
        characters=MappingProxyType({
            "א": "A",
            "ב" + DAGESH: "B", "ב": "Bh",
            "ג" + DAGESH: "G", "ג": "Gh",
            "ד" + DAGESH: "D", "ד": "Dh",
            "ה": "E",
            "ו": "W",
            "ז": "Z",
            "ח": "H",
            "ט": "θ",
            "י": "I",
            "כ" + DAGESH: "K", "כ": "Kh", "ך": "Ḱ",
            "ל": "L",
            "מ": "M", "ם": "Ḿ",
            "נ": "N", "ן": "Ń",
            "ס": "X",
            "ע": "O",
            "פ" + DAGESH: "P", "פ": "Ph", "ף": "Ṕ",
            "צ": "S", "ץ": "Ś",
            "ק": "Q",
            "ר": "R",
            "ש": "C",
            "ת" + DAGESH: "T", "ת": "Th",
            "\u05BB": "ù",  # Qubuts
            **_HEBREW_VOWELS,
        }),
        stripped_marks=_CANTILLATION | _UNTRANSCRIBED_POINTS,
    ),
    Scheme.YOUNGIAN: HebrewTable(
        characters=MappingProxyType({
            "א": "'",
            "ב" + DAGESH: "b", "ב": "bh",
            "ג" + DAGESH: "g", "ג": "gh",
            "ד" + DAGESH: "d", "ד": "dh",
            "ה": "h",
            "ו": "w",
            "ז": "z",
            "ח": "k͡h",
            "ט": "th́",
            "י": "j",
            "כ" + DAGESH: "k", "כ": "kh", "ך": "ḱ",
            "ל": "l",
            "מ": "m", "ם": "ḿ",
            "נ": "n", "ן": "ń",
            "ס": "c",
            "ע": "h́",
            "פ" + DAGESH: "p", "פ": "ph", "ף": "ṕ",
            "צ": "c͡h́", "ץ": "ć͡h́",
            "ק": "q",
            "ר": "r",
            "ש": "s",
            "ת" + DAGESH: "t", "ת": "th",
            **_HEBREW_VOWELS,
        }),
        # Qubuts is dropped as well
        stripped_marks=_CANTILLATION | _UNTRANSCRIBED_POINTS | frozenset("\u05BB"),
    ),
})


# =============================================================================
# Greek
# =============================================================================

_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")


def _is_latin_letter(char: str) -> bool:
    return char.isalpha() and unicodedata.name(char, "").startswith("LATIN")


def _hoist_breathing(latin: str) -> str:
    # The rough breathing becomes an "h" before the first Latin letter
    for index, char in enumerate(latin):
        if _is_latin_letter(char):
            mark = "H" if char.isupper() else "h"
            return latin[:index] + mark + latin[index:].lower()
    return latin


def _greek_word_to_latin(word: str, table) -> str:
    output = []
    has_breathing = False
    i = 0

    while i < len(word):
        char = word[i]

        if i + 1 < len(word) and word[i + 1] == ROUGH_BREATHING:
            if char in "ρΡ":
                output.append("Rh" if char.isupper() else "rh")
            else:
                output.append(table.get(char, char))
                has_breathing = True
            i += 2
            continue

        if char != ROUGH_BREATHING:
            output.append(table.get(char, char))
        i += 1

    latin = "".join(output)
    if has_breathing:
        return _hoist_breathing(latin)
    return latin


def greek_to_latin(text: str, scheme: Union[Scheme, str] = DEFAULT_SCHEME) -> str:
    """
    Transliterate Greek text to Latin.

    Args:
        text: Greek text, precomposed or decomposed
        scheme: Transliteration scheme

    Returns:
        The transliteration, NFC-composed; whitespace is preserved verbatim
    """
    table = GREEK_TABLES[Scheme.from_name(scheme)]
    normalized = unicodedata.normalize("NFD", text)

    latin = "".join(
        segment if segment.isspace() else _greek_word_to_latin(segment, table)
        for segment in _WHITESPACE_SPLIT_RE.split(normalized)
    )
    return unicodedata.normalize("NFC", latin)


# =============================================================================
# Hebrew
# =============================================================================

def hebrew_to_latin(text: str, scheme: Union[Scheme, str] = DEFAULT_SCHEME) -> str:
    """
    Transliterate Hebrew text to Latin.

    Cantillation marks are dropped, vowel points and dagesh are transcribed.
    A BeGaD KeFaT letter carrying a dagesh takes its fortition form.

    Args:
        text: Pointed or unpointed Hebrew text
        scheme: Transliteration scheme

    Returns:
        The transliteration, NFC-composed
    """
    table = HEBREW_TABLES[Scheme.from_name(scheme)]
    characters = table.characters
    chars = [
        char for char in unicodedata.normalize("NFD", text)
        if char not in table.stripped_marks
    ]

    output = []
    i = 0
    while i < len(chars):
        char = chars[i]

        # Marks following a letter may come in any order after normalization
        end = i + 1
        while end < len(chars) and unicodedata.combining(chars[end]):
            end += 1
        marks = chars[i + 1:end]

        if DAGESH in marks and char + DAGESH in characters:
            output.append(characters[char + DAGESH])
            marks.remove(DAGESH)
        else:
            output.append(characters.get(char, char))

        output.extend(characters.get(mark, mark) for mark in marks)
        i = end

    return unicodedata.normalize("NFC", "".join(output))


# =============================================================================
# Public API
# =============================================================================

def transliterate(
    text: str,
    script: Union[Script, str],
    scheme: Union[Scheme, str] = DEFAULT_SCHEME,
) -> str:
    """Transliterate text written in the given script."""
    if Script(script) is Script.HEBREW:
        return hebrew_to_latin(text, scheme)
    return greek_to_latin(text, scheme)


def list_schemes() -> list[Scheme]:
    """Return every available scheme."""
    return list(Scheme)


def detect_script(text: str) -> Optional[Script]:
    """Guess the script from the first Greek or Hebrew letter in the text."""
    for char in text:
        code = ord(char)
        if 0x0370 <= code <= 0x03FF or 0x1F00 <= code <= 0x1FFF:
            return Script.GREEK
        if 0x0590 <= code <= 0x05FF or 0xFB1D <= code <= 0xFB4F:
            return Script.HEBREW
    return None


def strip_accents(text: str) -> str:
    """Remove combining accents but keep the rough breathing mark."""
    return "".join(
        char for char in unicodedata.normalize("NFD", text)
        if char == ROUGH_BREATHING or not 0x0300 <= ord(char) <= 0x036F
    )


@dataclass(frozen=True)
class Transliterator:
    """Transliterates both scripts, with a scheme chosen per script."""

    greek_scheme: Scheme = DEFAULT_SCHEME
    hebrew_scheme: Scheme = DEFAULT_SCHEME

    def greek(self, text: str) -> str:
        return greek_to_latin(text, self.greek_scheme)

    def hebrew(self, text: str) -> str:
        return hebrew_to_latin(text, self.hebrew_scheme)

    def transliterate(self, text: str, script: Union[Script, str]) -> str:
        if Script(script) is Script.HEBREW:
            return self.hebrew(text)
        return self.greek(text)
