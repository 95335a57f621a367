"""Strong's concordance: verse-to-code index and Greek/Hebrew lexicons loaded from local files."""

import json
import logging
import re
from pathlib import Path
from typing import Optional, Union

from .models import StrongsEntry

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

DEFAULT_DATA_DIR = "data"
BIBLE_INDEX_FILE = "strongs.txt"
GREEK_LEXICON_FILE = "strongs-greek.json"
HEBREW_LEXICON_FILE = "strongs-hebrew.json"

INDEX_LINE_RE = re.compile(r"^(.+?)(<.+)$")
INDEX_CODE_RE = re.compile(r"<([HG]\d+)>")
CODE_RE = re.compile(r"^([GH])0*(\d+)$")


def normalize_code(code: str) -> Optional[str]:
    """Normalize a Strong's code: 'g0024' -> 'G24'. Returns None for anything else."""
    match = CODE_RE.match(code.strip().upper())
    if not match:
        return None
    return f"{match.group(1)}{match.group(2)}"


# =============================================================================
# Loaders
# =============================================================================

def load_bible_index(path: Union[str, Path]) -> dict[str, list[str]]:
    """
    Load the verse -> Strong's codes index.

    Each line holds a verse token followed by its codes, e.g.
    ``GEN.1.1<H7225><H1254><H430>``.

    Args:
        path: Path to the index file

    Returns:
        Map of verse token to codes, empty if the file is missing or not UTF-8
    """
    index: dict[str, list[str]] = {}
    path = Path(path)

    if not path.exists():
        logger.warning("Strong's index not found: %s", path)
        return index

    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except UnicodeDecodeError as e:
        logger.warning("Could not read Strong's index %s: %s", path, e)
        return index

    for line in lines:
        line = line.strip()
        if not line:
            continue

        match = INDEX_LINE_RE.match(line)
        if match:
            verse = match.group(1).strip()
            index[verse] = [normalize_code(c) for c in INDEX_CODE_RE.findall(match.group(2))]

    return index


def load_lexicon(path: Union[str, Path]) -> dict[str, StrongsEntry]:
    """
    Load a Strong's lexicon JSON file (``{code: {"lemma": ..., "kjv_def": ...}}``).

    Entries without both a lemma and a KJV definition are skipped.

    Args:
        path: Path to the lexicon file

    Returns:
        Map of normalized code to entry, empty if the file is missing or unreadable
    """
    lexicon: dict[str, StrongsEntry] = {}
    path = Path(path)

    if not path.exists():
        logger.warning("Strong's lexicon not found: %s", path)
        return lexicon

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Could not read Strong's lexicon %s: %s", path, e)
        return lexicon

    if not isinstance(data, dict):
        logger.warning("Strong's lexicon %s is not a JSON object", path)
        return lexicon

    for code, entry in data.items():
        normalized = normalize_code(code)
        if not normalized or not isinstance(entry, dict):
            continue
        if entry.get("lemma") and entry.get("kjv_def"):
            lexicon[normalized] = StrongsEntry(
                code=normalized,
                root=entry["lemma"],
                definition=entry["kjv_def"],
            )

    return lexicon


# =============================================================================
# Concordance
# =============================================================================

class Concordance:
    """Strong's concordance backed by files in a data directory, loaded on first use."""

    def __init__(self, data_dir: Union[str, Path] = DEFAULT_DATA_DIR):
        self.data_dir = Path(data_dir)
        self._bible: Optional[dict[str, list[str]]] = None
        self._greek: Optional[dict[str, StrongsEntry]] = None
        self._hebrew: Optional[dict[str, StrongsEntry]] = None

    @property
    def bible(self) -> dict[str, list[str]]:
        if self._bible is None:
            self._bible = load_bible_index(self.data_dir / BIBLE_INDEX_FILE)
        return self._bible

    @property
    def greek(self) -> dict[str, StrongsEntry]:
        if self._greek is None:
            self._greek = load_lexicon(self.data_dir / GREEK_LEXICON_FILE)
        return self._greek

    @property
    def hebrew(self) -> dict[str, StrongsEntry]:
        if self._hebrew is None:
            self._hebrew = load_lexicon(self.data_dir / HEBREW_LEXICON_FILE)
        return self._hebrew

    def codes_for(self, verse: str) -> list[str]:
        """Strong's codes for a verse token, in verse order."""
        return list(self.bible.get(verse, []))

    def get_entry(self, code: str) -> Optional[StrongsEntry]:
        """Look up a Greek ('G…') or Hebrew ('H…') code. Returns None if unknown."""
        normalized = normalize_code(code)
        if normalized is None:
            return None

        lexicon = self.greek if normalized.startswith("G") else self.hebrew
        return lexicon.get(normalized)
