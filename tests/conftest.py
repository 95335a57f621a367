import json

import pytest


GREEK_LEXICON = {
    "G25": {"lemma": "ἀγαπάω", "kjv_def": "(be-)love(-ed)", "derivation": "perhaps from agan"},
    "G2316": {"lemma": "θεός", "kjv_def": "X exceeding, God, god(-ly, -ward)"},
    "G3588": {"lemma": "ὁ", "kjv_def": "the, this, that, one, he, she, it, etc."},
    "G3779": {"lemma": "οὕτω", "kjv_def": "after that, after (in) this manner"},
    "G9999": {"lemma": "λόγος"},
}

HEBREW_LEXICON = {
    "H430": {"lemma": "אֱלֹהִים", "kjv_def": "angels, X exceeding, God (gods)"},
    "H1254": {"lemma": "בָּרָא", "kjv_def": "choose, create (creator)"},
    "H7225": {"lemma": "רֵאשִׁית", "kjv_def": "beginning, chief(-est), first(-fruits, part, time)"},
}

BIBLE_INDEX = (
    "GEN.1.1<H7225><H1254><H430>\n"
    "\n"
    "JHN.3.16<G3779><G1063><G25><G3588><G2316>\n"
)

VERSES = {
    "GEN.1.1": {
        "original": "בְּרֵאשִׁ֖ית בָּרָ֣א אֱלֹהִ֑ים",
        "translation": "In the beginning God created the heaven and the earth.",
    },
    "JHN.1.2": {
        "original": "οὗτος ἦν ἐν ἀρχῇ πρὸς τὸν θεόν.",
        "translation": "The same was in the beginning with God.",
    },
    "JHN.1.1": {
        "original": "Ἐν ἀρχῇ ἦν ὁ λόγος",
        "translation": "In the beginning was the Word",
    },
    "JHN.3.16": {
        "original": "Οὕτως γὰρ ἠγάπησεν ὁ θεὸς τὸν κόσμον",
        "translation": "For God so loved the world",
    },
}


@pytest.fixture
def data_dir(tmp_path):
    """A data directory holding a small Strong's index and both lexicons."""
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "strongs.txt").write_text(BIBLE_INDEX, encoding="utf-8")
    (directory / "strongs-greek.json").write_text(
        json.dumps(GREEK_LEXICON, ensure_ascii=False), encoding="utf-8"
    )
    (directory / "strongs-hebrew.json").write_text(
        json.dumps(HEBREW_LEXICON, ensure_ascii=False), encoding="utf-8"
    )
    return directory


@pytest.fixture
def verse_file(tmp_path):
    path = tmp_path / "verses.json"
    path.write_text(json.dumps(VERSES, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Point the config file at a temporary location."""
    path = tmp_path / "home" / ".biblia" / "config"
    monkeypatch.setenv("BIBLIA_CONFIG", str(path))
    return path
