"""Tests for Greek and Hebrew transliteration."""

import pytest

from biblia.transliteration import (
    GREEK_TABLES,
    HEBREW_TABLES,
    Scheme,
    Script,
    Transliterator,
    detect_script,
    greek_to_latin,
    hebrew_to_latin,
    list_schemes,
    strip_accents,
    transliterate,
)


ALL_SCHEMES = list(Scheme)

ROUGH_BREATHING = "\u0314"
ETNAHTA = "\u0591"
DAGESH = "\u05BC"
SHVA = "\u05B0"
HIRIQ = "\u05B4"
TSERE = "\u05B5"
PATAH = "\u05B7"
QUBUTS = "\u05BB"
SHIN_DOT = "\u05C1"


class TestSchemes:

    def test_list_schemes(self):
        assert list_schemes() == [Scheme.PUNIC, Scheme.YOUNGIAN]

    @pytest.mark.parametrize("name, expected", [
        ("punic", Scheme.PUNIC),
        ("PUNIC", Scheme.PUNIC),
        ("youngian", Scheme.YOUNGIAN),
        ("betacode", Scheme.YOUNGIAN),
        (" Youngian ", Scheme.YOUNGIAN),
        (Scheme.PUNIC, Scheme.PUNIC),
    ])
    def test_from_name(self, name, expected):
        assert Scheme.from_name(name) is expected

    def test_unknown_scheme(self):
        with pytest.raises(ValueError):
            Scheme.from_name("klingon")

    def test_unknown_scheme_in_call(self):
        with pytest.raises(ValueError):
            greek_to_latin("α", "klingon")


class TestGreek:

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_latin_text_unchanged(self, scheme):
        text = "In the beginning was the Word, 1:1!"
        assert greek_to_latin(text, scheme) == text

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_accented_latin_text_unchanged(self, scheme):
        text = "caf\u00e9 na\u00efve"
        assert greek_to_latin(text, scheme) == text
        assert greek_to_latin(greek_to_latin(text, scheme), scheme) == text

    def test_output_is_composed(self):
        assert greek_to_latin("\u1f61\u03c2", Scheme.YOUNGIAN) == "h\u00f3\u015b"

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_rho_with_rough_breathing(self, scheme):
        result = greek_to_latin("ῥόδον", scheme)
        assert result.startswith("rh")
        assert not result.startswith("h")

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_capital_rho_with_rough_breathing(self, scheme):
        assert greek_to_latin("Ῥόδος", scheme).startswith("Rh")

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_rough_breathing_hoisted(self, scheme):
        assert greek_to_latin("ὁ", scheme) == "ho"
        assert greek_to_latin("Ὁ", scheme) == "Ho"
        assert greek_to_latin("οἱ", scheme) == "hoi"

    def test_decomposed_input(self):
        assert greek_to_latin("ο" + ROUGH_BREATHING, Scheme.PUNIC) == "ho"

    def test_hoisting_lower_cases_rest_of_word(self):
        word = "ἉΓΙΟΣ"
        assert greek_to_latin(word, Scheme.YOUNGIAN) == "Hagios"
        assert greek_to_latin(word, Scheme.PUNIC) == "Hagioc"

    def test_hoisting_counts_accented_latin_letters(self):
        result = greek_to_latin("ὡς", Scheme.YOUNGIAN)
        assert result == "hóś"

    def test_hoisting_is_per_word(self):
        text = strip_accents("Ὁ λόγος")
        assert greek_to_latin(text, Scheme.YOUNGIAN) == "Ho logoś"

    def test_whitespace_preserved(self):
        text = "ὁ  λογος\tκαι\n"
        assert greek_to_latin(text, Scheme.YOUNGIAN) == "ho  logoś\tkai\n"

    def test_scheme_tables_differ(self):
        assert greek_to_latin("θ", Scheme.PUNIC) == "θ"
        assert greek_to_latin("θ", Scheme.YOUNGIAN) == "t\u0361h"
        assert greek_to_latin("υ", Scheme.PUNIC) == "y"
        assert greek_to_latin("υ", Scheme.YOUNGIAN) == "u"

    def test_john_1_1(self):
        text = "Ἐν ἀρχῇ ἦν ὁ λόγος"
        result = greek_to_latin(strip_accents(text), Scheme.YOUNGIAN)
        assert result == "En ark\u0361he en ho logoś"

    def test_unmapped_characters_pass_through(self):
        assert greek_to_latin("α1β?", Scheme.PUNIC) == "a1b?"

    def test_punctuation(self):
        assert greek_to_latin("λογος·", Scheme.PUNIC) == "logoc;"

    def test_stray_breathing_dropped(self):
        assert greek_to_latin(ROUGH_BREATHING + "α", Scheme.PUNIC) == "a"

    def test_empty(self):
        assert greek_to_latin("") == ""

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_every_table_entry(self, scheme):
        for char, latin in GREEK_TABLES[scheme].items():
            assert greek_to_latin(char, scheme) == latin
            assert greek_to_latin(char, scheme) == greek_to_latin(char, scheme)


BET = "ב"
QOF = "ק"
LAMED = "ל"
KAF = "כ"
MAQAF = "\u05BE"

# בְּרֵאשִׁית
BERESHIT = (
    BET + DAGESH + SHVA
    + "ר" + TSERE
    + "א"
    + "ש" + SHIN_DOT + HIRIQ
    + "י"
    + "ת"
)


class TestHebrew:

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_latin_text_unchanged(self, scheme):
        assert hebrew_to_latin("Genesis 1:1", scheme) == "Genesis 1:1"

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_accented_latin_text_unchanged(self, scheme):
        text = "caf\u00e9 na\u00efve"
        assert hebrew_to_latin(text, scheme) == text
        assert hebrew_to_latin(hebrew_to_latin(text, scheme), scheme) == text

    def test_cantillation_stripped_vowel_kept(self):
        result = hebrew_to_latin(BET + PATAH + ETNAHTA, Scheme.YOUNGIAN)
        assert result == "bhā"
        assert ETNAHTA not in result

    @pytest.mark.parametrize("scheme, fortition, spirant", [
        (Scheme.PUNIC, "B", "Bh"),
        (Scheme.YOUNGIAN, "b", "bh"),
    ])
    def test_dagesh_fortition(self, scheme, fortition, spirant):
        assert hebrew_to_latin(BET + DAGESH, scheme) == fortition
        assert hebrew_to_latin(BET, scheme) == spirant

    def test_presentation_form_with_dagesh(self):
        assert hebrew_to_latin("\uFB31", Scheme.YOUNGIAN) == "b"

    def test_dagesh_found_in_either_mark_order(self):
        assert hebrew_to_latin(BET + DAGESH + PATAH, Scheme.YOUNGIAN) == "bā"
        assert hebrew_to_latin(BET + PATAH + DAGESH, Scheme.YOUNGIAN) == "bā"

    def test_dagesh_without_fortition_form(self):
        assert hebrew_to_latin(LAMED + DAGESH, Scheme.YOUNGIAN) == "l:"

    def test_bereshit(self):
        assert hebrew_to_latin(BERESHIT, Scheme.YOUNGIAN) == "bərë'sijth"
        assert hebrew_to_latin(BERESHIT, Scheme.PUNIC) == "BəRëACiITh"

    def test_qubuts_per_scheme(self):
        assert hebrew_to_latin(QOF + QUBUTS, Scheme.YOUNGIAN) == "q"
        assert hebrew_to_latin(QOF + QUBUTS, Scheme.PUNIC) == "Qù"

    def test_maqaf(self):
        assert hebrew_to_latin(KAF + MAQAF + LAMED, Scheme.YOUNGIAN) == "kh-l"

    def test_unmapped_characters_pass_through(self):
        assert hebrew_to_latin("א 1.", Scheme.PUNIC) == "A 1."

    @pytest.mark.parametrize("scheme", ALL_SCHEMES)
    def test_every_table_entry(self, scheme):
        for key, latin in HEBREW_TABLES[scheme].characters.items():
            assert hebrew_to_latin(key, scheme) == latin
            assert hebrew_to_latin(key, scheme) == hebrew_to_latin(key, scheme)


class TestDispatch:

    def test_transliterate(self):
        assert transliterate("ὁ", Script.GREEK, Scheme.PUNIC) == "ho"
        assert transliterate(BET, "hebrew", Scheme.PUNIC) == "Bh"

    def test_transliterator_per_script_schemes(self):
        transliterator = Transliterator(greek_scheme=Scheme.PUNIC, hebrew_scheme=Scheme.YOUNGIAN)
        assert transliterator.transliterate("θ", Script.GREEK) == "θ"
        assert transliterator.transliterate(BET, Script.HEBREW) == "bh"

    def test_detect_script(self):
        assert detect_script("1:1 ἐν") is Script.GREEK
        assert detect_script(BET + DAGESH) is Script.HEBREW
        assert detect_script("\uFB31") is Script.HEBREW
        assert detect_script("plain") is None

    def test_strip_accents_keeps_rough_breathing(self):
        assert strip_accents("ὅ") == "\u03bf" + ROUGH_BREATHING
        assert strip_accents("λόγος") == "λογος"
