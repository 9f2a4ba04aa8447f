"""
Unit tests for non-ASCII → ASCII transliteration tables.
"""

import pytest

from hunt.exceptions import ConfigurationError
from hunt.text.transliteration import TRANSLITERATION_TABLES, transliterate


class TestTransliterate:
    """Test per-option substitution"""

    def test_ascii_unchanged(self):
        assert transliterate("plain ascii 123") == "plain ascii 123"

    def test_default_folds_diacritics(self):
        assert transliterate("łąkę źródło łódź") == "lake zrodlo lodz"

    def test_default_sharp_s(self):
        assert transliterate("äußert") == "aussert"

    def test_default_keeps_case(self):
        assert transliterate("Börse") == "Borse"

    def test_uppercase_letters_use_lowercase_table_entries(self):
        assert transliterate("ŁÓDŹ") == "lODZ"

    def test_default_drops_unknown_scripts(self):
        assert transliterate("mongo 日本") == "mongo "

    def test_non_ascii_whitespace_becomes_space(self):
        assert transliterate("a\u00a0b\u2003c") == "a b c"

    def test_german_umlauts(self):
        assert transliterate("Börse äußert Übung", "german") == "Boerse aeussert uebung"

    def test_german_falls_back_to_default_table(self):
        assert transliterate("łódź", "german") == "lodz"

    def test_cyrillic(self):
        assert transliterate("Карта сайта", "cyrillic") == "karta sajta"

    def test_cyrillic_digraphs(self):
        assert transliterate("щука жук", "cyrillic") == "schuka zhuk"

    def test_known_options(self):
        assert set(TRANSLITERATION_TABLES) == {"cyrillic", "german"}

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError, match="Valid options: cyrillic, german"):
            transliterate("łódź", "klingon")

    def test_unknown_option_with_ascii_text(self):
        with pytest.raises(ConfigurationError):
            transliterate("plain", "klingon")
