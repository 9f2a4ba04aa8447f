"""
Unit tests for stemming (NLTK Snowball / Porter).
"""

import pytest

from hunt.exceptions import ConfigurationError
from hunt.text.stemmer import STEMMERS, stem


class TestStem:
    """Pinned word → stem pairs"""

    @pytest.mark.parametrize("word, expected", [
        ("kissing", "kiss"),
        ("hello", "hello"),
        ("barfing", "barf"),
        ("running", "run"),
        ("caresses", "caress"),
        ("mongodb", "mongodb"),
        ("tv", "tv"),
    ])
    def test_snowball(self, word, expected):
        assert stem(word) == expected

    @pytest.mark.parametrize("word, expected", [
        ("kissing", "kiss"),
        ("hello", "hello"),
        ("barfing", "barf"),
        ("caresses", "caress"),
    ])
    def test_porter(self, word, expected):
        assert stem(word, "porter") == expected

    def test_available_algorithms(self):
        assert set(STEMMERS) == {"snowball", "porter"}

    @pytest.mark.parametrize("algorithm", ["snowball", "porter"])
    def test_deterministic(self, algorithm):
        words = ["generalizations", "awesome", "strategies", "connected"]
        assert [stem(w, algorithm) for w in words] == [stem(w, algorithm) for w in words]

    def test_unknown_algorithm(self):
        with pytest.raises(ConfigurationError, match="Valid options: porter, snowball"):
            stem("kissing", "lovins")
