"""
Tokenizer for search term extraction.

Normalization pipeline (to_words):
1. Strip punctuation/symbols (apostrophes too: "didn't" → "didnt")
2. Transliterate non-ASCII characters ("łódź" → "lodz")
3. Split on whitespace runs
4. Lowercase conversion
5. Drop words shorter than 2 characters
6. Filter stopwords (base list + configured additions)
7. Remove duplicates, first occurrence wins

to_stemmed_words applies stemming on top and removes duplicate stems.
"""

import logging
import re
from typing import Iterable, List, Optional, Union

from ..config import HuntConfig, resolve_config
from .stemmer import stem
from .transliteration import transliterate

logger = logging.getLogger(__name__)

# Anything that is not a letter, digit or whitespace (underscore counts as punctuation)
PUNCTUATION_PATTERN = re.compile(r'[^\w\s]|_')

MIN_WORD_LENGTH = 2


def _to_text(raw: Union[str, bytes, None]) -> str:
    if raw is None:
        return ''
    if isinstance(raw, (bytes, bytearray)):
        # Undecodable sequences are dropped
        return bytes(raw).decode('utf-8', errors='ignore')
    if not isinstance(raw, str):
        return str(raw)
    return raw


def _unique(words: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(words))


def strip_punctuation(text: str) -> str:
    """
    Remove every character that is not a letter, digit or whitespace.

    Examples:
        >>> strip_punctuation("woot!")
        'woot'
        >>> strip_punctuation("didn't")
        'didnt'
    """
    return PUNCTUATION_PATTERN.sub('', text)


def to_words(raw: Union[str, bytes, None], config: Optional[HuntConfig] = None) -> List[str]:
    """
    Normalize raw text into a deduplicated list of lowercase ASCII words.

    Never raises: None, empty and punctuation-only input give [].

    Args:
        raw: Input text (str, UTF-8 bytes or None)
        config: Configuration to use (defaults to the process-wide one)

    Returns:
        Words in first-occurrence order, without stopwords or short words

    Examples:
        >>> to_words("how was your day")
        ['day']

        >>> to_words("first    sentence & second")
        ['first', 'sentence', 'second']

        >>> to_words("boom boom")
        ['boom']
    """
    text = _to_text(raw)
    if not text:
        return []

    # Read configuration once per call
    config = resolve_config(config)
    stopwords = config.stopwords
    option = config.transliteration_option

    text = strip_punctuation(text)
    text = transliterate(text, option)

    words = [
        word for word in (token.lower() for token in text.split())
        if len(word) >= MIN_WORD_LENGTH and word not in stopwords
    ]

    return _unique(words)


def to_stemmed_words(raw: Union[str, bytes, None], config: Optional[HuntConfig] = None) -> List[str]:
    """
    Normalize raw text and stem every word.

    Distinct words can share a stem ("kiss kissing"), so stems are
    deduplicated again, keeping the first occurrence.

    Examples:
        >>> to_stemmed_words("I just Caught you kissing.")
        ['just', 'caught', 'kiss']
    """
    config = resolve_config(config)
    words = to_words(raw, config)
    terms = _unique(stem(word, config.stemmer) for word in words)
    logger.debug(f"Stemmed {len(words)} words into {len(terms)} terms")
    return terms
