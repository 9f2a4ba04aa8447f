"""
Text normalization for search terms.

Components:
- tokenizer: punctuation stripping, tokenization, stopword filtering, dedup
- transliteration: non-ASCII to ASCII substitution tables
- stemmer: NLTK Snowball/Porter stemming
- stopwords: base list of ignored words

The tokenizer depends on hunt.config; import it as hunt.text.tokenizer.
"""

from .stemmer import stem
from .stopwords import BASE_STOPWORDS
from .transliteration import transliterate

__all__ = [
    "stem",
    "transliterate",
    "BASE_STOPWORDS",
]
