"""
English stemming (via NLTK).

Two algorithms are available:
- snowball (default): Snowball English / Porter2 stemmer
  https://snowballstem.org/
- porter: the original Porter suffix-stripping rules (NLTK variant)

Both are fixed, ordered suffix-rewrite rule tables guarded by minimal stem
length, so short words survive ("hello" stays "hello"). Re-stemming a stem
may shorten it further; callers stem each normalized word exactly once.

Examples:
- "kissing" → "kiss"
- "barfing" → "barf"
- "awesome" → "awesom"
"""

from typing import Dict

from nltk.stem import PorterStemmer
from nltk.stem.api import StemmerI
from nltk.stem.snowball import SnowballStemmer

from ..exceptions import ConfigurationError

# Initialize stemmers once (reusable, no corpus download needed)
STEMMERS: Dict[str, StemmerI] = {
    'snowball': SnowballStemmer('english'),
    'porter': PorterStemmer(),
}


def stem(word: str, algorithm: str = 'snowball') -> str:
    """
    Stem a single lowercase word.

    Args:
        word: Lowercase word to stem
        algorithm: "snowball" or "porter"

    Returns:
        Stemmed word

    Raises:
        ConfigurationError: Unknown algorithm

    Examples:
        >>> stem("kissing")
        'kiss'
        >>> stem("hello")
        'hello'
    """
    try:
        stemmer = STEMMERS[algorithm]
    except KeyError:
        raise ConfigurationError(
            f"Unknown stemmer: {algorithm}. Valid options: {', '.join(sorted(STEMMERS))}"
        ) from None
    return stemmer.stem(word)
