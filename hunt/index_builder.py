"""
Search index builder - derives a record's term set from its field values.

The term set is rebuilt from scratch on every create/update; there is no
incremental update.
"""

import logging
from typing import Iterable, List, Optional

from .config import HuntConfig
from .text.tokenizer import to_stemmed_words

logger = logging.getLogger(__name__)

SEPARATOR = " "


def flatten_values(values: Iterable) -> List[str]:
    """
    Flatten field values in declared order.

    None contributes nothing; a list/tuple/set field (e.g. tags) contributes
    each element in order; other scalars are converted with str().
    """
    flat = []
    for value in values:
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            flat.extend(flatten_values(value))
        elif isinstance(value, (bytes, bytearray)):
            flat.append(bytes(value).decode("utf-8", errors="ignore"))
        else:
            flat.append(str(value))
    return flat


def concat_values(values: Iterable) -> str:
    """
    Join field values with a single space.

    Example:
        >>> concat_values(["Woot for MongoDB!", ["mongo", "nosql"], None])
        'Woot for MongoDB! mongo nosql'
    """
    return SEPARATOR.join(flatten_values(values))


def build_index(values: Iterable, config: Optional[HuntConfig] = None) -> List[str]:
    """
    Build the stored term set for one record.

    Args:
        values: Current values of the searchable fields, in declared order
        config: Configuration to use (defaults to the process-wide one)

    Returns:
        Stemmed, deduplicated terms in first-occurrence order

    Example:
        >>> build_index(["Woot for MongoDB!", "This is my body."])
        ['woot', 'mongodb', 'bodi']
    """
    if isinstance(values, (str, bytes, bytearray)):
        values = [values]
    values = list(values)
    terms = to_stemmed_words(concat_values(values), config)

    logger.debug(f"Built search index: {len(terms)} terms from {len(values)} fields")

    return terms
