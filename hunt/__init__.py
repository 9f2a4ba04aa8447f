"""
hunt - stemmed term indexing and search filters for document stores.

Records get a "searches.<index_name>" field holding the stemmed terms of
their searchable fields; searches run the same pipeline over user input and
filter on that field with {"$in": terms}.

Components:
- config: immutable HuntConfig and the process-wide default (configure)
- text: tokenizer, transliteration, stemmer, stopwords
- index_builder: record field values -> term set
- query: search text -> SearchQuery filter, filter composition
- searchable: binding of searchable fields to a record type
"""

from .config import (
    HuntConfig,
    configure,
    get_config,
    reset_config,
    searches_index_name,
)
from .exceptions import ConfigurationError, HuntError
from .text.stemmer import stem
from .text.tokenizer import strip_punctuation, to_stemmed_words, to_words
from .text.transliteration import transliterate
from .index_builder import build_index, concat_values
from .query import SearchQuery, build_query, document_matches, merge_filters
from .searchable import Searchable

__all__ = [
    "HuntConfig",
    "configure",
    "get_config",
    "reset_config",
    "searches_index_name",
    "ConfigurationError",
    "HuntError",
    "stem",
    "strip_punctuation",
    "to_words",
    "to_stemmed_words",
    "transliterate",
    "build_index",
    "concat_values",
    "SearchQuery",
    "build_query",
    "document_matches",
    "merge_filters",
    "Searchable",
]
