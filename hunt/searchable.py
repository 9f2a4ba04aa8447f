"""
Binding of searchable fields to a record type.

A Searchable declares which fields of a record feed its term set and
under which key the terms are stored. Records are plain mappings (document
dicts) or objects with attributes; the host persists them.

Usage:
    notes = Searchable(fields=("title", "tags"))

    note = {"title": "Woot for MongoDB!", "tags": ["mongo", "nosql"]}
    notes.index_record(note)        # call after every create/update
    # note["searches"] == {"default": ["woot", "mongodb", "mongo", "nosql"]}

    notes.search("mongodb", scope={"user_id": user_id})
    # {"user_id": ..., "searches.default": {"$in": ["mongodb"]}}
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, MutableMapping, Optional, Tuple

from .config import SEARCHES_KEY, HuntConfig, check_index_name, resolve_config
from .index_builder import build_index, concat_values
from .query import SearchQuery, build_query, document_matches

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Searchable:
    """Searchable fields of a record type and where their terms are stored"""
    fields: Tuple[str, ...]
    index_name: Optional[str] = None        # None = config.index_name
    config: Optional[HuntConfig] = None     # None = process-wide config at call time

    def __post_init__(self):
        if isinstance(self.fields, str):
            object.__setattr__(self, "fields", (self.fields,))
        else:
            object.__setattr__(self, "fields", tuple(self.fields))
        if self.index_name is not None:
            check_index_name(self.index_name)

    def _config(self) -> HuntConfig:
        return resolve_config(self.config)

    def _index_name(self, config: HuntConfig) -> str:
        return self.index_name if self.index_name is not None else config.index_name

    def _search_field(self, config: HuntConfig) -> str:
        return f"{SEARCHES_KEY}.{self._index_name(config)}"

    def search_field(self) -> str:
        """Dotted path of the indexed field, e.g. 'searches.default'"""
        return self._search_field(self._config())

    def search_values(self, record: Any) -> List[Any]:
        """Current values of the declared fields, in declared order"""
        if isinstance(record, Mapping):
            return [record.get(name) for name in self.fields]
        return [getattr(record, name, None) for name in self.fields]

    def concatted_search_values(self, record: Any) -> str:
        return concat_values(self.search_values(record))

    def search_terms(self, record: Any) -> List[str]:
        return build_index(self.search_values(record), self._config())

    def index_record(self, record: Any) -> List[str]:
        """
        Rebuild the record's term set and store it under searches.<index_name>.

        Always a full rebuild from current field values. Other keys under
        "searches" (other indexes) are kept.

        Returns:
            The stored terms
        """
        config = self._config()
        index_name = self._index_name(config)
        terms = build_index(self.search_values(record), config)

        if isinstance(record, MutableMapping):
            searches = dict(record.get(SEARCHES_KEY) or {})
            searches[index_name] = terms
            record[SEARCHES_KEY] = searches
        else:
            searches = dict(getattr(record, SEARCHES_KEY, None) or {})
            searches[index_name] = terms
            setattr(record, SEARCHES_KEY, searches)

        logger.debug(f"Indexed record on {SEARCHES_KEY}.{index_name}: {len(terms)} terms")
        return terms

    def build_query(self, search_text: Any) -> SearchQuery:
        config = self._config()
        return build_query(search_text, config, field=self._search_field(config))

    def search(self, search_text: Any, scope: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Filter for records matching the search text, ANDed with an optional
        scope filter (e.g. {"user_id": user_id}).
        """
        return self.build_query(search_text).merge(scope)

    def filter_records(self, records, search_text: Any, scope: Optional[Mapping[str, Any]] = None) -> List[Any]:
        """Apply search() to an in-memory collection of indexed records"""
        filter_doc = self.search(search_text, scope)
        return [record for record in records if document_matches(filter_doc, record)]
