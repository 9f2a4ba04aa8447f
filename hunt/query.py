"""
Search query construction.

Search text goes through the same normalization and stemming as indexed
records, and becomes a MongoDB-style filter on the indexed field:

    {"searches.default": {"$in": ["mongodb", "awesom"]}}

A record matches when its stored term set contains at least one query term.
Blank input yields {"$in": []}, which matches nothing (never everything).

The filter composes with host filters (scopes, associations) via
merge_filters, a logical AND that leaves both sides untouched.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .config import HuntConfig, resolve_config
from .text.tokenizer import to_stemmed_words

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class SearchQuery:
    """Predicate: the indexed field contains any of these terms"""
    field: str                      # Dotted path, e.g. "searches.default"
    terms: Tuple[str, ...] = ()     # Stemmed query terms (empty = match nothing)

    @property
    def is_empty(self) -> bool:
        return not self.terms

    def to_filter(self) -> Dict[str, Any]:
        return {self.field: {"$in": list(self.terms)}}

    def merge(self, *filters: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """AND this predicate with host filters (scope filters first)"""
        return merge_filters(*filters, self.to_filter())

    def matches(self, document: Any) -> bool:
        """Evaluate the predicate against an in-memory document"""
        if not self.terms:
            return False
        stored = get_path(document, self.field)
        if stored is _MISSING or stored is None:
            return False
        if isinstance(stored, str):
            stored = [stored]
        return not set(self.terms).isdisjoint(stored)


def build_query(
    search_text: Union[str, bytes, None],
    config: Optional[HuntConfig] = None,
    field: Optional[str] = None,
) -> SearchQuery:
    """
    Build the search predicate for raw user input.

    Args:
        search_text: Raw search input (None/blank gives a match-nothing query)
        config: Configuration to use (defaults to the process-wide one)
        field: Indexed field path (defaults to config.searches_field)

    Returns:
        SearchQuery over the stemmed query terms

    Examples:
        >>> build_query("mongodb is awesome").to_filter()
        {'searches.default': {'$in': ['mongodb', 'awesom']}}

        >>> build_query("").to_filter()
        {'searches.default': {'$in': []}}
    """
    config = resolve_config(config)
    terms = tuple(to_stemmed_words(search_text, config))
    query = SearchQuery(field=field or config.searches_field, terms=terms)

    if query.is_empty:
        logger.debug(f"Blank search on {query.field}: query matches nothing")
    else:
        logger.debug(f"Search on {query.field}: {len(terms)} terms")

    return query


def merge_filters(*filters: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Combine filters with logical AND.

    Filters with disjoint keys are merged into one dict; if any key repeats,
    the filters are wrapped in {"$and": [...]} instead. Inputs are not
    modified. None and empty filters are skipped.

    Examples:
        >>> merge_filters({"user_id": 1}, {"searches.default": {"$in": ["mongo"]}})
        {'user_id': 1, 'searches.default': {'$in': ['mongo']}}
    """
    parts: List[Dict[str, Any]] = [dict(f) for f in filters if f]
    if not parts:
        return {}
    if len(parts) == 1:
        return parts[0]

    seen = set()
    for part in parts:
        if not seen.isdisjoint(part):
            return {"$and": parts}
        seen.update(part)

    merged: Dict[str, Any] = {}
    for part in parts:
        merged.update(part)
    return merged


def get_path(document: Any, path: str) -> Any:
    """Resolve a dotted path through mappings and object attributes"""
    current = document
    for key in path.split("."):
        if isinstance(current, Mapping):
            current = current.get(key, _MISSING)
        else:
            current = getattr(current, key, _MISSING)
        if current is _MISSING:
            return _MISSING
    return current


def _matches_condition(value: Any, condition: Any) -> bool:
    values = value if isinstance(value, (list, tuple, set, frozenset)) else [value]

    if isinstance(condition, Mapping) and condition and all(k.startswith("$") for k in condition):
        for operator, operand in condition.items():
            if operator == "$in":
                if value is _MISSING or not any(v in operand for v in values):
                    return False
            elif operator == "$nin":
                if value is not _MISSING and any(v in operand for v in values):
                    return False
            elif operator == "$eq":
                if not _matches_condition(value, operand):
                    return False
            elif operator == "$ne":
                if _matches_condition(value, operand):
                    return False
            else:
                raise ValueError(f"Unsupported filter operator: {operator}")
        return True

    if value is _MISSING:
        return condition is None
    return value == condition or condition in values


def document_matches(filter_doc: Mapping[str, Any], document: Any) -> bool:
    """
    Evaluate a MongoDB-style filter against an in-memory document.

    Supports field equality (array fields match if any element is equal),
    $in, $nin, $eq, $ne, $and and $or. Hosts without a query engine, and
    tests, use it to check composed filters.

    Raises:
        ValueError: Unsupported operator
    """
    for key, condition in filter_doc.items():
        if key == "$and":
            if not all(document_matches(part, document) for part in condition):
                return False
        elif key == "$or":
            if not any(document_matches(part, document) for part in condition):
                return False
        elif not _matches_condition(get_path(document, key), condition):
            return False
    return True
