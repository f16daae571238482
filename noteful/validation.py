"""
Noteful API — Request Validation Helpers
========================================

What:  Pure functions used by the routers before anything reaches a store.

    required_fields_present()  First required field that is absent or null
    supplied_fields()          Recognized fields carrying a usable value
    sanitize_text()            Markup cleanup for free-text fields
    clean_text_field()         sanitize_text() that rejects markup-only input
    is_storable_id()           Whether a path id fits the integer id columns

Sanitization:
    Free text is cleaned with nh3 (Rust `ammonia` bindings) before it is
    persisted. Harmless formatting tags survive; <script>/<style> elements
    are removed with their content, event-handler attributes and
    `javascript:` URLs are dropped.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

import nh3

# Upper bound of a PostgreSQL INTEGER (int4) primary key
MAX_ROW_ID = 2**31 - 1


def required_fields_present(body: Mapping[str, Any], fields: Iterable[str]) -> Optional[str]:
    """
    Return the first field in `fields` missing from `body`, or None.

    A field counts as missing when the key is absent or its value is None.
    Empty strings are present; order of `fields` decides which name is
    reported when several are missing.
    """
    for field in fields:
        if body.get(field) is None:
            return field
    return None


def supplied_fields(body: Mapping[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    """
    Pick the recognized fields of a partial update.

    Keys outside `fields` are ignored. A recognized key only counts when its
    value is neither None nor an empty string.
    """
    return {
        field: body[field]
        for field in fields
        if body.get(field) is not None and body.get(field) != ""
    }


def sanitize_text(value: Optional[str]) -> Optional[str]:
    """Strip dangerous markup from a free-text value. None passes through."""
    if value is None:
        return None
    return nh3.clean(value)


def clean_text_field(value: str) -> Optional[str]:
    """
    Sanitize a submitted text value.

    Returns None when the client sent real content but nothing but
    whitespace is left once markup is stripped (e.g. "<script>x</script>").
    An empty or blank submission is returned unchanged.
    """
    cleaned = sanitize_text(value)
    if value.strip() and not cleaned.strip():
        return None
    return cleaned


def is_storable_id(value: int) -> bool:
    """True when `value` can be a row id: 1 through MAX_ROW_ID."""
    return 1 <= value <= MAX_ROW_ID
