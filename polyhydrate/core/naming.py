"""Naming — case conversion between external keys and Python identifiers.

Invariants:
    - Pure string functions, no state
    - to_snake_case is idempotent on snake_case input
    - to_studly_caps only upper-cases word starts; the rest of each word is kept

Design Decisions:
    - Callers may inject their own converter into Hydrator; these are defaults only
"""

import re

_WORD_SEPARATORS = re.compile(r"[\s_\-.]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake_case(name: str) -> str:
    """'lineItems', 'LineItems', 'line-items' → 'line_items'."""
    spaced = _CAMEL_BOUNDARY.sub("_", name.strip())
    parts = [p for p in _WORD_SEPARATORS.split(spaced) if p]
    return "_".join(p.lower() for p in parts)


def to_studly_caps(name: str) -> str:
    """'line_item', 'line-item', 'lineItem' → 'LineItem'."""
    parts = [p for p in _WORD_SEPARATORS.split(name.strip()) if p]
    return "".join(p[0].upper() + p[1:] for p in parts)


def to_camel_case(name: str) -> str:
    """'line_items' → 'lineItems'."""
    studly = to_studly_caps(name)
    return studly[:1].lower() + studly[1:]
