"""Bracket classification and matching policies.

Pure functions deciding whether a character is an opener or closer under
a BracketTypeMode, and whether an opener pairs with a closer. The glyph
sets per mode are built once at import time for O(1) lookups.

Usage:
    >>> from pairbrackets.classifiers import is_opening_bracket
    >>> is_opening_bracket("{", BracketTypeMode.ALL)
    True
    >>> is_opening_bracket("{", BracketTypeMode.ROUND)
    False
"""

from __future__ import annotations

from pairbrackets.modes import (
    BRACKET_PAIRS,
    CLOSING_BRACKETS,
    MATCHING_OPENER,
    OPENING_BRACKETS,
    BracketTypeMode,
)

_OPENERS_BY_MODE: dict[BracketTypeMode, frozenset[str]] = {
    BracketTypeMode.ALL: OPENING_BRACKETS,
    **{mode: frozenset(pair[0]) for mode, pair in BRACKET_PAIRS.items()},
}

_CLOSERS_BY_MODE: dict[BracketTypeMode, frozenset[str]] = {
    BracketTypeMode.ALL: CLOSING_BRACKETS,
    **{mode: frozenset(pair[1]) for mode, pair in BRACKET_PAIRS.items()},
}


def is_opening_bracket(char: str, mode: BracketTypeMode | str) -> bool:
    """Check if char opens a bracket recognized under mode."""
    return char in _OPENERS_BY_MODE[BracketTypeMode.parse(mode)]


def is_closing_bracket(char: str, mode: BracketTypeMode | str) -> bool:
    """Check if char closes a bracket recognized under mode."""
    return char in _CLOSERS_BY_MODE[BracketTypeMode.parse(mode)]


def brackets_match(opening_bracket: str, closing_bracket: str) -> bool:
    """Check if opening_bracket pairs with closing_bracket.

    Only the canonical pairs (), [], {} and <> match, and only in
    opener-then-closer order.
    """
    return MATCHING_OPENER.get(closing_bracket) == opening_bracket


def opening_brackets(*modes: BracketTypeMode | str) -> frozenset[str]:
    """Openers recognized under the union of modes."""
    return frozenset().union(
        *(_OPENERS_BY_MODE[BracketTypeMode.parse(m)] for m in modes)
    )


def closing_brackets(*modes: BracketTypeMode | str) -> frozenset[str]:
    """Closers recognized under the union of modes."""
    return frozenset().union(
        *(_CLOSERS_BY_MODE[BracketTypeMode.parse(m)] for m in modes)
    )
