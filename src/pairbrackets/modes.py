"""Bracket type modes and glyph constants.

This module defines the selector that restricts which bracket kinds
take part in a scan, and the fixed set of bracket glyphs.
"""

from __future__ import annotations

from enum import Enum

from pairbrackets.errors import UnknownModeError


class BracketTypeMode(Enum):
    """Which bracket kinds a scan recognizes.
    
    - ALL: round, square, curly and angle brackets
    - ROUND: ( ) only
    - SQUARE: [ ] only
    - CURLY: { } only
    - ANGLE: < > only
    
    Glyphs of kinds outside the mode are ordinary characters.
        
    """

    ALL = 0
    ROUND = 1  # ( )
    SQUARE = 2  # [ ]
    CURLY = 3  # { }
    ANGLE = 4  # < >

    @classmethod
    def parse(cls, value: BracketTypeMode | str) -> BracketTypeMode:
        """Resolve a mode from a member or its case-insensitive name.

        Example:
            >>> BracketTypeMode.parse("square")
            <BracketTypeMode.SQUARE: 2>

        Raises:
            UnknownModeError: If value names no mode.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise UnknownModeError(value)


# Opener/closer glyph per kind (closed set, no user-defined kinds)
BRACKET_PAIRS: dict[BracketTypeMode, tuple[str, str]] = {
    BracketTypeMode.ROUND: ("(", ")"),
    BracketTypeMode.SQUARE: ("[", "]"),
    BracketTypeMode.CURLY: ("{", "}"),
    BracketTypeMode.ANGLE: ("<", ">"),
}

OPENING_BRACKETS: frozenset[str] = frozenset(o for o, _ in BRACKET_PAIRS.values())

CLOSING_BRACKETS: frozenset[str] = frozenset(c for _, c in BRACKET_PAIRS.values())

# Closer -> the opener it pairs with
MATCHING_OPENER: dict[str, str] = {c: o for o, c in BRACKET_PAIRS.values()}
