"""Pair counting, pair location and validation.

Each operation is one BracketScanner pass under the policy it needs:
counting and locating are lenient (unmatched closers are skipped),
validation is strict (the first unmatched closer fails the text).

Example:
    >>> get_bracket_pair_positions("(a(b)c)")
    [BracketPair(start=0, end=6), BracketPair(start=2, end=4)]
    >>> validate_brackets("([)]", BracketTypeMode.ALL)
    False
"""

from __future__ import annotations

from pairbrackets.config import get_scan_config
from pairbrackets.errors import require_text
from pairbrackets.modes import BracketTypeMode
from pairbrackets.scanner import BracketPair, BracketScanner, ScanPolicy, ScanResult

# count_bracket_pairs() has always recognized only these two kinds
_COUNTED_MODES = (BracketTypeMode.ROUND, BracketTypeMode.SQUARE)


def _configured_mode(mode: BracketTypeMode | str | None) -> BracketTypeMode:
    if mode is None:
        return get_scan_config().default_mode
    return BracketTypeMode.parse(mode)


def count_bracket_pairs(text: str) -> int:
    """Count matched round and square bracket pairs in text.

    Curly and angle brackets are ordinary characters here. Unmatched
    closers are skipped and unclosed openers are not counted.

    Raises:
        InvalidArgumentError: If text is None.
    """
    require_text(text)
    return len(BracketScanner(text, _COUNTED_MODES, ScanPolicy.LENIENT).scan().pairs)


def get_bracket_pair_positions(
    text: str, mode: BracketTypeMode | str = BracketTypeMode.ALL
) -> list[BracketPair]:
    """Find the start and end offsets of every matched bracket pair.

    Args:
        text: The source text
        mode: Bracket kinds to recognize (default: every kind)

    Returns:
        Pairs sorted by start offset ascending, so an enclosing pair
        comes before the pairs nested in it.

    Raises:
        InvalidArgumentError: If text is None or mode is unknown.
    """
    require_text(text)
    scanner = BracketScanner(text, (BracketTypeMode.parse(mode),), ScanPolicy.LENIENT)
    return scanner.scan().sorted_pairs()


def validate_brackets(
    text: str, mode: BracketTypeMode | str = BracketTypeMode.ALL
) -> bool:
    """Check that every bracket in text is correctly nested and closed.

    Empty text, and text without recognized brackets, is balanced.

    Raises:
        InvalidArgumentError: If text is None or mode is unknown.
    """
    require_text(text)
    scanner = BracketScanner(text, (BracketTypeMode.parse(mode),), ScanPolicy.STRICT)
    return scanner.scan().balanced


def scan_brackets(
    text: str,
    mode: BracketTypeMode | str | None = None,
    *,
    strict: bool = False,
) -> ScanResult:
    """Scan text and report matched pairs, unclosed openers and unmatched closers.

    Args:
        text: The source text
        mode: Bracket kinds to recognize (default: configured default_mode)
        strict: Stop at the first unmatched closer instead of skipping it

    Example:
        >>> result = scan_brackets("(a]")
        >>> result.unmatched, result.unclosed
        ((2,), (ScanStackEntry(char='(', position=0),))

    Raises:
        InvalidArgumentError: If text is None or mode is unknown.
    """
    require_text(text)
    policy = ScanPolicy.STRICT if strict else ScanPolicy.LENIENT
    return BracketScanner(text, (_configured_mode(mode),), policy).scan()


__all__ = [
    "count_bracket_pairs",
    "get_bracket_pair_positions",
    "scan_brackets",
    "validate_brackets",
]
