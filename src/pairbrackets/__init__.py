"""
pairbrackets: bracket pair scanning for Python

Locates, counts and validates matched pairs of round, square, curly and
angle brackets in a single O(n) pass. Zero runtime dependencies.

Quick Start:
    >>> from pairbrackets import (
    ...     BracketTypeMode,
    ...     get_bracket_pair_positions,
    ...     validate_brackets,
    ... )
    >>> get_bracket_pair_positions("f(a[0], {b})")
    [BracketPair(start=1, end=11), BracketPair(start=3, end=5), BracketPair(start=8, end=10)]
    >>> validate_brackets("([{<>}])")
    True
    >>> validate_brackets("{[}", BracketTypeMode.SQUARE)
    False

Unbalanced input is never an error: counting and locating skip what they
cannot match, validation reports False, and scan_brackets() says where.
"""

from pairbrackets.classifiers import (
    brackets_match,
    closing_brackets,
    is_closing_bracket,
    is_opening_bracket,
    opening_brackets,
)
from pairbrackets.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from pairbrackets.errors import InvalidArgumentError, PairBracketsError, UnknownModeError
from pairbrackets.location import SourceLocation
from pairbrackets.modes import BracketTypeMode
from pairbrackets.pairs import (
    count_bracket_pairs,
    get_bracket_pair_positions,
    scan_brackets,
    validate_brackets,
)
from pairbrackets.scanner import (
    BracketPair,
    BracketScanner,
    ScanPolicy,
    ScanResult,
    ScanStackEntry,
)

__version__ = "0.1.0"

__all__ = [
    # Operations
    "count_bracket_pairs",
    "get_bracket_pair_positions",
    "scan_brackets",
    "validate_brackets",
    # Policies
    "brackets_match",
    "closing_brackets",
    "is_closing_bracket",
    "is_opening_bracket",
    "opening_brackets",
    # Types
    "BracketPair",
    "BracketScanner",
    "BracketTypeMode",
    "ScanPolicy",
    "ScanResult",
    "ScanStackEntry",
    "SourceLocation",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "InvalidArgumentError",
    "PairBracketsError",
    "UnknownModeError",
    "__version__",
]
