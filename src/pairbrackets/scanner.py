"""Single-pass stack scanner with O(n) guaranteed performance.

Walks the text once, left to right, keeping a stack of (opener, position)
entries. Every derived operation (pair counting, pair location,
validation) is this one scan under a different traversal policy:

- LENIENT: a closer that cannot be matched is skipped; scanning continues
- STRICT: a closer that cannot be matched stops the scan as unbalanced

Thread Safety:
BracketScanner instances are single-use. Create one per text.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple

from pairbrackets.classifiers import brackets_match, closing_brackets, opening_brackets
from pairbrackets.errors import require_text
from pairbrackets.location import SourceLocation
from pairbrackets.modes import BracketTypeMode
from pairbrackets.utils.logger import get_logger

logger = get_logger(__name__)


class ScanPolicy(Enum):
    """What the scanner does with a closer it cannot match."""

    LENIENT = auto()  # Skip it
    STRICT = auto()  # Stop, text is unbalanced


class ScanStackEntry(NamedTuple):
    """An opener waiting on the stack for its closer."""

    char: str
    position: int


class BracketPair(NamedTuple):
    """Offsets of a matched opener and closer (0-based, start < end).

    Compares equal to a plain (start, end) tuple.
    """

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of one scan.

    Attributes:
        pairs: Matched pairs in the order they closed (innermost first)
        unclosed: Openers still on the stack at the end, bottom to top
        unmatched: Offsets of closers that found no matching opener
        mismatch: Offset where a STRICT scan stopped, None otherwise

    """

    pairs: tuple[BracketPair, ...]
    unclosed: tuple[ScanStackEntry, ...]
    unmatched: tuple[int, ...]
    mismatch: int | None = None

    @property
    def balanced(self) -> bool:
        """True if every closer matched and no opener was left open."""
        return self.mismatch is None and not self.unmatched and not self.unclosed

    def sorted_pairs(self) -> list[BracketPair]:
        """Pairs ordered by start offset (outer before inner)."""
        return sorted(self.pairs, key=lambda p: p.start)

    def unclosed_locations(self, text: str) -> list[SourceLocation]:
        """Line/column of every leftover opener in text."""
        return [SourceLocation.from_offset(text, e.position) for e in self.unclosed]

    def unmatched_locations(self, text: str) -> list[SourceLocation]:
        """Line/column of every closer that found no opener in text."""
        return [SourceLocation.from_offset(text, pos) for pos in self.unmatched]


class BracketScanner:
    """Stack-based bracket scanner.

    Usage:
            >>> scanner = BracketScanner("(a[b])", [BracketTypeMode.ALL])
            >>> scanner.scan().pairs
        (BracketPair(start=2, end=4), BracketPair(start=0, end=5))

    Thread Safety:
        Scanner instances are single-use. Create one per text.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_text",
        "_openers",
        "_closers",
        "_policy",
        "_result",
    )

    def __init__(
        self,
        text: str,
        modes: Iterable[BracketTypeMode | str] = (BracketTypeMode.ALL,),
        policy: ScanPolicy = ScanPolicy.LENIENT,
    ) -> None:
        """Initialize scanner.

        Args:
            text: Text to scan (never mutated)
            modes: Bracket kinds that take part; glyphs of any other kind
                are treated as ordinary characters
            policy: Handling of closers that cannot be matched

        Raises:
            InvalidArgumentError: If text is None or a mode is unknown.
        """
        self._text = require_text(text)
        modes = tuple(modes)
        self._openers = opening_brackets(*modes)
        self._closers = closing_brackets(*modes)
        self._policy = policy
        self._result: ScanResult | None = None

    @property
    def policy(self) -> ScanPolicy:
        return self._policy

    def scan(self) -> ScanResult:
        """Scan the text once and return the result.

        Repeated calls return the same result without rescanning.
        """
        if self._result is None:
            self._result = self._scan()
        return self._result

    def _scan(self) -> ScanResult:
        openers = self._openers
        closers = self._closers
        strict = self._policy is ScanPolicy.STRICT

        stack: list[ScanStackEntry] = []
        pairs: list[BracketPair] = []
        unmatched: list[int] = []
        mismatch: int | None = None

        for i, c in enumerate(self._text):
            if c in openers:
                stack.append(ScanStackEntry(c, i))
            elif c in closers:
                if stack and brackets_match(stack[-1].char, c):
                    pairs.append(BracketPair(stack.pop().position, i))
                    continue
                unmatched.append(i)
                if strict:
                    logger.debug("Unmatched %r at offset %d, stopping scan", c, i)
                    mismatch = i
                    break
                logger.debug("Skipping unmatched %r at offset %d", c, i)

        if stack:
            logger.debug("%d opener(s) left unclosed", len(stack))

        return ScanResult(
            pairs=tuple(pairs),
            unclosed=tuple(stack),
            unmatched=tuple(unmatched),
            mismatch=mismatch,
        )
