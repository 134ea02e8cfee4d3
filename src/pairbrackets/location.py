"""Source location tracking for scan reports.

Converts the 0-based character offsets produced by the scanner into
1-indexed line/column positions for messages and debugging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line/column position of a character in scanned text.
    
    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute 0-based offset in the text
    
    Examples:
            >>> SourceLocation.from_offset("a\\n(b", 2)
        SourceLocation(lineno=2, col_offset=1, offset=2)
            >>> str(SourceLocation(3, 7, 40))
            '3:7'
        
    """

    lineno: int
    col_offset: int
    offset: int = 0

    def __str__(self) -> str:
        """Format location as "line:col"."""
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(cls, text: str, offset: int) -> SourceLocation:
        """Locate a 0-based offset within text.

        Lines are split on "\\n" only. An offset equal to len(text) is
        allowed and points just past the last character.

        Raises:
            IndexError: If offset is negative or beyond the end of text.
        """
        if offset < 0 or offset > len(text):
            raise IndexError(f"offset {offset} outside text of length {len(text)}")
        lineno = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(lineno=lineno, col_offset=offset - line_start + 1, offset=offset)
