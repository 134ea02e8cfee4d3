"""Exception classes for pairbrackets.

Provides standardized exceptions for error handling throughout pairbrackets.
Unbalanced brackets are never an error: scans report them as results.
"""

from __future__ import annotations


class PairBracketsError(Exception):
    """Base exception for all pairbrackets errors.
    
    Subclass this for specific error categories.
    """

    pass


class InvalidArgumentError(PairBracketsError, TypeError):
    """Error for an absent or ill-typed argument.
    
    Raised when the text to scan is None (or not a string), or when a
    bracket type mode cannot be resolved.
    """

    def __init__(self, argument: str, message: str) -> None:
        """Initialize invalid argument error.
        
        Args:
            argument: Name of the offending parameter (e.g., "text", "mode")
            message: Description of what was wrong with it
        """
        self.argument = argument
        self.message = message
        super().__init__(f"{argument}: {message}")


class UnknownModeError(InvalidArgumentError, ValueError):
    """A bracket type mode value that names no BracketTypeMode member."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__("mode", f"unknown bracket type mode {value!r}")


def require_text(text: object, argument: str = "text") -> str:
    """Return text unchanged, or raise InvalidArgumentError.

    Args:
        text: Value passed by the caller
        argument: Parameter name used in the error message

    Returns:
        The text, known to be a str.

    Raises:
        InvalidArgumentError: If text is None or not a str.
    """
    if text is None:
        raise InvalidArgumentError(argument, "must not be None")
    if not isinstance(text, str):
        raise InvalidArgumentError(
            argument, f"expected str, got {type(text).__name__}"
        )
    return text
