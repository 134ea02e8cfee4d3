"""ContextVar-based scan configuration for pairbrackets.

Provides thread-local configuration using Python's ContextVars (PEP 567).
scan_brackets() called without an explicit mode reads its default from here.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pairbrackets.config import ScanConfig, scan_config_context
    from pairbrackets.modes import BracketTypeMode

    with scan_config_context(ScanConfig(default_mode=BracketTypeMode.SQUARE)):
        scan_brackets("{[]").balanced  # True: braces are ordinary characters

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from pairbrackets.modes import BracketTypeMode


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        default_mode: Mode used by scan_brackets() when no mode is passed.
            count_bracket_pairs(), get_bracket_pair_positions() and
            validate_brackets() never read it; the latter two default to ALL.

    """

    default_mode: BracketTypeMode = BracketTypeMode.ALL

    def __post_init__(self) -> None:
        # Accept mode names ("square") as well as members
        object.__setattr__(self, "default_mode", BracketTypeMode.parse(self.default_mode))

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ScanConfig.from_dict({"default_mode": "curly", "other": 1}).default_mode
            <BracketTypeMode.CURLY: 3>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(default_mode=BracketTypeMode.ROUND)):
        ...     get_scan_config().default_mode
        <BracketTypeMode.ROUND: 1>

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
