"""Logger access for pairbrackets modules.

Every logger lives under the "pairbrackets" namespace so an application
can enable the scanner's DEBUG output (skipped closers, strict scans
stopping, openers left unclosed) with a single logging configuration:

    logging.getLogger("pairbrackets").setLevel(logging.DEBUG)

The library installs no handlers.
"""

from __future__ import annotations

import logging

_ROOT = "pairbrackets"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name inside the pairbrackets namespace.

    Module names already under the package (``pairbrackets.scanner``) are
    used as is; anything else is nested below it.
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
