"""Custom exception hierarchy for flakers.

All exceptions that cross layer boundaries must inherit from
:class:`FlakersError`.  Raw OS or codec exceptions raised while reading
stdin must NEVER propagate beyond the infrastructure layer — they are
caught and re-raised as :class:`InputReadError`.

Hierarchy
---------
FlakersError
├── InputReadError
├── OutputWriteError
├── FlakeRefError
└── EnvironmentError
"""

from __future__ import annotations


class FlakersError(Exception):
    """Base exception for all flakers errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Process I/O -----------------------------------------------------------

class InputReadError(FlakersError):
    """Raised when standard input cannot be read to completion."""


class OutputWriteError(FlakersError):
    """Raised when the rendered document cannot be written to stdout."""


# --- Parsing ---------------------------------------------------------------

class FlakeRefError(FlakersError):
    """Raised when a flake URL cannot be parsed.

    The line parser treats this as a skip, not a failure; it only
    escapes when :func:`~flakers.core.flake_ref.parse_flake_ref` is
    called directly.
    """


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(FlakersError):
    """Raised when a required runtime dependency is not available."""
