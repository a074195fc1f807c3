"""Error taxonomy for cviz.

Startup errors (:class:`ConfigError`, :class:`RecordValidationError`) are fatal.
Request errors (:class:`RequestIOError`) are answered per request, and
:class:`BrowserLaunchError` is only ever logged.
"""

from __future__ import annotations

from typing import NamedTuple


class CvizError(Exception):
    """Base class for all cviz errors."""


class ConfigError(CvizError):
    """Missing, unreadable or malformed input file, or invalid options."""


class Violation(NamedTuple):
    """A single invalid field in an input record."""

    index: int
    field: str
    message: str

    def __str__(self) -> str:
        return f"objects[{self.index}].{self.field}: {self.message}"


class RecordValidationError(CvizError):
    """One or more input records are invalid.

    All violations found in the batch are carried, not just the first.
    """

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = list(violations)
        lines = "\n".join(f"  - {v}" for v in self.violations)
        super().__init__(f"{len(self.violations)} invalid record field(s):\n{lines}")


class RequestIOError(CvizError):
    """A file referenced by a request could not be opened or read."""


class BrowserLaunchError(CvizError):
    """The platform URL-opening command could not be started."""
