# reporting.py
"""
Failure collection for the checks in `distcheck.checks`.

A check never raises on a mismatch. It reports the mismatch to a `Reporter`
and moves on, so one bad value does not hide the next one. Tests decide
what to do with the collected failures, usually by calling
`raise_for_failures()` or asserting on `failures` directly.
"""
from __future__ import annotations

import logging

__all__ = [
    "CheckFailure",
    "Reporter",
]

logger = logging.getLogger(__name__)


class CheckFailure(AssertionError):
    """Raised by `Reporter.raise_for_failures` when any check failed."""

    def __init__(self, failures: list[str]):
        self.failures = list(failures)
        lines = "\n".join(f"  - {msg}" for msg in self.failures)
        super().__init__(f"{len(self.failures)} check(s) failed:\n{lines}")


class Reporter:
    """Records check failures without interrupting the caller.

    Args:
        name: str, optional
            Label prepended to log records, typically the test name.
    """

    def __init__(self, name: str | None = None):
        self.name = name
        self._failures: list[str] = []

    @property
    def failures(self) -> list[str]:
        """Messages recorded so far, in order."""
        return list(self._failures)

    @property
    def failed(self) -> bool:
        return bool(self._failures)

    def error(self, msg: str) -> None:
        """Record a failure and continue."""
        self._failures.append(msg)
        if self.name:
            logger.error("%s: %s", self.name, msg)
        else:
            logger.error("%s", msg)

    def raise_for_failures(self) -> None:
        if self._failures:
            raise CheckFailure(self._failures)

    def __repr__(self) -> str:
        return f"Reporter(name={self.name!r}, failures={len(self._failures)})"
