"""
Scraper Diagnostics Module
==========================

Per-field, per-source ledger of extraction outcomes for one scraper run.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ExtractionAttempt:
    """Outcome of one source trying to produce one field."""

    field: str
    source: str
    success: bool
    error: Any = None


@dataclass(frozen=True)
class Failure:
    """A failed attempt with its original cause."""

    field: str
    source: str
    error: Any


class ScraperDiagnostics:
    """
    Records which source supplied, or failed to supply, each field.

    Entries are keyed by (field, source); recording the same pair twice
    keeps the most recent outcome. Fields and sources keep their
    first-insertion order.
    """

    def __init__(self) -> None:
        self._data: dict[str, dict[str, ExtractionAttempt]] = {}

    def _record(self, attempt: ExtractionAttempt) -> None:
        self._data.setdefault(attempt.field, {})[attempt.source] = attempt

    def record_success(self, source: str, field: str) -> None:
        """Record that ``source`` produced a value for ``field``."""
        self._record(ExtractionAttempt(field=str(field), source=source, success=True))

    def record_failure(self, source: str, field: str, error: Any) -> None:
        """Record that ``source`` failed to produce ``field`` because of ``error``."""
        self._record(ExtractionAttempt(field=str(field), source=source, success=False, error=error))

    def attempts(self) -> list[ExtractionAttempt]:
        """Every recorded attempt, field by field."""
        return [attempt for sources in self._data.values() for attempt in sources.values()]

    def get_summary(self) -> dict[str, dict[str, list[str]]]:
        """
        Summarize outcomes per field.

        Returns:
            Mapping of field to {"successes": [...], "failures": [...]}
        """
        summary: dict[str, dict[str, list[str]]] = {}

        for field, sources in self._data.items():
            entry: dict[str, list[str]] = {"successes": [], "failures": []}
            for source, attempt in sources.items():
                bucket = "successes" if attempt.success else "failures"
                entry[bucket].append(source)
            summary[field] = entry

        return summary

    def get_failures(self) -> list[Failure]:
        """Flattened list of failed attempts with their causes."""
        return [
            Failure(field=attempt.field, source=attempt.source, error=attempt.error)
            for attempt in self.attempts()
            if not attempt.success
        ]

    def report_lines(self) -> list[str]:
        """Human-readable report, one line per entry."""
        lines = ["--- Scraper Diagnostics Report ---"]

        for field, sources in self._data.items():
            lines.append(f"Field: {field}")
            for source, attempt in sources.items():
                if attempt.success:
                    lines.append(f"  ✅ {source}")
                else:
                    lines.append(f"  ❌ {source}: {attempt.error}")

        lines.append("----------------------------------")
        return lines

    def print_report(self, write: Callable[[str], Any] = print) -> None:
        """Write the report line by line (to stdout by default)."""
        for line in self.report_lines():
            write(line)
