from __future__ import annotations

import dataclasses
import enum
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from fuzzysearch import find_near_matches
from rich.text import Text

from fieldwork import colors
from fieldwork.consts import MATCH_ALL, MAX_SUGGESTION_DISTANCE
from fieldwork.log import console, log, log_in_out
from fieldwork.pipeline import unique
from fieldwork.records import Record, field_names
from fieldwork.util import compile_ignorecase, short_repr


class Status(enum.Enum):
    RESOLVED = "resolved"
    NOT_FOUND = "not found"
    AMBIGUOUS = "ambiguous"
    CANDIDATES = "candidates"


class ReportKind(enum.Enum):
    FIELDS = "fields"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not found"
    VALUES = "values"


@dataclass
class Resolution:
    pattern: str
    status: Status
    candidates: list[str] = dataclasses.field(default_factory=list)
    field: str | None = None
    suggestions: list[str] = dataclasses.field(default_factory=list)

    def __bool__(self):
        return self.status is Status.RESOLVED

    def report(self) -> Report | None:
        if self.status is Status.AMBIGUOUS:
            return Report(ReportKind.AMBIGUOUS, self.pattern, self.candidates)
        if self.status is Status.NOT_FOUND:
            return Report(ReportKind.NOT_FOUND, self.pattern, self.suggestions)
        return None


@dataclass
class Report:
    """User guidance: what fields or values are available.
    For NOT_FOUND, `items` are "did you mean" suggestions."""

    kind: ReportKind
    pattern: str | None
    items: list[Any]
    field: str | None = None


OnReport = Callable[[Report], Any]


def fields(records: Iterable[Record], pattern: str = MATCH_ALL) -> list[str]:
    """Field names of all records matching `pattern` (case-insensitive search),
    each once, ordered by first appearance. Names differing only in case count
    as one field, spelled as first seen."""
    regex = compile_ignorecase(pattern)
    all_names = (name for record in records for name in field_names(record))
    distinct_names = unique(all_names, key=lambda name: str(name).lower())
    return [name for name in distinct_names if regex.search(str(name))]


def suggest(pattern: str, names: Iterable[str]) -> list[str]:
    """Names within a small edit distance of `pattern`."""
    max_l_dist = min(len(pattern) - 1, MAX_SUGGESTION_DISTANCE)
    if max_l_dist < 1:
        return []
    lowered_pattern = pattern.lower()
    return [
        name
        for name in names
        if find_near_matches(lowered_pattern, str(name).lower(), max_l_dist=max_l_dist)
    ]


@log_in_out
def resolve(records: Sequence[Record], pattern: str, require_single: bool = True) -> Resolution:
    candidates = fields(records, pattern)
    if not require_single:
        return Resolution(pattern, Status.CANDIDATES, candidates)

    if len(candidates) == 1:
        return Resolution(pattern, Status.RESOLVED, candidates, field=candidates[0])

    if not candidates:
        suggestions = suggest(pattern, fields(records))
        return Resolution(pattern, Status.NOT_FOUND, candidates, suggestions=suggestions)

    lowered_pattern = pattern.lower()
    exact_matches = [name for name in candidates if str(name).lower() == lowered_pattern]
    if len(exact_matches) == 1:
        return Resolution(pattern, Status.RESOLVED, candidates, field=exact_matches[0])
    return Resolution(pattern, Status.AMBIGUOUS, candidates)


def report_to_console(report: Report) -> None:
    log.debug(f"{report.kind.value} | {report.pattern!r} | {short_repr(report.items)}")
    pattern = colors.b(repr(report.pattern))
    if report.kind is ReportKind.FIELDS:
        header = colors.h3("Available fields:")
        items = map(colors.field, report.items)
    elif report.kind is ReportKind.AMBIGUOUS:
        header = colors.warn("Ambiguous field pattern ") + pattern + colors.warn(". Matching fields:")
        items = map(colors.field, report.items)
    elif report.kind is ReportKind.NOT_FOUND:
        header = colors.warn("No field matches ") + pattern
        if report.items:
            header += colors.warn(". Did you mean:")
        items = map(colors.field, report.items)
    else:
        header = colors.h3(f"Values of {report.field}:")
        items = (colors.value(repr(value)) for value in report.items)
    lines = [header, *(f" {colors.dim('·')} {item}" for item in items)]
    console.print(Text.from_ansi("\n".join(lines)))
