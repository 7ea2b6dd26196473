"""Projection and filtering of record batches by ambiguity-tolerant field patterns.

Both operations buffer their whole input before doing anything, since a field
may only show up in the last record of a batch.

Guidance (which fields or values are available, what was ambiguous) is never
raised. It is passed to `on_report`, which prints to the console by default.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence

from fieldwork.consts import MATCH_ALL
from fieldwork.fields import OnReport, Report, ReportKind, fields, report_to_console, resolve
from fieldwork.log import log
from fieldwork.pipeline import unique
from fieldwork.records import ABSENT, Record, as_record, get_field, is_empty
from fieldwork.util import compile_ignorecase


def _buffer(records: Iterable) -> list[Record]:
    return [as_record(record) for record in records]


def _report_fields(records: Sequence[Record], on_report: OnReport) -> None:
    on_report(Report(ReportKind.FIELDS, None, fields(records, MATCH_ALL)))


def project(
    records: Iterable, patterns: Sequence[str], *, on_report: OnReport = report_to_console
) -> list[dict]:
    """Reduces every record to the fields named by `patterns`, in `patterns` order.
    If any pattern doesn't resolve to exactly one field, nothing is returned."""
    records = _buffer(records)
    if not patterns:
        _report_fields(records, on_report)
        return []

    resolved_fields = []
    for pattern in patterns:
        resolution = resolve(records, pattern, require_single=True)
        if not resolution:
            on_report(resolution.report())
            log.debug(f"project() | {pattern!r} {resolution.status.value}")
            continue
        resolved_fields.append(resolution.field)

    if len(resolved_fields) != len(patterns):
        return []

    projected = []
    for record in records:
        projected.append({name: get_field(record, name, None) for name in resolved_fields})
    return projected


def _values(records: Sequence[Record], field: str) -> list:
    values = (get_field(record, field) for record in records)
    return unique(value for value in values if value is not ABSENT)


def distinct_values(
    records: Iterable, field_pattern: str, *, on_report: OnReport = report_to_console
) -> list:
    """Distinct values of the field `field_pattern` resolves to, in order of first appearance.
    Records missing the field are skipped."""
    records = _buffer(records)
    resolution = resolve(records, field_pattern, require_single=True)
    if not resolution:
        on_report(resolution.report())
        return []
    return _values(records, resolution.field)


def filter_records(
    records: Iterable,
    field_pattern: str | None = None,
    value_pattern: str | None = None,
    *,
    no_value: bool = False,
    on_report: OnReport = report_to_console,
) -> list[Record]:
    """
    - No `field_pattern`: reports available fields.
    - `no_value`: records whose field is absent or empty (`value_pattern` is ignored).
    - No `value_pattern`: reports the field's distinct values.
    - Otherwise: records whose field value, as text, matches `value_pattern` (case-insensitive search).
    """
    records = _buffer(records)
    if not field_pattern:
        _report_fields(records, on_report)
        return []

    resolution = resolve(records, field_pattern, require_single=True)
    if not resolution:
        on_report(resolution.report())
        return []
    field = resolution.field

    if no_value:
        return [record for record in records if is_empty(get_field(record, field))]

    if not value_pattern:
        values = _values(records, field)
        on_report(Report(ReportKind.VALUES, field_pattern, values, field=field))
        return []

    regex = compile_ignorecase(value_pattern)
    matching = []
    for record in records:
        value = get_field(record, field)
        if value is ABSENT:
            continue
        if regex.search(str(value)):
            matching.append(record)
    return matching
