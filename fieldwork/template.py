from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from fieldwork.consts import PLACEHOLDER_RE
from fieldwork.pipeline import unique
from fieldwork.records import Record, get_field, is_empty


def placeholders(template: str) -> list[str]:
    """
    >>> placeholders("{Name} is {Age}, {Name}")
    ['Name', 'Age']
    """
    return unique(PLACEHOLDER_RE.findall(template))


def _lookup(name: str, record: Record, scopes: Sequence[Mapping]):
    value = get_field(record, name)
    if not is_empty(value):
        return value
    for scope in scopes:
        value = get_field(scope, name)
        if not is_empty(value):
            return value
    return None


def _is_record_sequence(obj) -> bool:
    if isinstance(obj, (Mapping, str)) or hasattr(obj, "_asdict"):
        return False
    return isinstance(obj, Iterable)


def render(record: Record, template: str, scopes: Sequence[Mapping] = ()) -> str | list[str]:
    """Substitutes every {name} in `template` with the record's field, or with the
    first of `scopes` that has a non-empty `name`. Unresolved placeholders are left as-is.

    Given a sequence of records rather than a single one, renders each (see `render_each`).
    """
    if _is_record_sequence(record):
        return render_each(record, template, scopes)
    resolved = {}
    for name in placeholders(template):
        value = _lookup(name, record, scopes)
        if value is not None:
            resolved[name] = str(value).strip()
    # Single pass: substituted values are never scanned for placeholders themselves
    return PLACEHOLDER_RE.sub(lambda match: resolved.get(match[1], match[0]), template)


def render_each(records: Iterable[Record], template: str, scopes: Sequence[Mapping] = ()) -> list[str]:
    return [render(record, template, scopes) for record in records]
