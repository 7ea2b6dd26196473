from __future__ import annotations

import re
from collections.abc import Generator, Iterable, Sequence

from fieldwork.errors import ParseMismatch


def _captured(match: re.Match, names: Sequence[str]) -> str | dict[str, str]:
    # A group that didn't take part in the match captures ""
    groups = match.groups(default="")
    if not names:
        return groups[0] if groups else match.group(0)
    return {name: group for name, group in zip(names, groups)}


def parse_line(line: str, pattern: str | re.Pattern, names: Sequence[str] = (), *, enforce: bool = False):
    """Matches `line` against `pattern` (case-sensitive search).

    Without `names`, returns the text of the first group. With `names`, returns
    {names[0]: group 1, names[1]: group 2, ...}; names without a group are ignored,
    as are groups without a name.

    A line that doesn't match returns None, or raises ParseMismatch if `enforce`.
    """
    regex = re.compile(pattern)
    match = regex.search(line)
    if not match:
        if enforce:
            raise ParseMismatch(line, regex.pattern)
        return None
    return _captured(match, names)


def parse_lines(
    lines: Iterable[str], pattern: str | re.Pattern, names: Sequence[str] = (), *, enforce: bool = False
) -> Generator[str | dict[str, str]]:
    regex = re.compile(pattern)
    for line in lines:
        line = line.rstrip("\r\n")
        match = regex.search(line)
        if match:
            yield _captured(match, names)
        elif enforce:
            raise ParseMismatch(line, regex.pattern)
