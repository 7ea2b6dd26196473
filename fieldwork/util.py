import re
from typing import Sized

from fieldwork.consts import COLOR_RE


def short_repr(obj: Sized) -> str:
    if type(obj) is str:
        obj: str
        lines = obj.splitlines()
        if len(lines) > 2:
            return repr("\n".join([lines[0], "…", lines[-1]]))
        if len(obj) > 75:
            return obj[:40] + "…" + obj[-40:]
        return obj

    if len(obj) > 2:
        empty_sequence_repr = repr(type(obj)())
        match = re.match(r"\w+", empty_sequence_repr)
        if match:
            type_name = match.group()
            parens = empty_sequence_repr[match.end() :]
        else:
            type_name = ""
            parens = empty_sequence_repr
        half = len(parens) // 2
        left_parens, right_parens = parens[:half], parens[half:]
        items = list(obj)
        return f"{type_name}{left_parens}{items[0]!r}, ..., {items[-1]!r}{right_parens}"
    return repr(obj)


def decolor(text):
    return COLOR_RE.sub("", text)


def compile_ignorecase(pattern: str) -> re.Pattern:
    """Compiles a user-supplied pattern for case-insensitive searching.
    A malformed pattern raises re.error as-is."""
    return re.compile(pattern, re.IGNORECASE)
