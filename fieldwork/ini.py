from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from fieldwork.consts import DEFAULT_COMMENT_MARKER, INI_KEY_VALUE_RE, INI_SECTION_RE
from fieldwork.log import log

SECTIONLESS = ""


class IniDocument(dict):
    """Ordered {section: {key: value}}. Sectionless keys that don't collide with
    a section name live at the top level as {key: value}.

    `warnings` holds a message per line that was neither a section, a key nor a comment.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.warnings: list[str] = []


def parse_ini(
    lines: Iterable[str] | str,
    comment_marker: str = DEFAULT_COMMENT_MARKER,
    keep_empty_sections: bool = False,
) -> IniDocument:
    """
    >>> dict(parse_ini("z=9\\n[a]\\nx=1"))
    {'z': '9', 'a': {'x': '1'}}
    """
    if isinstance(lines, str):
        lines = lines.splitlines()

    sections: dict[str, dict[str, str]] = {SECTIONLESS: {}}
    current_section = SECTIONLESS
    warnings = []
    for line_number, line in enumerate(lines, start=1):
        if comment_marker:
            line = line.partition(comment_marker)[0]
        line = line.strip()
        if not line:
            continue

        if section_match := INI_SECTION_RE.match(line):
            current_section = section_match.group(1).strip()
            sections.setdefault(current_section, {})
            continue

        if key_value_match := INI_KEY_VALUE_RE.match(line):
            key, value = key_value_match.groups()
            sections[current_section][key.strip()] = value.strip()
            continue

        warning = f"Skipping unrecognized line {line_number}: {line!r}"
        log.warning(warning)
        warnings.append(warning)

    if not keep_empty_sections:
        sections = {name: keys for name, keys in sections.items() if keys}

    document = IniDocument()
    document.warnings = warnings
    for section_name, keys in sections.items():
        if section_name != SECTIONLESS:
            document[section_name] = keys
            continue
        # Hoist sectionless keys unless they collide with a section name.
        colliding = {}
        for key, value in keys.items():
            if key in sections:
                colliding[key] = value
            else:
                document[key] = value
        if colliding or keep_empty_sections:
            document[SECTIONLESS] = colliding
    return document


def read_ini(path: str | Path, encoding: str = "utf-8", **kwargs) -> IniDocument:
    text = Path(path).read_text(encoding=encoding)
    return parse_ini(text, **kwargs)
