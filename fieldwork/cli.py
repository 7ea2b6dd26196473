from __future__ import annotations

import functools
import json
import os
import re
import sys
from typing import IO, Any

import click

from fieldwork import consts
from fieldwork.errors import FieldworkError
from fieldwork.fields import Status, report_to_console, resolve
from fieldwork.ini import parse_ini
from fieldwork.lines import parse_lines
from fieldwork.log import log
from fieldwork.pipeline import median as median_of
from fieldwork.pipeline import unique as unique_of
from fieldwork.process import run as run_process
from fieldwork.query import distinct_values, filter_records, project
from fieldwork.records import ABSENT, get_field
from fieldwork.syntax import syntax_highlight
from fieldwork.template import render_each


def read_records(stream: IO[str]) -> list[Any]:
    """A JSON array, a single JSON object, or JSON lines."""
    text = stream.read().strip()
    if not text:
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return [json.loads(line) for line in text.splitlines() if line.strip()]
    if isinstance(data, list):
        return data
    return [data]


def echo_json(data) -> None:
    text = json.dumps(data, indent=2, default=str, ensure_ascii=False)
    if sys.stdout.isatty():
        text = syntax_highlight(text, "json").rstrip("\n")
    click.echo(text)


def exits_on_errors(command):
    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except (FieldworkError, re.error, ValueError) as e:
            log.error(repr(e))
            return sys.exit(1)

    return wrapper


def stdin() -> IO[str]:
    return click.get_text_stream("stdin")


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
def main():
    """Explore JSON records piped through stdin."""


@main.command()
@click.argument("pattern", required=False, default=consts.MATCH_ALL)
@exits_on_errors
def fields(pattern: str):
    """List field names matching PATTERN."""
    records = read_records(stdin())
    resolution = resolve(records, pattern, require_single=False)
    echo_json(resolution.candidates)


@main.command()
@click.argument("patterns", nargs=-1)
@exits_on_errors
def select(patterns: tuple[str]):
    """Keep only the fields matching PATTERNS, one field per pattern."""
    records = read_records(stdin())
    projected = project(records, patterns)
    if projected:
        echo_json(projected)


@main.command()
@click.argument("field_pattern", required=False)
@click.argument("value_pattern", required=False)
@click.option("-n", "--no-value", is_flag=True, help="Records where the field is missing or empty")
@exits_on_errors
def where(field_pattern: str | None, value_pattern: str | None, no_value: bool):
    """Keep records whose FIELD_PATTERN field matches VALUE_PATTERN."""
    records = read_records(stdin())
    matching = filter_records(records, field_pattern, value_pattern, no_value=no_value)
    if matching:
        echo_json(matching)


@main.command()
@click.option("-k", "--key", "key", help="Field name to compare records by")
@exits_on_errors
def unique(key: str | None):
    """Drop repeated records, keeping the first of each."""
    records = read_records(stdin())
    echo_json(unique_of(records, key=key))


@main.command()
@click.argument("field_pattern")
@exits_on_errors
def values(field_pattern: str):
    """List the distinct values of a field."""
    records = read_records(stdin())
    echo_json(distinct_values(records, field_pattern))


@main.command()
@click.argument("field_pattern")
@exits_on_errors
def median(field_pattern: str):
    """Median of a numeric field."""
    records = read_records(stdin())
    resolution = resolve(records, field_pattern)
    if resolution.status is not Status.RESOLVED:
        report_to_console(resolution.report())
        return sys.exit(1)
    numbers = []
    for record in records:
        value = get_field(record, resolution.field)
        if value is ABSENT or value is None:
            continue
        numbers.append(float(value))
    echo_json(median_of(numbers))


@main.command()
@click.argument("template")
@click.option("-v", "--var", "variables", multiple=True, help="NAME=VALUE, used when a record lacks NAME")
@exits_on_errors
def render(template: str, variables: tuple[str]):
    """Render TEMPLATE once per record, substituting {name} placeholders."""
    scope = {}
    for variable in variables:
        assignment = consts.ASSIGNMENT_RE.fullmatch(variable)
        if not assignment:
            raise click.BadParameter(f"Expected NAME=VALUE, got {variable!r}", param_hint="--var")
        scope[assignment["name"].strip()] = assignment["value"]
    records = read_records(stdin()) or [{}]
    for rendered in render_each(records, template, scopes=[scope, os.environ]):
        click.echo(rendered)


@main.command()
@click.argument("pattern")
@click.argument("names", nargs=-1)
@click.option("-e", "--enforce", is_flag=True, help="Fail on the first line that doesn't match")
@exits_on_errors
def parse(pattern: str, names: tuple[str], enforce: bool):
    """Parse raw stdin lines with PATTERN's capture groups, labeled by NAMES."""
    parsed = []
    try:
        for item in parse_lines(stdin(), pattern, names, enforce=enforce):
            parsed.append(item)
    finally:
        if parsed:
            echo_json(parsed)


@main.command()
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
@click.option("-c", "--comment-marker", default=consts.DEFAULT_COMMENT_MARKER, show_default=True)
@click.option("-k", "--keep-empty-sections", is_flag=True)
@exits_on_errors
def ini(file: IO[str], comment_marker: str, keep_empty_sections: bool):
    """Parse an INI file (or stdin) into JSON."""
    document = parse_ini(file, comment_marker=comment_marker, keep_empty_sections=keep_empty_sections)
    echo_json(document)


@main.command(context_settings=dict(ignore_unknown_options=True))
@click.argument("command")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("-p", "--pattern", help="Parse stdout lines with this pattern")
@click.option("-n", "--name", "names", multiple=True, help="Capture group names, in order")
@click.option("--cwd", type=click.Path(exists=True, file_okay=False), help="Working directory")
@exits_on_errors
def run(command: str, args: tuple[str], pattern: str | None, names: tuple[str], cwd: str | None):
    """Run COMMAND and print its output as JSON, optionally parsed by --pattern."""
    try:
        result = run_process(command, args, cwd)
    except FileNotFoundError as e:
        log.error(repr(e))
        return sys.exit(127)
    if pattern:
        echo_json(list(parse_lines(result.stdout_lines, pattern, names)))
    else:
        echo_json(result._asdict())
    return sys.exit(result.exit_code)
