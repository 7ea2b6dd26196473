# ** fieldwork/__init__.py

import bdb

import click
from rich.traceback import install as rich_traceback_install

from fieldwork import consts
from fieldwork.log import console


rich_traceback_install(
    console=console,
    width=console.width,
    show_locals=True,
    extra_lines=5,
    suppress=(click, bdb),
)

from fieldwork.errors import FieldworkError, ParseMismatch
from fieldwork.fields import MATCH_ALL, Report, Resolution, resolve
from fieldwork.ini import IniDocument, parse_ini, read_ini
from fieldwork.lines import parse_line, parse_lines
from fieldwork.pipeline import all_, any_, first, last, median, unique
from fieldwork.query import distinct_values, filter_records, project
from fieldwork.template import placeholders, render, render_each
