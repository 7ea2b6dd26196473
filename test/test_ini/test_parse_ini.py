import logging
from pathlib import Path

from fieldwork.ini import IniDocument, parse_ini, read_ini

DATA = Path(__file__).parent.parent / "data"


def test_sections_keys_and_comments():
    text = "[a]\nx=1\n; comment\ny = 2\n[b]\n"
    assert parse_ini(text) == {"a": {"x": "1", "y": "2"}}


def test_accepts_lines():
    assert parse_ini(["[a]", "x=1"]) == {"a": {"x": "1"}}


def test_returns_ini_document():
    document = parse_ini("[a]\nx=1")
    assert isinstance(document, IniDocument)
    assert document.warnings == []


def test_sectionless_keys_are_hoisted():
    document = parse_ini("z=9\n[a]\nx=1")
    assert document == {"z": "9", "a": {"x": "1"}}
    assert list(document) == ["z", "a"]


def test_colliding_sectionless_key_stays_nested():
    document = parse_ini("a=top\nz=9\n[a]\nx=1")
    assert document == {"": {"a": "top"}, "z": "9", "a": {"x": "1"}}


def test_keep_empty_sections():
    document = parse_ini("[a]\nx=1\n[b]\n", keep_empty_sections=True)
    assert document == {"": {}, "a": {"x": "1"}, "b": {}}


def test_last_duplicate_key_wins():
    assert parse_ini("[a]\nx=1\nx=2") == {"a": {"x": "2"}}


def test_reopened_section_merges():
    assert parse_ini("[a]\nx=1\n[b]\ny=2\n[a]\nz=3") == {"a": {"x": "1", "z": "3"}, "b": {"y": "2"}}


def test_first_equals_sign_delimits():
    assert parse_ini("[a]\nurl = http://h/?q=1") == {"a": {"url": "http://h/?q=1"}}


def test_empty_value():
    assert parse_ini("[a]\nx=") == {"a": {"x": ""}}


def test_custom_comment_marker():
    assert parse_ini("[a]\nx=1 # note\n# y=2", comment_marker="#") == {"a": {"x": "1"}}


def test_section_names_are_trimmed():
    assert parse_ini("[ a ]\nx=1") == {"a": {"x": "1"}}


def test_unrecognized_lines_are_skipped_with_a_warning(caplog):
    with caplog.at_level(logging.WARNING):
        document = parse_ini("[a]\nx=1\nnot a key value\ny=2")
    assert document == {"a": {"x": "1", "y": "2"}}
    assert len(document.warnings) == 1
    assert "line 3" in document.warnings[0]
    assert "not a key value" in caplog.text


def test_empty_input():
    assert parse_ini("") == {}


def test_read_ini():
    document = read_ini(DATA / "sample.ini")
    assert document == {
        "root": "/srv/app",
        "server": {"host": "example.org", "port": "9090", "empty": ""},
        "logging": {"level": "debug"},
    }
