import re

import pytest

from fieldwork.fields import ReportKind
from fieldwork.query import distinct_values, filter_records


def names(records):
    return [record["Name"] for record in records]


def test_value_pattern_is_case_insensitive_search(file_records, reports):
    matching = filter_records(file_records, "^name$", "TXT", on_report=reports.append)
    assert names(matching) == ["notes.txt"]
    assert reports == []


def test_value_is_matched_as_text(file_records, reports):
    matching = filter_records(file_records, "length", "^12", on_report=reports.append)
    assert names(matching) == ["notes.txt"]


def test_records_missing_the_field_never_match(file_records, reports):
    matching = filter_records(file_records, "mode", ".*", on_report=reports.append)
    assert names(matching) == ["setup.py"]


def test_no_value_selects_absent_and_empty(file_records, reports):
    matching = filter_records(file_records, "length", "ignored", no_value=True, on_report=reports.append)
    assert names(matching) == ["src", "setup.py"]


def test_no_field_pattern_reports_fields(file_records, reports):
    assert filter_records(file_records, on_report=reports.append) == []
    assert reports[0].kind is ReportKind.FIELDS
    assert "LastAccessTime" in reports[0].items


def test_no_value_pattern_reports_distinct_values(reports):
    records = [{"State": "open"}, {"State": "closed"}, {"State": "open"}, {"Other": 1}]
    assert filter_records(records, "state", on_report=reports.append) == []
    assert len(reports) == 1
    assert reports[0].kind is ReportKind.VALUES
    assert reports[0].field == "State"
    assert reports[0].items == ["open", "closed"]


def test_ambiguous_field_yields_nothing(file_records, reports):
    assert filter_records(file_records, "time", "2024", on_report=reports.append) == []
    assert reports[0].kind is ReportKind.AMBIGUOUS


def test_unknown_field_yields_nothing(file_records, reports):
    assert filter_records(file_records, "qqq", "x", on_report=reports.append) == []
    assert reports[0].kind is ReportKind.NOT_FOUND


def test_malformed_value_pattern_raises(file_records, reports):
    with pytest.raises(re.error):
        filter_records(file_records, "name", "[", on_report=reports.append)


def test_distinct_values(file_records, reports):
    assert distinct_values(file_records, "len", on_report=reports.append) == [120, 0]
    assert distinct_values(file_records, "time", on_report=reports.append) == []
    assert reports[0].kind is ReportKind.AMBIGUOUS


def test_no_value_ignores_malformed_value_pattern(reports):
    records = [{"Name": "a", "Length": 0}, {"Name": "b", "Length": 3}]
    assert names(filter_records(records, "length", "[", no_value=True, on_report=reports.append)) == ["a"]
