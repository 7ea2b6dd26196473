from collections.abc import Mapping

import pytest
from _pytest.config import Config
from _pytest.reports import CollectReport, TestReport

from fieldwork.consts import NON_INTERACTIVE_WIDTH


def pytest_report_teststatus(
    report: CollectReport | TestReport, config: Config
) -> tuple[str, str, str | Mapping[str, bool]] | None:
    if report.when == "call":
        if report.failed:
            return report.outcome, "x", ""
        if report.passed:
            return report.outcome, "√", ""
    return None


def pytest_exception_interact(node, call, report) -> None:
    import importlib

    import _pytest
    import pluggy
    from rich.traceback import Traceback

    from fieldwork.log import console

    traceback = Traceback.from_exception(
        call.excinfo.type,
        call.excinfo.value,
        call.excinfo.tb,
        width=console.width,
        show_locals=True,
        locals_max_string=max(console.width, NON_INTERACTIVE_WIDTH) - 20,
        suppress=(_pytest, importlib, pluggy),
    )

    console.print(traceback)


@pytest.fixture
def reports() -> list:
    """Pass `on_report=reports.append` to collect guidance instead of printing it."""
    return []


@pytest.fixture
def file_records() -> list[dict]:
    """Records shaped like a directory listing. Not every record has every field."""
    return [
        {
            "Name": "notes.txt",
            "Length": 120,
            "CreationTime": "2024-01-02",
            "CreationTimeUtc": "2024-01-02Z",
            "LastAccessTime": "2024-03-01",
        },
        {
            "Name": "src",
            "CreationTime": "2023-11-30",
            "CreationTimeUtc": "2023-11-30Z",
            "LastAccessTime": "2024-02-11",
        },
        {
            "Name": "setup.py",
            "Length": 0,
            "CreationTime": "2024-01-05",
            "CreationTimeUtc": "2024-01-05Z",
            "LastAccessTime": "2024-01-05",
            "Mode": "-a---",
        },
    ]
