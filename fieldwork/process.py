from __future__ import annotations

import subprocess
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple, TypeVar

from fieldwork.log import log

ReturnType = TypeVar("ReturnType")


class ProcessResult(NamedTuple):
    exit_code: int
    stdout_lines: list[str]
    stderr_lines: list[str]


def run(
    command: str,
    args: Sequence[str] = (),
    working_directory: str | Path | None = None,
    *,
    timeout: float | None = None,
) -> ProcessResult:
    """Runs `command` without a shell and waits for it, draining both streams.
    A non-zero exit code is returned, not raised."""
    log.debug(f"run({command!r}, {list(args)!r}, cwd={working_directory!r})")
    completed = subprocess.run(
        [command, *args],
        cwd=working_directory,
        capture_output=True,
        timeout=timeout,
    )
    stdout = completed.stdout.decode("utf-8", errors="replace")
    stderr = completed.stderr.decode("utf-8", errors="replace")
    return ProcessResult(completed.returncode, stdout.splitlines(), stderr.splitlines())


@dataclass
class RetryContext:
    """Owned by the caller and passed to `retry`, which records its progress here."""

    attempts: int = 3
    delay: float = 1.0
    backoff: float = 1.0
    retry_on: tuple[type[BaseException], ...] = (Exception,)
    attempt: int = 0
    errors: list[BaseException] = field(default_factory=list)


def retry(fn: Callable[[], ReturnType], context: RetryContext) -> ReturnType:
    if context.attempts < 1:
        raise ValueError(f"RetryContext.attempts must be at least 1, got {context.attempts}")
    context.attempt = 0
    delay = context.delay
    while True:
        context.attempt += 1
        try:
            return fn()
        except context.retry_on as e:
            context.errors.append(e)
            if context.attempt >= context.attempts:
                log.error(f"{getattr(fn, '__name__', fn)!s} failed {context.attempt} times: {e!r}")
                raise
            log.warning(
                f"Attempt {context.attempt}/{context.attempts} of"
                f" {getattr(fn, '__name__', fn)!s} failed: {e!r}. Retrying in {delay}s"
            )
            time.sleep(delay)
            delay *= context.backoff
