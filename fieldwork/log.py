"""Logging and the console that guidance reports are printed to.

Both write to stderr (stdout under PyCharm), so stdout carries nothing but
command output.
"""
import functools
import inspect
import logging
import sys

from rich.console import Console as RichConsole
from rich.logging import RichHandler
from rich.theme import Theme

from fieldwork import consts

LEVEL = logging.DEBUG if consts.DEBUG else logging.INFO

# RichHandler looks up its level column styles under these names
THEME = Theme(
    {
        "logging.level.debug": "dim",
        "logging.level.info": "cyan",
        "logging.level.warning": "yellow",
        "logging.level.error": "bold red",
    }
)


def log_in_out(func_or_nothing=None):
    """A decorator that logs the entry and exit of a function."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not log.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            func_name = func.__name__
            bound_args = inspect.signature(func).bind(*args, **kwargs)
            log.debug(f"➡️️ Entered {func_name}{str(bound_args)[16:-1]}", stacklevel=2)
            ret = func(*args, **kwargs)
            log.debug(f"⬅️️️ Exiting {func_name}() -> {ret!r}", stacklevel=2)
            return ret

        return wrapper

    if func_or_nothing:
        # We're called e.g as @log_in_out
        return decorator(func_or_nothing)
    # We're called e.g as @log_in_out()
    return decorator


class Console(RichConsole):
    """Resolves its stream on every write, so redirected or captured stderr is honored.
    Wraps at NON_INTERACTIVE_WIDTH when that stream isn't a terminal."""

    def __init__(self, **kwargs):
        to_stderr = not consts.PYCHARM_HOSTED
        stream = sys.stderr if to_stderr else sys.stdout
        super().__init__(
            stderr=to_stderr,
            width=kwargs.pop("width", None if stream.isatty() else consts.NON_INTERACTIVE_WIDTH),
            theme=kwargs.pop("theme", THEME),
            **kwargs,
        )


console = Console()

rich_handler = RichHandler(
    console=console,
    level=LEVEL,
    # Messages embed raw record values and input lines, which must print verbatim
    markup=False,
    show_time=False,
    show_path=consts.DEBUG,
    enable_link_path=False,
)

logging.basicConfig(
    level=LEVEL,
    format="%(funcName)s() %(message)s" if consts.DEBUG else "%(message)s",
    force=True,
    handlers=[rich_handler],
)

log = logging.getLogger("root")
