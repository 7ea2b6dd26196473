class FieldworkError(Exception):
    """Base class for errors raised by fieldwork."""


class ParseMismatch(FieldworkError, ValueError):
    def __init__(self, line: str, pattern: str):
        self.line = line
        self.pattern = pattern
        super().__init__(f"Line does not match {pattern!r}: {line!r}")
