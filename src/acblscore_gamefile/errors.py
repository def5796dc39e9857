"""Errors raised while decoding a game file."""

from contextlib import contextmanager


class DecodeError(Exception):
    """Base class for game file decode failures.

    ``path`` lists the records the error passed through on its way out,
    outermost first, e.g. ``["event 1", "section A", "entry 3N"]``.
    """

    def __init__(self, message):
        super().__init__(message)
        self.message = message
        self.path = []

    def __str__(self):
        if not self.path:
            return self.message
        return " > ".join(self.path) + ": " + self.message


class FormatError(DecodeError):
    """The buffer is not an ACBLscore game file or its structure is inconsistent."""


class OutOfBounds(DecodeError):
    def __init__(self, offset, width, size):
        super().__init__(
            "read of %d bytes at 0x%X past end of %d-byte buffer" % (width, offset, size)
        )
        self.offset = offset
        self.width = width
        self.size = size


class UnknownCode(DecodeError):
    def __init__(self, table, code):
        super().__init__(f"unknown {table} code {code!r}")
        self.table = table
        self.code = code


@contextmanager
def located(where):
    try:
        yield
    except DecodeError as e:
        e.path.insert(0, where)
        raise
