"""Token reading for certificate lines, exit codes and process helpers."""

from __future__ import annotations

import enum
import re
import sys

_PROC_STATUS = "/proc/self/status"

_INT_PREFIX = re.compile(r"[+-]?\d+")
_INT_RANGE = (-(2**31), 2**31 - 1)
_LONG_RANGE = (-(2**63), 2**63 - 1)


class ParseError(ValueError):
    """Raised when a certificate line cannot be read."""


class ExitCode(enum.IntEnum):
    """Process exit codes of the verifier."""

    CERTIFICATE_VALID = 0
    CRITICAL_ERROR = 1
    CERTIFICATE_NOT_VALID = 2
    NO_TASK_FILE = 3
    NO_CERTIFICATE_FILE = 4
    PARSING_ERROR = 5
    OUT_OF_MEMORY = 6
    TIMEOUT = 7

    def message(self) -> str:
        """The line printed when exiting with this code."""
        return _MESSAGES[self]


_MESSAGES = {
    ExitCode.CERTIFICATE_VALID: "Exiting: certificate is valid",
    ExitCode.CERTIFICATE_NOT_VALID: "Exiting: certificate is not valid",
    ExitCode.CRITICAL_ERROR: "Exiting: unexplained critical error",
    ExitCode.PARSING_ERROR: "Exiting: parsing error",
    ExitCode.NO_CERTIFICATE_FILE: "Exiting: no certificate file found",
    ExitCode.NO_TASK_FILE: "Exiting: no task file found",
    ExitCode.OUT_OF_MEMORY: "Exiting: memory limit reached",
    ExitCode.TIMEOUT: "Exiting: timeout reached",
}


def _parse_integer(word: str, bounds: tuple[int, int]) -> int:
    match = _INT_PREFIX.match(word)
    if match is None:
        raise ParseError(f"Invalid integer: {word!r}.")
    value = int(match.group())
    low, high = bounds
    if not low <= value <= high:
        raise ParseError(f"Integer {word!r} is out of range.")
    return value


class TokenReader:
    """Reads whitespace-separated words and numbers from a line of text."""

    def __init__(self, text: str) -> None:
        self._tokens = text.split()
        self._pos = 0

    def read_word(self) -> str:
        """Return the next word; raise ParseError at the end of the line."""
        if self._pos >= len(self._tokens):
            raise ParseError("Unexpected end of line.")
        word = self._tokens[self._pos]
        self._pos += 1
        return word

    def read_int(self) -> int:
        """Read a signed 32-bit integer (a leading numeric prefix is accepted)."""
        return _parse_integer(self.read_word(), _INT_RANGE)

    def read_uint(self) -> int:
        """Read a non-negative identifier."""
        value = _parse_integer(self.read_word(), _LONG_RANGE)
        if value < 0:
            raise ParseError(f"ID {value} is negative.")
        return value

    def at_end(self) -> bool:
        """Whether all words have been consumed."""
        return self._pos >= len(self._tokens)


def exit_with(code: ExitCode | int) -> None:
    """Print the exit message for ``code`` and leave the process with it."""
    code = ExitCode(code)
    print(code.message(), flush=True)
    raise SystemExit(int(code))


def get_peak_memory_in_kb() -> int:
    """Peak virtual memory of this process in KB, or -1 if unknown."""
    try:
        with open(_PROC_STATUS, encoding="ascii", errors="replace") as status:
            for line in status:
                parts = line.split()
                if parts and parts[0] == "VmPeak:":
                    if len(parts) > 1 and parts[1].isdigit():
                        return int(parts[1])
                    break
    except OSError:
        pass
    print("warning: could not determine peak memory", file=sys.stderr)
    return -1