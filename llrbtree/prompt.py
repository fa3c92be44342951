"""Reading unsigned integers typed at an interactive prompt."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_NUMBER_RE = re.compile(r"[ \t\v\f\r]*([+-]?)([0-9]+)(.*)", re.DOTALL)
_BLANK = " \t\v\f\r"
_ULONG_MAX = 2**64 - 1

EOF_MESSAGE = "Ввод завершён (EOF).\n"
RETRY_MESSAGE = "Ошибка: попробуйте еще раз.\n"
INVALID_MESSAGE = (
    "Ошибка: некорректный ввод. "
    "Попробуйте снова ввести число (положительное больше 0).\n"
)


class EndOfInput(Exception):
    """Raised when the input stream ends before a value was read."""


def _to_uint(sign: str, digits: str) -> int:
    magnitude = int(digits)
    if magnitude > _ULONG_MAX:
        value = _ULONG_MAX
    else:
        value = (-magnitude if sign == "-" else magnitude) % 2**64
    return value & 0xFFFFFFFF


def read_uint(
    prompt: str = "",
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Prompt once, then read lines until one holds exactly one number.

    Blank lines are skipped, malformed lines are reported and retried.
    Raises EndOfInput when the stream ends.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(prompt)
    stdout.flush()
    while True:
        line = stdin.readline()
        terminated = line.endswith("\n")
        body = line[:-1] if terminated else line
        if line == "" or (not terminated and not body.strip(_BLANK)):
            stdout.write(EOF_MESSAGE)
            raise EndOfInput("input ended")
        if not body.strip(_BLANK):
            continue
        match = _NUMBER_RE.match(body)
        if match is None:
            stdout.write(INVALID_MESSAGE)
            continue
        sign, digits, rest = match.groups()
        if rest == "" and terminated:
            return _to_uint(sign, digits)
        stdout.write(RETRY_MESSAGE)