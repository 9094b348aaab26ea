"""The text filters of the user programs: awk, grep, wc, echo and xargs."""

from __future__ import annotations

import re

_ASCII_WORD = re.compile(r"[^ \t\n\x0c\r]+")


def _split_ascii_whitespace(text: str) -> list[str]:
    return _ASCII_WORD.findall(text)


def awk_column(line: str, col_num: int) -> str:
    """Field ``col_num`` (from 0) of a line; the last field if out of range, else ''."""
    cols = _split_ascii_whitespace(line)
    if 0 <= col_num < len(cols):
        return cols[col_num]
    return cols[-1] if cols else ""


def grep_find(text: str, pattern: str) -> list[str]:
    """The newline-separated lines of ``text`` that contain ``pattern``."""
    return [line for line in text.split("\n") if pattern in line]


def wc_count(text: str) -> tuple[int, int, int]:
    """Line, word and byte counts of ``text``."""
    return text.count("\n"), len(_split_ascii_whitespace(text)), len(text.encode("utf-8"))


def echo(args: list[str]) -> str:
    """The words of an argument vector (command name first) joined by spaces."""
    return " ".join(args[1:])


def xargs_command(args: list[str], text: str) -> list[str]:
    """The argument vector xargs runs: its arguments, or echo, then the words of ``text``."""
    command = list(args[1:]) or ["echo"]
    return command + _split_ascii_whitespace(text)