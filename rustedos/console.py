"""Line input from a character source, with backspace editing."""

from __future__ import annotations

from collections.abc import Callable, Iterator

EOT = "\x04"
BS = "\x08"
LF = "\n"
DEL = "\x7f"

_ERASE = f"{BS} {BS}"


def _next_char(getchar: Callable[[], str | None]) -> str:
    """One character; None means try again, an empty string means end of input."""
    while True:
        ch = getchar()
        if ch is None:
            continue
        return ch or EOT


def get_line(getchar: Callable[[], str | None], echo: Callable[[str], object] | None = None) -> str:
    """Read one line, newline included; an empty string means end of input.

    DEL removes the last character read so far and, when ``echo`` is given,
    writes the terminal sequence that erases it on screen.
    """
    chars: list[str] = []
    while True:
        ch = _next_char(getchar)
        if ch == DEL:
            if chars:
                chars.pop()
                if echo is not None:
                    echo(_ERASE)
            continue
        if ch == EOT:
            return "".join(chars)
        chars.append(ch)
        if ch == LF:
            return "".join(chars)


def read_lines(
    getchar: Callable[[], str | None], echo: Callable[[str], object] | None = None
) -> Iterator[str]:
    """Yield lines until end of input."""
    while line := get_line(getchar, echo):
        yield line