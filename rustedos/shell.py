"""Command-line parsing of the shell: background jobs, pipes, redirections, cd."""

from __future__ import annotations

from dataclasses import dataclass, field


class ShellSyntaxError(ValueError):
    """A command line the shell cannot make sense of."""


@dataclass
class Redirects:
    """A command's arguments with its input and output redirection targets."""

    args: list[str] = field(default_factory=list)
    stdin: str | None = None
    stdout: str | None = None


def split_background(args: list[str]) -> tuple[list[str], bool]:
    """Strip a trailing '&'; returns the arguments and whether to run in background."""
    if args and args[-1] == "&":
        return list(args[:-1]), True
    return list(args), False


def split_pipeline(args: list[str]) -> tuple[list[str] | None, list[str]]:
    """Split at the last '|': (upstream, last command); upstream is None without a pipe."""
    for pos in range(len(args) - 1, -1, -1):
        if args[pos] == "|":
            return list(args[:pos]), list(args[pos + 1:])
    return None, list(args)


def _take_target(args: list[str], operator: str) -> tuple[list[str], str | None]:
    if operator not in args:
        return args, None
    pos = args.index(operator)
    if pos + 1 >= len(args):
        raise ShellSyntaxError("syntax error")
    return args[:pos] + args[pos + 2:], args[pos + 1]


def extract_redirects(args: list[str]) -> Redirects:
    """Remove the first '< file' and '> file' from the arguments.

    Raises ShellSyntaxError when an operator has no file after it.
    """
    rest, stdin = _take_target(list(args), "<")
    rest, stdout = _take_target(rest, ">")
    return Redirects(rest, stdin, stdout)


def cd_target(args: list[str]) -> str:
    """The directory 'cd' changes to: '/' without an argument."""
    if len(args) == 1:
        return "/"
    if len(args) == 2:
        return args[1]
    raise ShellSyntaxError("too many arguments")


def prompt(cwd: str) -> str:
    """The prompt shown before each command."""
    return f"root@rusted_os:{cwd}# "