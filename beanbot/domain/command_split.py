"""Shell-like splitting of a one-line ledger command into arguments.

Rules:
- arguments are separated by spaces or tabs
- arguments containing spaces can be quoted in double or single quotes
- inside double quotes, ``\\"`` and ``\\\\`` are escapes; any other backslash is kept
- no escape is allowed in single quotes
- quoted and unquoted parts of one argument are concatenated
- a raw newline is never allowed
"""

from __future__ import annotations

from collections.abc import Iterator

from beanbot.domain.errors import NewlineInArgumentError, UnmatchedQuoteError

_BLANKS = (" ", "\t")


class _CommandSplitter:
    """Cursor over the characters of one command line."""

    def __init__(self, line: str) -> None:
        self._line = line
        self._pos = 0

    def _next_char(self) -> str | None:
        if self._pos >= len(self._line):
            return None
        ch = self._line[self._pos]
        self._pos += 1
        return ch

    def _skip_blanks(self) -> None:
        while self._pos < len(self._line) and self._line[self._pos] in _BLANKS:
            self._pos += 1

    def args(self) -> Iterator[str]:
        while (arg := self._parse_arg()) is not None:
            yield arg

    def _parse_arg(self) -> str | None:
        self._skip_blanks()
        if self._pos >= len(self._line):
            return None

        result: list[str] = []
        while (ch := self._next_char()) is not None:
            if ch == '"':
                self._parse_double(result)
            elif ch == "'":
                self._parse_single(result)
            elif ch == "\n":
                raise NewlineInArgumentError("argument")
            elif ch in _BLANKS:
                break
            else:
                result.append(ch)
        return "".join(result)

    def _parse_double(self, result: list[str]) -> None:
        while (ch := self._next_char()) is not None:
            if ch == '"':
                return
            if ch == "\n":
                raise NewlineInArgumentError("double quote")
            if ch == "\\":
                escaped = self._next_char()
                if escaped is None:
                    break
                if escaped in ('"', "\\"):
                    result.append(escaped)
                elif escaped == "\n":
                    raise NewlineInArgumentError("double quote")
                else:
                    result.append("\\")
                    result.append(escaped)
            else:
                result.append(ch)
        raise UnmatchedQuoteError("double")

    def _parse_single(self, result: list[str]) -> None:
        while (ch := self._next_char()) is not None:
            if ch == "'":
                return
            if ch == "\n":
                raise NewlineInArgumentError("single quote")
            result.append(ch)
        raise UnmatchedQuoteError("single")


def iter_command_args(line: str) -> Iterator[str]:
    """
    Yield the arguments of ``line`` one by one.

    The iterator is single-pass; an error is raised when the offending
    character is reached, after any earlier arguments were yielded.
    """
    return _CommandSplitter(line).args()


def command_split(line: str) -> list[str]:
    """
    Split a command into a list of arguments.

    Raises:
        UnmatchedQuoteError: a quote is still open at end of input.
        NewlineInArgumentError: a raw newline appears anywhere in an argument.
    """
    return list(iter_command_args(line))
