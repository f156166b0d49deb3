from typing import TextIO

from .errors import ParseIOError, ParseSyntaxError


class Lexer:
    """One-character lookahead over a text stream.

    `current` holds the next unconsumed character, or `None` once the
    stream is exhausted. Nothing is read until the first `advance()`.
    """

    # Skipped before structural characters; "\n" ends a line and is kept.
    _BLANKS = " \t\r"

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._current: str | None = None
        self.line = 1

    @property
    def current(self) -> str | None:
        return self._current

    def advance(self) -> None:
        if self._current == "\n":
            self.line += 1

        try:
            char = self._stream.read(1)
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseIOError(str(exc), line=self.line) from exc

        self._current = char or None

    def skip_blanks(self) -> None:
        while self._current is not None and self._current in self._BLANKS:
            self.advance()

    def peek(self) -> str | None:
        """Skip blanks and return the lookahead character."""
        self.skip_blanks()
        return self._current

    def expect(self, char: str, rule: str) -> None:
        """Consume `char` or raise on behalf of the grammar rule `rule`."""
        self.skip_blanks()

        if self._current is None:
            raise ParseIOError(
                f"unexpected end of input in {rule}, expected {char!r}",
                line=self.line,
            )
        elif self._current != char:
            raise ParseSyntaxError(rule, char, self._current, line=self.line)
        else:
            self.advance()

    def read_until(self, stop: str, rule: str) -> str:
        """Read raw characters up to, but not including, `stop`.

        Newlines are not special here; the end of the stream is.
        """
        text = ""

        while self._current != stop:
            if self._current is None:
                raise ParseIOError(
                    f"unexpected end of input in {rule}, expected {stop!r}",
                    line=self.line,
                )

            text += self._current
            self.advance()

        return text

    def read_line(self) -> str:
        """Read the rest of the line and consume its newline, if any."""
        text = ""

        while self._current is not None and self._current != "\n":
            text += self._current
            self.advance()
        else:
            if self._current == "\n":
                self.advance()

        return text

    def end_line(self, rule: str) -> None:
        """Consume the newline ending a line, or accept the end of input."""
        if self.peek() is not None:
            self.expect("\n", rule)
