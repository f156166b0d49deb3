__all__ = (
    "ParseError",
    "ParseSyntaxError",
    "ParseIOError",
)


class ParseError(Exception):
    """Base class for every error raised while parsing INI input.

    Attributes
    ----------
    line
        1-based line number the parser was on when it gave up.
    """

    def __init__(self, message: str, *, line: int = 0) -> None:
        super().__init__(message)
        self.line = line


class ParseSyntaxError(ParseError):
    """A required structural character was not found."""

    def __init__(
        self,
        rule: str,
        expected: str,
        actual: str,
        *,
        line: int = 0,
    ) -> None:
        super().__init__(
            f"In {rule}: expected {expected!r}, got {actual!r} (line {line})",
            line=line,
        )
        self.rule = rule
        self.expected = expected
        self.actual = actual


class ParseIOError(ParseError):
    """Reading the stream failed, or it ended while a token was expected."""

    def __init__(self, reason: str, *, line: int = 0) -> None:
        super().__init__(f"IO error: {reason} (line {line})", line=line)
        self.reason = reason
