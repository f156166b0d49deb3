import io
import os
from typing import TextIO

from .document import Document, Entry
from .entry import Comment, Key, SectionEntry
from .errors import ParseError, ParseIOError, ParseSyntaxError
from .parser import Parser
from .section import Section
from .writer import Writer, write

__all__ = (
    "Comment",
    "Document",
    "Entry",
    "Key",
    "ParseError",
    "ParseIOError",
    "ParseSyntaxError",
    "Parser",
    "Section",
    "SectionEntry",
    "Writer",
    "dump",
    "dumps",
    "load",
    "loads",
    "read",
    "write",
    "write_file",
)


def load(fp: TextIO) -> Document:
    """Deserialize INI text read from the open stream `fp`.

    The stream is read to the end. It is not closed; that is up to whoever
    opened it.

    Parameters
    ----------
    fp
        Readable text stream.

    Returns
    -------
    Document
        Top-level comments and sections, in the order they were read.

    Raises
    ------
    ParseSyntaxError
        A required `[`, `]`, `=`, `;` or newline was missing.
    ParseIOError
        The stream could not be read, or ended in the middle of a section
        header or key.
    """
    return Parser(fp).parse()


def loads(data: str) -> Document:
    """Deserialize INI-encoded `data`. See `load`."""
    return load(io.StringIO(data))


def read(path: str | os.PathLike[str], encoding: str = "utf-8") -> Document:
    """Open, parse and close the INI file at `path`."""
    with open(path, encoding=encoding, newline="") as fp:
        return load(fp)


def dump(document: Document, fp: TextIO) -> None:
    """Serialize `document` to the writable text stream `fp`."""
    write(document, fp)


def dumps(document: Document) -> str:
    """Serialize `document` to a `str`.

    Every line ends in a newline and each section is followed by one blank
    line. Only documents whose text avoids `;`, `[`, `]`, `=` and newlines
    are guaranteed to parse back unchanged.
    """
    buf = io.StringIO()
    write(document, buf)
    return buf.getvalue()


def write_file(
    document: Document,
    path: str | os.PathLike[str],
    encoding: str = "utf-8",
) -> None:
    """Serialize `document` into the file at `path`, replacing it."""
    with open(path, "w", encoding=encoding, newline="") as fp:
        dump(document, fp)
