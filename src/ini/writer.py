from typing import TextIO

from .document import Document
from .entry import Comment, Key, SectionEntry
from .section import Section


class Writer:
    """Render a `Document` as INI text, one construct per line.

    Nothing is escaped: names, values and comments containing `;`, `[`,
    `]`, `=` or a newline are written as-is and may not parse back to the
    same document.
    """

    def __init__(self, sink: TextIO) -> None:
        self._sink = sink

    def write_document(self, document: Document) -> None:
        for entry in document.entries:
            match entry:
                case Comment():
                    self.write_comment(entry)
                case Section():
                    self.write_section(entry)
                case _:
                    raise TypeError(f"unexpected entry: {entry!r}")

    def write_section(self, section: Section) -> None:
        self._line(f"[{section.name}]")

        for entry in section.entries:
            self.write_section_entry(entry)

        self._line("")  # Separates this section from whatever follows.

    def write_section_entry(self, entry: SectionEntry) -> None:
        match entry:
            case Comment():
                self.write_comment(entry)
            case Key(name=name, value=value):
                self._line(f"{name} = {value}")
            case _:
                raise TypeError(f"unexpected section entry: {entry!r}")

    def write_comment(self, comment: Comment) -> None:
        self._line(f"; {comment.text}")

    def _line(self, text: str) -> None:
        self._sink.write(text + "\n")


def write(document: Document, sink: TextIO) -> None:
    Writer(sink).write_document(document)
