import logging
from typing import TextIO

from .document import Document, Entry
from .entry import Comment, Key, SectionEntry
from .lexer import Lexer
from .section import Section

logger = logging.getLogger(__name__)


class Parser:
    """Recursive-descent reader for INI text.

    Grammar, one construct per line::

        document       := (comment | section | blank)*
        comment        := ';' rest_of_line
        section        := section_header (comment | key)* blank?
        section_header := '[' char_except(']')* ']' line_end
        key            := char_except('=')* '=' rest_of_line

    A blank line closes the current section, so a comment after it belongs
    to the document again.

    Spaces, tabs and carriage returns are skipped before every structural
    character. Each `parse_*` method returns the fragment it read, and the
    first error raised aborts the whole parse.
    """

    def __init__(self, stream: TextIO) -> None:
        self._lexer = Lexer(stream)

    def parse(self) -> Document:
        lexer = self._lexer
        lexer.advance()

        entries: list[Entry] = []

        while (char := lexer.peek()) is not None:
            match char:
                case "\n":
                    lexer.advance()  # Blank line.
                case ";":
                    entries.append(self.parse_comment())
                case _:
                    entries.append(self.parse_section())

        logger.debug("parsed %d top-level entries", len(entries))
        return Document(entries=entries)

    def parse_comment(self) -> Comment:
        self._lexer.expect(";", "parse_comment")
        return Comment(text=self._lexer.read_line().strip())

    def parse_section(self) -> Section:
        lexer = self._lexer
        name = self.parse_section_header()

        entries: list[SectionEntry] = []

        # A section runs until a blank line, the next header or the end of
        # input. The opening bracket is left for the next `parse_section`.
        while (char := lexer.peek()) is not None and char != "[":
            match char:
                case "\n":
                    lexer.advance()
                    break
                case ";":
                    entries.append(self.parse_comment())
                case _:
                    entries.append(self.parse_key())

        logger.debug("parsed section %r with %d entries", name, len(entries))
        return Section(name=name, entries=entries)

    def parse_section_header(self) -> str:
        lexer = self._lexer
        lexer.expect("[", "parse_section")

        # Everything up to the closing bracket is the name, raw and with
        # newlines included. An unterminated header runs to the end of input.
        name = lexer.read_until("]", "parse_section")

        lexer.expect("]", "parse_section")
        lexer.end_line("parse_section")
        return name

    def parse_key(self) -> Key:
        lexer = self._lexer
        name = lexer.read_until("=", "parse_key")

        lexer.expect("=", "parse_key")
        value = lexer.read_line()

        return Key(name=name.strip(), value=value.strip())
