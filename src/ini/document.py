import dataclasses
from typing import Iterator

from .entry import Comment
from .section import Section

Entry = Comment | Section


@dataclasses.dataclass
class Document:
    """An INI file: top-level comments and sections, in file order."""

    entries: list[Entry] = dataclasses.field(default_factory=list)

    def sections(self) -> Iterator[Section]:
        for entry in self.entries:
            if isinstance(entry, Section):
                yield entry

    def comments(self) -> Iterator[Comment]:
        for entry in self.entries:
            if isinstance(entry, Comment):
                yield entry

    def section(self, name: str) -> Section:
        for section in self.sections():
            if section.name == name:
                return section

        raise KeyError(name)
