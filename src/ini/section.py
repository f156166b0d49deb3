import dataclasses
from typing import Iterator

from .entry import Comment, Key, SectionEntry


@dataclasses.dataclass
class Section:
    name: str
    entries: list[SectionEntry] = dataclasses.field(default_factory=list)

    def keys(self) -> Iterator[Key]:
        for entry in self.entries:
            if isinstance(entry, Key):
                yield entry

    def comments(self) -> Iterator[Comment]:
        for entry in self.entries:
            if isinstance(entry, Comment):
                yield entry

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of the first key called `name`.

        Duplicate keys are kept as written, so later ones are only
        reachable through `keys()`.
        """
        for key in self.keys():
            if key.name == name:
                return key.value

        return default
