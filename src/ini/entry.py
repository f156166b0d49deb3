import dataclasses


@dataclasses.dataclass
class Comment:
    """A `;` comment line. Only the trimmed body is stored."""

    text: str


@dataclasses.dataclass
class Key:
    """Represents a `name = value` pair of a `Section`."""

    name: str
    value: str


SectionEntry = Comment | Key
