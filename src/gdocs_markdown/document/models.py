# document/models.py

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

# list id -> glyph type per nesting level
ListCatalog = Mapping[str, Sequence[str]]

ORDERED_GLYPH_TYPES = frozenset({"DECIMAL", "ALPHA", "ROMAN"})


class HeadingStyle(str, Enum):
    """Named paragraph styles that render as Markdown headings."""

    TITLE = "TITLE"
    HEADING_1 = "HEADING_1"
    HEADING_2 = "HEADING_2"
    HEADING_3 = "HEADING_3"
    HEADING_4 = "HEADING_4"
    HEADING_5 = "HEADING_5"
    HEADING_6 = "HEADING_6"

    @property
    def level(self) -> int:
        if self is HeadingStyle.TITLE:
            return 1
        return int(self.value.rsplit("_", 1)[1])


@dataclass(frozen=True)
class TextStyle:
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    link_url: str | None = None

    @property
    def is_emphasized(self) -> bool:
        return self.bold or self.italic or self.strikethrough


@dataclass(frozen=True)
class TextRun:
    content: str
    style: TextStyle | None = None


@dataclass(frozen=True)
class Bullet:
    nesting_level: int = 0
    list_id: str | None = None


@dataclass(frozen=True)
class Paragraph:
    runs: tuple[TextRun, ...] = ()
    heading: HeadingStyle | None = None
    bullet: Bullet | None = None


@dataclass(frozen=True)
class TableCell:
    content: tuple[StructuralElement, ...] = ()


@dataclass(frozen=True)
class TableRow:
    cells: tuple[TableCell, ...] = ()


@dataclass(frozen=True)
class Table:
    rows: tuple[TableRow, ...] = ()


@dataclass(frozen=True)
class SectionBreak:
    pass


StructuralElement = Union[Paragraph, Table, SectionBreak]


@dataclass(frozen=True)
class Tab:
    """One named tab of a document.

    ``body`` is None when the tab carries no document content of its own.
    Such a tab produces no fragment, but its children are still visited.
    """

    tab_id: str
    title: str = ""
    body: tuple[StructuralElement, ...] | None = None
    lists: ListCatalog = field(default_factory=dict)
    children: tuple[Tab, ...] = ()


@dataclass(frozen=True)
class Document:
    """A fetched document.

    Documents created before tabs existed expose a single ``body`` and
    document-level ``lists`` instead of ``tabs``.
    """

    title: str
    document_id: str = ""
    tabs: tuple[Tab, ...] = ()
    body: tuple[StructuralElement, ...] | None = None
    lists: ListCatalog = field(default_factory=dict)


@dataclass(frozen=True)
class TabFragment:
    tab_id: str
    tab_title: str
    markdown: str


def is_ordered_list(lists: ListCatalog | None, bullet: Bullet) -> bool:
    """Return True if the bullet's list renders numbered at its nesting level.

    Unknown list ids and levels past the end of the list's glyph table
    render as unordered.
    """
    if not lists or not bullet.list_id:
        return False
    glyph_types = lists.get(bullet.list_id)
    if glyph_types is None or not 0 <= bullet.nesting_level < len(glyph_types):
        return False
    return glyph_types[bullet.nesting_level] in ORDERED_GLYPH_TYPES
