# document/loader.py

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import (
    Bullet,
    Document,
    HeadingStyle,
    ListCatalog,
    Paragraph,
    SectionBreak,
    StructuralElement,
    Tab,
    Table,
    TableCell,
    TableRow,
    TextRun,
    TextStyle,
)

logger = logging.getLogger(__name__)

_HEADING_STYLES = {style.value: style for style in HeadingStyle}


# Wire models for the Docs API ``documents.get`` payload. Internal only:
# callers only ever see the frozen models from ``models.py``.


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class _Link(_ApiModel):
    url: str | None = None


class _TextStyle(_ApiModel):
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    link: _Link | None = None


class _TextRun(_ApiModel):
    content: str = ""
    text_style: _TextStyle | None = None


class _ParagraphElement(_ApiModel):
    text_run: _TextRun | None = None


class _ParagraphStyle(_ApiModel):
    named_style_type: str | None = None


class _Bullet(_ApiModel):
    list_id: str | None = None
    nesting_level: int = 0


class _Paragraph(_ApiModel):
    elements: list[_ParagraphElement] = Field(default_factory=list)
    paragraph_style: _ParagraphStyle | None = None
    bullet: _Bullet | None = None


class _TableCell(_ApiModel):
    content: list["_StructuralElement"] = Field(default_factory=list)


class _TableRow(_ApiModel):
    table_cells: list[_TableCell] = Field(default_factory=list)


class _Table(_ApiModel):
    table_rows: list[_TableRow] = Field(default_factory=list)


class _StructuralElement(_ApiModel):
    paragraph: _Paragraph | None = None
    table: _Table | None = None
    section_break: dict[str, Any] | None = None


class _Body(_ApiModel):
    content: list[_StructuralElement] = Field(default_factory=list)


class _NestingLevel(_ApiModel):
    glyph_type: str | None = None


class _ListProperties(_ApiModel):
    nesting_levels: list[_NestingLevel] = Field(default_factory=list)


class _List(_ApiModel):
    list_properties: _ListProperties | None = None


class _DocumentTab(_ApiModel):
    body: _Body | None = None
    lists: dict[str, _List] = Field(default_factory=dict)


class _TabProperties(_ApiModel):
    tab_id: str = ""
    title: str = ""


class _Tab(_ApiModel):
    tab_properties: _TabProperties | None = None
    document_tab: _DocumentTab | None = None
    child_tabs: list["_Tab"] = Field(default_factory=list)


class _Document(_ApiModel):
    document_id: str = ""
    title: str = ""
    tabs: list[_Tab] = Field(default_factory=list)
    body: _Body | None = None
    lists: dict[str, _List] = Field(default_factory=dict)


# Table cells nest structural elements, so the recursive models are only
# complete once everything above is defined.
for _model in (_TableCell, _TableRow, _Table, _StructuralElement, _Body, _Tab, _Document):
    _model.model_rebuild()


def load_document(payload: Mapping[str, Any]) -> Document:
    """Build a Document from a raw ``documents.get`` response.

    Unknown keys are ignored. Structural elements other than paragraphs,
    tables and section breaks are dropped, as are non-text paragraph
    elements.

    Raises:
        ValueError: If the payload is not a JSON object.
        pydantic.ValidationError: If a known field has the wrong shape.
    """
    if not isinstance(payload, Mapping):
        raise ValueError("Document payload must be a JSON object")

    raw = _Document.model_validate(payload)
    document = Document(
        title=raw.title,
        document_id=raw.document_id,
        tabs=tuple(_build_tab(tab) for tab in raw.tabs),
        body=_build_body(raw.body),
        lists=_build_lists(raw.lists),
    )
    logger.debug(
        "Loaded document id=%s with %d top-level tabs",
        document.document_id,
        len(document.tabs),
    )
    return document


def load_document_file(path: str | Path) -> Document:
    """Load a Document from a saved ``documents.get`` JSON response."""
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)
    return load_document(payload)


def _build_tab(raw: _Tab) -> Tab:
    children = tuple(_build_tab(child) for child in raw.child_tabs)
    props = raw.tab_properties
    if props is None:
        return Tab(tab_id="", children=children)

    doc_tab = raw.document_tab
    if doc_tab is None:
        return Tab(tab_id=props.tab_id, title=props.title, children=children)

    return Tab(
        tab_id=props.tab_id,
        title=props.title,
        body=_build_body(doc_tab.body) or (),
        lists=_build_lists(doc_tab.lists),
        children=children,
    )


def _build_body(raw: _Body | None) -> tuple[StructuralElement, ...] | None:
    if raw is None:
        return None
    return _build_elements(raw.content)


def _build_elements(
    raw_elements: list[_StructuralElement],
) -> tuple[StructuralElement, ...]:
    elements: list[StructuralElement] = []
    for raw in raw_elements:
        if raw.paragraph is not None:
            elements.append(_build_paragraph(raw.paragraph))
        elif raw.table is not None:
            elements.append(_build_table(raw.table))
        elif raw.section_break is not None:
            elements.append(SectionBreak())
    return tuple(elements)


def _build_paragraph(raw: _Paragraph) -> Paragraph:
    heading = None
    if raw.paragraph_style is not None and raw.paragraph_style.named_style_type:
        heading = _HEADING_STYLES.get(raw.paragraph_style.named_style_type)

    bullet = None
    if raw.bullet is not None:
        bullet = Bullet(
            nesting_level=max(raw.bullet.nesting_level, 0),
            list_id=raw.bullet.list_id or None,
        )

    runs = tuple(
        _build_text_run(element.text_run)
        for element in raw.elements
        if element.text_run is not None
    )
    return Paragraph(runs=runs, heading=heading, bullet=bullet)


def _build_text_run(raw: _TextRun) -> TextRun:
    style = raw.text_style
    if style is None:
        return TextRun(content=raw.content)
    return TextRun(
        content=raw.content,
        style=TextStyle(
            bold=style.bold,
            italic=style.italic,
            strikethrough=style.strikethrough,
            link_url=(style.link.url or None) if style.link is not None else None,
        ),
    )


def _build_table(raw: _Table) -> Table:
    return Table(
        rows=tuple(
            TableRow(
                cells=tuple(
                    TableCell(content=_build_elements(cell.content))
                    for cell in row.table_cells
                )
            )
            for row in raw.table_rows
        )
    )


def _build_lists(raw_lists: dict[str, _List]) -> ListCatalog:
    catalog: dict[str, tuple[str, ...]] = {}
    for list_id, raw in raw_lists.items():
        levels = raw.list_properties.nesting_levels if raw.list_properties else []
        catalog[list_id] = tuple(level.glyph_type or "" for level in levels)
    return catalog
