# markdown/render.py

import logging
from collections.abc import Iterable

from gdocs_markdown.document.models import (
    ListCatalog,
    Paragraph,
    SectionBreak,
    StructuralElement,
    Table,
)

from .buffer import MarkdownBuffer
from .paragraph import render_paragraph

logger = logging.getLogger(__name__)

SECTION_BREAK = "\n---\n\n"
HEADER_SEPARATOR_CELL = " --- |"


def render_elements(
    elements: Iterable[StructuralElement | None],
    lists: ListCatalog | None = None,
    heading_offset: int = 0,
) -> str:
    """Render a sequence of structural elements into a Markdown string.

    The result is not newline-normalized; callers producing a finished
    fragment pass it through ``normalize_newlines``.
    """
    buffer = MarkdownBuffer()
    write_elements(buffer, elements, lists, heading_offset)
    return buffer.getvalue()


def write_elements(
    buffer: MarkdownBuffer,
    elements: Iterable[StructuralElement | None],
    lists: ListCatalog | None = None,
    heading_offset: int = 0,
) -> None:
    for element in elements:
        if element is None:
            continue
        if isinstance(element, Paragraph):
            render_paragraph(buffer, element, lists, heading_offset)
        elif isinstance(element, Table):
            render_table(buffer, element, lists, heading_offset)
        elif isinstance(element, SectionBreak):
            # Nothing to separate at the start of a document.
            if not buffer.is_blank():
                buffer.write(SECTION_BREAK)
        else:
            logger.debug("Skipping unsupported element: %s", type(element).__name__)


def render_table(
    buffer: MarkdownBuffer,
    table: Table,
    lists: ListCatalog | None = None,
    heading_offset: int = 0,
) -> None:
    """Append ``table`` as a pipe table.

    The first row is the header. Cell content is rendered recursively and
    flattened onto one line.
    """
    if not table.rows:
        return

    buffer.write("\n")
    for row_index, row in enumerate(table.rows):
        buffer.write("|")
        for cell in row.cells:
            cell_text = render_elements(cell.content, lists, heading_offset)
            cell_text = cell_text.strip().replace("\n", " ")
            buffer.write(f" {cell_text} |")
        buffer.write("\n")

        if row_index == 0:
            buffer.write("|" + HEADER_SEPARATOR_CELL * len(row.cells) + "\n")

    buffer.write("\n")
