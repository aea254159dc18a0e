# markdown/paragraph.py

from gdocs_markdown.document.models import ListCatalog, Paragraph, is_ordered_list

from .buffer import MarkdownBuffer
from .inline import format_text_run

MAX_HEADING_LEVEL = 6


def heading_prefix(paragraph: Paragraph, heading_offset: int = 0) -> str:
    if paragraph.heading is None:
        return ""
    level = min(paragraph.heading.level + heading_offset, MAX_HEADING_LEVEL)
    return "#" * level + " "


def bullet_prefix(paragraph: Paragraph, lists: ListCatalog | None = None) -> str:
    bullet = paragraph.bullet
    if bullet is None:
        return ""
    indent = "  " * bullet.nesting_level
    if is_ordered_list(lists, bullet):
        return indent + "1. "
    return indent + "- "


def render_paragraph(
    buffer: MarkdownBuffer,
    paragraph: Paragraph,
    lists: ListCatalog | None = None,
    heading_offset: int = 0,
) -> None:
    """Append one paragraph to ``buffer``.

    Headings are separated from what precedes them by a blank line and
    followed by one. List items end with a single newline so consecutive
    items stay in one list. Empty paragraphs contribute at most one newline
    and never stack a second blank line.
    """
    heading = heading_prefix(paragraph, heading_offset)
    bullet = bullet_prefix(paragraph, lists)

    content = "".join(format_text_run(run) for run in paragraph.runs if run.content)

    if not content.strip():
        if not buffer.ends_with_blank_line():
            buffer.write("\n")
        return

    content = content.removesuffix("\n")

    if heading:
        if not buffer.is_empty() and not buffer.ends_with_blank_line():
            buffer.write("\n")
        buffer.write(heading + content + "\n\n")
    elif bullet:
        # Placeholder items made of a lone dash are dropped.
        if content.strip() in ("", "-"):
            return
        buffer.write(bullet + content + "\n")
    else:
        buffer.write(content + "\n\n")
