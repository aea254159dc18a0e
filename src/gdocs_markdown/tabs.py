# src/gdocs_markdown/tabs.py

from collections.abc import Sequence

from .document.models import Document, ListCatalog, StructuralElement, Tab, TabFragment
from .markdown import normalize_newlines, render_elements


def collect_tabs(document: Document, heading_offset: int = 0) -> list[TabFragment]:
    """Convert every tab of ``document`` into a Markdown fragment.

    Tabs are visited depth-first with each parent ahead of its children.
    Documents without tabs fall back to their single legacy body, emitted
    as one fragment with an empty tab id.
    """
    if document.tabs:
        return _collect(document.tabs, document.title, heading_offset)

    if document.body is not None:
        return [
            TabFragment(
                tab_id="",
                tab_title=document.title,
                markdown=_to_markdown(document.body, document.lists, heading_offset),
            )
        ]

    return []


def _collect(
    tabs: Sequence[Tab], doc_title: str, heading_offset: int
) -> list[TabFragment]:
    fragments: list[TabFragment] = []
    for tab in tabs:
        if tab.body is not None:
            fragments.append(
                TabFragment(
                    tab_id=tab.tab_id,
                    tab_title=tab.title or doc_title,
                    markdown=_to_markdown(tab.body, tab.lists, heading_offset),
                )
            )
        if tab.children:
            fragments.extend(_collect(tab.children, doc_title, heading_offset))
    return fragments


def _to_markdown(
    body: Sequence[StructuralElement], lists: ListCatalog, heading_offset: int
) -> str:
    return normalize_newlines(render_elements(body, lists, heading_offset))
