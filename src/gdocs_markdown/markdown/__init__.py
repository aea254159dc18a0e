"""Structured document to Markdown rendering."""

from .buffer import MarkdownBuffer
from .inline import format_text_run
from .normalize import normalize_newlines
from .paragraph import bullet_prefix, heading_prefix, render_paragraph
from .render import render_elements, render_table, write_elements

__all__ = [
    "MarkdownBuffer",
    "bullet_prefix",
    "format_text_run",
    "heading_prefix",
    "normalize_newlines",
    "render_elements",
    "render_paragraph",
    "render_table",
    "write_elements",
]
