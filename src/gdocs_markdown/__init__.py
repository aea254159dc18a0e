# Conversion
from .base import DocumentConverter
from .config import ConverterConfig, OutputFormat
from .converter import DocsMarkdownConverter

# Fetching
from .client import DocsClient

# Document model
from .document import (
    Document,
    Paragraph,
    SectionBreak,
    Tab,
    TabFragment,
    Table,
    TextRun,
    TextStyle,
    load_document,
    load_document_file,
)

# Rendering
from .markdown import format_text_run, normalize_newlines, render_elements
from .tabs import collect_tabs

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Response
from .response import DocContent, TabContent

__all__ = [
    # Conversion
    "ConverterConfig",
    "DocsMarkdownConverter",
    "DocumentConverter",
    "OutputFormat",
    # Fetching
    "DocsClient",
    # Document model
    "Document",
    "Paragraph",
    "SectionBreak",
    "Tab",
    "TabFragment",
    "Table",
    "TextRun",
    "TextStyle",
    "load_document",
    "load_document_file",
    # Rendering
    "collect_tabs",
    "format_text_run",
    "normalize_newlines",
    "render_elements",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Response
    "DocContent",
    "TabContent",
]
