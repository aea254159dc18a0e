from .loader import load_document, load_document_file
from .models import (
    ORDERED_GLYPH_TYPES,
    Bullet,
    Document,
    HeadingStyle,
    ListCatalog,
    Paragraph,
    SectionBreak,
    StructuralElement,
    Tab,
    TabFragment,
    Table,
    TableCell,
    TableRow,
    TextRun,
    TextStyle,
    is_ordered_list,
)

__all__ = [
    "ORDERED_GLYPH_TYPES",
    "Bullet",
    "Document",
    "HeadingStyle",
    "ListCatalog",
    "Paragraph",
    "SectionBreak",
    "StructuralElement",
    "Tab",
    "TabFragment",
    "Table",
    "TableCell",
    "TableRow",
    "TextRun",
    "TextStyle",
    "is_ordered_list",
    "load_document",
    "load_document_file",
]
