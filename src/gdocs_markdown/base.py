# src/gdocs_markdown/base.py

from abc import ABC, abstractmethod

from .document.models import Document, TabFragment


class DocumentConverter(ABC):
    @abstractmethod
    def convert(self, document: Document) -> list[TabFragment]:
        """
        Convert a loaded document into one Markdown fragment per tab.

        Requirements:
        - Pure: same document, same output
        - Fragments ordered parent tab first, then its children
        - Never raises on malformed content; falls back instead
        """
        raise NotImplementedError
