# src/gdocs_markdown/converter.py

import logging
from time import monotonic

from .base import DocumentConverter
from .config import ConverterConfig
from .document.models import Document, TabFragment
from .observability import names
from .observability.base import MetricsHook, NoOpMetricsHook
from .response import DocContent
from .tabs import collect_tabs

logger = logging.getLogger(__name__)


class DocsMarkdownConverter(DocumentConverter):
    """
    Converts loaded documents to Markdown.
    - One fragment per tab, depth-first
    - Legacy single-body documents yield one fragment
    - Stateless between calls; safe to share across threads
    """

    def __init__(
        self,
        config: ConverterConfig = ConverterConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized DocsMarkdownConverter with heading_offset=%s, output_format=%s",
            config.heading_offset,
            config.output_format,
        )

    def convert(self, document: Document) -> list[TabFragment]:
        start = monotonic()
        fragments = collect_tabs(document, heading_offset=self.config.heading_offset)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CONVERSION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.CONVERSIONS_TOTAL)
        self.metrics_hook.increment(names.TABS_CONVERTED_TOTAL, len(fragments))
        self.metrics_hook.record_gauge(
            names.MARKDOWN_OUTPUT_CHARS,
            sum(len(fragment.markdown) for fragment in fragments),
        )
        logger.debug(
            "Converted document id=%s into %d tabs in %.1fms",
            document.document_id,
            len(fragments),
            elapsed_ms,
        )
        return fragments

    def to_content(self, document: Document, document_id: str | None = None) -> DocContent:
        """Convert ``document`` and wrap the fragments in a response envelope.

        ``document_id`` overrides the id carried by the document, for callers
        that fetched by an id the payload doesn't echo back.
        """
        return DocContent.from_fragments(
            document_id=document_id or document.document_id,
            title=document.title,
            fragments=self.convert(document),
        )

    def render(self, document: Document) -> str:
        """Convert ``document`` and serialize it in the configured output format."""
        return self.to_content(document).render(self.config.output_format)
