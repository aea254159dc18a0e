# src/gdocs_markdown/client.py

import logging
from time import monotonic
from typing import Any

from googleapiclient.errors import HttpError
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .converter import DocsMarkdownConverter
from .document.loader import load_document
from .document.models import Document
from .observability import names
from .observability.base import MetricsHook, NoOpMetricsHook
from .response import DocContent

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def is_transient_error(exc: BaseException) -> bool:
    """Return True for failures worth retrying: rate limits, 5xx, dropped connections."""
    if isinstance(exc, HttpError):
        return exc.resp.status in RETRYABLE_STATUS_CODES
    return isinstance(exc, (ConnectionError, TimeoutError))


class DocsClient:
    """Fetches documents through a Docs API service object.

    Transport only: the service (credentials, discovery) is built by the
    caller. Retries only on transient transport errors; anything else
    propagates unchanged.
    """

    def __init__(
        self,
        service: Any,
        *,
        max_retries: int = 3,
        backoff_seconds: float = 0.5,
        converter: DocsMarkdownConverter | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be >= 1")
        self._service = service
        self._max_retries = max_retries
        self._backoff_seconds = backoff_seconds
        self.converter = converter or DocsMarkdownConverter(metrics_hook=metrics_hook)
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized DocsClient with max_retries=%s, backoff_seconds=%s",
            max_retries,
            backoff_seconds,
        )

    def fetch_document(self, document_id: str) -> Document:
        """Fetch a document including the content of every tab.

        Raises:
            ValueError: If ``document_id`` is empty.
            googleapiclient.errors.HttpError: After retries are exhausted,
                or immediately for non-transient statuses.
        """
        if not document_id:
            raise ValueError("document_id is required")

        start = monotonic()
        try:
            payload = self._get(document_id)
        except Exception:
            self.metrics_hook.increment(names.FETCH_ERRORS_TOTAL)
            logger.error("Failed to fetch document id=%s", document_id)
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.FETCH_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.FETCH_REQUESTS_TOTAL)
        logger.debug("Fetched document id=%s in %.1fms", document_id, elapsed_ms)
        return load_document(payload)

    def get_content(self, document_id: str) -> DocContent:
        """Fetch a document and convert every tab to Markdown."""
        document = self.fetch_document(document_id)
        return self.converter.to_content(document, document_id=document_id)

    def _get(self, document_id: str) -> Any:
        for attempt in Retrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(
                multiplier=self._backoff_seconds,
                min=self._backoff_seconds,
                max=10 * self._backoff_seconds,
            ),
            retry=retry_if_exception(is_transient_error),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return (
                    self._service.documents()
                    .get(documentId=document_id, includeTabsContent=True)
                    .execute()
                )
