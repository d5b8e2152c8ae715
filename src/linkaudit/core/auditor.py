"""Batch auditing with a streaming event API."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Iterable, Sequence
from typing import Callable, Optional

from ..aggregate import summarize_articles, summarize_pages
from ..extraction import ArticleLinkExtractor, PageLinkExtractor
from ..matching import check_targets, find_target
from ..models.config import AuditConfig, AuditMode, ExtractionConfig
from ..models.events import AuditEvent, AuditStats, EventType
from ..models.links import (
    ARTICLE_REGIONS,
    PAGE_REGIONS,
    ArticleAnalysis,
    BatchReport,
    CategorizedLinkSet,
    Document,
    DocumentResult,
    PageScanResult,
    RegionType,
    SeoAnalysis,
    TargetCheckResult,
    TargetLookup,
)

logger = logging.getLogger(__name__)


def _clean_targets(targets: Iterable[str]) -> tuple[str, ...]:
    """Trimmed, non-blank targets."""
    return tuple(target.strip() for target in targets if target and target.strip())


def scan_page(document: Document, config: Optional[ExtractionConfig] = None) -> PageScanResult:
    """
    Categorize the links of one page and look up its targets.

    Errors never propagate: a bad base URL (or any other failure) is
    recorded on the result, whose link set is then empty.
    """
    targets = _clean_targets(document.targets)
    try:
        links = PageLinkExtractor(config).extract(document.html, document.url)
    except Exception as e:
        logger.warning(f"Failed to scan {document.url}: {e}")
        return PageScanResult(
            url=document.url,
            links=CategorizedLinkSet.empty(PAGE_REGIONS),
            lookups=tuple(TargetLookup(target_link=target) for target in targets),
            error=f"Failed to scan: {e}",
        )

    return PageScanResult(
        url=document.url,
        links=links,
        lookups=tuple(find_target(target, links) for target in targets),
        target_results=tuple(check_targets(targets, links)),
    )


def analyze_article(document: Document, config: Optional[ExtractionConfig] = None) -> ArticleAnalysis:
    """
    Split the links of one article into content and other links and check
    where each target appears.

    Errors are recorded on the result like in :func:`scan_page`.
    """
    targets = _clean_targets(document.targets)
    try:
        links = ArticleLinkExtractor(config).extract(document.html, document.url)
    except Exception as e:
        logger.warning(f"Failed to analyze {document.url}: {e}")
        return ArticleAnalysis(
            url=document.url,
            links=CategorizedLinkSet.empty(ARTICLE_REGIONS, has_content_region=True),
            target_results=tuple(TargetCheckResult(target_link=target) for target in targets),
            error=f"Failed to analyze: {e}",
        )

    content_links = links.content_links
    seo = SeoAnalysis(
        content_link_count=len(content_links),
        has_internal_content_links=bool(links.get(RegionType.CONTENT_INTERNAL)),
        has_external_content_links=bool(links.get(RegionType.CONTENT_EXTERNAL)),
        word_count=links.content_word_count,
    )

    return ArticleAnalysis(
        url=document.url,
        links=links,
        target_results=tuple(check_targets(targets, links)),
        seo=seo,
    )


class LinkAuditor:
    """
    Audit a batch of documents one at a time, yielding events.

    Documents are processed strictly in order. A failing document is
    recorded with an error and the batch moves on; the summary is computed
    once every document has finished.

    Example:
        auditor = LinkAuditor(AuditConfig(mode=AuditMode.ARTICLE))
        async for event in auditor.run(documents):
            if event.type == EventType.DOCUMENT_FAILED:
                print(f"Error: {event.url} - {event.error}")

        print(auditor.report.summary.to_dict())
    """

    def __init__(self, config: Optional[AuditConfig] = None):
        """
        Initialize the auditor.

        Args:
            config: Audit configuration (defaults to a page scan)
        """
        self.config = config or AuditConfig()
        self._cancelled = False
        self._stats = AuditStats()
        self._report: Optional[BatchReport] = None

    @property
    def stats(self) -> AuditStats:
        """Get current audit statistics."""
        return self._stats

    @property
    def report(self) -> Optional[BatchReport]:
        """Report of the last completed run (None until a run completes)."""
        return self._report

    def cancel(self) -> None:
        """
        Request cancellation of the run.

        The current document is finished first; a CANCELLED event is
        emitted and no report is produced.
        """
        self._cancelled = True

    def process(self, document: Document) -> DocumentResult:
        """Run the configured pipeline on a single document."""
        if self.config.mode == AuditMode.ARTICLE:
            return analyze_article(document, self.config.extraction)
        return scan_page(document, self.config.extraction)

    async def run(self, documents: Iterable[Document]) -> AsyncIterator[AuditEvent]:
        """
        Audit every document, yielding events as the batch progresses.

        Args:
            documents: Documents with their HTML already loaded

        Yields:
            AuditEvent objects for each significant step
        """
        batch = list(documents)
        total = len(batch)
        start_time = time.monotonic()
        self._cancelled = False
        self._stats = AuditStats()
        self._report = None

        yield AuditEvent(
            type=EventType.STARTED,
            total=total,
            message=f"Starting {self.config.mode.value} audit of {total} documents",
        )

        results: list[DocumentResult] = []
        for i, document in enumerate(batch):
            if self._cancelled:
                self._stats.duration_seconds = time.monotonic() - start_time
                yield AuditEvent(type=EventType.CANCELLED, message="Audit cancelled by user")
                return

            yield AuditEvent(
                type=EventType.DOCUMENT_STARTED,
                url=document.url,
                current=i + 1,
                total=total,
                message=f"Processing {i + 1}/{total}: {document.url}",
            )

            result = self.process(document)
            results.append(result)
            self._stats.documents_processed += 1

            if result.error:
                self._stats.documents_failed += 1
                yield AuditEvent(
                    type=EventType.DOCUMENT_FAILED,
                    url=document.url,
                    current=i + 1,
                    total=total,
                    error=result.error,
                )
            else:
                yield AuditEvent(
                    type=EventType.DOCUMENT_COMPLETED,
                    url=document.url,
                    current=i + 1,
                    total=total,
                    message=f"{result.links.total_links} links in {document.url}",
                )

            # Let other tasks run between documents
            await asyncio.sleep(0)

        self._report = build_report(results, self.config.mode, batch)
        self._stats.duration_seconds = time.monotonic() - start_time

        yield AuditEvent(
            type=EventType.COMPLETED,
            total=total,
            message=(
                f"Audit completed: {self._stats.documents_processed - self._stats.documents_failed} ok, "
                f"{self._stats.documents_failed} failed"
            ),
        )


def build_report(
    results: Sequence[DocumentResult],
    mode: AuditMode,
    documents: Sequence[Document] = (),
) -> BatchReport:
    """Aggregate finished results into a BatchReport."""
    if mode == AuditMode.ARTICLE:
        summary = summarize_articles([r for r in results if isinstance(r, ArticleAnalysis)])
    else:
        summary = summarize_pages([r for r in results if isinstance(r, PageScanResult)])

    targets = {target for document in documents for target in _clean_targets(document.targets)}
    return BatchReport(results=tuple(results), summary=summary, target_links_count=len(targets))


def audit_blocking(
    documents: Iterable[Document],
    on_event: Callable[[AuditEvent], None] | None = None,
    config: Optional[AuditConfig] = None,
    **kwargs: object,
) -> BatchReport:
    """
    Blocking audit with optional event callback.

    Convenience wrapper for sync code. For async code, use LinkAuditor
    directly.

    WARNING: Do not call from within an existing event loop.

    Args:
        documents: Documents to audit
        on_event: Optional callback for events
        config: Audit configuration (built from kwargs if None)
        **kwargs: AuditConfig fields, used when config is None

    Returns:
        The batch report

    Example:
        report = audit_blocking(
            [Document(url="https://example.com", html=html, targets=("/pricing",))],
            mode=AuditMode.PAGE,
        )
    """
    try:
        asyncio.get_running_loop()
        raise RuntimeError("audit_blocking() called from async context. Use LinkAuditor.run() instead.")
    except RuntimeError as e:
        if "no running event loop" not in str(e).lower():
            raise

    if config is None:
        config = AuditConfig(**kwargs)  # type: ignore[arg-type]

    auditor = LinkAuditor(config)

    async def _run() -> BatchReport:
        async for event in auditor.run(documents):
            if on_event:
                on_event(event)
        if auditor.report is None:
            raise RuntimeError("Audit did not complete")
        return auditor.report

    return asyncio.run(_run())
