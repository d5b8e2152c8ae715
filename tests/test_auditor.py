"""Tests for the batch auditor, events and summaries."""

import pytest

from linkaudit.aggregate import summarize_articles, summarize_pages
from linkaudit.core import LinkAuditor, analyze_article, audit_blocking, build_report, scan_page
from linkaudit.models.config import AuditConfig, AuditMode
from linkaudit.models.events import AuditEvent, AuditStats, EventType
from linkaudit.models.links import (
    ArticleBatchSummary,
    Document,
    PageBatchSummary,
    PageScanResult,
    RegionType,
)

from conftest import ARTICLE_HTML, ARTICLE_URL, PAGE_HTML, PAGE_URL


@pytest.fixture
def page_batch():
    """Three pages, the second with a base URL that has no host."""
    return [
        Document(url=PAGE_URL, html=PAGE_HTML, targets=("/pricing",)),
        Document(url="not a url", html=PAGE_HTML, targets=("/pricing",)),
        Document(url="https://acme.com/other", html=PAGE_HTML, targets=("/careers",)),
    ]


class TestScanPage:
    """Tests for scan_page."""

    def test_lookups(self):
        document = Document(url=PAGE_URL, html=PAGE_HTML, targets=("/pricing", "/careers"))
        result = scan_page(document)

        assert result.error is None
        assert [lookup.found for lookup in result.lookups] == [True, False]
        assert result.target_found is False
        assert len(result.target_results) == 2

    def test_blank_targets_are_dropped(self):
        document = Document(url=PAGE_URL, html=PAGE_HTML, targets=("  ", "/pricing "))
        result = scan_page(document)

        assert [lookup.target_link for lookup in result.lookups] == ["/pricing"]
        assert result.target_found is True

    def test_no_targets(self):
        result = scan_page(Document(url=PAGE_URL, html=PAGE_HTML))
        assert result.lookups == ()
        assert result.target_found is False

    def test_bad_base_url_is_recorded(self):
        """Test that a document-level failure is captured on the result."""
        result = scan_page(Document(url="", html=PAGE_HTML, targets=("/pricing",)))

        assert result.error.startswith("Failed to scan:")
        assert result.links.total_links == 0
        assert result.links.get(RegionType.MENU) == ()
        assert [lookup.found for lookup in result.lookups] == [False]


class TestAnalyzeArticle:
    """Tests for analyze_article."""

    def test_seo_statistics(self):
        document = Document(url=ARTICLE_URL, html=ARTICLE_HTML, targets=("/related-article-1",))
        result = analyze_article(document)

        assert result.error is None
        assert result.seo.content_link_count == 3
        assert result.seo.has_internal_content_links is True
        assert result.seo.has_external_content_links is True
        assert result.seo.word_count > 0
        assert result.seo.link_density == pytest.approx(3 / result.seo.word_count)
        assert result.target_results[0].found_in_content is True

    def test_bad_base_url_is_recorded(self):
        result = analyze_article(Document(url="nope", html=ARTICLE_HTML, targets=("/x",)))

        assert result.error.startswith("Failed to analyze:")
        assert result.links.content_links == ()
        assert result.target_results[0].exists is False


class TestSummaries:
    """Tests for batch aggregation."""

    def test_summarize_pages(self):
        results = [
            scan_page(Document(url=PAGE_URL, html=PAGE_HTML, targets=("/pricing",))),
            scan_page(Document(url=PAGE_URL, html=PAGE_HTML, targets=("/careers",))),
        ]
        summary = summarize_pages(results)

        assert summary == PageBatchSummary(
            total_scanned=2,
            targets_found=1,
            total_links_found=28,
            total_menu_links=6,
            total_footer_links=8,
            total_social_links=4,
            total_email_addresses=4,
            total_other_links=10,
            error_count=0,
        )

    def test_summarize_pages_counts_each_found_target(self):
        """Test that targets_found counts found (page, target) pairs."""
        results = [
            scan_page(Document(url=PAGE_URL, html=PAGE_HTML, targets=("/pricing", "/careers", "/news"))),
            scan_page(Document(url=PAGE_URL, html=PAGE_HTML, targets=("/about",))),
        ]
        summary = summarize_pages(results)

        assert summary.total_scanned == 2
        assert summary.targets_found == 3
        assert results[0].found_count == 2
        assert results[0].target_found is False

    def test_summarize_articles_counts_targets_once(self):
        """Test that each target counts towards one placement."""
        document = Document(
            url=ARTICLE_URL,
            html=ARTICLE_HTML,
            targets=("/related-article-1", "/sidebar-link-1", "/privacy", "/missing"),
        )
        summary = summarize_articles([analyze_article(document)])

        assert summary == ArticleBatchSummary(
            total_content_links=3,
            total_other_links=7,
            total_found_in_content=1,
            total_found_in_other=2,
            error_count=0,
        )

    def test_empty_batch(self):
        assert summarize_pages([]) == PageBatchSummary()
        assert summarize_articles([]) == ArticleBatchSummary()


class TestLinkAuditor:
    """Tests for LinkAuditor."""

    @pytest.mark.asyncio
    async def test_failed_document_does_not_stop_batch(self, page_batch):
        """Test that one bad document is isolated from its neighbours."""
        auditor = LinkAuditor()
        events = [event async for event in auditor.run(page_batch)]

        report = auditor.report
        assert len(report.results) == 3
        assert [r.url for r in report.results] == [d.url for d in page_batch]
        assert report.results[0].error is None
        assert report.results[1].error
        assert report.results[2].error is None

        summary = report.summary
        assert summary.total_scanned == 3
        assert summary.error_count == 1
        assert summary.total_menu_links == 6
        assert summary.total_links_found == 28
        assert summary.targets_found == 1
        assert report.target_links_count == 2

        types = [event.type for event in events]
        assert types[0] == EventType.STARTED
        assert types[-1] == EventType.COMPLETED
        assert types.count(EventType.DOCUMENT_STARTED) == 3
        assert types.count(EventType.DOCUMENT_FAILED) == 1
        assert types.count(EventType.DOCUMENT_COMPLETED) == 2

    @pytest.mark.asyncio
    async def test_stats(self, page_batch):
        auditor = LinkAuditor()
        async for _ in auditor.run(page_batch):
            pass

        assert auditor.stats.documents_processed == 3
        assert auditor.stats.documents_failed == 1

    @pytest.mark.asyncio
    async def test_article_mode(self):
        auditor = LinkAuditor(AuditConfig(mode=AuditMode.ARTICLE))
        documents = [Document(url=ARTICLE_URL, html=ARTICLE_HTML, targets=("/related-article-1",))]
        async for _ in auditor.run(documents):
            pass

        assert isinstance(auditor.report.summary, ArticleBatchSummary)
        assert auditor.report.summary.total_found_in_content == 1

    @pytest.mark.asyncio
    async def test_cancel(self, page_batch):
        """Test that cancelling stops between documents without a report."""
        auditor = LinkAuditor()
        events = []
        async for event in auditor.run(page_batch):
            events.append(event)
            if event.type == EventType.DOCUMENT_COMPLETED:
                auditor.cancel()

        assert events[-1].type == EventType.CANCELLED
        assert auditor.report is None
        assert auditor.stats.documents_processed == 1

    @pytest.mark.asyncio
    async def test_empty_batch(self):
        auditor = LinkAuditor()
        events = [event async for event in auditor.run([])]

        assert [event.type for event in events] == [EventType.STARTED, EventType.COMPLETED]
        assert auditor.report.results == ()
        assert auditor.report.summary == PageBatchSummary()

    def test_process_dispatches_on_mode(self):
        document = Document(url=PAGE_URL, html=PAGE_HTML)
        assert isinstance(LinkAuditor().process(document), PageScanResult)


class TestAuditBlocking:
    """Tests for the blocking wrapper."""

    def test_returns_report_and_emits_events(self, page_batch):
        events = []
        report = audit_blocking(page_batch, on_event=events.append)

        assert len(report.results) == 3
        assert events[0].type == EventType.STARTED
        assert events[-1].type == EventType.COMPLETED

    def test_kwargs_build_config(self):
        documents = [Document(url=ARTICLE_URL, html=ARTICLE_HTML)]
        report = audit_blocking(documents, mode=AuditMode.ARTICLE)
        assert isinstance(report.summary, ArticleBatchSummary)

    @pytest.mark.asyncio
    async def test_refuses_running_loop(self, page_batch):
        with pytest.raises(RuntimeError, match="async context"):
            audit_blocking(page_batch)


class TestEventsAndStats:
    """Tests for AuditEvent and AuditStats."""

    def test_progress_percent(self):
        event = AuditEvent(type=EventType.DOCUMENT_STARTED, current=1, total=4)
        assert event.progress_percent == 25.0

    def test_failed_event_is_error(self):
        assert AuditEvent(type=EventType.DOCUMENT_FAILED, error="boom").is_error is True
        assert AuditEvent(type=EventType.COMPLETED).is_error is False

    def test_stats_to_dict(self):
        stats = AuditStats(documents_processed=4, documents_failed=1)
        stats_dict = stats.to_dict()
        assert stats_dict["documents_processed"] == 4
        assert stats_dict["success_rate"] == 75.0

    def test_build_report_counts_unique_targets(self):
        documents = [
            Document(url=PAGE_URL, html=PAGE_HTML, targets=("/a", "/b")),
            Document(url=PAGE_URL, html=PAGE_HTML, targets=("/b", " ")),
        ]
        results = [scan_page(document) for document in documents]
        report = build_report(results, AuditMode.PAGE, documents)
        assert report.target_links_count == 2
