"""
linkaudit - Classify page links and check where target links are placed.

Usage:
    from linkaudit import Document, LinkAuditor, AuditConfig, AuditMode

    auditor = LinkAuditor(AuditConfig(mode=AuditMode.ARTICLE))

    async for event in auditor.run([Document(url=url, html=html, targets=("/pricing",))]):
        print(event)

    print(auditor.report.summary.to_dict())
"""

__version__ = "1.0.0"

from .aggregate import summarize_articles, summarize_pages
from .core.auditor import LinkAuditor, analyze_article, audit_blocking, scan_page
from .extraction import (
    ArticleLinkExtractor,
    PageLinkExtractor,
    classify_href,
    dedupe_links,
    extract_article_links,
    extract_page_links,
)
from .matching import check_targets, find_target, matches
from .models.config import AuditConfig, AuditMode, ExportConfig, ExtractionConfig
from .models.events import AuditEvent, AuditStats, EventType
from .models.links import (
    ArticleAnalysis,
    ArticleBatchSummary,
    BatchReport,
    CategorizedLinkSet,
    Document,
    Link,
    PageBatchSummary,
    PageScanResult,
    RegionType,
    SeoAnalysis,
    TargetCheckResult,
    TargetLookup,
)

__all__ = [
    "__version__",
    # Core
    "LinkAuditor",
    "audit_blocking",
    "scan_page",
    "analyze_article",
    # Extraction
    "PageLinkExtractor",
    "ArticleLinkExtractor",
    "extract_page_links",
    "extract_article_links",
    "classify_href",
    "dedupe_links",
    # Matching
    "matches",
    "check_targets",
    "find_target",
    # Aggregation
    "summarize_pages",
    "summarize_articles",
    # Config
    "AuditConfig",
    "AuditMode",
    "ExportConfig",
    "ExtractionConfig",
    # Events
    "AuditEvent",
    "AuditStats",
    "EventType",
    # Results
    "ArticleAnalysis",
    "ArticleBatchSummary",
    "BatchReport",
    "CategorizedLinkSet",
    "Document",
    "Link",
    "PageBatchSummary",
    "PageScanResult",
    "RegionType",
    "SeoAnalysis",
    "TargetCheckResult",
    "TargetLookup",
]
