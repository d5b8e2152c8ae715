"""Linkaudit configuration, result and event models."""

from .config import AuditConfig, AuditMode, ExportConfig, ExtractionConfig
from .events import AuditEvent, AuditStats, EventType
from .links import (
    ARTICLE_REGIONS,
    PAGE_REGIONS,
    ArticleAnalysis,
    ArticleBatchSummary,
    BatchReport,
    BatchSummary,
    CategorizedLinkSet,
    Document,
    DocumentResult,
    Link,
    PageBatchSummary,
    PageScanResult,
    RegionType,
    SeoAnalysis,
    TargetCheckResult,
    TargetLookup,
)

__all__ = [
    # Config
    "AuditConfig",
    "AuditMode",
    "ExportConfig",
    "ExtractionConfig",
    # Events
    "AuditEvent",
    "AuditStats",
    "EventType",
    # Links and results
    "ARTICLE_REGIONS",
    "PAGE_REGIONS",
    "ArticleAnalysis",
    "ArticleBatchSummary",
    "BatchReport",
    "BatchSummary",
    "CategorizedLinkSet",
    "Document",
    "DocumentResult",
    "Link",
    "PageBatchSummary",
    "PageScanResult",
    "RegionType",
    "SeoAnalysis",
    "TargetCheckResult",
    "TargetLookup",
]
