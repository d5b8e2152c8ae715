"""Batch auditing entry points."""

from .auditor import LinkAuditor, analyze_article, audit_blocking, build_report, scan_page

__all__ = [
    "LinkAuditor",
    "analyze_article",
    "audit_blocking",
    "build_report",
    "scan_page",
]
