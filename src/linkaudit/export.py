"""Tabular and JSON export of batch reports."""

from __future__ import annotations

import csv
import json
from collections.abc import Iterator
from typing import Optional, TextIO

from .models.config import ExportConfig
from .models.links import ArticleAnalysis, BatchReport, PageScanResult, RegionType

PAGE_HEADERS = [
    "Page URL",
    "Target Link",
    "Target Found",
    "Anchor Text",
    "Menu Links Count",
    "Footer Links Count",
    "Social Media Links Count",
    "Email Addresses",
    "Other Links Count",
]

ARTICLE_HEADERS = [
    "Article URL",
    "Target Link",
    "Found In Content",
    "Found In Other",
    "Content Links Count",
    "Other Links Count",
    "Error",
]


def page_rows(report: BatchReport, config: Optional[ExportConfig] = None) -> Iterator[list[str]]:
    """
    Flatten page scan results into rows, one per (page, target).

    Pages scanned without targets still produce one row with an empty
    target cell.
    """
    config = config or ExportConfig()

    for result in report.results:
        if not isinstance(result, PageScanResult):
            continue

        links = result.links
        emails = config.email_separator.join(links.email_addresses) or config.missing_value
        other_count = len(links.get(RegionType.OTHER_INTERNAL)) + len(links.get(RegionType.OTHER_EXTERNAL))
        counts = [
            str(len(links.get(RegionType.MENU))),
            str(len(links.get(RegionType.FOOTER))),
            str(len(links.get(RegionType.SOCIAL))),
        ]

        lookups = result.lookups or ()
        if not lookups:
            yield [result.url, "", "No", config.missing_value, *counts, emails, str(other_count)]
            continue

        for lookup in lookups:
            yield [
                result.url,
                lookup.target_link,
                "Yes" if lookup.found else "No",
                lookup.anchor_text or config.missing_value,
                *counts,
                emails,
                str(other_count),
            ]


def article_rows(report: BatchReport, config: Optional[ExportConfig] = None) -> Iterator[list[str]]:
    """Flatten article analyses into rows, one per (article, target)."""
    config = config or ExportConfig()

    for result in report.results:
        if not isinstance(result, ArticleAnalysis):
            continue

        content_count = str(len(result.links.content_links))
        other_count = str(len(result.links.other_links))
        error = result.error or ""

        if not result.target_results:
            yield [result.url, "", "No", "No", content_count, other_count, error]
            continue

        for check in result.target_results:
            yield [
                result.url,
                check.target_link,
                "Yes" if check.found_in_content else "No",
                "Yes" if check.found_in_other else "No",
                content_count,
                other_count,
                error,
            ]


def write_page_csv(report: BatchReport, stream: TextIO, config: Optional[ExportConfig] = None) -> int:
    """
    Write page scan rows as CSV with every cell quoted.

    Returns:
        Number of data rows written
    """
    writer = csv.writer(stream, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(PAGE_HEADERS)
    count = 0
    for row in page_rows(report, config):
        writer.writerow(row)
        count += 1
    return count


def write_article_csv(report: BatchReport, stream: TextIO, config: Optional[ExportConfig] = None) -> int:
    """Write article analysis rows as CSV; returns the number of data rows."""
    writer = csv.writer(stream, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(ARTICLE_HEADERS)
    count = 0
    for row in article_rows(report, config):
        writer.writerow(row)
        count += 1
    return count


def report_to_json(report: BatchReport, indent: Optional[int] = 2) -> str:
    """Serialize a batch report to JSON."""
    return json.dumps(report.to_dict(), indent=indent, ensure_ascii=False)
