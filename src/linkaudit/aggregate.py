"""Batch summaries computed from per-document results."""

from collections.abc import Sequence

from .models.links import (
    ArticleAnalysis,
    ArticleBatchSummary,
    PageBatchSummary,
    PageScanResult,
    RegionType,
)


def summarize_pages(results: Sequence[PageScanResult]) -> PageBatchSummary:
    """
    Sum link counts across page scans.

    ``total_scanned`` counts pages while ``targets_found`` counts found
    (page, target) pairs, one per exported row with a found target.
    Failed scans carry empty link sets and only count towards
    ``error_count``. No deduplication happens across pages.
    """
    menu = sum(len(r.links.get(RegionType.MENU)) for r in results)
    footer = sum(len(r.links.get(RegionType.FOOTER)) for r in results)
    social = sum(len(r.links.get(RegionType.SOCIAL)) for r in results)
    other = sum(
        len(r.links.get(RegionType.OTHER_INTERNAL)) + len(r.links.get(RegionType.OTHER_EXTERNAL)) for r in results
    )

    return PageBatchSummary(
        total_scanned=len(results),
        targets_found=sum(r.found_count for r in results),
        total_links_found=menu + footer + social + other,
        total_menu_links=menu,
        total_footer_links=footer,
        total_social_links=social,
        total_email_addresses=sum(len(r.links.email_addresses) for r in results),
        total_other_links=other,
        error_count=sum(1 for r in results if r.error),
    )


def summarize_articles(results: Sequence[ArticleAnalysis]) -> ArticleBatchSummary:
    """
    Sum content/other link counts and target placement across articles.

    ``total_found_in_other`` counts targets found outside the body only,
    so a target present in both places is counted once, as content.
    """
    return ArticleBatchSummary(
        total_content_links=sum(len(r.links.content_links) for r in results),
        total_other_links=sum(len(r.links.other_links) for r in results),
        total_found_in_content=sum(1 for r in results for check in r.target_results if check.found_in_content),
        total_found_in_other=sum(
            1 for r in results for check in r.target_results if check.found_in_other and not check.found_in_content
        ),
        error_count=sum(1 for r in results if r.error),
    )
