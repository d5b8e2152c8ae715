"""Link and result models produced by the extraction pipelines."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Optional, Union


class RegionType(str, Enum):
    """Mutually exclusive category assigned to a link in one extraction pass."""

    MENU = "menu"
    FOOTER = "footer"
    SOCIAL = "social"
    CONTENT_INTERNAL = "content-internal"
    CONTENT_EXTERNAL = "content-external"
    OTHER_INTERNAL = "other-internal"
    OTHER_EXTERNAL = "other-external"
    EMAIL = "email"
    TEL = "tel"
    ANCHOR = "anchor"
    JAVASCRIPT = "javascript"


PAGE_REGIONS = (
    RegionType.MENU,
    RegionType.FOOTER,
    RegionType.SOCIAL,
    RegionType.OTHER_INTERNAL,
    RegionType.OTHER_EXTERNAL,
)

ARTICLE_REGIONS = (
    RegionType.CONTENT_INTERNAL,
    RegionType.CONTENT_EXTERNAL,
    RegionType.OTHER_INTERNAL,
    RegionType.OTHER_EXTERNAL,
    RegionType.EMAIL,
    RegionType.TEL,
    RegionType.ANCHOR,
    RegionType.JAVASCRIPT,
)


@dataclass(frozen=True)
class Link:
    """
    A discovered anchor reference.

    Attributes:
        href: Reference value, left relative for relative links
        text: Visible anchor text (falls back to image alt, then href)
        title: Tooltip attribute, empty if absent
        is_internal: True if the link points at the base host
        region_type: Category assigned during extraction
    """

    href: str
    text: str
    title: str = ""
    is_internal: bool = True
    region_type: Optional[RegionType] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert link to dictionary for serialization."""
        return {
            "href": self.href,
            "text": self.text,
            "title": self.title,
            "is_internal": self.is_internal,
            "region_type": self.region_type.value if self.region_type else None,
        }


@dataclass(frozen=True)
class CategorizedLinkSet:
    """
    Result of one extraction pass over one document.

    ``categories`` maps every region of the pipeline to its ordered links;
    ``all_links`` is the flat list searched by the target matcher.
    """

    categories: Mapping[RegionType, tuple[Link, ...]]
    all_links: tuple[Link, ...] = ()
    email_addresses: tuple[str, ...] = ()
    has_content_region: bool = False
    content_word_count: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))

    @classmethod
    def empty(cls, regions: tuple[RegionType, ...], has_content_region: bool = False) -> CategorizedLinkSet:
        """Create a link set with every region present and empty."""
        return cls(
            categories={region: () for region in regions},
            has_content_region=has_content_region,
        )

    def get(self, region: RegionType) -> tuple[Link, ...]:
        """Get links of one category (empty tuple if the region is absent)."""
        return self.categories.get(region, ())

    @property
    def total_links(self) -> int:
        """Number of links across all categories."""
        return sum(len(links) for links in self.categories.values())

    @property
    def content_links(self) -> tuple[Link, ...]:
        """Links inside the article body."""
        return self.get(RegionType.CONTENT_INTERNAL) + self.get(RegionType.CONTENT_EXTERNAL)

    @property
    def other_links(self) -> tuple[Link, ...]:
        """
        Links outside the article body.

        Page scans have no content region, so every link counts as other.
        """
        if not self.has_content_region:
            return self.all_links
        return (
            self.get(RegionType.OTHER_INTERNAL)
            + self.get(RegionType.OTHER_EXTERNAL)
            + self.get(RegionType.EMAIL)
            + self.get(RegionType.TEL)
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert link set to dictionary for serialization."""
        return {
            "categories": {
                region.value: [link.to_dict() for link in links] for region, links in self.categories.items()
            },
            "email_addresses": list(self.email_addresses),
            "total_links": self.total_links,
        }


@dataclass(frozen=True)
class TargetCheckResult:
    """Where one target link was found in a document."""

    target_link: str
    content_matches: tuple[Link, ...] = ()
    other_matches: tuple[Link, ...] = ()

    @property
    def found_in_content(self) -> bool:
        return len(self.content_matches) > 0

    @property
    def found_in_other(self) -> bool:
        return len(self.other_matches) > 0

    @property
    def exists(self) -> bool:
        return self.found_in_content or self.found_in_other

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_link": self.target_link,
            "found_in_content": self.found_in_content,
            "found_in_other": self.found_in_other,
            "exists": self.exists,
            "content_matches": [link.to_dict() for link in self.content_matches],
            "other_matches": [link.to_dict() for link in self.other_matches],
        }


@dataclass(frozen=True)
class TargetLookup:
    """First link on a page matching a target."""

    target_link: str
    found: bool = False
    anchor_text: Optional[str] = None
    matched_href: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_link": self.target_link,
            "found": self.found,
            "anchor_text": self.anchor_text,
            "matched_href": self.matched_href,
        }


@dataclass(frozen=True)
class SeoAnalysis:
    """Content link statistics for one article."""

    content_link_count: int = 0
    has_internal_content_links: bool = False
    has_external_content_links: bool = False
    word_count: int = 0

    @property
    def link_density(self) -> float:
        """Content links per word of article text."""
        return self.content_link_count / max(self.word_count, 1)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content_link_count": self.content_link_count,
            "has_internal_content_links": self.has_internal_content_links,
            "has_external_content_links": self.has_external_content_links,
            "word_count": self.word_count,
            "link_density": round(self.link_density, 4),
        }


@dataclass(frozen=True)
class Document:
    """
    One HTML document supplied by a collaborator.

    The auditor never fetches anything; callers read files or fetch pages
    themselves and hand over the HTML text.
    """

    url: str
    html: str
    targets: tuple[str, ...] = ()


@dataclass(frozen=True)
class PageScanResult:
    """Outcome of a page scan for one document."""

    url: str
    links: CategorizedLinkSet
    lookups: tuple[TargetLookup, ...] = ()
    target_results: tuple[TargetCheckResult, ...] = ()
    error: Optional[str] = None

    @property
    def target_found(self) -> bool:
        """True if every requested target was found on the page."""
        return bool(self.lookups) and all(lookup.found for lookup in self.lookups)

    @property
    def found_count(self) -> int:
        """Number of targets found on the page."""
        return sum(1 for lookup in self.lookups if lookup.found)

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "links": self.links.to_dict(),
            "lookups": [lookup.to_dict() for lookup in self.lookups],
            "target_results": [result.to_dict() for result in self.target_results],
            "error": self.error,
        }


@dataclass(frozen=True)
class ArticleAnalysis:
    """Outcome of an article analysis for one document."""

    url: str
    links: CategorizedLinkSet
    target_results: tuple[TargetCheckResult, ...] = ()
    seo: SeoAnalysis = field(default_factory=SeoAnalysis)
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "links": self.links.to_dict(),
            "target_results": [result.to_dict() for result in self.target_results],
            "seo": self.seo.to_dict(),
            "error": self.error,
        }


@dataclass(frozen=True)
class PageBatchSummary:
    """Totals across a batch of page scans."""

    total_scanned: int = 0
    targets_found: int = 0
    total_links_found: int = 0
    total_menu_links: int = 0
    total_footer_links: int = 0
    total_social_links: int = 0
    total_email_addresses: int = 0
    total_other_links: int = 0
    error_count: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total_scanned": self.total_scanned,
            "targets_found": self.targets_found,
            "total_links_found": self.total_links_found,
            "total_menu_links": self.total_menu_links,
            "total_footer_links": self.total_footer_links,
            "total_social_links": self.total_social_links,
            "total_email_addresses": self.total_email_addresses,
            "total_other_links": self.total_other_links,
            "error_count": self.error_count,
        }


@dataclass(frozen=True)
class ArticleBatchSummary:
    """Totals across a batch of article analyses."""

    total_content_links: int = 0
    total_other_links: int = 0
    total_found_in_content: int = 0
    total_found_in_other: int = 0
    error_count: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total_content_links": self.total_content_links,
            "total_other_links": self.total_other_links,
            "total_found_in_content": self.total_found_in_content,
            "total_found_in_other": self.total_found_in_other,
            "error_count": self.error_count,
        }


DocumentResult = Union[PageScanResult, ArticleAnalysis]
BatchSummary = Union[PageBatchSummary, ArticleBatchSummary]


@dataclass(frozen=True)
class BatchReport:
    """Per-document results plus the summary computed once the batch finished."""

    results: tuple[DocumentResult, ...]
    summary: BatchSummary
    target_links_count: int = 0
    analyzed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [result.to_dict() for result in self.results],
            "summary": self.summary.to_dict(),
            "target_links_count": self.target_links_count,
            "analyzed_at": self.analyzed_at.isoformat(),
        }
