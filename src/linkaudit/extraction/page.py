"""Region-tagged link extraction for whole pages (menu, footer, social, other)."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from typing import Optional, Protocol, Union, runtime_checkable
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

from ..models.config import ExtractionConfig
from ..models.links import PAGE_REGIONS, CategorizedLinkSet, Link, RegionType
from .anchors import build_link
from .dedup import dedupe_links
from .dom import document_text, parse_html
from .normalizer import ClassifiedHref, SchemeTag, base_host_from_url, classify_href

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def is_social_href(href: str, social_domains: Iterable[str]) -> bool:
    """
    Check whether an href points at a social network.

    Bare hosts such as ``facebook.com/acme`` are accepted. The host (minus
    a leading ``www.``) must equal a listed domain or be a subdomain of it.
    """
    candidate = href if href.lower().startswith("http") else f"https://{href}"
    try:
        host = urlparse(candidate).hostname
    except ValueError:
        return False

    if not host:
        return False
    if host.startswith("www."):
        host = host[4:]

    return any(host == domain or host.endswith("." + domain) for domain in social_domains)


@runtime_checkable
class RegionStage(Protocol):
    """
    One step of the page tagging pipeline.

    Stages run in order. Each yields candidate anchors and either returns
    a region for an anchor or None to pass it on. An href claimed by an
    earlier stage is never offered to later ones.
    """

    name: str

    def candidates(self, soup: BeautifulSoup, anchors: Sequence[Tag]) -> Iterable[Tag]:
        """Anchors this stage wants to look at, in the order to claim them."""
        ...

    def assign(self, anchor: Tag, classified: ClassifiedHref) -> Optional[RegionType]:
        """Region for the anchor, or None to pass."""
        ...


class SelectorStage:
    """Claims anchors nested in containers matched by CSS selectors."""

    def __init__(self, name: str, region: RegionType, selectors: Sequence[str]):
        self.name = name
        self._region = region
        self._selectors = tuple(selectors)

    def candidates(self, soup: BeautifulSoup, anchors: Sequence[Tag]) -> Iterable[Tag]:
        for selector in self._selectors:
            try:
                matches = soup.select(f"{selector} a[href]")
            except Exception as e:
                logger.debug(f"Skipping invalid selector {selector!r}: {e}")
                continue
            yield from matches

    def assign(self, anchor: Tag, classified: ClassifiedHref) -> Optional[RegionType]:
        return self._region


class SocialStage:
    """Claims anchors pointing at a social network, wherever they are."""

    name = "social"

    def __init__(self, social_domains: Sequence[str]):
        self._domains = tuple(domain.lower() for domain in social_domains)

    def candidates(self, soup: BeautifulSoup, anchors: Sequence[Tag]) -> Iterable[Tag]:
        return anchors

    def assign(self, anchor: Tag, classified: ClassifiedHref) -> Optional[RegionType]:
        if classified.is_contact:
            return None
        if is_social_href(classified.href, self._domains):
            return RegionType.SOCIAL
        return None


class RemainderStage:
    """Splits every remaining anchor, except mailto: and tel:, into internal and external."""

    name = "other"

    def candidates(self, soup: BeautifulSoup, anchors: Sequence[Tag]) -> Iterable[Tag]:
        return anchors

    def assign(self, anchor: Tag, classified: ClassifiedHref) -> Optional[RegionType]:
        if classified.is_contact:
            return None
        return RegionType.OTHER_INTERNAL if classified.is_internal else RegionType.OTHER_EXTERNAL


def default_stages(config: ExtractionConfig) -> list[RegionStage]:
    """Tagging priority: menu > footer > social > other."""
    return [
        SelectorStage("menu", RegionType.MENU, config.menu_selectors),
        SelectorStage("footer", RegionType.FOOTER, config.footer_selectors),
        SocialStage(config.social_domains),
        RemainderStage(),
    ]


class PageLinkExtractor:
    """
    Extract and categorize every link on a page.

    Each href lands in at most one of menu, footer, social, other-internal
    or other-external. mailto: and tel: links are tagged menu or footer
    when they sit in those containers and are otherwise left out of the
    regions. Email addresses come from mailto: links plus a scan of the
    visible text.

    Example:
        extractor = PageLinkExtractor()
        links = extractor.extract(html, "https://example.com")
        for link in links.get(RegionType.MENU):
            print(link.href, link.text)
    """

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        stages: Optional[Sequence[RegionStage]] = None,
    ):
        """
        Initialize the page link extractor.

        Args:
            config: Selector and domain lists (defaults if None)
            stages: Custom tagging pipeline (overrides the default order)
        """
        self._config = config or ExtractionConfig()
        self._stages = list(stages) if stages is not None else default_stages(self._config)

    @property
    def stages(self) -> list[RegionStage]:
        """Tagging stages in priority order."""
        return list(self._stages)

    def extract(self, html: Union[str, bytes], base_url: str) -> CategorizedLinkSet:
        """
        Extract categorized links from a page.

        Args:
            html: Full HTML document
            base_url: Absolute URL of the page

        Returns:
            CategorizedLinkSet with page regions and email addresses

        Raises:
            ValueError: If base_url has no host
        """
        base_host = base_host_from_url(base_url)
        soup = parse_html(html)

        anchors: list[Tag] = []
        classified: dict[int, ClassifiedHref] = {}
        for anchor in soup.find_all("a", href=True):
            result = classify_href(anchor.get("href"), base_host)
            if not result.is_link:
                continue
            anchors.append(anchor)
            classified[id(anchor)] = result

        categories: dict[RegionType, list[Link]] = {region: [] for region in PAGE_REGIONS}
        claimed: dict[str, RegionType] = {}

        for stage in self._stages:
            for anchor in stage.candidates(soup, anchors):
                result = classified.get(id(anchor))
                if result is None:
                    continue

                key = result.href.lower()
                if key in claimed:
                    continue

                region = stage.assign(anchor, result)
                if region is None:
                    continue

                claimed[key] = region
                categories.setdefault(region, []).append(build_link(anchor, result, region))

        all_links = tuple(
            build_link(anchor, classified[id(anchor)], self._region_of(classified[id(anchor)], claimed))
            for anchor in anchors
        )

        emails = self._collect_emails(soup, anchors, classified)

        link_set = CategorizedLinkSet(
            categories={region: tuple(dedupe_links(links)) for region, links in categories.items()},
            all_links=all_links,
            email_addresses=tuple(emails),
        )

        logger.debug(
            f"Page {base_url}: "
            + ", ".join(f"{region.value}={len(links)}" for region, links in link_set.categories.items())
            + f", emails={len(emails)}"
        )

        return link_set

    @staticmethod
    def _region_of(result: ClassifiedHref, claimed: dict[str, RegionType]) -> Optional[RegionType]:
        """Region reported on the flat all-links entry for an anchor."""
        region = claimed.get(result.href.lower())
        if region is not None:
            return region
        if result.scheme == SchemeTag.EMAIL:
            return RegionType.EMAIL
        if result.scheme == SchemeTag.TEL:
            return RegionType.TEL
        return None

    @staticmethod
    def _collect_emails(
        soup: BeautifulSoup,
        anchors: Sequence[Tag],
        classified: dict[int, ClassifiedHref],
    ) -> list[str]:
        """mailto: addresses first, then addresses found in the text."""
        emails: dict[str, None] = {}

        for anchor in anchors:
            result = classified[id(anchor)]
            if result.scheme == SchemeTag.EMAIL and result.address:
                emails.setdefault(result.address, None)

        for match in EMAIL_PATTERN.findall(document_text(soup)):
            emails.setdefault(match, None)

        return list(emails)


def extract_page_links(
    html: Union[str, bytes],
    base_url: str,
    config: Optional[ExtractionConfig] = None,
) -> CategorizedLinkSet:
    """Convenience wrapper around PageLinkExtractor.extract."""
    return PageLinkExtractor(config).extract(html, base_url)
