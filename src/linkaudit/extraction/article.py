"""Article link extraction separating body links from boilerplate links."""

from __future__ import annotations

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from ..models.config import ExtractionConfig
from ..models.links import ARTICLE_REGIONS, CategorizedLinkSet, Link, RegionType
from .anchors import build_link
from .dedup import dedupe_links
from .dom import is_descendant_of, is_inside_any, parse_html, select_all, select_first
from .heuristics import is_likely_content_link
from .normalizer import ClassifiedHref, SchemeTag, base_host_from_url, classify_href, email_address

logger = logging.getLogger(__name__)

# Special schemes bypass the location logic entirely
SCHEME_REGIONS = {
    SchemeTag.EMAIL: RegionType.EMAIL,
    SchemeTag.TEL: RegionType.TEL,
    SchemeTag.JAVASCRIPT: RegionType.JAVASCRIPT,
    SchemeTag.ANCHOR: RegionType.ANCHOR,
}


class ArticleLinkExtractor:
    """
    Split the links of an article into content and boilerplate links.

    A link is content when it is outside every navigation, footer, sidebar
    or similar region and either inside the main content container or
    judged to be prose by :func:`is_likely_content_link`.

    Example:
        extractor = ArticleLinkExtractor()
        links = extractor.extract(html, "https://blog.example.com/post")
        print(len(links.content_links), "links in the article body")
    """

    def __init__(self, config: Optional[ExtractionConfig] = None):
        """
        Initialize the article link extractor.

        Args:
            config: Selector and heuristic settings (defaults if None)
        """
        self._config = config or ExtractionConfig()

    def find_content_area(self, soup: BeautifulSoup) -> Union[Tag, BeautifulSoup]:
        """Main content container, falling back to the body, then the document."""
        container = select_first(soup, self._config.content_selectors)
        if container is not None:
            return container
        if soup.body is not None:
            return soup.body
        return soup

    def extract(self, html: Union[str, bytes], base_url: str) -> CategorizedLinkSet:
        """
        Extract article links into directional content/other categories.

        Args:
            html: Full HTML document
            base_url: Absolute URL of the article

        Returns:
            CategorizedLinkSet with the article regions

        Raises:
            ValueError: If base_url has no host
        """
        base_host = base_host_from_url(base_url)
        soup = parse_html(html)

        content_area = self.find_content_area(soup)
        boilerplate_ids = {id(element) for element in select_all(soup, self._config.boilerplate_selectors)}

        categories: dict[RegionType, list[Link]] = {region: [] for region in ARTICLE_REGIONS}

        for anchor in soup.find_all("a", href=True):
            result = classify_href(anchor.get("href"), base_host)
            if result.scheme == SchemeTag.EMPTY:
                continue

            region = self._region_for(anchor, result, content_area, boilerplate_ids)
            categories[region].append(build_link(anchor, result, region))

        deduped = {region: tuple(dedupe_links(links)) for region, links in categories.items()}
        word_count = len(content_area.get_text(" ").split())

        link_set = CategorizedLinkSet(
            categories=deduped,
            all_links=tuple(link for links in deduped.values() for link in links),
            email_addresses=tuple(dict.fromkeys(email_address(link.href) for link in deduped[RegionType.EMAIL])),
            has_content_region=True,
            content_word_count=word_count,
        )

        logger.debug(
            f"Article {base_url}: {len(link_set.content_links)} content links, "
            f"{len(link_set.other_links)} other links, {word_count} words"
        )

        return link_set

    def _region_for(
        self,
        anchor: Tag,
        result: ClassifiedHref,
        content_area: Union[Tag, BeautifulSoup],
        boilerplate_ids: set[int],
    ) -> RegionType:
        """Category of one anchor."""
        special = SCHEME_REGIONS.get(result.scheme)
        if special is not None:
            return special

        in_navigation = is_inside_any(anchor, boilerplate_ids)
        in_content = not in_navigation and (
            is_descendant_of(anchor, content_area) or is_likely_content_link(anchor, self._config)
        )

        if result.is_internal:
            return RegionType.CONTENT_INTERNAL if in_content else RegionType.OTHER_INTERNAL
        return RegionType.CONTENT_EXTERNAL if in_content else RegionType.OTHER_EXTERNAL


def extract_article_links(
    html: Union[str, bytes],
    base_url: str,
    config: Optional[ExtractionConfig] = None,
) -> CategorizedLinkSet:
    """Convenience wrapper around ArticleLinkExtractor.extract."""
    return ArticleLinkExtractor(config).extract(html, base_url)
