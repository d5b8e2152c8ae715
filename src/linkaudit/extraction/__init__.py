"""Link extraction and classification for linkaudit."""

from .article import ArticleLinkExtractor, extract_article_links
from .dedup import dedupe_links
from .dom import ancestors, is_descendant_of, parse_html
from .heuristics import is_likely_content_link
from .normalizer import ClassifiedHref, SchemeTag, base_host_from_url, classify_href, email_address
from .page import (
    EMAIL_PATTERN,
    PageLinkExtractor,
    RegionStage,
    RemainderStage,
    SelectorStage,
    SocialStage,
    default_stages,
    extract_page_links,
    is_social_href,
)

__all__ = [
    # Normalizer
    "ClassifiedHref",
    "SchemeTag",
    "base_host_from_url",
    "classify_href",
    "email_address",
    # DOM
    "ancestors",
    "is_descendant_of",
    "parse_html",
    # Page scan
    "EMAIL_PATTERN",
    "PageLinkExtractor",
    "RegionStage",
    "RemainderStage",
    "SelectorStage",
    "SocialStage",
    "default_stages",
    "extract_page_links",
    "is_social_href",
    # Article scan
    "ArticleLinkExtractor",
    "extract_article_links",
    "is_likely_content_link",
    # Dedup
    "dedupe_links",
]
