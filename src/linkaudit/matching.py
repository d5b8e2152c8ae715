"""Matching target links against extracted links."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional
from urllib.parse import urlparse

from .models.links import CategorizedLinkSet, Link, TargetCheckResult, TargetLookup

logger = logging.getLogger(__name__)


def _hostname(url: str) -> Optional[str]:
    try:
        return urlparse(url).hostname
    except ValueError:
        return None


def matches(candidate_href: str, target_link: str) -> bool:
    """
    Check whether an extracted href matches a target link.

    Rules, first hit wins:
    1. Case-insensitive equality
    2. Case-insensitive containment in either direction
    3. Both absolute (contain ``://``): same hostname
    4. Target is a path (starts with ``/``) contained in the href

    A blank target matches nothing.

    Args:
        candidate_href: href of an extracted link
        target_link: Link the user is looking for

    Returns:
        True if the link counts as the target
    """
    target = target_link.strip().lower()
    if not target or not candidate_href:
        return False

    href = candidate_href.lower()

    if href == target:
        return True

    if target in href or href in target:
        return True

    if "://" in target and "://" in candidate_href:
        target_host = _hostname(target)
        href_host = _hostname(candidate_href)
        if target_host and href_host and target_host == href_host:
            return True

    if target.startswith("/") and target in candidate_href:
        return True

    return False


def find_matches(links: Iterable[Link], target_link: str) -> tuple[Link, ...]:
    """All links matching a target, in order."""
    return tuple(link for link in links if matches(link.href, target_link))


def check_targets(targets: Iterable[str], link_set: CategorizedLinkSet) -> list[TargetCheckResult]:
    """
    Locate each target in the content and non-content links of a document.

    Page scans have no content region, so all of their matches are
    reported as other matches.

    Args:
        targets: Target link strings
        link_set: Extraction result for one document

    Returns:
        One TargetCheckResult per target, in input order
    """
    content_links = link_set.content_links
    other_links = link_set.other_links

    results = []
    for target in targets:
        result = TargetCheckResult(
            target_link=target,
            content_matches=find_matches(content_links, target),
            other_matches=find_matches(other_links, target),
        )
        logger.debug(
            f"Target {target!r}: {len(result.content_matches)} content, {len(result.other_matches)} other matches"
        )
        results.append(result)
    return results


def find_target(target_link: str, link_set: CategorizedLinkSet) -> TargetLookup:
    """
    First link on the page matching a target.

    Searches the flat all-links list, so links excluded from every
    category are still found.
    """
    for link in link_set.all_links:
        if matches(link.href, target_link):
            return TargetLookup(
                target_link=target_link,
                found=True,
                anchor_text=link.text,
                matched_href=link.href,
            )
    return TargetLookup(target_link=target_link)
