"""Document parsing and tree queries shared by the extractors."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


def parse_html(html: Union[str, bytes]) -> BeautifulSoup:
    """Parse an HTML document with the stdlib-backed parser."""
    return BeautifulSoup(html, "html.parser")


def ancestors(tag: Tag, max_depth: Optional[int] = None) -> Iterator[Tag]:
    """
    Yield the element ancestors of a tag, nearest first.

    Stops at the document root (the BeautifulSoup object itself is not
    yielded) or after ``max_depth`` ancestors.
    """
    depth = 0
    parent = tag.parent
    while parent is not None and not isinstance(parent, BeautifulSoup):
        if max_depth is not None and depth >= max_depth:
            return
        yield parent
        parent = parent.parent
        depth += 1


def is_descendant_of(tag: Tag, container: Tag) -> bool:
    """Check whether ``container`` contains ``tag`` (a tag contains itself)."""
    if tag is container or isinstance(container, BeautifulSoup):
        return True
    return any(parent is container for parent in ancestors(tag))


def is_inside_any(tag: Tag, container_ids: set[int]) -> bool:
    """Check whether any ancestor (or the tag itself) is one of the containers."""
    if id(tag) in container_ids:
        return True
    return any(id(parent) in container_ids for parent in ancestors(tag))


def select_all(soup: BeautifulSoup, selectors: Iterable[str]) -> list[Tag]:
    """
    Collect every element matching any of the selectors, without repeats.

    Invalid selectors are skipped with a debug message.
    """
    found: list[Tag] = []
    seen: set[int] = set()
    for selector in selectors:
        try:
            matches = soup.select(selector)
        except Exception as e:
            logger.debug(f"Skipping invalid selector {selector!r}: {e}")
            continue
        for element in matches:
            if id(element) not in seen:
                seen.add(id(element))
                found.append(element)
    return found


def select_first(soup: BeautifulSoup, selectors: Iterable[str]) -> Optional[Tag]:
    """Return the first element matched by the first selector that matches."""
    for selector in selectors:
        try:
            element = soup.select_one(selector)
        except Exception as e:
            logger.debug(f"Skipping invalid selector {selector!r}: {e}")
            continue
        if element is not None:
            return element
    return None


def class_string(tag: Tag) -> str:
    """Lowercase class attribute of a tag as a single string."""
    classes = tag.get("class") or []
    if isinstance(classes, str):
        return classes.lower()
    return " ".join(classes).lower()


def anchor_text(anchor: Tag) -> str:
    """Visible text of an anchor with whitespace collapsed."""
    return " ".join(anchor.get_text(" ").split())


def document_text(soup: BeautifulSoup) -> str:
    """Text content of the document body (whole document if there is no body)."""
    root = soup.body if soup.body is not None else soup
    return root.get_text(" ")
