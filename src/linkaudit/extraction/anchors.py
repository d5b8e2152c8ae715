"""Building Link objects from anchor elements."""

from __future__ import annotations

from typing import Optional

from bs4 import Tag

from ..models.links import Link, RegionType
from .dom import anchor_text
from .normalizer import ClassifiedHref


def link_text(anchor: Tag, href: str) -> str:
    """
    Visible text of an anchor.

    Image-only anchors use the image alt text; anchors with neither text
    nor alt fall back to the href.
    """
    text = anchor_text(anchor)
    if text:
        return text

    img = anchor.find("img")
    if isinstance(img, Tag):
        alt = (img.get("alt") or "").strip()
        if alt:
            return alt

    return href


def build_link(
    anchor: Tag,
    classified: ClassifiedHref,
    region: Optional[RegionType] = None,
) -> Link:
    """Create a Link for an anchor from its classified href."""
    title = anchor.get("title") or ""
    return Link(
        href=classified.href,
        text=link_text(anchor, classified.href),
        title=title.strip() if isinstance(title, str) else "",
        is_internal=classified.is_internal,
        region_type=region,
    )
