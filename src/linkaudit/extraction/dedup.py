"""Per-category link deduplication."""

from collections.abc import Iterable

from ..models.links import Link


def dedupe_links(links: Iterable[Link]) -> list[Link]:
    """
    Drop links whose href repeats an earlier one, ignoring case.

    The first occurrence wins and the relative order of kept links is
    preserved. Apply per category: the same href in two categories is left
    alone.

    Args:
        links: Links of a single category

    Returns:
        Deduplicated list
    """
    seen: set[str] = set()
    unique: list[Link] = []
    for link in links:
        key = link.href.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(link)
    return unique
