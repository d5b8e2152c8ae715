"""Heuristic for telling article links from navigation links."""

from bs4 import Tag

from ..models.config import ExtractionConfig
from .dom import ancestors, class_string


def is_likely_content_link(anchor: Tag, config: ExtractionConfig) -> bool:
    """
    Guess whether an anchor sits in article text.

    Walks up to ``config.max_ancestor_depth`` ancestors. A prose tag with a
    content-like class decides for content; a navigation tag or a
    navigation-like class decides against it. Without a decisive ancestor,
    long anchor text counts as content, text containing a navigation word
    does not, and anything else defaults to content.
    """
    for parent in ancestors(anchor, config.max_ancestor_depth):
        tag_name = (parent.name or "").lower()
        classes = class_string(parent)

        if tag_name in config.prose_tags and any(marker in classes for marker in config.content_class_markers):
            return True

        if tag_name in config.navigation_tags or any(
            marker in classes for marker in config.navigation_class_markers
        ):
            return False

    # Raw text length, so wrapped whitespace counts towards the threshold
    text = anchor.get_text().strip()
    if len(text) > config.long_text_threshold:
        return True

    lowered = text.lower()
    if any(word in lowered for word in config.navigation_words):
        return False

    return True
