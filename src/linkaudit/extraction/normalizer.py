"""URL normalization and internal/external classification of href values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


class SchemeTag(str, Enum):
    """Kind of reference an href value holds."""

    HTTP = "http"
    RELATIVE = "relative"
    EMAIL = "email"
    TEL = "tel"
    ANCHOR = "anchor"
    JAVASCRIPT = "javascript"
    EMPTY = "empty"


# Tags that are not navigable links at all
NON_LINK_SCHEMES = frozenset({SchemeTag.EMPTY, SchemeTag.ANCHOR, SchemeTag.JAVASCRIPT})


@dataclass(frozen=True)
class ClassifiedHref:
    """Result of classifying one href."""

    href: str
    is_internal: bool
    scheme: SchemeTag
    address: Optional[str] = None  # mailto: target without query string

    @property
    def is_link(self) -> bool:
        """False for empty, fragment-only and javascript: hrefs."""
        return self.scheme not in NON_LINK_SCHEMES

    @property
    def is_contact(self) -> bool:
        """True for mailto: and tel: hrefs."""
        return self.scheme in (SchemeTag.EMAIL, SchemeTag.TEL)


def base_host_from_url(base_url: str) -> str:
    """
    Extract the lowercase host of a page URL.

    Args:
        base_url: Absolute URL of the page being scanned

    Returns:
        Hostname without port

    Raises:
        ValueError: If no host can be determined
    """
    try:
        host = urlparse(base_url.strip()).hostname
    except ValueError as e:
        raise ValueError(f"Invalid base URL {base_url!r}: {e}") from e

    if not host:
        raise ValueError(f"Invalid base URL {base_url!r}: no host")

    return host


def email_address(href: str) -> str:
    """Strip the mailto: prefix and any query string from an href."""
    address = href[len("mailto:") :] if href.lower().startswith("mailto:") else href
    return address.split("?", 1)[0]


def classify_href(href: Optional[str], base_host: str) -> ClassifiedHref:
    """
    Classify an href relative to the page host.

    Never raises: hosts that cannot be parsed are treated as internal and
    the href is kept unchanged.

    Args:
        href: Raw href attribute value
        base_host: Lowercase host of the page being scanned

    Returns:
        ClassifiedHref describing the reference
    """
    value = (href or "").strip()
    lowered = value.lower()

    if not value:
        return ClassifiedHref(href=value, is_internal=True, scheme=SchemeTag.EMPTY)

    if value.startswith("#"):
        return ClassifiedHref(href=value, is_internal=True, scheme=SchemeTag.ANCHOR)

    if lowered.startswith("javascript:"):
        return ClassifiedHref(href=value, is_internal=True, scheme=SchemeTag.JAVASCRIPT)

    if lowered.startswith("mailto:"):
        return ClassifiedHref(
            href=value,
            is_internal=False,
            scheme=SchemeTag.EMAIL,
            address=email_address(value),
        )

    if lowered.startswith("tel:"):
        return ClassifiedHref(href=value, is_internal=False, scheme=SchemeTag.TEL)

    if lowered.startswith(("http://", "https://")):
        try:
            host = urlparse(value).hostname
        except ValueError as e:
            logger.debug(f"Malformed URL {value!r}, treating as internal: {e}")
            return ClassifiedHref(href=value, is_internal=True, scheme=SchemeTag.HTTP)

        if not host:
            return ClassifiedHref(href=value, is_internal=True, scheme=SchemeTag.HTTP)

        return ClassifiedHref(href=value, is_internal=host == base_host.lower(), scheme=SchemeTag.HTTP)

    # Root-relative and plain relative paths stay as written
    return ClassifiedHref(href=value, is_internal=True, scheme=SchemeTag.RELATIVE)
