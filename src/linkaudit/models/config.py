"""Pydantic configuration models for linkaudit."""

from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

DEFAULT_MENU_SELECTORS = (
    "nav",
    ".nav",
    ".navigation",
    ".menu",
    ".navbar",
    "ul.menu",
    "ul.nav",
    ".main-nav",
    ".primary-nav",
    "header nav",
)

DEFAULT_FOOTER_SELECTORS = ("footer", ".footer")

# Hosts (and their subdomains) treated as social media profiles
DEFAULT_SOCIAL_DOMAINS = (
    "facebook.com",
    "fb.com",
    "twitter.com",
    "x.com",
    "linkedin.com",
    "instagram.com",
    "youtube.com",
    "pinterest.com",
    "tiktok.com",
    "snapchat.com",
    "reddit.com",
    "tumblr.com",
    "discord.com",
    "telegram.org",
    "whatsapp.com",
    "wechat.com",
)

# Main article areas, checked in order
DEFAULT_CONTENT_SELECTORS = (
    "article",
    "main",
    ".content",
    ".post-content",
    ".entry-content",
    ".article-content",
    ".blog-content",
    ".post-body",
    ".article-body",
    '[role="main"]',
    ".main-content",
    ".page-content",
    ".story-content",
)

# Site-wide chrome excluded from content
DEFAULT_BOILERPLATE_SELECTORS = (
    "nav",
    "header",
    "footer",
    ".navigation",
    ".nav",
    ".menu",
    ".header",
    ".footer",
    ".sidebar",
    ".widget",
    ".aside",
    ".breadcrumb",
    ".pagination",
    ".author-bio",
    ".related-posts",
    ".comments",
    ".social-share",
    ".tags",
    ".categories",
)

DEFAULT_NAVIGATION_WORDS = (
    "home",
    "about",
    "contact",
    "services",
    "products",
    "blog",
    "login",
    "signup",
)


class AuditMode(str, Enum):
    """Which extraction pipeline to run over a batch."""

    PAGE = "page"
    ARTICLE = "article"


class ExtractionConfig(BaseModel):
    """
    Selector, domain and word lists driving link classification.

    Frozen so a single instance can be shared between extractors. Override
    individual lists per call to tune detection for a specific site:

        config = ExtractionConfig(content_selectors=(".story",))
    """

    menu_selectors: tuple[str, ...] = Field(
        DEFAULT_MENU_SELECTORS,
        description="CSS selectors of navigation containers, in priority order",
    )
    footer_selectors: tuple[str, ...] = Field(
        DEFAULT_FOOTER_SELECTORS,
        description="CSS selectors of footer containers",
    )
    social_domains: tuple[str, ...] = Field(
        DEFAULT_SOCIAL_DOMAINS,
        description="Social network domains (subdomains match too)",
    )
    content_selectors: tuple[str, ...] = Field(
        DEFAULT_CONTENT_SELECTORS,
        description="CSS selectors of the main content area, first match wins",
    )
    boilerplate_selectors: tuple[str, ...] = Field(
        DEFAULT_BOILERPLATE_SELECTORS,
        description="CSS selectors of navigation/footer/sidebar regions",
    )
    navigation_words: tuple[str, ...] = Field(
        DEFAULT_NAVIGATION_WORDS,
        description="Anchor text fragments that suggest a navigation link",
    )
    content_class_markers: tuple[str, ...] = Field(
        ("content", "text", "body"),
        description="Class fragments marking a prose container",
    )
    navigation_class_markers: tuple[str, ...] = Field(
        ("nav", "menu", "header", "footer"),
        description="Class fragments marking a navigation container",
    )
    prose_tags: tuple[str, ...] = Field(
        ("p", "div", "span", "section"),
        description="Tags that may carry a prose class marker",
    )
    navigation_tags: tuple[str, ...] = Field(
        ("nav", "header", "footer"),
        description="Tags that always mark a navigation container",
    )
    max_ancestor_depth: int = Field(5, ge=1, description="Ancestors inspected by the content heuristic")
    long_text_threshold: int = Field(
        20,
        ge=0,
        description="Anchor text longer than this is treated as content",
    )

    model_config = {"extra": "forbid", "frozen": True}


class ExportConfig(BaseModel):
    """Configuration for tabular export."""

    email_separator: str = Field(", ", description="Separator used to join email addresses")
    missing_value: str = Field("N/A", description="Placeholder for empty cells")

    model_config = {"extra": "forbid"}


class AuditConfig(BaseModel):
    """
    Root configuration model for linkaudit.

    Example:
        config = AuditConfig(
            mode=AuditMode.ARTICLE,
            extraction=ExtractionConfig(social_domains=("mastodon.social",)),
        )

    YAML format:
        mode: article
        extraction:
          long_text_threshold: 30
        export:
          email_separator: "; "
    """

    mode: AuditMode = Field(AuditMode.PAGE, description="Pipeline to run (page or article)")
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "AuditConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "AuditConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())
