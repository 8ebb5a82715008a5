"""Site configuration.

SiteConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from quire.errors import ConfigurationError

if TYPE_CHECKING:
    from quire.content.paths import PathResolver


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(docs_dir="docs", site_title="Mystral Native.js")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    reload_include: tuple[str, ...] = (".md", ".mdx", ".toml")

    # Content
    docs_dir: str | Path = "docs"
    route_prefix: str = "/docs/"
    default_slug: str = "getting-started"
    extensions: tuple[str, ...] = (".mdx", ".md")  # Ordered: earlier wins
    index_name: str = "index"
    navigation_file: str = "navigation.toml"  # Relative to docs_dir

    # Rendering
    site_title: str = "Documentation"
    brand_href: str = "/"
    header_links: tuple[tuple[str, str], ...] = ()  # (label, href) pairs in the top bar
    template_dir: str | Path | None = None  # Overrides for quire/*.html templates
    autoescape: bool = True
    markdown_plugins: tuple[str, ...] = ("all",)
    highlight: bool = False  # Needs patitas highlighting support installed

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if the content settings are unusable."""
        if not (self.route_prefix.startswith("/") and self.route_prefix.endswith("/")):
            msg = f"route_prefix must start and end with '/', got {self.route_prefix!r}"
            raise ConfigurationError(msg)
        if self.route_prefix == "/":
            msg = "route_prefix cannot be the site root"
            raise ConfigurationError(msg)
        if not self.extensions:
            msg = "At least one markup extension is required"
            raise ConfigurationError(msg)
        if not self.default_slug.strip("/"):
            msg = "default_slug cannot be empty"
            raise ConfigurationError(msg)

    @property
    def docs_path(self) -> Path:
        return Path(self.docs_dir)

    @property
    def navigation_path(self) -> Path:
        return self.docs_path / self.navigation_file

    def doc_href(self, slug: str) -> str:
        """URL for a slug under the route prefix."""
        return f"{self.route_prefix}{slug}"

    def resolver(self) -> PathResolver:
        """Build the ``PathResolver`` described by this config."""
        from quire.content.paths import PathResolver

        return PathResolver(
            extensions=self.extensions,
            default_slug=self.default_slug,
            index_name=self.index_name,
        )
