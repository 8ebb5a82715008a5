"""Mystral Native.js docs — a quire site.

Markdown and MDX pages live in ``docs/``; the sidebar is
``docs/navigation.toml``.  ``/docs/<slug>`` tries ``<slug>.mdx``,
``<slug>.md``, ``<slug>/index.mdx`` and ``<slug>/index.md`` in that
order, so ``guides/configuration`` is served from its ``index.md``.

Run:
    python app.py
"""

from pathlib import Path

from quire import DocsApp, SiteConfig

DOCS_DIR = Path(__file__).parent / "docs"

config = SiteConfig(
    docs_dir=DOCS_DIR,
    site_title="Mystral Native.js",
    brand_href="/",
    header_links=(("GitHub", "https://github.com/mystralengine/mystralnative"),),
)

app = DocsApp(config)


if __name__ == "__main__":
    app.run()
