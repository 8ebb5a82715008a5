"""Shared fixtures: a small docs tree on disk and an app serving it."""

from pathlib import Path

import pytest

from quire.app import DocsApp
from quire.config import SiteConfig

NAVIGATION_TOML = """\
[[sections]]
title = "Getting Started"

[[sections.items]]
label = "Introduction"
slug = "getting-started"

[[sections.items]]
label = "Installation"
slug = "installation"

[[sections]]
title = "Guides"

[[sections.items]]
label = "Guides Overview"
slug = "guides"

[[sections.items]]
label = "Building from Source"
slug = "guides/building"

[[sections.items]]
label = "Configuration"
slug = "guides/configuration"
"""


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """A docs directory exercising file-style and index-style documents."""
    root = tmp_path / "docs"
    (root / "guides" / "configuration").mkdir(parents=True)
    (root / "_drafts").mkdir()
    (root / ".cache").mkdir()

    (root / "getting-started.mdx").write_text(
        "import { Callout } from '../components'\n"
        "export const meta = { draft: false }\n"
        "\n"
        "# Getting Started\n"
        "\n"
        "Welcome to the docs.\n",
        encoding="utf-8",
    )
    (root / "installation.md").write_text(
        "# Installation\n\nRun the installer.\n", encoding="utf-8"
    )
    (root / "guides" / "building.md").write_text(
        "# Building from Source\n\nClone and build.\n", encoding="utf-8"
    )
    (root / "guides" / "configuration" / "index.md").write_text(
        "# Configuration\n\nAll the knobs.\n", encoding="utf-8"
    )
    (root / "_drafts" / "secret.md").write_text("# Secret\n", encoding="utf-8")
    (root / ".cache" / "stale.md").write_text("# Stale\n", encoding="utf-8")
    (root / "navigation.toml").write_text(NAVIGATION_TOML, encoding="utf-8")
    return root


@pytest.fixture
def docs_app(docs_dir: Path) -> DocsApp:
    return DocsApp(SiteConfig(docs_dir=docs_dir, site_title="Test Docs"))
