"""Tests for quire.view — route changes and shell rendering per state."""

from quire.config import SiteConfig
from quire.content.loader import ContentLoader
from quire.content.paths import PathResolver
from quire.content.registry import StaticRegistry
from quire.content.state import Document, Loaded, Loading, NotFound
from quire.navigation import build_navigation
from quire.templating.integration import create_environment
from quire.view import DocumentView

NAV = build_navigation([
    {
        "title": "Getting Started",
        "items": [
            {"label": "Introduction", "slug": "getting-started"},
            {"label": "Guides", "slug": "guides"},
            {"label": "Building from Source", "slug": "guides/building"},
        ],
    },
])


class RecordingRegistry:
    """StaticRegistry that records loaded identifiers."""

    def __init__(self) -> None:
        self._inner = StaticRegistry({
            "getting-started.mdx": lambda: Document(
                "getting-started.mdx", "<h1>Getting Started</h1>", "Getting Started"
            ),
            "guides/building.md": lambda: Document(
                "guides/building.md", "<h1>Building</h1><p>Steps</p>", "Building"
            ),
        })
        self.loads: list[str] = []

    def has(self, identifier: str) -> bool:
        return self._inner.has(identifier)

    async def load(self, identifier: str) -> Document:
        self.loads.append(identifier)
        return await self._inner.load(identifier)


def _view(registry: RecordingRegistry | None = None) -> DocumentView:
    config = SiteConfig(site_title="Test Docs")
    loader = ContentLoader(registry or RecordingRegistry(), PathResolver())
    return DocumentView(loader, NAV, create_environment(config), config)


class TestNavigate:
    async def test_navigate_loads_document(self) -> None:
        view = _view()
        state = await view.navigate("/docs/guides/building")
        assert isinstance(state, Loaded)
        assert view.slug == "guides/building"
        assert view.status == 200

    async def test_same_slug_resolves_once(self) -> None:
        registry = RecordingRegistry()
        view = _view(registry)
        await view.navigate("/docs/guides/building")
        assert await view.navigate("/docs/guides/building/") is None
        assert registry.loads == ["guides/building.md"]

    async def test_distinct_slug_resolves_again(self) -> None:
        registry = RecordingRegistry()
        view = _view(registry)
        await view.navigate("/docs/guides/building")
        await view.navigate("/docs/getting-started")
        assert registry.loads == ["guides/building.md", "getting-started.mdx"]

    async def test_prefix_only_path_uses_default(self) -> None:
        view = _view()
        state = await view.navigate("/docs/")
        assert isinstance(state, Loaded)
        assert state.slug == "getting-started"

    async def test_unknown_slug_is_404(self) -> None:
        view = _view()
        state = await view.navigate("/docs/nope")
        assert state == NotFound("nope")
        assert view.status == 404

    def test_state_before_navigation_is_loading(self) -> None:
        view = _view()
        assert view.state == Loading("getting-started")


class TestRender:
    async def test_loaded_page(self) -> None:
        view = _view()
        await view.navigate("/docs/guides/building")
        html = view.render()
        assert "<h1>Building</h1><p>Steps</p>" in html
        assert 'data-source="guides/building.md"' in html
        assert 'data-state="loaded"' in html
        assert "Building · Test Docs" in html

    async def test_exactly_one_active_link(self) -> None:
        view = _view()
        await view.navigate("/docs/guides/building")
        html = view.render()
        assert html.count("sidebar-link active") == 1
        assert 'href="/docs/guides/building" class="sidebar-link active" aria-current="page"' in html
        assert 'href="/docs/guides" class="sidebar-link"' in html

    async def test_pager_links_neighbors(self) -> None:
        view = _view()
        await view.navigate("/docs/guides/building")
        html = view.render()
        assert 'rel="prev"' in html
        assert "Guides" in html
        assert 'rel="next"' not in html

    async def test_not_found_page(self) -> None:
        view = _view()
        await view.navigate("/docs/guides/missing")
        html = view.render()
        assert "Page Not Found" in html
        assert "Document not found: guides/missing" in html
        assert 'href="/docs/getting-started">Go to Getting Started' in html
        assert "sidebar-link active" not in html

    def test_loading_placeholder(self) -> None:
        view = _view()
        html = view.render()
        assert "Loading..." in html
        assert 'data-state="loading"' in html

    async def test_content_pane_only(self) -> None:
        view = _view()
        await view.navigate("/docs/guides/building")
        html = view.render_content()
        assert "<h1>Building</h1>" in html
        assert "sidebar" not in html
        assert "<html" not in html

    async def test_navigation_fragment_carries_sidebar_out_of_band(self) -> None:
        view = _view()
        await view.navigate("/docs/guides/building")
        html = view.render_navigation()
        assert html.startswith("<title>Building · Test Docs</title>")
        assert html.index("<h1>Building</h1>") < html.index('hx-swap-oob="innerHTML"')
        assert 'href="/docs/guides/building" class="sidebar-link active"' in html
        assert "<html" not in html

    def test_shell_boosts_sidebar_links_into_content_pane(self) -> None:
        html = _view().render()
        assert "htmx.org" in html
        assert 'hx-boost="true"' in html
        assert 'hx-target="#content"' in html
        assert 'id="content"' in html
        assert 'id="sidebar"' in html
        navbar = html[html.find('<nav class="navbar"') : html.find("</nav>")]
        assert "hx-boost" not in navbar

    async def test_document_html_is_not_escaped(self) -> None:
        view = _view()
        await view.navigate("/docs/getting-started")
        assert "&lt;h1&gt;" not in view.render()

    async def test_context_for_loaded(self) -> None:
        view = _view()
        await view.navigate("/docs/getting-started")
        ctx = view.context()
        assert ctx["state_kind"] == "loaded"
        assert ctx["document_title"] == "Getting Started"
        assert ctx["previous"] is None
        assert ctx["next"].href == "/docs/guides"
