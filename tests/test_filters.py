"""Tests for quire.templating.filters and environment globals."""

from quire.config import SiteConfig
from quire.templating.filters import attr, is_external, page_title, url
from quire.templating.integration import create_environment


class TestFilters:
    def test_attr_truthy(self) -> None:
        assert str(attr("page", "aria-current")) == ' aria-current="page"'

    def test_attr_falsy(self) -> None:
        assert attr(None, "aria-current") == ""

    def test_attr_escapes(self) -> None:
        assert "&quot;" in str(attr('a"b', "title"))

    def test_url_keeps_safe(self) -> None:
        assert url("https://github.com/mystralengine/mystralnative") == (
            "https://github.com/mystralengine/mystralnative"
        )

    def test_url_rejects_javascript(self) -> None:
        assert url("javascript:alert(1)") == "#"

    def test_is_external(self) -> None:
        assert is_external("https://example.com")
        assert not is_external("/docs/intro")

    def test_page_title(self) -> None:
        assert page_title("Building", "Docs") == "Building · Docs"
        assert page_title("", "Docs") == "Docs"
        assert page_title("Docs", "Docs") == "Docs"


class TestEnvironment:
    def test_header_links_rendered(self) -> None:
        config = SiteConfig(
            site_title="Mystral",
            header_links=(("GitHub", "https://github.com/mystralengine/mystralnative"),),
        )
        env = create_environment(config)
        html = env.get_template("quire/shell.html").render({
            "sidebar": (),
            "state_kind": "loading",
            "document_title": "",
        })
        assert 'target="_blank"' in html
        assert ">GitHub</a>" in html
        assert "<title>Mystral</title>" in html

    def test_template_dir_overrides_shell(self, tmp_path) -> None:
        (tmp_path / "quire").mkdir()
        (tmp_path / "quire" / "shell.html").write_text("custom {{ site_title }}", encoding="utf-8")
        env = create_environment(SiteConfig(site_title="X", template_dir=tmp_path))
        assert env.get_template("quire/shell.html").render({}) == "custom X"
