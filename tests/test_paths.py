"""Tests for quire.content.paths — slug to candidate expansion."""

import pytest

from quire.content.paths import PathResolver, resolve_slug
from quire.errors import ConfigurationError


class TestCandidates:
    def test_order_for_nested_slug(self) -> None:
        resolver = PathResolver()
        assert resolver.candidates("guides/building") == (
            "guides/building.mdx",
            "guides/building.md",
            "guides/building/index.mdx",
            "guides/building/index.md",
        )

    def test_empty_slug_uses_default(self) -> None:
        resolver = PathResolver(default_slug="getting-started")
        assert resolver.candidates("") == resolver.candidates("getting-started")
        assert resolver.candidates("")[0] == "getting-started.mdx"

    def test_one_candidate_pair_per_extension(self) -> None:
        resolver = PathResolver(extensions=(".md",))
        assert resolver.candidates("intro") == ("intro.md", "intro/index.md")

    def test_extension_priority_is_preserved(self) -> None:
        resolver = PathResolver(extensions=(".md", ".mdx", ".rst"))
        assert resolver.candidates("a") == (
            "a.md",
            "a.mdx",
            "a.rst",
            "a/index.md",
            "a/index.mdx",
            "a/index.rst",
        )

    def test_custom_index_name(self) -> None:
        resolver = PathResolver(extensions=(".md",), index_name="README")
        assert resolver.candidates("guides") == ("guides.md", "guides/README.md")

    def test_deterministic(self) -> None:
        resolver = PathResolver()
        assert resolver.candidates("x/y") == resolver.candidates("x/y")

    def test_normalize(self) -> None:
        resolver = PathResolver(default_slug="home")
        assert resolver.normalize("") == "home"
        assert resolver.normalize("guides") == "guides"


class TestValidation:
    def test_no_extensions(self) -> None:
        with pytest.raises(ConfigurationError, match="at least one extension"):
            PathResolver(extensions=())

    @pytest.mark.parametrize("ext", ["md", ".", ""])
    def test_malformed_extension(self, ext: str) -> None:
        with pytest.raises(ConfigurationError, match="Extensions must look like"):
            PathResolver(extensions=(ext,))

    def test_empty_default_slug(self) -> None:
        with pytest.raises(ConfigurationError, match="default_slug"):
            PathResolver(default_slug="")


class TestResolveSlug:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/docs/guides/building", "guides/building"),
            ("/docs/installation", "installation"),
            ("/docs/guides/building/", "guides/building"),
            ("/docs/", "getting-started"),
            ("/docs", "getting-started"),
        ],
    )
    def test_paths(self, path: str, expected: str) -> None:
        assert resolve_slug(path, default="getting-started") == expected

    def test_custom_prefix(self) -> None:
        assert resolve_slug("/handbook/setup", prefix="/handbook/", default="intro") == "setup"
        assert resolve_slug("/handbook", prefix="/handbook/", default="intro") == "intro"
