"""Build a NavigationModel from authored data.

The sidebar is written by hand, either as Python data or as a TOML file
next to the docs::

    [[sections]]
    title = "Guides"

    [[sections.items]]
    label = "Building from Source"
    slug = "guides/building"

Validation happens here, once, so the model itself can stay a dumb
frozen tree.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from quire.errors import ConfigurationError
from quire.navigation.types import NavigationItem, NavigationModel, NavigationSection


def build_navigation(data: Sequence[Mapping[str, Any]]) -> NavigationModel:
    """Build a model from a list of ``{"title": ..., "items": [...]}`` dicts.

    Each item is ``{"label": ..., "slug": ...}``.  ``"path"`` is accepted
    as an alias for ``"slug"``.

    Raises:
        ConfigurationError: A section or item is malformed, or two items
            share a slug.
    """
    sections: list[NavigationSection] = []
    seen: dict[str, str] = {}

    for s_index, raw_section in enumerate(data):
        if not isinstance(raw_section, Mapping):
            msg = f"Navigation section #{s_index} must be a table, got {type(raw_section).__name__}"
            raise ConfigurationError(msg)
        title = raw_section.get("title")
        if not isinstance(title, str) or not title:
            msg = f"Navigation section #{s_index} needs a non-empty 'title'"
            raise ConfigurationError(msg)

        raw_items = raw_section.get("items", [])
        if not isinstance(raw_items, Sequence) or isinstance(raw_items, str):
            msg = f"Navigation section {title!r}: 'items' must be a list"
            raise ConfigurationError(msg)

        items: list[NavigationItem] = []
        for i_index, raw_item in enumerate(raw_items):
            item = _build_item(raw_item, where=f"{title!r} item #{i_index}")
            if item.slug in seen:
                msg = (
                    f"Duplicate navigation slug {item.slug!r} "
                    f"(in {seen[item.slug]!r} and {title!r})"
                )
                raise ConfigurationError(msg)
            seen[item.slug] = title
            items.append(item)

        sections.append(NavigationSection(title=title, items=tuple(items)))

    return NavigationModel(tuple(sections))


def load_navigation(path: str | Path) -> NavigationModel:
    """Read a navigation TOML file with a ``[[sections]]`` array.

    Raises:
        FileNotFoundError: *path* does not exist.
        ConfigurationError: The file is not valid TOML or the data is
            malformed.
    """
    file = Path(path)
    try:
        raw = tomllib.loads(file.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid navigation file {file}: {exc}"
        raise ConfigurationError(msg) from exc

    sections = raw.get("sections", [])
    if not isinstance(sections, list):
        msg = f"{file}: navigation must define a [[sections]] array"
        raise ConfigurationError(msg)
    return build_navigation(sections)


def _build_item(raw: object, *, where: str) -> NavigationItem:
    if not isinstance(raw, Mapping):
        msg = f"Navigation {where} must be a table"
        raise ConfigurationError(msg)
    label = raw.get("label")
    slug = raw.get("slug", raw.get("path"))
    if not isinstance(label, str) or not label:
        msg = f"Navigation {where} needs a non-empty 'label'"
        raise ConfigurationError(msg)
    if not isinstance(slug, str) or not slug.strip("/"):
        msg = f"Navigation {where} ({label!r}) needs a non-empty 'slug'"
        raise ConfigurationError(msg)
    return NavigationItem(label=label, slug=slug.strip("/"))
