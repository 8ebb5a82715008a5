"""Navigation model for the sidebar.

Immutable frozen dataclasses.  Built once at startup from externally
authored data and never changed afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NavigationItem:
    """One sidebar link.

    Attributes:
        label: Link text.
        slug: Document slug the link points at (``"guides/building"``).
    """

    label: str
    slug: str


@dataclass(frozen=True, slots=True)
class NavigationSection:
    """A titled group of sidebar links, in display order."""

    title: str
    items: tuple[NavigationItem, ...] = ()


@dataclass(frozen=True, slots=True)
class NavigationModel:
    """The whole sidebar: sections in display order.

    Active-item matching is exact.  ``guides`` is *not* active while
    ``guides/building`` is being viewed; a parent-looking slug never
    lights up for a child route.
    """

    sections: tuple[NavigationSection, ...] = ()

    @staticmethod
    def is_active(item: NavigationItem, current_slug: str) -> bool:
        """Whether *item* is the link for *current_slug* (exact match)."""
        return item.slug == current_slug

    def items(self) -> Iterator[NavigationItem]:
        """All items across sections, in display order."""
        for section in self.sections:
            yield from section.items

    def find(self, slug: str) -> NavigationItem | None:
        """The item whose slug is exactly *slug*, if any."""
        for item in self.items():
            if item.slug == slug:
                return item
        return None

    def section_for(self, slug: str) -> NavigationSection | None:
        """The section holding the item for *slug*, if any."""
        for section in self.sections:
            if any(item.slug == slug for item in section.items):
                return section
        return None

    def neighbors(self, slug: str) -> tuple[NavigationItem | None, NavigationItem | None]:
        """Previous and next items around *slug* in reading order.

        Crosses section boundaries.  Returns ``(None, None)`` when *slug*
        is not in the sidebar.
        """
        flat = list(self.items())
        for i, item in enumerate(flat):
            if item.slug == slug:
                prev_item = flat[i - 1] if i > 0 else None
                next_item = flat[i + 1] if i + 1 < len(flat) else None
                return prev_item, next_item
        return None, None

    def __len__(self) -> int:
        return sum(len(section.items) for section in self.sections)
