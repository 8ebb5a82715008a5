"""Sidebar navigation — sections, items, and active-route matching.

Usage::

    from quire.navigation import load_navigation

    nav = load_navigation("docs/navigation.toml")
    for section in nav.sections:
        for item in section.items:
            nav.is_active(item, "guides/building")
"""

from quire.navigation.loading import build_navigation, load_navigation
from quire.navigation.types import NavigationItem, NavigationModel, NavigationSection

__all__ = [
    "NavigationItem",
    "NavigationModel",
    "NavigationSection",
    "build_navigation",
    "load_navigation",
]
