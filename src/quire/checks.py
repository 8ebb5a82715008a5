"""Navigation checks — does every sidebar entry lead somewhere?

A sidebar link whose slug has no backing document renders the
not-found page.  ``check_navigation`` resolves every item once and
reports the ones that miss, so broken links show up before deploy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from quire.content.loader import ContentLoader
from quire.content.state import Loaded

if TYPE_CHECKING:
    from quire.app import DocsApp
    from quire.navigation.types import NavigationItem


@dataclass(frozen=True, slots=True)
class ItemCheck:
    """Outcome of resolving one navigation item."""

    section: str
    item: NavigationItem
    identifier: str | None  # None when nothing loaded

    @property
    def ok(self) -> bool:
        return self.identifier is not None


@dataclass(frozen=True, slots=True)
class NavigationReport:
    checks: tuple[ItemCheck, ...] = ()

    @property
    def ok(self) -> bool:
        return all(check.ok for check in self.checks)

    @property
    def missing(self) -> tuple[ItemCheck, ...]:
        return tuple(check for check in self.checks if not check.ok)

    def lines(self) -> list[str]:
        """Human-readable report, one line per item plus a summary."""
        out: list[str] = []
        for check in self.checks:
            if check.ok:
                out.append(f"  ok       {check.item.slug} -> {check.identifier}")
            else:
                out.append(f"  MISSING  {check.item.slug} ({check.section} / {check.item.label})")
        total = len(self.checks)
        out.append(f"{total - len(self.missing)}/{total} navigation entries resolve")
        return out


async def check_navigation(app: DocsApp) -> NavigationReport:
    """Resolve every navigation item against the app's registry."""
    loader = ContentLoader(app.registry, app.resolver)
    checks: list[ItemCheck] = []
    for section in app.navigation.sections:
        for item in section.items:
            state = await loader.resolve(item.slug)
            identifier = state.document.identifier if isinstance(state, Loaded) else None
            checks.append(ItemCheck(section=section.title, item=item, identifier=identifier))
    return NavigationReport(tuple(checks))
