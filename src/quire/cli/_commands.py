"""Implementations of the ``quire`` subcommands.

Each takes the parsed ``argparse.Namespace``.  Failures print to
stderr and exit with status 1.
"""

import argparse
import asyncio
import sys

from quire.app import DocsApp
from quire.checks import check_navigation
from quire.config import SiteConfig
from quire.content.loader import ContentLoader
from quire.content.registry import StaticRegistry
from quire.content.state import Loaded
from quire.errors import ConfigurationError


def _config(args: argparse.Namespace, **overrides: object) -> SiteConfig:
    return SiteConfig(docs_dir=args.docs, **overrides)  # type: ignore[arg-type]


def _app(args: argparse.Namespace, **overrides: object) -> DocsApp:
    try:
        app = DocsApp(_config(args, **overrides))
        app.registry  # noqa: B018  freezes now so errors surface before serving
    except (FileNotFoundError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    return app


def serve(args: argparse.Namespace) -> None:
    """Start the docs server."""
    overrides: dict[str, object] = {"debug": args.debug}
    if args.title:
        overrides["site_title"] = args.title
    app = _app(args, **overrides)
    app.run(host=args.host, port=args.port)


def candidates(args: argparse.Namespace) -> None:
    """Print candidate identifiers for a slug, most specific first."""
    resolver = SiteConfig().resolver()
    for identifier in resolver.candidates(args.slug):
        print(identifier)


def resolve(args: argparse.Namespace) -> None:
    """Resolve a slug against the docs directory and report the outcome."""
    app = _app(args)
    loader = ContentLoader(app.registry, app.resolver)
    state = asyncio.run(loader.resolve(args.slug))
    if isinstance(state, Loaded):
        print(f"{state.slug} -> {state.document.identifier} ({state.document.title})")
        return
    print(f"Document not found: {app.resolver.normalize(args.slug)}", file=sys.stderr)
    raise SystemExit(1)


def index(args: argparse.Namespace) -> None:
    """List every identifier in the content registry."""
    registry = _app(args).registry
    if not isinstance(registry, StaticRegistry):
        print("Error: this registry cannot be listed", file=sys.stderr)
        raise SystemExit(1)
    for identifier in registry.identifiers():
        print(identifier)


def check(args: argparse.Namespace) -> None:
    """Exit 1 if any navigation entry fails to resolve."""
    app = _app(args)
    report = asyncio.run(check_navigation(app))
    for line in report.lines():
        print(line)
    if not report.ok:
        raise SystemExit(1)
