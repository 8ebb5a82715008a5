"""Quire CLI — serve a docs directory and inspect how slugs resolve.

Entry point registered as ``quire`` in ``pyproject.toml``::

    [project.scripts]
    quire = "quire.cli:main"
"""

import argparse
import logging
import sys


def _add_docs_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--docs", default="docs", help="Docs directory (default: docs)")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``quire`` command."""
    parser = argparse.ArgumentParser(
        prog="quire",
        description="Quire — sidebar-driven documentation sites from Markdown and MDX.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=("debug", "info", "warning", "error"),
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- quire serve ------------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve the docs site")
    _add_docs_option(serve_parser)
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument("--title", default=None, help="Site title shown in the top bar")
    serve_parser.add_argument(
        "--debug",
        action="store_true",
        help="Reload on docs changes and show tracebacks",
    )

    # -- quire candidates -------------------------------------------------
    candidates_parser = subparsers.add_parser(
        "candidates", help="Print the content identifiers tried for a slug"
    )
    candidates_parser.add_argument("slug", nargs="?", default="", help="Document slug")

    # -- quire resolve ----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a slug once and report")
    resolve_parser.add_argument("slug", nargs="?", default="", help="Document slug")
    _add_docs_option(resolve_parser)

    # -- quire index ------------------------------------------------------
    index_parser = subparsers.add_parser("index", help="List indexed documents")
    _add_docs_option(index_parser)

    # -- quire check ------------------------------------------------------
    check_parser = subparsers.add_parser(
        "check", help="Verify every navigation entry resolves to a document"
    )
    _add_docs_option(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    from quire.cli import _commands

    handlers = {
        "serve": _commands.serve,
        "candidates": _commands.candidates,
        "resolve": _commands.resolve,
        "index": _commands.index,
        "check": _commands.check,
    }
    handlers[args.command](args)
