"""Markdown layer error hierarchy."""

from quire.errors import QuireError


class MarkdownError(QuireError):
    """Base for all quire.markdown errors."""


class MarkdownNotInstalledError(MarkdownError):
    """Raised when patitas is not installed."""
