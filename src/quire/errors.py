"""Quire exception hierarchy.

Shared across the content layer, the view, and the ASGI app so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class QuireError(Exception):
    """Base for all quire-specific errors."""


class ConfigurationError(QuireError):
    """Raised when site configuration or navigation data is invalid.

    Typically surfaces at startup, when ``DocsApp`` freezes.
    """


class ContentError(QuireError):
    """Base for content-layer failures."""


class LoaderInvocationError(ContentError):
    """A single candidate's lazy loader failed.

    Recoverable: ``ContentLoader`` logs it and moves on to the next
    candidate.  The original exception is chained as ``__cause__``.
    """

    def __init__(self, identifier: str, detail: str = "") -> None:
        self.identifier = identifier
        self.detail = detail
        message = f"Failed to load {identifier!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnknownContentError(ContentError, KeyError):
    """``load()`` was called for an identifier the registry does not hold."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(identifier)

    def __str__(self) -> str:
        return f"No content registered for {self.identifier!r}"


class ResolutionExhausted(ContentError):  # noqa: N818
    """Every candidate for a slug was absent or failed to load.

    Never raised across the ``ContentLoader`` boundary; surfaced as a
    ``NotFound`` load state instead.  Kept as an exception type so the
    loader can log it with full context.
    """

    def __init__(
        self,
        slug: str,
        candidates: tuple[str, ...],
        failures: tuple[LoaderInvocationError, ...] = (),
    ) -> None:
        self.slug = slug
        self.candidates = candidates
        self.failures = failures
        super().__init__(
            f"Document not found: {slug} "
            f"(tried {len(candidates)} candidates, {len(failures)} failed to load)"
        )


@dataclass(frozen=True, slots=True)
class HTTPError(QuireError):
    """An error that maps directly to an HTTP status code.

    Raised by the app's router; the request handler turns it into a
    plain response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — the docs site only answers GET and HEAD."""

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
