"""Slug resolution: resolver + registry + fallback chain + staleness guard.

``ContentLoader.resolve(slug)`` runs one resolution cycle:

1. Start a new generation and commit ``Loading(slug)``.
2. Walk the resolver's candidates in order.  Absent identifiers are
   skipped; a candidate whose loader raises, or returns something other
   than a Document or an HTML string, is logged and skipped.
3. Commit ``Loaded`` for the first candidate that loads, or
   ``NotFound`` when the list runs out.

Each cycle carries a ``ResolutionToken``.  A newer ``resolve()`` call
bumps the generation, and any older cycle still awaiting a loader
notices on its next check: it tries no further candidates and commits
nothing.  There is no cancellation beyond that comparison; a loader
already awaited may still finish, its result is just dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from quire.content.chain import Exhausted, Stopped, Success, first_success
from quire.content.paths import PathResolver
from quire.content.registry import ContentRegistry
from quire.content.state import Document, Loaded, LoadState, Loading, NotFound
from quire.errors import LoaderInvocationError, ResolutionExhausted

logger = logging.getLogger("quire.content")


@dataclass(frozen=True, slots=True)
class ResolutionToken:
    """Identifies one resolution cycle."""

    generation: int
    slug: str


class ContentLoader:
    """Resolve slugs to load states against a content registry.

    Args:
        registry: Where candidate identifiers are looked up and loaded.
        resolver: Expands a slug into ordered candidate identifiers.
        on_commit: Optional callback fired once per committed state
            (``Loading`` at cycle start, then the settled state).
    """

    __slots__ = ("_generation", "_on_commit", "_registry", "_resolver", "_state", "_token")

    def __init__(
        self,
        registry: ContentRegistry,
        resolver: PathResolver,
        *,
        on_commit: Callable[[LoadState], None] | None = None,
    ) -> None:
        self._registry = registry
        self._resolver = resolver
        self._on_commit = on_commit
        self._generation = 0
        self._token: ResolutionToken | None = None
        self._state: LoadState | None = None

    # -- Observable state --

    @property
    def state(self) -> LoadState | None:
        """The last committed state, or ``None`` before the first cycle."""
        return self._state

    @property
    def active_slug(self) -> str | None:
        """Slug of the most recently started cycle."""
        return self._token.slug if self._token is not None else None

    @property
    def generation(self) -> int:
        return self._generation

    def is_current(self, token: ResolutionToken) -> bool:
        """Whether *token* belongs to the most recently started cycle."""
        return token.generation == self._generation

    # -- Resolution --

    def begin(self, slug: str) -> ResolutionToken:
        """Start a new cycle for *slug*, superseding any in flight."""
        self._generation += 1
        token = ResolutionToken(self._generation, self._resolver.normalize(slug))
        self._token = token
        self._commit(Loading(token.slug))
        return token

    async def resolve(self, slug: str) -> LoadState | None:
        """Resolve *slug* and commit the outcome.

        Returns:
            The committed ``Loaded`` or ``NotFound`` state, or ``None``
            if a newer cycle started before this one settled.
        """
        token = self.begin(slug)
        return await self.settle(token)

    async def settle(self, token: ResolutionToken) -> LoadState | None:
        """Walk the candidates for *token* and commit if still current."""
        candidates = self._resolver.candidates(token.slug)

        def log_failure(identifier: str, exc: Exception) -> None:
            logger.warning(
                "Failed to load %s for slug %r; trying next candidate",
                identifier,
                token.slug,
                exc_info=exc,
            )

        async def load(identifier: str) -> Document:
            return _as_document(await self._registry.load(identifier), identifier)

        outcome = await first_success(
            candidates,
            check=self._registry.has,
            attempt=load,
            recoverable=(LoaderInvocationError,),
            on_failure=log_failure,
            proceed=lambda: self.is_current(token),
        )

        if isinstance(outcome, Stopped) or not self.is_current(token):
            logger.debug(
                "Discarding stale resolution of %r (generation %d, now %d)",
                token.slug,
                token.generation,
                self._generation,
            )
            return None

        state: LoadState
        match outcome:
            case Success(value=document):
                state = Loaded(token.slug, document)
            case Exhausted(failures=failures):
                exhausted = ResolutionExhausted(
                    token.slug,
                    candidates,
                    tuple(f for f in failures if isinstance(f, LoaderInvocationError)),
                )
                logger.info("%s", exhausted)
                state = NotFound(token.slug)

        self._commit(state)
        return state

    def _commit(self, state: LoadState) -> None:
        self._state = state
        if self._on_commit is not None:
            self._on_commit(state)


def _as_document(value: object, identifier: str) -> Document:
    """Accept loaders that return bare HTML strings as well as Documents.

    Raises:
        LoaderInvocationError: *value* is neither, so the candidate is
            skipped like one whose loader raised.
    """
    if isinstance(value, Document):
        return value
    if isinstance(value, str):
        return Document(identifier=identifier, html=value)
    raise LoaderInvocationError(identifier, f"loader returned {type(value).__name__}")
