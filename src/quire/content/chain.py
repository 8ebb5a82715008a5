"""Ordered fallback chains.

A chain is a plain sequence of keys plus two callables: a synchronous
``check`` (is this key worth trying?) and an asynchronous ``attempt``
(try it).  Keys are walked strictly in order, one await at a time, and
the walk stops at the first successful attempt.

Nothing here knows about content or registries; ``ContentLoader`` is
one caller.

Usage::

    outcome = await first_success(
        candidates,
        check=registry.has,
        attempt=registry.load,
        recoverable=(LoaderInvocationError,),
    )
    match outcome:
        case Success(key=key, value=value): ...
        case Exhausted(failures=failures): ...
        case Stopped(): ...
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Success[K, T]:
    """An attempt succeeded.  *failures* lists the recoverable errors before it."""

    key: K
    value: T
    failures: tuple[Exception, ...] = ()


@dataclass(frozen=True, slots=True)
class Exhausted:
    """Every key was skipped by ``check`` or failed its attempt."""

    tried: int
    failures: tuple[Exception, ...] = ()


@dataclass(frozen=True, slots=True)
class Stopped:
    """The walk was abandoned because ``proceed`` returned False."""

    after: int


type ChainOutcome[K, T] = Success[K, T] | Exhausted | Stopped


async def first_success[K, T](
    keys: Iterable[K],
    *,
    check: Callable[[K], bool],
    attempt: Callable[[K], Awaitable[T]],
    recoverable: tuple[type[Exception], ...] = (Exception,),
    on_failure: Callable[[K, Exception], None] | None = None,
    proceed: Callable[[], bool] | None = None,
) -> ChainOutcome[K, T]:
    """Walk *keys* in order and return the first successful attempt.

    Args:
        keys: Keys in priority order.
        check: Cheap synchronous gate; keys it rejects are skipped
            without an attempt.
        attempt: Awaited for each key that passes ``check``.
        recoverable: Exception types that count as a soft failure.
            Anything else propagates.
        on_failure: Called with the key and error for each soft failure.
        proceed: Consulted before each key; returning False stops the
            walk with ``Stopped``.

    Returns:
        ``Success``, ``Exhausted`` or ``Stopped``.
    """
    failures: list[Exception] = []
    tried = 0
    for key in keys:
        if proceed is not None and not proceed():
            return Stopped(after=tried)
        tried += 1
        if not check(key):
            continue
        try:
            value = await attempt(key)
        except recoverable as exc:
            failures.append(exc)
            if on_failure is not None:
                on_failure(key, exc)
            continue
        return Success(key=key, value=value, failures=tuple(failures))
    return Exhausted(tried=tried, failures=tuple(failures))
