"""Invoke helpers — call sync or async loaders uniformly.

Registry loaders can be plain functions or coroutine functions. Any
code that calls one must handle both cases; this module keeps the
check in exactly one place.

Usage::

    from quire._internal.invoke import invoke

    document = await invoke(loader)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable."""
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
