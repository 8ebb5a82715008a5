"""Immutable HTTP request.

The docs site reads nothing but the method, the path, and a couple of
headers, so that is all a Request carries.  Bodies are never read.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from quire._internal.asgi import Scope


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Header names are lower-cased; when a header repeats, the first value
    wins.
    """

    method: str
    path: str
    headers: Mapping[str, str]
    query_string: str = ""

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Build a Request from a raw ASGI HTTP scope."""
        headers: dict[str, str] = {}
        for name, value in scope.get("headers", ()):
            headers.setdefault(name.decode("latin-1").lower(), value.decode("latin-1"))
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            headers=MappingProxyType(headers),
            query_string=scope.get("query_string", b"").decode("latin-1"),
        )

    @property
    def is_fragment(self) -> bool:
        """True if this is an htmx fragment request (HX-Request header)."""
        return self.headers.get("hx-request") == "true"

    @property
    def is_history_restore(self) -> bool:
        """True for htmx history-cache misses, which need the full page."""
        return self.headers.get("hx-history-restore-request") == "true"
