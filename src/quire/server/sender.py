"""ASGI response sending: one quire Response, two ASGI messages."""

from quire._internal.asgi import Send
from quire.http.response import Response

# 1xx, 204 and 304 responses never carry a body
_BODYLESS = frozenset({204, 304})


def _encode_headers(response: Response, content_length: int) -> list[tuple[bytes, bytes]]:
    pairs = [("content-type", response.content_type), *response.headers]
    encoded = [(name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in pairs]
    encoded.append((b"content-length", str(content_length).encode("latin-1")))
    return encoded


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Translate a quire Response into ASGI send() calls.

    For HEAD requests *head* is True: headers, including the length the
    GET body would have, go out and the body does not.
    """
    status = response.status
    body = b"" if status < 200 or status in _BODYLESS else response.body_bytes

    await send({
        "type": "http.response.start",
        "status": status,
        "headers": _encode_headers(response, len(body)),
    })
    await send({"type": "http.response.body", "body": b"" if head else body})
