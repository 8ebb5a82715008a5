"""Error handling for docs requests.

Maps HTTPError exceptions and unexpected failures to plain Responses.
A missing *document* is not an error here: the view renders it as a
404 page with navigation intact.
"""

import html
import logging
import traceback

from quire.errors import HTTPError
from quire.http.request import Request
from quire.http.response import Response

logger = logging.getLogger("quire.server")


def handle_http_error(exc: HTTPError, request: Request, *, debug: bool = False) -> Response:
    """Map an HTTPError to a Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    resp = Response(body=detail, content_type="text/plain; charset=utf-8").with_status(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request, *, debug: bool = False) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    if debug:
        formatted = "".join(traceback.format_exception(exc))
        body = f"<h1>Internal Server Error</h1>\n<pre>{html.escape(formatted)}</pre>"
        return Response(body=body, status=500)

    return Response(
        body="Internal Server Error",
        status=500,
        content_type="text/plain; charset=utf-8",
    )
