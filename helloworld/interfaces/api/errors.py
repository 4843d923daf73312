"""Exception handlers installed on the FastAPI application."""

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException


async def not_found_for_unmatched_method(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Report a known path requested with an unsupported method as missing.

    Every other HTTP error is rendered by FastAPI's default handler.
    """

    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        exc = StarletteHTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application's HTTP exception handlers."""

    app.add_exception_handler(StarletteHTTPException, not_found_for_unmatched_method)


__all__ = ["not_found_for_unmatched_method", "register_exception_handlers"]
