"""FastAPI dependency utilities."""

from fastapi import HTTPException, Request, status

from helloworld.interfaces.api.negotiation import accepts_json


def require_json_accept(request: Request) -> None:
    """Reject requests whose ``Accept`` header rules out JSON.

    A rejected request is reported exactly like a path that does not exist,
    since the route only matches JSON-accepting clients.
    """

    if not accepts_json(request.headers.getlist("accept")):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


__all__ = ["require_json_accept"]
