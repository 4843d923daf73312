from fastapi import FastAPI

from .hello import router as hello_router


def register_routes(app: FastAPI) -> None:
    """Register the API routers on the FastAPI application, in match order."""

    app.include_router(hello_router)
