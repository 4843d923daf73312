"""Schemas for the greeting endpoint."""

from pydantic import BaseModel, ConfigDict


class GreetingRead(BaseModel):
    """Representation of the greeting returned by the API."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    message: str


__all__ = ["GreetingRead"]
