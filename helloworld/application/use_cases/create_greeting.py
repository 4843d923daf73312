"""Use case for producing the greeting message."""

from helloworld.domain.entities.greeting import Greeting


DEFAULT_GREETING = "Hello World"


def create_greeting() -> Greeting:
    """Return the fixed greeting.

    The result never depends on the incoming request; a fresh value is built
    on every call.
    """

    return Greeting(message=DEFAULT_GREETING)


__all__ = ["DEFAULT_GREETING", "create_greeting"]
