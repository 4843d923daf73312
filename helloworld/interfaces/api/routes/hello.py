from fastapi import APIRouter, Depends

from helloworld.application.use_cases.create_greeting import create_greeting
from helloworld.interfaces.api.dependencies import require_json_accept
from helloworld.interfaces.api.schemas import GreetingRead

router = APIRouter(tags=["hello"])


@router.get(
    "/hello",
    response_model=GreetingRead,
    dependencies=[Depends(require_json_accept)],
)
async def say_hello() -> GreetingRead:
    greeting = create_greeting()
    return GreetingRead.model_validate(greeting)


__all__ = ["router"]
