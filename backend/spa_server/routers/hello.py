"""Demo JSON endpoint."""

from fastapi import APIRouter

from spa_server.schemas import Message

router = APIRouter(tags=["Demo"])


@router.get("/hello", response_model=Message)
async def hello():
    """Return a fixed greeting."""
    return Message(message="Hello, World!")
