"""
API dependencies.
These functions are used with FastAPI's Depends() for dependency injection.
"""
import re
from fastapi import Path, Request
from fastapi.exceptions import RequestValidationError
from typing import Optional
from chat_api.services.chat_service import ChatService


INT64_MIN = -2**63
INT64_MAX = 2**63 - 1
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int64(raw: Optional[str]) -> Optional[int]:
    """
    Parse a decimal integer that fits in a signed 64-bit column.

    Only ASCII digits with an optional sign are accepted; whitespace,
    underscores and decimal points are not.

    Returns:
        The integer, or None if the value is not such an integer
    """
    if raw is None or not _INTEGER_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def get_chat_id(chat_id: str = Path(...)) -> int:
    """
    Dependency parsing the chat id path segment.

    Raises:
        RequestValidationError: Located in the path, rendered as "Invalid chat ID"
    """
    value = parse_int64(chat_id)
    if value is None:
        raise RequestValidationError([{
            "type": "int_parsing",
            "loc": ("path", "chat_id"),
            "msg": "Input should be a 64-bit integer",
            "input": chat_id,
        }])
    return value


def get_chat_service(request: Request) -> ChatService:
    """
    Dependency returning the ChatService built at application startup.

    Returns:
        ChatService: The service stored on app.state by the lifespan
    """
    return request.app.state.chat_service
