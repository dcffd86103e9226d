"""
Exception handlers mapping errors to HTTP responses.

Validation errors are returned as JSON, not-found and decoding errors as
plain text. Infrastructure failures are logged and masked.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger
from chat_api.api.deps import parse_int64
from chat_api.core.exceptions import ChatAPIError, ErrorKind


INTERNAL_ERROR_MESSAGE = "Internal server error"


def _has_invalid_chat_id(request: Request, exc: RequestValidationError) -> bool:
    if any(error["loc"] and error["loc"][0] == "path" for error in exc.errors()):
        return True
    # Malformed JSON is reported before path parameters are parsed
    raw_id = request.path_params.get("chat_id")
    return raw_id is not None and parse_int64(raw_id) is None


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # A bad path segment wins over a bad body
    if _has_invalid_chat_id(request, exc):
        return PlainTextResponse("Invalid chat ID", status_code=status.HTTP_400_BAD_REQUEST)
    return PlainTextResponse("Invalid request body", status_code=status.HTTP_400_BAD_REQUEST)


async def chat_api_error_handler(request: Request, exc: ChatAPIError):
    if exc.kind == ErrorKind.VALIDATION:
        return JSONResponse({"error": exc.message}, status_code=status.HTTP_400_BAD_REQUEST)
    if exc.kind == ErrorKind.NOT_FOUND:
        return PlainTextResponse(exc.message, status_code=status.HTTP_404_NOT_FOUND)
    return _internal_error(request, exc)


async def unhandled_error_handler(request: Request, exc: Exception):
    return _internal_error(request, exc)


def _internal_error(request: Request, exc: Exception) -> PlainTextResponse:
    logger.opt(exception=exc).error(f"Error handling {request.method} {request.url.path}: {exc}")
    return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ChatAPIError, chat_api_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
