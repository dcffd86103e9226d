"""
Chat endpoints for creating, reading and deleting chats and posting messages.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import Optional
from chat_api.api.deps import get_chat_id, get_chat_service, parse_int64
from chat_api.schemas.chat import (
    CreateChatRequest,
    CreateMessageRequest,
    ChatResponse,
    MessageResponse,
    ErrorResponse,
)
from chat_api.services.chat_service import ChatService


DEFAULT_MESSAGE_LIMIT = 20

router = APIRouter(tags=["Chats"])


def parse_limit(raw: Optional[str]) -> int:
    """Anything but a positive integer falls back to the default limit."""
    limit = parse_int64(raw)
    if limit is None or limit < 1:
        return DEFAULT_MESSAGE_LIMIT
    return limit


@router.post(
    "/chats/",
    response_model=ChatResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_chat(
    request: CreateChatRequest,
    service: ChatService = Depends(get_chat_service)
):
    """
    Create a new chat.

    Args:
        request: Chat title, trimmed before it is stored
        service: Chat service

    Returns:
        The created chat with its id and creation time
    """
    chat = await service.create_chat(request)
    return ChatResponse.model_validate(chat)


@router.post(
    "/chats/{chat_id}/messages/",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"description": "Chat not found"}},
)
async def create_message(
    request: CreateMessageRequest,
    chat_id: int = Depends(get_chat_id),
    service: ChatService = Depends(get_chat_service)
):
    """
    Post a message into an existing chat.

    Args:
        chat_id: Chat the message belongs to
        request: Message text, trimmed before it is stored
        service: Chat service

    Returns:
        The created message
    """
    message = await service.create_message(chat_id, request)
    return MessageResponse.model_validate(message)


@router.get(
    "/chats/{chat_id}",
    response_model=ChatResponse,
    response_model_exclude_none=True,
    responses={404: {"description": "Chat not found"}},
)
async def get_chat(
    chat_id: int = Depends(get_chat_id),
    limit: Optional[str] = None,
    service: ChatService = Depends(get_chat_service)
):
    """
    Get a chat with its most recent messages, newest first.

    Args:
        chat_id: Chat to load
        limit: Maximum number of messages, default 20, capped at 100
        service: Chat service
    """
    chat = await service.get_chat_with_messages(chat_id, parse_limit(limit))
    return ChatResponse.model_validate(chat)


@router.delete("/chats/{chat_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_chat(
    chat_id: int = Depends(get_chat_id),
    service: ChatService = Depends(get_chat_service)
):
    """
    Delete a chat (messages will be cascade deleted).
    Deleting a chat that does not exist also succeeds.
    """
    await service.delete_chat(chat_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
