"""
Pydantic schemas for chat requests and responses.
"""
from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import List, Optional
from chat_api.services.validation import validate_chat_title, validate_message_text


class CreateChatRequest(BaseModel):
    """Request schema for creating a chat"""
    title: str = ""

    @field_validator("title", mode="before")
    @classmethod
    def null_title_is_empty(cls, value):
        return "" if value is None else value

    def normalize(self) -> None:
        """Check the title and replace it with its trimmed form."""
        self.title = validate_chat_title(self.title)


class CreateMessageRequest(BaseModel):
    """Request schema for posting a message into a chat"""
    text: str = ""

    @field_validator("text", mode="before")
    @classmethod
    def null_text_is_empty(cls, value):
        return "" if value is None else value

    def normalize(self) -> None:
        """Check the text and replace it with its trimmed form."""
        self.text = validate_message_text(self.text)


class MessageResponse(BaseModel):
    """Response schema for a message"""
    id: int
    chat_id: int
    text: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ChatResponse(BaseModel):
    """Response schema for a chat, messages newest first"""
    id: int
    title: str
    created_at: datetime
    messages: Optional[List[MessageResponse]] = None

    model_config = {"from_attributes": True}

    @field_validator("messages", mode="after")
    @classmethod
    def drop_empty_messages(cls, value: Optional[List[MessageResponse]]):
        # An empty list is rendered the same as "not loaded": omitted
        return value or None


class ErrorResponse(BaseModel):
    """Body of a 400 response caused by invalid field values"""
    error: str
