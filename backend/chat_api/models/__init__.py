"""
Models package - exports all database models.
"""
from chat_api.models.chat import Chat
from chat_api.models.message import Message

__all__ = [
    "Chat",
    "Message",
]
