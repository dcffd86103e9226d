"""
In-memory repositories.

Used by tests and local experiments in place of the database. The two
repositories share one InMemoryStore so that deleting a chat removes its
messages, like the ON DELETE CASCADE of the real schema.
"""
import itertools
from datetime import datetime, timezone
from typing import Dict, Optional
from sqlalchemy.orm.attributes import set_committed_value
from chat_api.core.exceptions import InfrastructureError
from chat_api.models.chat import Chat
from chat_api.models.message import Message
from chat_api.repositories.base import ChatRepository, MessageRepository


class InMemoryStore:
    """Rows of both tables, keyed by id."""

    def __init__(self):
        self.chats: Dict[int, Chat] = {}
        self.messages: Dict[int, Message] = {}
        self._chat_ids = itertools.count(1)
        self._message_ids = itertools.count(1)

    def next_chat_id(self) -> int:
        return next(self._chat_ids)

    def next_message_id(self) -> int:
        return next(self._message_ids)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryChatRepository(ChatRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def create(self, chat: Chat) -> None:
        chat.id = self.store.next_chat_id()
        chat.created_at = _now()
        self.store.chats[chat.id] = Chat(id=chat.id, title=chat.title, created_at=chat.created_at)
        set_committed_value(chat, "messages", [])

    async def get_by_id(self, chat_id: int, limit: int) -> Optional[Chat]:
        stored = self.store.chats.get(chat_id)
        if stored is None:
            return None

        messages = sorted(
            (m for m in self.store.messages.values() if m.chat_id == chat_id),
            key=lambda m: (m.created_at, m.id),
            reverse=True,
        )
        if limit >= 0:
            messages = messages[:limit]

        chat = Chat(id=stored.id, title=stored.title, created_at=stored.created_at)
        set_committed_value(chat, "messages", messages)
        return chat

    async def delete(self, chat_id: int) -> None:
        self.store.chats.pop(chat_id, None)
        for message_id in [m.id for m in self.store.messages.values() if m.chat_id == chat_id]:
            del self.store.messages[message_id]


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def create(self, message: Message) -> None:
        if message.chat_id not in self.store.chats:
            raise InfrastructureError(
                f"foreign key violation: chat {message.chat_id} does not exist"
            )

        message.id = self.store.next_message_id()
        message.created_at = _now()
        self.store.messages[message.id] = message
