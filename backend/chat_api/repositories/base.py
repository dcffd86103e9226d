from abc import ABC, abstractmethod
from typing import Optional
from chat_api.models.chat import Chat
from chat_api.models.message import Message


class ChatRepository(ABC):
    """
    Abstract storage contract for chats.
    Storage failures are raised as InfrastructureError.
    """

    @abstractmethod
    async def create(self, chat: Chat) -> None:
        """
        Persists a new chat and assigns its id and created_at in place.
        """
        pass

    @abstractmethod
    async def get_by_id(self, chat_id: int, limit: int) -> Optional[Chat]:
        """
        Returns the chat with at most `limit` of its messages, newest first,
        or None if no chat has this id.
        """
        pass

    @abstractmethod
    async def delete(self, chat_id: int) -> None:
        """
        Deletes the chat and, by cascade, its messages.
        Deleting an unknown id is not an error.
        """
        pass


class MessageRepository(ABC):
    """
    Abstract storage contract for messages.
    """

    @abstractmethod
    async def create(self, message: Message) -> None:
        """
        Persists a new message and assigns its id and created_at in place.
        The owning chat is not checked here.
        """
        pass
