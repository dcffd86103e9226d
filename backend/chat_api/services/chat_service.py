from chat_api.core.exceptions import NotFoundError
from chat_api.models.chat import Chat
from chat_api.models.message import Message
from chat_api.repositories.base import ChatRepository, MessageRepository
from chat_api.schemas.chat import CreateChatRequest, CreateMessageRequest


MAX_MESSAGE_LIMIT = 100
# Only the chat's existence matters when posting a message
EXISTENCE_CHECK_LIMIT = 1


class ChatService:
    """
    Use cases for chats and their messages.

    Validation errors are raised before any storage access. NotFoundError is
    raised here when a repository reports a chat as absent. Repository errors
    propagate unchanged.
    """

    def __init__(self, chat_repository: ChatRepository, message_repository: MessageRepository):
        self.chat_repository = chat_repository
        self.message_repository = message_repository

    async def create_chat(self, request: CreateChatRequest) -> Chat:
        request.normalize()

        chat = Chat(title=request.title)
        await self.chat_repository.create(chat)
        return chat

    async def create_message(self, chat_id: int, request: CreateMessageRequest) -> Message:
        request.normalize()

        chat = await self.chat_repository.get_by_id(chat_id, EXISTENCE_CHECK_LIMIT)
        if chat is None:
            raise NotFoundError("chat", chat_id)

        message = Message(chat_id=chat_id, text=request.text)
        await self.message_repository.create(message)
        return message

    async def get_chat_with_messages(self, chat_id: int, limit: int) -> Chat:
        """
        Load a chat with up to `limit` most recent messages.

        Limits above MAX_MESSAGE_LIMIT are capped silently; smaller values,
        including zero and negatives, are passed to the repository as is.
        """
        if limit > MAX_MESSAGE_LIMIT:
            limit = MAX_MESSAGE_LIMIT

        chat = await self.chat_repository.get_by_id(chat_id, limit)
        if chat is None:
            raise NotFoundError("chat", chat_id)

        return chat

    async def delete_chat(self, chat_id: int) -> None:
        await self.chat_repository.delete(chat_id)
