from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm.attributes import set_committed_value
from typing import Optional
from chat_api.core.exceptions import InfrastructureError
from chat_api.models.chat import Chat
from chat_api.models.message import Message
from chat_api.repositories.base import ChatRepository


class SQLChatRepository(ChatRepository):
    """Chat storage backed by SQLAlchemy, one session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def create(self, chat: Chat) -> None:
        async with self.session_factory() as db:
            try:
                db.add(chat)
                await db.commit()
                await db.refresh(chat)
            except (SQLAlchemyError, OverflowError) as e:
                await db.rollback()
                raise InfrastructureError(f"failed to create chat: {e}") from e

        set_committed_value(chat, "messages", [])

    async def get_by_id(self, chat_id: int, limit: int) -> Optional[Chat]:
        async with self.session_factory() as db:
            try:
                chat = await db.get(Chat, chat_id)
                if chat is None:
                    return None

                stmt = (
                    select(Message)
                    .where(Message.chat_id == chat_id)
                    .order_by(Message.created_at.desc(), Message.id.desc())
                )
                # A negative limit means no cap
                if limit >= 0:
                    stmt = stmt.limit(limit)

                result = await db.execute(stmt)
                messages = list(result.scalars().all())
            except (SQLAlchemyError, OverflowError) as e:
                raise InfrastructureError(f"failed to load chat {chat_id}: {e}") from e

        set_committed_value(chat, "messages", messages)
        return chat

    async def delete(self, chat_id: int) -> None:
        async with self.session_factory() as db:
            try:
                # Messages go with the chat through ON DELETE CASCADE
                await db.execute(delete(Chat).where(Chat.id == chat_id))
                await db.commit()
            except (SQLAlchemyError, OverflowError) as e:
                await db.rollback()
                raise InfrastructureError(f"failed to delete chat {chat_id}: {e}") from e
