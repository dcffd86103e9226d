from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from chat_api.core.exceptions import InfrastructureError
from chat_api.models.message import Message
from chat_api.repositories.base import MessageRepository


class SQLMessageRepository(MessageRepository):
    """Message storage backed by SQLAlchemy, one session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def create(self, message: Message) -> None:
        async with self.session_factory() as db:
            try:
                db.add(message)
                await db.commit()
                await db.refresh(message)
            except (SQLAlchemyError, OverflowError) as e:
                await db.rollback()
                raise InfrastructureError(f"failed to create message: {e}") from e
