"""
Database connection and session management using SQLAlchemy async.
"""
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from chat_api.core.config import Settings


# Base class for all models
Base = declarative_base()


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database.

    SQLite connections get foreign key enforcement switched on, otherwise
    the ON DELETE CASCADE from messages to chats is silently ignored.
    """
    engine = create_async_engine(
        settings.database_url,
        echo=settings.DEBUG,  # Log SQL queries in debug mode
        future=True,
        pool_pre_ping=True,  # Verify connections before using them
    )

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory handed to the repositories."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


async def init_db(engine: AsyncEngine):
    """
    Initialize database - create all tables.
    This should be called on application startup.
    """
    async with engine.begin() as conn:
        # Import all models here to ensure they are registered
        from chat_api.models import chat, message  # noqa: F401

        await conn.run_sync(Base.metadata.create_all)
