"""
Main FastAPI application.
This is the entry point for the backend server.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
from loguru import logger
import uvicorn
from chat_api.core.config import Settings, get_settings
from chat_api.core.logging import setup_logging
from chat_api.db.database import create_engine, create_session_factory, init_db
from chat_api.api.errors import register_exception_handlers
from chat_api.api.endpoints import chats
from chat_api.repositories.chat_repository import SQLChatRepository
from chat_api.repositories.message_repository import SQLMessageRepository
from chat_api.services.chat_service import ChatService


def create_app(settings: Optional[Settings] = None, chat_service: Optional[ChatService] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings, read from the environment if omitted
        chat_service: Ready-made service; when given no database is opened

    Returns:
        FastAPI: The configured application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup and shutdown events.
        Wires the SQL repositories into the chat service unless one was injected.
        """
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        if chat_service is not None:
            app.state.chat_service = chat_service
            yield
            return

        engine = create_engine(settings)
        await init_db(engine)
        logger.info("Database connection established")

        session_factory = create_session_factory(engine)
        app.state.chat_service = ChatService(
            SQLChatRepository(session_factory),
            SQLMessageRepository(session_factory),
        )

        yield

        logger.info("Shutting down...")
        await engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        description="Chats and messages REST API",
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(chats.router)

    @app.get("/")
    async def root():
        """Root endpoint - health check"""
        return {
            "message": settings.APP_NAME,
            "version": settings.VERSION,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    return app


def run():
    """Console entry point: configure logging and serve the app."""
    settings = get_settings()
    setup_logging(settings)
    logger.info(f"Server starting on port {settings.PORT}")
    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
