import pytest
from fastapi.testclient import TestClient
from chat_api.core.config import Settings
from chat_api.db.database import create_engine, create_session_factory, init_db
from chat_api.main import create_app
from chat_api.repositories.memory import InMemoryStore, InMemoryMessageRepository
from chat_api.services.chat_service import ChatService
from fakes import BrokenChatRepository, RecordingChatRepository, RecordingMessageRepository


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def chat_repository(store):
    return RecordingChatRepository(store)


@pytest.fixture
def message_repository(store):
    return RecordingMessageRepository(store)


@pytest.fixture
def chat_service(chat_repository, message_repository):
    return ChatService(chat_repository, message_repository)


@pytest.fixture
def settings():
    return Settings(_env_file=None, DATABASE_URL="sqlite+aiosqlite:///:memory:")


@pytest.fixture
def client(settings, chat_service):
    with TestClient(create_app(settings, chat_service=chat_service)) as test_client:
        yield test_client


@pytest.fixture
def broken_client(settings, store):
    service = ChatService(BrokenChatRepository(store), InMemoryMessageRepository(store))
    with TestClient(create_app(settings, chat_service=service)) as test_client:
        yield test_client


@pytest.fixture
async def session_factory(tmp_path):
    settings = Settings(_env_file=None, DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'chat.db'}")
    engine = create_engine(settings)
    await init_db(engine)
    yield create_session_factory(engine)
    await engine.dispose()
