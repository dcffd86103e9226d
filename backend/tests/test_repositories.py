import pytest
from sqlalchemy import select, func
from chat_api.core.exceptions import InfrastructureError
from chat_api.models.chat import Chat
from chat_api.models.message import Message
from chat_api.repositories.chat_repository import SQLChatRepository
from chat_api.repositories.message_repository import SQLMessageRepository


@pytest.fixture
def chats(session_factory):
    return SQLChatRepository(session_factory)


@pytest.fixture
def messages(session_factory):
    return SQLMessageRepository(session_factory)


async def _add_messages(messages, chat_id, texts):
    for text in texts:
        await messages.create(Message(chat_id=chat_id, text=text))


async def test_create_assigns_id_and_created_at(chats):
    chat = Chat(title="General")

    await chats.create(chat)

    assert chat.id is not None and chat.id > 0
    assert chat.created_at is not None
    assert chat.messages == []


async def test_get_by_id_absent_returns_none(chats):
    assert await chats.get_by_id(999, 20) is None


async def test_get_by_id_limits_and_orders_messages(chats, messages):
    chat = Chat(title="General")
    await chats.create(chat)
    await _add_messages(messages, chat.id, ["first", "second", "third"])

    loaded = await chats.get_by_id(chat.id, 2)

    assert loaded.title == "General"
    assert [m.text for m in loaded.messages] == ["third", "second"]


async def test_get_by_id_zero_and_negative_limits(chats, messages):
    chat = Chat(title="General")
    await chats.create(chat)
    await _add_messages(messages, chat.id, ["a", "b", "c"])

    assert (await chats.get_by_id(chat.id, 0)).messages == []
    assert len((await chats.get_by_id(chat.id, -1)).messages) == 3


async def test_messages_of_other_chats_are_not_loaded(chats, messages):
    first, second = Chat(title="first"), Chat(title="second")
    await chats.create(first)
    await chats.create(second)
    await _add_messages(messages, second.id, ["elsewhere"])

    assert (await chats.get_by_id(first.id, 20)).messages == []


async def test_delete_cascades_to_messages(chats, messages, session_factory):
    chat = Chat(title="General")
    await chats.create(chat)
    await _add_messages(messages, chat.id, ["a", "b"])

    await chats.delete(chat.id)

    assert await chats.get_by_id(chat.id, 20) is None
    async with session_factory() as db:
        remaining = await db.scalar(
            select(func.count()).select_from(Message).where(Message.chat_id == chat.id)
        )
    assert remaining == 0


async def test_delete_missing_chat_is_not_an_error(chats):
    await chats.delete(424242)


async def test_message_for_missing_chat_is_an_infrastructure_error(messages):
    with pytest.raises(InfrastructureError) as exc_info:
        await messages.create(Message(chat_id=777, text="orphan"))

    assert exc_info.value.__cause__ is not None


async def test_id_beyond_int64_is_an_infrastructure_error(chats):
    with pytest.raises(InfrastructureError):
        await chats.get_by_id(2**70, 20)
