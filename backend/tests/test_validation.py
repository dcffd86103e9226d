import pytest
from chat_api.core.exceptions import ErrorKind, ValidationError
from chat_api.schemas.chat import CreateChatRequest, CreateMessageRequest
from chat_api.services.validation import validate_chat_title, validate_message_text


@pytest.mark.parametrize("title, expected", [
    ("Valid Chat", "Valid Chat"),
    ("  padded  ", "padded"),
    ("\tTabs\n", "Tabs"),
    ("x" * 200, "x" * 200),
    ("  " + "x" * 200 + "  ", "x" * 200),
])
def test_valid_titles_are_trimmed(title, expected):
    assert validate_chat_title(title) == expected


@pytest.mark.parametrize("title", ["", " ", "   ", "\t\n "])
def test_blank_title_is_empty(title):
    with pytest.raises(ValidationError) as exc_info:
        validate_chat_title(title)

    assert exc_info.value.kind == ErrorKind.VALIDATION
    assert exc_info.value.field == "title"
    assert str(exc_info.value) == "title cannot be empty"


def test_title_over_200_characters_fails():
    with pytest.raises(ValidationError) as exc_info:
        validate_chat_title("x" * 201)

    assert str(exc_info.value) == "title must be less than 200 characters"


def test_title_length_counts_characters():
    assert validate_chat_title("é" * 200) == "é" * 200


def test_text_boundaries():
    assert validate_message_text("y" * 5000) == "y" * 5000

    with pytest.raises(ValidationError) as exc_info:
        validate_message_text("y" * 5001)

    assert exc_info.value.field == "text"
    assert str(exc_info.value) == "text must be less than 5000 characters"


@pytest.mark.parametrize("text", ["", "    ", "\n"])
def test_blank_text_is_empty(text):
    with pytest.raises(ValidationError, match="^text cannot be empty$"):
        validate_message_text(text)


@pytest.mark.parametrize("validate, value", [
    (validate_message_text, "Hello"),
    (validate_message_text, "  Hello World  "),
    (validate_message_text, "a" * 5000),
    (validate_chat_title, "Weekly sync"),
    (validate_chat_title, "\t Roadmap \n"),
    (validate_chat_title, " " + "t" * 200 + " "),
])
def test_validation_is_idempotent(validate, value):
    once = validate(value)
    assert validate(once) == once


def test_requests_are_normalized_in_place():
    chat_request = CreateChatRequest(title="  Weekly sync  ")
    chat_request.normalize()
    assert chat_request.title == "Weekly sync"

    message_request = CreateMessageRequest(text=" hi ")
    message_request.normalize()
    assert message_request.text == "hi"


def test_failed_normalize_leaves_request_untouched():
    request = CreateChatRequest(title="   ")

    with pytest.raises(ValidationError):
        request.normalize()

    assert request.title == "   "
