"""
Field validation for chat and message requests.
Pure functions: they normalize a value and never touch storage.
"""
from chat_api.core.exceptions import ValidationError


MAX_TITLE_LENGTH = 200
MAX_TEXT_LENGTH = 5000


def _validate_field(field: str, value: str, max_length: int) -> str:
    normalized = value.strip()

    if not normalized:
        raise ValidationError(field, f"{field} cannot be empty")

    if len(normalized) > max_length:
        raise ValidationError(field, f"{field} must be less than {max_length} characters")

    return normalized


def validate_chat_title(title: str) -> str:
    """
    Trim a chat title and check it.

    Returns:
        The trimmed title

    Raises:
        ValidationError: If the trimmed title is empty or longer than 200 characters
    """
    return _validate_field("title", title, MAX_TITLE_LENGTH)


def validate_message_text(text: str) -> str:
    """
    Trim a message text and check it.

    Returns:
        The trimmed text

    Raises:
        ValidationError: If the trimmed text is empty or longer than 5000 characters
    """
    return _validate_field("text", text, MAX_TEXT_LENGTH)
