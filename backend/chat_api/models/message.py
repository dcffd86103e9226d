"""
Message model for storing individual chat messages.
"""
from sqlalchemy import Column, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from chat_api.db.database import Base
from chat_api.models.chat import Identifier


class Message(Base):
    """
    Message table to store individual messages within chats.

    Fields:
        id: Primary key
        chat_id: Foreign key to parent chat, removed together with it
        text: The message text, 1-5000 characters after trimming
        created_at: Timestamp when message was created
    """
    __tablename__ = "messages"

    id = Column(Identifier, primary_key=True, autoincrement=True, index=True)
    chat_id = Column(Identifier, ForeignKey("chats.id", ondelete="CASCADE"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    chat = relationship("Chat", back_populates="messages", lazy="raise")

    def __repr__(self):
        text_preview = self.text[:50] + "..." if len(self.text) > 50 else self.text
        return f"<Message(id={self.id}, chat_id={self.chat_id}, text='{text_preview}')>"
