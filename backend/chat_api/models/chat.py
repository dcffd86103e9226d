"""
Chat model for storing conversation threads.
"""
from sqlalchemy import BigInteger, Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from chat_api.db.database import Base


# 64-bit ids; SQLite only autoincrements a column declared INTEGER PRIMARY KEY
Identifier = BigInteger().with_variant(Integer, "sqlite")


class Chat(Base):
    """
    Chat table to store conversation threads.

    Fields:
        id: Primary key, assigned by the database
        title: Chat title, 1-200 characters after trimming
        created_at: When the chat was created

    ``messages`` is never lazy loaded; the repositories populate it
    explicitly with the requested number of most recent messages.
    """
    __tablename__ = "chats"

    id = Column(Identifier, primary_key=True, autoincrement=True, index=True)
    title = Column(String(200), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    messages = relationship(
        "Message",
        back_populates="chat",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<Chat(id={self.id}, title='{self.title}')>"
