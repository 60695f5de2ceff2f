"""SQLAlchemy models for sessions, chats, responses and contexts."""

from datetime import datetime
from typing import Any

from sqlalchemy import Integer, String, Text, ForeignKey, DateTime, func, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all models."""

    def to_dict(self) -> dict[str, Any]:
        """Column values keyed by column name."""
        return {
            column.key: getattr(self, column.key)
            for column in inspect(type(self)).column_attrs
        }


class Session(Base):
    """A conversation session carrying rules and reference contexts."""

    __tablename__ = "sessions"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    rules: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    chats: Mapped[list["Chat"]] = relationship(back_populates="session", cascade="all, delete-orphan")
    contexts: Mapped[list["Context"]] = relationship(back_populates="session", cascade="all, delete-orphan")


class Chat(Base):
    """One user prompt within a session."""

    __tablename__ = "chats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_uuid: Mapped[str] = mapped_column(String(36), ForeignKey("sessions.uuid", ondelete="CASCADE"), index=True)
    chat: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    session: Mapped["Session"] = relationship(back_populates="chats")
    responses: Mapped[list["Response"]] = relationship(
        back_populates="chat", cascade="all, delete-orphan", order_by="Response.id"
    )


class Response(Base):
    """The generated reply to a chat."""

    __tablename__ = "responses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    chat_id: Mapped[int] = mapped_column(Integer, ForeignKey("chats.id", ondelete="CASCADE"), index=True)
    response: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    chat: Mapped["Chat"] = relationship(back_populates="responses")


class Context(Base):
    """A reference snippet fed into every generation call of its session."""

    __tablename__ = "contexts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_uuid: Mapped[str] = mapped_column(String(36), ForeignKey("sessions.uuid", ondelete="CASCADE"), index=True)
    context: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    session: Mapped["Session"] = relationship(back_populates="contexts")
