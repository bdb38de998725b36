"""PostgreSQL implementation of ChatMessage repository."""

from typing import List

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from mindful.domain.model import ChatMessage
from mindful.domain.repository import ChatMessageRepository
from mindful.domain.value import UserId
from mindful.persistence.error import execute
from mindful.persistence.mappers import chat_message_to_dict, row_to_chat_message
from mindful.persistence.tables import chat_messages_table


class PostgresChatMessageRepository(ChatMessageRepository):
    """PostgreSQL implementation of ChatMessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_recent_by_user(
        self, user_id: UserId, limit: int = 50
    ) -> List[ChatMessage]:
        """Find a user's most recent messages, oldest first."""
        stmt = (
            select(chat_messages_table)
            .where(chat_messages_table.c.user_id == user_id)
            .order_by(
                desc(chat_messages_table.c.created_at), desc(chat_messages_table.c.id)
            )
            .limit(limit)
        )
        result = await execute(self.session, stmt)
        messages = [row_to_chat_message(row._asdict()) for row in result.fetchall()]
        # Newest-first from the query; callers want chronological order
        messages.reverse()
        return messages

    async def save(self, message: ChatMessage) -> ChatMessage:
        """Insert a new message."""
        stmt = (
            insert(chat_messages_table)
            .values(**chat_message_to_dict(message))
            .returning(chat_messages_table)
        )
        result = await execute(self.session, stmt)
        return row_to_chat_message(result.one()._asdict())
