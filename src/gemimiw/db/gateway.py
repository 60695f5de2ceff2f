"""
Table-level persistence gateway.

Every operation returns a ``Result``: the row payload as plain dicts on
success, or a ``DatabaseError`` on failure. Nothing here raises; callers
branch on the result.
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gemimiw.db.models import Base, Chat, Context, Response, Session
from gemimiw.errors import DatabaseError, NoRowsError, Result
from gemimiw.logger import get_logger

logger = get_logger(__name__)

Filters = dict[str, Any]

# Raised by drivers for values they cannot bind, e.g. ints outside SQLite INTEGER
DRIVER_ERRORS = (SQLAlchemyError, OverflowError)


class Table:
    """Filtered insert/select/update/delete against one model."""

    def __init__(self, db: AsyncSession, model: type[Base]):
        self._db = db
        self.model = model
        self.name = model.__tablename__

    def _statement(self, filters: Filters):
        conditions = [getattr(self.model, column) == value for column, value in filters.items()]
        primary_key = self.model.__mapper__.primary_key
        return select(self.model).where(*conditions).order_by(*primary_key)

    def _shape(self, rows: list[dict], single: bool) -> Result:
        if not single:
            return Result(data=rows)
        if not rows:
            return Result(error=NoRowsError(self.name))
        if len(rows) > 1:
            return Result(
                error=DatabaseError(
                    f"The result contains {len(rows)} rows",
                    {"table": self.name},
                )
            )
        return Result(data=rows[0])

    async def _failed(self, operation: str, exc: Exception) -> Result:
        await self._db.rollback()
        logger.error("Database %s on %s failed: %s", operation, self.name, exc)
        detail = getattr(exc, "orig", None) or exc
        return Result(
            error=DatabaseError(
                str(detail),
                {"table": self.name, "operation": operation},
            )
        )

    async def insert(self, values: dict[str, Any]) -> Result:
        """Insert one row and return it."""
        row = self.model(**values)
        try:
            self._db.add(row)
            await self._db.commit()
            await self._db.refresh(row)
        except DRIVER_ERRORS as exc:
            return await self._failed("insert", exc)
        return Result(data=row.to_dict())

    async def select(
        self,
        filters: Filters,
        *,
        related: str | None = None,
        single: bool = False,
    ) -> Result:
        """
        Select rows matching every filter.

        Args:
            filters: Column name to required value
            related: Relationship to nest under its own name in each row
            single: Expect exactly one row; zero rows is a NoRowsError
        """
        statement = self._statement(filters)
        if related:
            statement = statement.options(
                selectinload(getattr(self.model, related))
            ).execution_options(populate_existing=True)

        try:
            result = await self._db.execute(statement)
            rows = list(result.scalars().all())
        except DRIVER_ERRORS as exc:
            return await self._failed("select", exc)

        payload = []
        for row in rows:
            data = row.to_dict()
            if related:
                data[related] = [child.to_dict() for child in getattr(row, related)]
            payload.append(data)

        return self._shape(payload, single)

    async def update(
        self,
        values: dict[str, Any],
        filters: Filters,
        *,
        single: bool = False,
    ) -> Result:
        """Set ``values`` on every matching row and return the updated rows."""
        try:
            result = await self._db.execute(self._statement(filters))
            rows = list(result.scalars().all())
            for row in rows:
                for column, value in values.items():
                    setattr(row, column, value)
            await self._db.commit()
        except DRIVER_ERRORS as exc:
            return await self._failed("update", exc)
        return self._shape([row.to_dict() for row in rows], single)

    async def delete(self, filters: Filters) -> Result:
        """Delete every matching row (cascading to children) and return them."""
        try:
            result = await self._db.execute(self._statement(filters))
            rows = list(result.scalars().all())
            payload = [row.to_dict() for row in rows]
            for row in rows:
                await self._db.delete(row)
            await self._db.commit()
        except DRIVER_ERRORS as exc:
            return await self._failed("delete", exc)
        return Result(data=payload)


class Database:
    """The four logical tables bound to one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.sessions = Table(db, Session)
        self.chats = Table(db, Chat)
        self.responses = Table(db, Response)
        self.contexts = Table(db, Context)
