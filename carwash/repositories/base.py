"""
Shared repository plumbing.
"""
import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from carwash.exceptions import Conflict

logger = logging.getLogger(__name__)


class Repository:
    """Wraps one request's database session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _commit(self, conflict_message: str) -> None:
        """
        Commit the pending write.

        Pre-checks only give the friendly error; a writer racing past them is
        stopped by the store's own constraints and reported the same way.
        """
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning("Constraint violation on commit: %s", exc.orig)
            raise Conflict(conflict_message) from exc

    async def _count(self, model, *criteria) -> int:
        query = select(func.count()).select_from(model)
        if criteria:
            query = query.where(*criteria)
        result = await self.session.execute(query)
        return result.scalar_one()
