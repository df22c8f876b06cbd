from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, and_
from typing import Optional
from datetime import datetime
import logging

from app.modules.lenders.models import Lender, LenderStatus

logger = logging.getLogger(__name__)


class LenderService:
    """Lender profile reads and writes used by the loan lifecycle"""

    @staticmethod
    async def set_status(
        db: AsyncSession,
        lender_id: str,
        status: LenderStatus,
        closed_date: Optional[datetime]
    ) -> int:
        """
        Set a lender profile's status by lender id alone.

        The profile owner is not checked. Returns the number of matched rows;
        zero is not an error.
        """
        result = await db.execute(
            update(Lender)
            .where(Lender.lender_id == lender_id)
            .values(status=status, closed_date=closed_date)
        )
        await db.commit()
        return result.rowcount

    @staticmethod
    async def delete_owned_lender(db: AsyncSession, lender_id: str, added_by: str) -> Optional[Lender]:
        """Delete the lender profile only if added_by owns it"""
        result = await db.execute(
            select(Lender).where(and_(Lender.lender_id == lender_id, Lender.added_by == added_by))
        )
        lender = result.scalar_one_or_none()

        if not lender:
            return None

        await db.delete(lender)
        await db.commit()
        logger.info(f"Lender {lender_id} deleted by owner {added_by}")
        return lender
