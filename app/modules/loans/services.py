from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional, Dict, Any
from datetime import datetime, timezone
import logging

from app.modules.loans.models import TakenLoan, LoanStatus
from app.modules.lenders.models import LenderStatus
from app.modules.lenders.services import LenderService

logger = logging.getLogger(__name__)

UNKNOWN_LENDER_NAME = "Unknown"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LoanLifecycleService:
    """
    Lifecycle transitions for a borrower's loans and the lender profiles behind them.

    Every operation looks the loan up by (lender_id, borrowed_by=user_id). That
    lookup is the only authorization: a loan owned by someone else is reported
    exactly like a missing one, as ``None``.

    Loan writes and lender writes are committed separately. Close and reopen
    treat the lender write as best effort: if it fails or matches nothing the
    loan change stands and the operation still succeeds.
    """

    @staticmethod
    async def get_owned_loan(db: AsyncSession, lender_id: str, user_id: str) -> Optional[TakenLoan]:
        """Get the caller's first loan from this lender"""
        query = (
            select(TakenLoan)
            .where(and_(TakenLoan.lender_id == lender_id, TakenLoan.borrowed_by == user_id))
            .order_by(TakenLoan.id)
            .limit(1)
        )
        result = await db.execute(query)
        return result.scalars().first()

    @staticmethod
    async def delete_transaction(db: AsyncSession, lender_id: str, user_id: str) -> Optional[int]:
        """Delete one loan record. The lender profile is left alone."""
        loan = await LoanLifecycleService.get_owned_loan(db, lender_id, user_id)
        if not loan:
            return None

        loan_id = loan.id
        await db.delete(loan)
        await db.commit()
        logger.info(f"Loan {loan_id} from lender {lender_id} deleted by {user_id}")
        return loan_id

    @staticmethod
    async def stop_interest(db: AsyncSession, lender_id: str, user_id: str) -> Optional[TakenLoan]:
        """
        Freeze interest accrual on the loan.

        Repeating the call re-stamps interest_stopped_date. Closed loans are
        not rejected and status is never touched.
        """
        loan = await LoanLifecycleService.get_owned_loan(db, lender_id, user_id)
        if not loan:
            return None

        loan.interest_stopped = True
        loan.interest_stopped_date = _utcnow()

        await db.commit()
        logger.info(f"Interest stopped on loan {loan.id} from lender {lender_id}")
        return loan

    @staticmethod
    async def close_profile(db: AsyncSession, lender_id: str, user_id: str) -> Optional[TakenLoan]:
        """Close the loan, always stopping interest, then close the lender profile"""
        loan = await LoanLifecycleService.get_owned_loan(db, lender_id, user_id)
        if not loan:
            return None

        now = _utcnow()
        loan.status = LoanStatus.CLOSED
        loan.closed_date = now
        loan.interest_stopped = True
        loan.interest_stopped_date = now

        await db.commit()
        logger.info(f"Loan {loan.id} from lender {lender_id} closed")

        await LoanLifecycleService._sync_lender_status(db, loan, LenderStatus.CLOSED, now)
        return loan

    @staticmethod
    async def reopen_profile(db: AsyncSession, lender_id: str, user_id: str) -> Optional[TakenLoan]:
        """Reopen the loan with interest running again, then reopen the lender profile"""
        loan = await LoanLifecycleService.get_owned_loan(db, lender_id, user_id)
        if not loan:
            return None

        loan.status = LoanStatus.ACTIVE
        loan.closed_date = None
        loan.interest_stopped = False
        loan.interest_stopped_date = None

        await db.commit()
        logger.info(f"Loan {loan.id} from lender {lender_id} reopened")

        await LoanLifecycleService._sync_lender_status(db, loan, LenderStatus.ACTIVE, None)
        return loan

    @staticmethod
    async def delete_profile(db: AsyncSession, lender_id: str, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Delete every loan the caller has from this lender, then the lender
        profile itself if the caller added it.

        Other borrowers' loans on the same lender id are untouched.
        """
        loan = await LoanLifecycleService.get_owned_loan(db, lender_id, user_id)
        if not loan:
            return None

        result = await db.execute(
            delete(TakenLoan).where(
                and_(TakenLoan.lender_id == lender_id, TakenLoan.borrowed_by == user_id)
            )
        )
        deleted_count = result.rowcount
        await db.commit()
        logger.info(f"{deleted_count} loans from lender {lender_id} deleted by {user_id}")

        lender = await LenderService.delete_owned_lender(db, lender_id, user_id)

        return {
            "deleted_lender_id": lender_id,
            "deleted_lender_name": lender.display_name if lender else UNKNOWN_LENDER_NAME,
            "deleted_loan_count": deleted_count,
        }

    @staticmethod
    async def get_profile_status(db: AsyncSession, lender_id: str, user_id: str) -> Optional[TakenLoan]:
        """Get the loan for a read-only status projection"""
        return await LoanLifecycleService.get_owned_loan(db, lender_id, user_id)

    @staticmethod
    async def _sync_lender_status(
        db: AsyncSession,
        loan: TakenLoan,
        status: LenderStatus,
        closed_date: Optional[datetime]
    ) -> None:
        """Mirror the loan status onto its lender profile, by lender id only"""
        lender_id = loan.lender_id
        # A rollback expires everything in the session; the committed loan must stay readable.
        db.expunge(loan)

        try:
            matched = await LenderService.set_status(db, lender_id, status, closed_date)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.warning(f"Failed to mark lender {lender_id} {status.value}: {str(e)}")
            return

        if not matched:
            logger.warning(f"No lender profile {lender_id} to mark {status.value}")
