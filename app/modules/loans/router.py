from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import get_db
from app.core.dependencies import get_current_user_id
from app.core.errors import LoanNotFoundError, StorageError
from app.modules.loans import schemas
from app.modules.loans.services import LoanLifecycleService


router = APIRouter(
    tags=["loan-lifecycle"],
    responses={
        404: {"model": schemas.MessageResponse},
        500: {"model": schemas.ErrorResponse},
    },
)


@router.delete("/delete-transaction/{lender_id}", response_model=schemas.DeleteTransactionResponse)
async def delete_transaction(
    lender_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """
    Delete a single loan transaction.

    - Only the borrower's own loan can be deleted
    - The lender profile is kept
    """
    try:
        loan_id = await LoanLifecycleService.delete_transaction(db, lender_id, user_id)
    except SQLAlchemyError as e:
        raise StorageError("Error deleting transaction", error=str(e))

    if loan_id is None:
        raise LoanNotFoundError("Loan not found or you do not have permission to delete this transaction")

    return schemas.DeleteTransactionResponse(
        message="Transaction deleted successfully",
        deleted_loan_id=loan_id
    )


@router.put("/stop-interest/{lender_id}", response_model=schemas.StopInterestResponse)
async def stop_interest(
    lender_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """
    Stop interest accrual on a loan.

    - Calling it again re-stamps the stop date
    - Loan status is not changed
    """
    try:
        loan = await LoanLifecycleService.stop_interest(db, lender_id, user_id)
    except SQLAlchemyError as e:
        raise StorageError("Error stopping interest", error=str(e))

    if loan is None:
        raise LoanNotFoundError("Loan not found or you do not have permission to modify this loan")

    return schemas.StopInterestResponse(
        message="Interest stopped successfully",
        loan=schemas.StoppedInterestLoan.model_validate(loan)
    )


@router.put("/close-profile/{lender_id}", response_model=schemas.CloseProfileResponse)
async def close_profile(
    lender_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """
    Close a lender profile.

    - Closes the loan and stops its interest
    - Marks the lender profile closed on a best-effort basis
    """
    try:
        loan = await LoanLifecycleService.close_profile(db, lender_id, user_id)
    except SQLAlchemyError as e:
        raise StorageError("Error closing profile", error=str(e))

    if loan is None:
        raise LoanNotFoundError("Loan not found or you do not have permission to close this profile")

    return schemas.CloseProfileResponse(
        message="Profile closed successfully",
        loan=schemas.ClosedLoan.model_validate(loan)
    )


@router.delete("/delete-profile/{lender_id}", response_model=schemas.DeleteProfileResponse)
async def delete_profile(
    lender_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """
    Delete a lender profile and all of the caller's loans from that lender.

    - The lender profile is removed only if the caller added it
    - Loans other borrowers recorded against the lender are kept
    """
    try:
        deleted = await LoanLifecycleService.delete_profile(db, lender_id, user_id)
    except SQLAlchemyError as e:
        raise StorageError("Error deleting profile", error=str(e))

    if deleted is None:
        raise LoanNotFoundError("Loan not found or you do not have permission to delete this profile")

    return schemas.DeleteProfileResponse(
        message="Profile and all associated data deleted successfully",
        **deleted
    )


@router.put("/reopen-profile/{lender_id}", response_model=schemas.ReopenProfileResponse)
async def reopen_profile(
    lender_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """
    Reopen a closed lender profile.

    - Interest starts running again
    - Marks the lender profile active on a best-effort basis
    """
    try:
        loan = await LoanLifecycleService.reopen_profile(db, lender_id, user_id)
    except SQLAlchemyError as e:
        raise StorageError("Error reopening profile", error=str(e))

    if loan is None:
        raise LoanNotFoundError("Loan not found or you do not have permission to reopen this profile")

    return schemas.ReopenProfileResponse(
        message="Profile reopened successfully",
        loan=schemas.ReopenedLoan.model_validate(loan)
    )


@router.get("/profile-status/{lender_id}", response_model=schemas.ProfileStatusResponse)
async def get_profile_status(
    lender_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id)
):
    """Get the lifecycle status of a loan"""
    try:
        loan = await LoanLifecycleService.get_profile_status(db, lender_id, user_id)
    except SQLAlchemyError as e:
        raise StorageError("Error fetching profile status", error=str(e))

    if loan is None:
        raise LoanNotFoundError("Loan not found")

    return schemas.ProfileStatusResponse.model_validate(loan)
