from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional

from app.modules.loans.models import LoanStatus


class CamelModel(BaseModel):
    """Reads snake_case ORM attributes, writes the camelCase wire names"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(MessageResponse):
    error: Optional[str] = None


# ============ Loan payloads ============

class StoppedInterestLoan(CamelModel):
    lender_id: str = Field(alias="lenderID")
    interest_stopped: bool = Field(alias="interestStopped")
    interest_stopped_date: Optional[datetime] = Field(alias="interestStoppedDate")
    accrued_interest: Optional[float] = Field(default=None, alias="accruedInterest")


class ClosedLoan(CamelModel):
    lender_id: str = Field(alias="lenderID")
    status: LoanStatus
    closed_date: Optional[datetime] = Field(alias="closedDate")


class ReopenedLoan(CamelModel):
    lender_id: str = Field(alias="lenderID")
    status: LoanStatus


# ============ Operation responses ============

class DeleteTransactionResponse(MessageResponse):
    deleted_loan_id: int = Field(alias="deletedLoanId")

    model_config = ConfigDict(populate_by_name=True)


class StopInterestResponse(MessageResponse):
    loan: StoppedInterestLoan


class CloseProfileResponse(MessageResponse):
    loan: ClosedLoan


class ReopenProfileResponse(MessageResponse):
    loan: ReopenedLoan


class DeleteProfileResponse(MessageResponse):
    deleted_lender_id: str = Field(alias="deletedLenderID")
    deleted_lender_name: str = Field(alias="deletedLenderName")
    deleted_loan_count: int = Field(alias="deletedLoanCount")

    model_config = ConfigDict(populate_by_name=True)


class ProfileStatusResponse(CamelModel):
    """Read-only projection of a loan's lifecycle fields"""
    message: str = "Profile status retrieved"
    lender_id: str = Field(alias="lenderID")
    status: LoanStatus
    interest_stopped: bool = Field(alias="interestStopped")
    closed_date: Optional[datetime] = Field(alias="closedDate")
    interest_stopped_date: Optional[datetime] = Field(alias="interestStoppedDate")
