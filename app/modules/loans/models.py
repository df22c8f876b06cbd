from sqlalchemy import Column, Integer, String, Boolean, Numeric, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
from app.core.database import Base
import enum


class LoanStatus(str, enum.Enum):
    """Loan record status"""
    ACTIVE = "active"
    CLOSED = "closed"


class TakenLoan(Base):
    """
    A loan the borrower took from one of their lenders.

    lender_id points at a Lender profile but is deliberately not a foreign key:
    ownership comes from borrowed_by, and other borrowers' loans may outlive
    a lender profile that its owner deleted.
    """
    __tablename__ = "taken_loans"

    id = Column(Integer, primary_key=True, index=True)
    lender_id = Column(String(64), index=True, nullable=False)
    borrowed_by = Column(String(64), index=True, nullable=False)

    # Lifecycle
    status = Column(SQLEnum(LoanStatus), default=LoanStatus.ACTIVE, nullable=False)
    closed_date = Column(DateTime(timezone=True), nullable=True)

    # Loan details
    principal_amount = Column(Numeric(15, 2), nullable=True)
    interest_rate = Column(Numeric(5, 2), nullable=True)
    accrued_interest = Column(Numeric(15, 2), default=0, nullable=False)
    interest_stopped = Column(Boolean, default=False, nullable=False)
    interest_stopped_date = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
