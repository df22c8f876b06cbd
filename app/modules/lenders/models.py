from sqlalchemy import Column, Integer, String, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
from app.core.database import Base
import enum


class LenderStatus(str, enum.Enum):
    """Lender profile status"""
    ACTIVE = "active"
    CLOSED = "closed"


class Lender(Base):
    """Lender profile registered by a user"""
    __tablename__ = "lenders"

    id = Column(Integer, primary_key=True, index=True)
    lender_id = Column(String(64), unique=True, index=True, nullable=False)
    added_by = Column(String(64), index=True, nullable=False)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)

    status = Column(SQLEnum(LenderStatus), default=LenderStatus.ACTIVE, nullable=False)
    closed_date = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
