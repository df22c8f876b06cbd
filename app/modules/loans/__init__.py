# Loans module
from app.modules.loans.models import TakenLoan, LoanStatus
from app.modules.loans.services import LoanLifecycleService
from app.modules.loans.router import router

__all__ = ["TakenLoan", "LoanStatus", "LoanLifecycleService", "router"]
