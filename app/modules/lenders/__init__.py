# Lenders module
from app.modules.lenders.models import Lender, LenderStatus
from app.modules.lenders.services import LenderService

__all__ = ["Lender", "LenderStatus", "LenderService"]
