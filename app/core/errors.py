from typing import Optional, Dict, Any
from fastapi import status


class LedgerError(Exception):
    """Base exception rendered as a ``{"message": ...}`` JSON body"""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_response(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"message": self.message}
        if self.error is not None:
            content["error"] = self.error
        return content


class LoanNotFoundError(LedgerError):
    """No loan matches the lender id for this borrower.

    Also raised when the loan exists but belongs to someone else, so the
    response never reveals whether another user's record exists.
    """

    http_status = status.HTTP_404_NOT_FOUND


class StorageError(LedgerError):
    """The persistence layer failed while serving the request"""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
