"""Ledger error taxonomy.

Every error carries a stable ``code`` and the HTTP status the API layer maps
it to. Rule violations raised inside a unit of work cause a full rollback.
"""


class LedgerError(Exception):
    """Base class for credit ledger failures."""

    code = "LEDGER_ERROR"
    status_code = 500

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code

    def to_detail(self) -> dict[str, str]:
        return {"code": self.code, "message": self.detail}


class InvalidTransfer(LedgerError):
    """Raised for self-transfers."""

    code = "INVALID_TRANSFER"
    status_code = 400


class InvalidAmount(LedgerError):
    """Raised when a credit amount is not a positive integer."""

    code = "INVALID_AMOUNT"
    status_code = 400


class SenderNotFound(LedgerError):
    code = "SENDER_NOT_FOUND"


class RecipientNotFound(LedgerError):
    code = "RECIPIENT_NOT_FOUND"


class UserNotFound(LedgerError):
    code = "USER_NOT_FOUND"


class AccountNotFound(LedgerError):
    code = "ACCOUNT_NOT_FOUND"
    status_code = 404


class InsufficientCredits(LedgerError):
    code = "INSUFFICIENT_CREDITS"


class MonthlyLimitExceeded(LedgerError):
    code = "MONTHLY_LIMIT_EXCEEDED"


class InsufficientRedeemableCredits(LedgerError):
    code = "INSUFFICIENT_REDEEMABLE_CREDITS"


class DuplicateEndorsement(LedgerError):
    """Raised when the (user, recognition) unique constraint fires."""

    code = "DUPLICATE_ENDORSEMENT"
    status_code = 409


class DuplicateAccount(LedgerError):
    code = "DUPLICATE_ACCOUNT"
    status_code = 409


class StoreUnavailable(LedgerError):
    """Raised when the database connection fails or times out."""

    code = "STORE_UNAVAILABLE"
    status_code = 503
