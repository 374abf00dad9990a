"""
Service-layer exceptions, translated to HTTP responses in main.py.
"""


class TripLedgerError(Exception):
    """Base error for trip, person and expense operations."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(TripLedgerError):
    """A trip, person or expense does not exist."""
    status_code = 404


class ValidationError(TripLedgerError):
    """Input violates a data-model rule (empty name, non-positive amount, ...)."""
    status_code = 400
