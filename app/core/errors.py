from typing import Optional


class ValidationFailure(ValueError):
    """
    Caller supplied data that breaks a domain rule (unknown reference,
    duplicate unique key, illegal status transition).

    Raised by the service layer before anything is written; the API layer
    maps it to a 400 response.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
