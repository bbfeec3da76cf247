"""
DomainLogicError - Raised when an entity is used before the state it needs is set.
Maps to: HTTP 500 Internal Server Error (programmer error)
"""


class DomainLogicError(Exception):
    """Exception raised for unset entity fields and malformed collection elements."""

    def __init__(self, message: str = "Domain logic error"):
        super().__init__(message)
        self.message = message
