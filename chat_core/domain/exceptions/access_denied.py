"""
AccessDeniedError - Raised when a user acts on a chat room or message they do not own.
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    """Raised when user lacks permission to act on a resource"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
