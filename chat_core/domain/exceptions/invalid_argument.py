"""
InvalidArgumentError - Raised when a raw value violates a value object's rule.
Maps to: HTTP 422 Unprocessable Entity
"""


class InvalidArgumentError(ValueError):
    """Exception raised when a value cannot be wrapped by a value object."""

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message)
        self.message = message
