"""
Application exceptions
"""


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing or unusable"""
