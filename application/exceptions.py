"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class RecordStoreError(Exception):
    """A read or write was rejected by the record store.

    Raised by RecordStore implementations for constraint violations,
    network errors or expired credentials. ``message`` carries the store's
    reason and may be empty when the store gave none.
    """

    def __init__(self, message: str = "", *, code: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code


class IdentityMissingError(ValueError):
    """An action that writes or reads personal data was called without a user id."""

    def __init__(self, message: str = "An authenticated user is required"):
        super().__init__(message)
        self.message = message
