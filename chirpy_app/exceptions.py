"""
Domain exceptions.

The API layer turns these into {"error": ...} responses (see chirpy_app.errors).
"""


class ChirpyError(Exception):
    """Base class for errors raised by the service and storage layers."""

    status_code = 500
    message = "Something went wrong"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class ChirpTooLongError(ChirpyError):
    """Chirp body exceeds the length limit."""

    status_code = 400
    message = "Chirp is too long"


class StorageError(ChirpyError):
    """A database write failed. The message is safe to show to clients."""

    status_code = 500
    message = "Database error"
