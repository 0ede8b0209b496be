"""Exceptions raised at service decision points and by external clients."""


class ControlledError(Exception):
    """A known policy violation carrying the message and status code returned to the client."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class StarWarsApiError(ControlledError):
    """Raised when the external movie catalog cannot be fetched."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)
