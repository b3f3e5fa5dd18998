"""Exceptions raised by the sign-in API and turned into JSON responses."""


class SignInError(Exception):
    """A rejected sign-in attempt, carrying the HTTP status to answer with."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)
