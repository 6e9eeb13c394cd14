"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnauthorizedError(InterfaceError):
    """Request requires an authenticated member."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)
