"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationRequiredError(InterfaceError):
    """Request needs a valid access token and has none."""

    def __init__(self, message: str = "Authentication required") -> None:
        self.message = message
        super().__init__(message)
