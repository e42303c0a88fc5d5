"""
Custom exception classes for the video rental statements app.

These exceptions provide precise error types that controllers can catch
to render friendly messages instead of generic 500 errors.
"""


class MovieNotFoundError(Exception):
    """Raised when a movie ID cannot be found in the catalog."""

    def __init__(self, message: str = "Error: movie not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class CustomerNotFoundError(Exception):
    """Raised when a customer ID cannot be found in the catalog."""

    def __init__(self, message: str = "Error: customer not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class UnknownPriceCodeError(Exception):
    """Raised when a price code does not name any pricing policy."""

    def __init__(self, message: str = "Error: unknown price code") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class UnsupportedStatementFormatError(Exception):
    """Raised when a statement is requested in a format we cannot render."""

    def __init__(self, message: str = "Error: unsupported statement format") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
