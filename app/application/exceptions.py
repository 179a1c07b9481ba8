class MovieBotError(Exception):
    """Base exception for the movie bot."""


class ConfigurationError(MovieBotError):
    """Raised at startup when required credentials are missing."""


class WebhookValidationError(MovieBotError):
    """Raised when an inbound batch is unsigned, wrongly signed or malformed."""


class MovieFetchError(MovieBotError):
    """Raised when a random movie cannot be obtained from the catalog."""


class UnrecognizedGenreError(MovieFetchError):
    """Raised before any network call when the genre has no catalog query."""


class NetworkError(MovieFetchError):
    """Raised when the catalog cannot be reached or answers with an error status."""


class ParseError(MovieFetchError):
    """Raised when the catalog body is not the expected JSON shape."""


class EmptyResultError(MovieFetchError):
    """Raised when the catalog returns no movies."""


class DeliveryError(MovieBotError):
    """Raised when a reply cannot be delivered to the messaging platform."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status
