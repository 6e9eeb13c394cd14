"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class FeedClosedError(AdapterError):
    """Raised when subscribing to a feed that has been shut down."""

    pass
