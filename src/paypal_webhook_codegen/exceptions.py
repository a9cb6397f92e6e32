"""Exception hierarchy for the webhook event code generator."""


class CodegenError(Exception):
    """Base exception for all code generator errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(CodegenError):
    """An expected pattern did not match."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class TooManyMatchesError(CodegenError):
    """A pattern matched more often than allowed.

    Nothing raises this yet; it is kept so callers can catch it once an
    ambiguity check needs it.
    """

    def __init__(self, message: str = "too many matches") -> None:
        super().__init__(message)


class InvalidEventNameError(CodegenError, ValueError):
    """An event name cannot be turned into an identifier."""

    def __init__(self, event: str) -> None:
        self.event = event
        super().__init__(f"invalid event name {event!r}: empty segment")


class ParseError(CodegenError):
    """Parsing the event-names document failed at a given stage.

    Args:
        stage: Stage of the document structure ("title", "description", "webhooks").
        cause: Underlying error.
    """

    def __init__(self, stage: str, cause: Exception) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage}: {cause}")


class FetchError(CodegenError):
    """The event-names document could not be read or downloaded."""


class NothingToDoError(CodegenError):
    """No output destination was given."""

    def __init__(self) -> None:
        super().__init__("nothing to do")
