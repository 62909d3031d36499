GENERIC_ERROR_MESSAGE = "An internal error occurred. Please try again later."
EMPTY_INPUT_MESSAGE = "Please provide some input to generate a prompt."


class PromptArchitectError(Exception):
    """Base class for errors surfaced to API callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PromptValidationError(PromptArchitectError):
    """Input rejected before any completion call is made."""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE, details=None):
        super().__init__(message)
        self.details = details or []


class CompletionGatewayError(PromptArchitectError):
    """
    Any failure talking to the completion API.

    The message is always the generic one; the real cause is chained
    via ``__cause__`` and logged, never returned to the caller.
    """

    def __init__(self):
        super().__init__(GENERIC_ERROR_MESSAGE)
