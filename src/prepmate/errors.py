"""Error taxonomy for prepmate.

Every error carries a ``user_message`` that the controller or the
conversation shows instead of the raw exception text.
"""


class PrepMateError(Exception):
    """Base class for prepmate errors."""

    user_message = "Something went wrong. Please try again."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)


class PlanValidationError(PrepMateError):
    """Study plan inputs are incomplete (request never issued)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.user_message = message


class PlanGenerationError(PrepMateError):
    """The plan endpoint failed or was unreachable."""

    user_message = "Failed to generate plan. Please check your API key and try again."

    def __init__(self, message: str):
        super().__init__(f"Plan generation failed: {message}")


class ChatStreamError(PrepMateError):
    """The chat session could not be created or its stream broke."""

    user_message = "I encountered an error connecting to the AI. Please try again."

    def __init__(self, message: str):
        super().__init__(f"Chat stream failed: {message}")


class ConversationBusyError(PrepMateError):
    """A message was sent while the previous response was still streaming."""

    user_message = "Please wait for the current response to finish."


class ConfigurationError(PrepMateError):
    """Provider configuration is missing or invalid."""

    def __init__(self, message: str):
        super().__init__(message)
        self.user_message = message
