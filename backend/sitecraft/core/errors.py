"""Errors raised by the generation pipeline."""

GENERATION_FAILED_MESSAGE = "Failed to generate website from AI. Please try again."


class GenerationError(Exception):
    """A pipeline step failed or the model returned unusable output.

    ``message`` is safe to show to the user; the underlying cause is kept as
    ``__cause__`` for logging only.
    """

    def __init__(self, message: str = GENERATION_FAILED_MESSAGE, *, step: str | None = None):
        self.message = message
        self.step = step
        super().__init__(message)
