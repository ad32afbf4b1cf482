# =============================================================================
# Rendering Exceptions
# =============================================================================
# ConversionError is raised by a single HTML converter and is recovered by
# the engine, which moves on to the next strategy. RenderError is raised
# only when every strategy failed and is meant for the caller.
# =============================================================================


class MailRenderError(Exception):
    """Base exception for rendering operations."""
    pass


class ConversionError(MailRenderError):
    """
    Raised when one HTML conversion strategy fails.

    Attributes:
        strategy: Name of the converter that failed (e.g. "w3m").
    """

    def __init__(self, strategy: str, message: str) -> None:
        super().__init__(f"{strategy}: {message}")
        self.strategy = strategy


class RenderError(MailRenderError):
    """
    Raised when no HTML conversion strategy succeeded.

    Attributes:
        failures: The ConversionError from each strategy, in the order tried.
    """

    def __init__(self, failures: list[ConversionError]) -> None:
        if failures:
            details = "; ".join(str(f) for f in failures)
            message = f"All HTML conversion strategies failed ({details})"
        else:
            message = "No HTML conversion strategy available"
        super().__init__(message)
        self.failures = failures
