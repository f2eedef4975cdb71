class ValidationError(ValueError):
    """Input rejected before any request is made."""


class ExternalServiceError(RuntimeError):
    """The text completion service failed or sent back something unusable."""
