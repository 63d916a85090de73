"""Custom exception hierarchy for the Dreamteller service."""


class DreamtellerError(Exception):
    """Base exception for service-level issues."""


class ConfigurationError(DreamtellerError):
    """Raised when configuration is invalid or missing."""


class InputValidationError(DreamtellerError):
    """Raised when the submitted dream description is unusable."""


class ExternalServiceError(DreamtellerError):
    """Raised when an external dependency responds with an error."""


class RateLimitExceeded(ExternalServiceError):
    """Raised when the upstream API reports rate limiting."""
