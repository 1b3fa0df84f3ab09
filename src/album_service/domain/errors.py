"""Domain errors."""


class UpstreamError(RuntimeError):
    """Raised when a valid photo list cannot be obtained from the photos service."""
