"""Application error types."""


class GrowthTrackerError(Exception):
    """Base class for recoverable application errors."""


class NotEnoughEntriesError(GrowthTrackerError):
    """Raised when a domain has too few entries for an analysis."""


class MissingCredentialError(GrowthTrackerError):
    """Raised before any remote call when the API credential is absent."""


class AnalysisFailedError(GrowthTrackerError):
    """Raised when a remote model call or its response parsing fails."""

    def __init__(self, message: str = "Analysis failed. Please try again.") -> None:
        super().__init__(message)
