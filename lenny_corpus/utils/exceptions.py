class LennyCorpusError(Exception):
    """Base class for lenny corpus exceptions."""


class TranscriptDownloadError(LennyCorpusError):
    """Exception raised when the transcript archive cannot be downloaded."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"Failed to download: {status_code} {reason}")
        self.status_code = status_code
        self.reason = reason


class ArchiveExtractionError(LennyCorpusError):
    """Exception raised when the transcript archive cannot be extracted."""


class CorpusValidationError(LennyCorpusError):
    """Exception raised when too few episodes are present after extraction."""
