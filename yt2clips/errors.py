"""Exceptions raised by the extraction pipeline."""


class ConfigurationError(ValueError):
    """Required configuration (the model credential) is missing."""


class PipelineError(RuntimeError):
    """Base class for failures after configuration has been checked."""


class UpstreamError(PipelineError):
    """The model service returned an error or could not be reached."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class UnparsableResponseError(PipelineError):
    """No JSON array could be recovered from the model response."""


class ValidationError(PipelineError):
    """A recovered array does not satisfy the record contract."""


class AnalysisError(PipelineError):
    """Topic extraction failed; carries a user-facing message."""
