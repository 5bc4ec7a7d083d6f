"""
Errors raised while analyzing a URL.

Users only ever see two messages: URL_REQUIRED for ValidationError and
ANALYSIS_FAILED for everything else. The concrete class is kept for logs and
for callers that want to tell the causes apart.
"""
from typing import Optional

URL_REQUIRED_TITLE = "URL Required"
URL_REQUIRED_MESSAGE = "Please enter a valid URL to analyze"
ANALYSIS_FAILED_TITLE = "Analysis Failed"
ANALYSIS_FAILED_MESSAGE = "Unable to analyze the website. Please check the URL and try again."


class AnalysisError(Exception):
    """Base class for every analysis failure."""
    kind = "analysis_error"

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(detail or self.kind)


class ValidationError(AnalysisError):
    """The submitted URL is empty or whitespace."""
    kind = "validation_error"


class TransportError(AnalysisError):
    """The analyzer could not be reached."""
    kind = "transport_error"


class StatusError(AnalysisError):
    """The analyzer answered with a non-2xx status."""
    kind = "status_error"

    def __init__(self, status_code: int, detail: str = ""):
        self.status_code = status_code
        super().__init__(detail or f"HTTP error! status: {status_code}")


class DecodeError(AnalysisError):
    """The analyzer body is not the expected JSON document."""
    kind = "decode_error"


class AnalysisInProgressError(AnalysisError):
    """analyze() was called while a request is still in flight."""
    kind = "in_progress"

    def __init__(self, url: Optional[str] = None):
        super().__init__(f"An analysis is already running for {url}" if url else "")
