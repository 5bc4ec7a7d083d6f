"""
Request Orchestrator

Drives a single accessibility analysis: validate the URL, call the analyzer,
transform the payload and keep the lifecycle state.
"""
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from app.features.accessibility.exceptions import (
    ANALYSIS_FAILED_MESSAGE,
    ANALYSIS_FAILED_TITLE,
    URL_REQUIRED_MESSAGE,
    URL_REQUIRED_TITLE,
    AnalysisError,
    AnalysisInProgressError,
    DecodeError,
    ValidationError,
)
from app.features.accessibility.schemas.analysis import AnalysisResult, AnalyzerPayload
from app.features.accessibility.schemas.state import (
    Failed,
    Idle,
    Loading,
    RequestState,
    Succeeded,
)
from app.features.accessibility.services.client import AnalyzerClient
from app.features.accessibility.services.notifier import LoggingNotifier, Notifier
from app.features.accessibility.services.transformer import summary_message, transform
from app.platform.logger import get_logger

logger = get_logger("accessibility_orchestrator")

ANALYSIS_COMPLETE_TITLE = "Analysis Complete"


class RequestOrchestrator:
    """
    Owns the RequestState of one analysis at a time.

    There is no retry, timeout or cancellation here: once Loading, the
    request runs to completion before the state changes again.
    """

    def __init__(
        self,
        client: Optional[AnalyzerClient] = None,
        notifier: Optional[Notifier] = None,
    ):
        self.client = client or AnalyzerClient()
        self.notifier = notifier or LoggingNotifier()
        self._state: RequestState = Idle()

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def result(self) -> Optional[AnalysisResult]:
        if isinstance(self._state, Succeeded):
            return self._state.result
        return None

    async def analyze(self, url: str) -> AnalysisResult:
        """
        Analyze a URL and store the outcome as the current state.

        Args:
            url: Page URL as typed by the user

        Returns:
            The AnalysisResult, also available as state.result

        Raises:
            ValidationError: url is empty; state is left untouched
            AnalysisInProgressError: a request is already in flight
            TransportError, StatusError, DecodeError: state becomes Failed
        """
        if not url or not url.strip():
            self.notifier.notify(URL_REQUIRED_TITLE, URL_REQUIRED_MESSAGE, True)
            raise ValidationError("URL cannot be empty")

        if isinstance(self._state, Loading):
            raise AnalysisInProgressError(self._state.url)

        self._state = Loading(url=url)
        logger.info(f"Starting accessibility analysis for URL: {url}")

        try:
            raw = await self.client.analyze_url(url)
            try:
                payload = AnalyzerPayload.model_validate(raw)
            except PydanticValidationError as e:
                raise DecodeError(f"Unexpected analyzer payload: {e}") from e
            result = transform(payload)
        except AnalysisError as e:
            logger.error(f"Analysis failed for {url} ({e.kind}): {e}")
            self._fail()
            raise
        except Exception as e:
            logger.error(f"Unexpected error analyzing {url}: {e}", exc_info=True)
            self._fail()
            raise

        self._state = Succeeded(result=result)
        logger.info(
            f"Analysis complete for {url}: score={result.score}, issues={len(result.issues)}"
        )
        self.notifier.notify(ANALYSIS_COMPLETE_TITLE, summary_message(payload), False)
        return result

    def _fail(self) -> None:
        self._state = Failed(reason=ANALYSIS_FAILED_MESSAGE)
        self.notifier.notify(ANALYSIS_FAILED_TITLE, ANALYSIS_FAILED_MESSAGE, True)
