from fastapi import APIRouter, Depends, status

from app.features.accessibility.schemas.analysis import AnalysisReport, AnalysisRequest
from app.features.accessibility.services.client import AnalyzerClient
from app.features.accessibility.services.notifier import CollectingNotifier
from app.features.accessibility.services.orchestrator import RequestOrchestrator
from app.features.accessibility.services.report import build_report
from app.platform.response import api_response

router = APIRouter(prefix="/accessibility", tags=["Accessibility"])


def get_analyzer_client() -> AnalyzerClient:
    return AnalyzerClient()


@router.post("/analyze", response_model=AnalysisReport)
async def analyze_url(
    analysis_in: AnalysisRequest,
    client: AnalyzerClient = Depends(get_analyzer_client),
):
    """
    Analyze a URL and return the accessibility report.

    AnalysisError subclasses are turned into 400/502 envelopes by the
    handlers in app.platform.exceptions.
    """
    notifier = CollectingNotifier()
    orchestrator = RequestOrchestrator(client=client, notifier=notifier)

    result = await orchestrator.analyze(analysis_in.url)

    report = build_report(result)
    return api_response(
        data=report.model_dump(mode="json"),
        message=notifier.last.description,
        status_code=status.HTTP_200_OK,
    )
