from app.features.accessibility.schemas.analysis import (
    AnalysisReport,
    AnalysisResult,
    ReportIssue,
)
from app.features.accessibility.services.classifier import (
    issue_icon,
    score_band,
    score_color,
    score_label,
    score_tier,
    severity_badge,
)


def build_report(result: AnalysisResult) -> AnalysisReport:
    """Attach score band, colors, badges and icons to an analysis result."""
    issues = [
        ReportIssue(
            **issue.model_dump(),
            badge_variant=severity_badge(issue.severity),
            icon=issue_icon(issue.kind),
        )
        for issue in result.issues
    ]

    return AnalysisReport(
        score=result.score,
        score_band=score_band(result.score),
        score_tier=score_tier(result.score),
        score_color=score_color(result.score),
        score_label=score_label(result.score),
        issue_count=len(result.issues),
        suggestion_count=len(result.suggestions),
        issues=issues,
        suggestions=list(result.suggestions),
    )
