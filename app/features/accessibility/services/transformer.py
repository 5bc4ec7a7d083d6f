"""
Response Transformer

Turns the remote analyzer payload into a normalized AnalysisResult.
Pure functions only: the same payload always produces the same result.
"""
import math
from typing import Any, Dict, Iterable, List, Union

from app.features.accessibility.schemas.analysis import (
    AnalysisResult,
    AnalyzerPayload,
    Issue,
    RawIssue,
)
from app.features.accessibility.services.classifier import issue_meta

# Ordered: suggestions are emitted in this order, whatever order the issues came in
SUGGESTIONS = [
    ("INPUT_MISSING_LABEL", "Add descriptive labels to all form input fields"),
    ("MISSING_ALT_TEXT", "Add alternative text to all images for screen readers"),
    ("LOW_CONTRAST", "Increase color contrast for better text readability"),
    ("MISSING_HEADING", "Implement proper heading hierarchy (h1, h2, h3, etc.)"),
    ("MISSING_ARIA_LABEL", "Add ARIA labels to interactive elements"),
]

GENERIC_SUGGESTIONS = [
    "Ensure all interactive elements are keyboard accessible",
    "Test your website with screen readers",
    "Add skip navigation links for better accessibility",
]


def normalize_issue(raw: RawIssue) -> Issue:
    """Map one raw analyzer issue to its display form."""
    meta = issue_meta(raw.code)
    return Issue(
        kind=meta.kind,
        title=meta.title,
        description=raw.description,
        severity=meta.severity,
        element=raw.element,
    )


def generate_suggestions(codes: Iterable[str]) -> List[str]:
    """
    Build remediation suggestions for a set of issue codes.

    Only the distinct codes matter. Falls back to GENERIC_SUGGESTIONS when
    no code has a dedicated suggestion.
    """
    present = set(codes)
    suggestions = [text for code, text in SUGGESTIONS if code in present]
    if not suggestions:
        suggestions = list(GENERIC_SUGGESTIONS)
    return suggestions


def normalize_score(score: float) -> int:
    """
    Floor to an integer and clamp into [0, 100].

    Flooring keeps band thresholds where the raw score puts them: 89.5 stays "good".
    """
    return max(0, min(100, math.floor(score)))


def summary_message(payload: AnalyzerPayload) -> str:
    """Server message when given, otherwise a count-based one."""
    if payload.message:
        return payload.message
    return f"Found {len(payload.issues)} accessibility issues"


def transform(raw: Union[AnalyzerPayload, Dict[str, Any]]) -> AnalysisResult:
    """
    Convert an analyzer payload into an AnalysisResult.

    Args:
        raw: Decoded JSON body or an already validated AnalyzerPayload

    Returns:
        AnalysisResult with issues in received order

    Raises:
        pydantic.ValidationError: if a dict payload does not match AnalyzerPayload
    """
    payload = raw if isinstance(raw, AnalyzerPayload) else AnalyzerPayload.model_validate(raw)

    return AnalysisResult(
        score=normalize_score(payload.score),
        issues=[normalize_issue(issue) for issue in payload.issues],
        suggestions=generate_suggestions(issue.code for issue in payload.issues),
    )
