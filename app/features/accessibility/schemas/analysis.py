"""
Accessibility Analysis Schemas

Models for the remote analyzer payload and the normalized analysis result.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IssueKind(str, Enum):
    """How an issue is presented: blocking error, warning or informational"""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Severity(str, Enum):
    """Remediation priority of an issue"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ScoreBand(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs-improvement"


class ScoreTier(str, Enum):
    HIGH = "high"
    MID = "mid"
    LOW = "low"


class AnalysisRequest(BaseModel):
    """Request body for an analysis."""
    url: str

    class Config:
        json_schema_extra = {
            "example": {
                "url": "https://example.com"
            }
        }


# ============================================================================
# Remote analyzer payload
# ============================================================================

class RawIssue(BaseModel):
    """
    Issue record as returned by the remote analyzer.

    The backend calls the issue code `type`; it is exposed here as `code`.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    code: str = Field(default="", alias="type")
    description: str = ""
    element: str = ""

    @field_validator("code", "description", "element", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        # Fields are untyped upstream: scalars are kept as their text
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        return value


class AnalyzerPayload(BaseModel):
    """Decoded success body of the remote analyzer."""
    model_config = ConfigDict(extra="ignore")

    score: float = Field(allow_inf_nan=False)
    issues: List[RawIssue]
    message: Optional[str] = None


# ============================================================================
# Normalized result
# ============================================================================

class Issue(BaseModel):
    """Normalized issue ready for display."""
    kind: IssueKind
    title: str
    description: str
    severity: Severity
    element: str

    class Config:
        json_schema_extra = {
            "example": {
                "kind": "error",
                "title": "Missing Alt Text",
                "description": "img missing alt",
                "severity": "high",
                "element": "<img src=\"hero.png\">"
            }
        }


class AnalysisResult(BaseModel):
    """
    Outcome of a successful analysis.

    `issues` keep the order the analyzer sent them in; `suggestions` are
    deduplicated and follow the suggestion table order.
    """
    score: int = Field(ge=0, le=100)
    issues: List[Issue] = []
    suggestions: List[str] = []


# ============================================================================
# Report (presentation hints)
# ============================================================================

class IssueIcon(BaseModel):
    name: str
    color: str


class ReportIssue(Issue):
    badge_variant: str
    icon: IssueIcon


class AnalysisReport(BaseModel):
    """Analysis result decorated with the hints the UI renders from."""
    score: int
    score_band: ScoreBand
    score_tier: ScoreTier
    score_color: str
    score_label: str
    issue_count: int
    suggestion_count: int
    issues: List[ReportIssue]
    suggestions: List[str]
