from typing import Dict, NamedTuple

from app.features.accessibility.schemas.analysis import (
    IssueIcon,
    IssueKind,
    ScoreBand,
    ScoreTier,
    Severity,
)

EXCELLENT_THRESHOLD = 90
GOOD_THRESHOLD = 70


class IssueMeta(NamedTuple):
    kind: IssueKind
    title: str
    severity: Severity


ISSUE_META: Dict[str, IssueMeta] = {
    "INPUT_MISSING_LABEL": IssueMeta(IssueKind.ERROR, "Missing Input Labels", Severity.HIGH),
    "MISSING_ALT_TEXT": IssueMeta(IssueKind.ERROR, "Missing Alt Text", Severity.HIGH),
    "LOW_CONTRAST": IssueMeta(IssueKind.WARNING, "Low Color Contrast", Severity.MEDIUM),
    "MISSING_HEADING": IssueMeta(IssueKind.WARNING, "Missing Heading Structure", Severity.MEDIUM),
    "MISSING_ARIA_LABEL": IssueMeta(IssueKind.INFO, "Missing ARIA Labels", Severity.LOW),
}

DEFAULT_ISSUE_META = IssueMeta(IssueKind.INFO, "Accessibility Issue", Severity.LOW)


def issue_meta(code: str) -> IssueMeta:
    """Classify an analyzer issue code. Unknown codes get the default entry."""
    return ISSUE_META.get(code, DEFAULT_ISSUE_META)


def score_band(score: int) -> ScoreBand:
    """Qualitative band of a score; lower bounds are inclusive."""
    if score >= EXCELLENT_THRESHOLD:
        return ScoreBand.EXCELLENT
    elif score >= GOOD_THRESHOLD:
        return ScoreBand.GOOD
    else:
        return ScoreBand.NEEDS_IMPROVEMENT


def score_tier(score: int) -> ScoreTier:
    """Display tier of a score, same thresholds as score_band."""
    if score >= EXCELLENT_THRESHOLD:
        return ScoreTier.HIGH
    elif score >= GOOD_THRESHOLD:
        return ScoreTier.MID
    else:
        return ScoreTier.LOW


SCORE_COLORS = {
    ScoreTier.HIGH: "text-emerald-600",
    ScoreTier.MID: "text-amber-600",
    ScoreTier.LOW: "text-red-600",
}

SCORE_LABELS = {
    ScoreBand.EXCELLENT: "Excellent!",
    ScoreBand.GOOD: "Good progress",
    ScoreBand.NEEDS_IMPROVEMENT: "Needs improvement",
}

SEVERITY_BADGES = {
    Severity.HIGH: "destructive",
    Severity.MEDIUM: "secondary",
    Severity.LOW: "outline",
}

ISSUE_ICONS = {
    IssueKind.ERROR: IssueIcon(name="x-circle", color="text-red-500"),
    IssueKind.WARNING: IssueIcon(name="alert-triangle", color="text-amber-500"),
    IssueKind.INFO: IssueIcon(name="check-circle", color="text-purple-500"),
}


def score_color(score: int) -> str:
    return SCORE_COLORS[score_tier(score)]


def score_label(score: int) -> str:
    return SCORE_LABELS[score_band(score)]


def severity_badge(severity: Severity) -> str:
    return SEVERITY_BADGES[severity]


def issue_icon(kind: IssueKind) -> IssueIcon:
    return ISSUE_ICONS[kind]
