import pytest
from pydantic import ValidationError as PydanticValidationError

from app.features.accessibility.schemas.analysis import (
    AnalysisResult,
    AnalyzerPayload,
    IssueKind,
    Severity,
)
from app.features.accessibility.services.transformer import (
    GENERIC_SUGGESTIONS,
    generate_suggestions,
    normalize_score,
    summary_message,
    transform,
)


def raw_issue(code, description="desc", element="<div>"):
    return {"type": code, "description": description, "element": element}


class TestTransform:
    def test_missing_alt_text_issue(self):
        result = transform({
            "score": 80,
            "issues": [raw_issue("MISSING_ALT_TEXT", "img missing alt", "<img>")],
        })

        assert isinstance(result, AnalysisResult)
        issue = result.issues[0]
        assert issue.kind == IssueKind.ERROR
        assert issue.title == "Missing Alt Text"
        assert issue.severity == Severity.HIGH
        assert issue.description == "img missing alt"
        assert issue.element == "<img>"
        assert "Add alternative text to all images for screen readers" in result.suggestions

    def test_unknown_code_uses_default_and_adds_no_suggestion(self):
        result = transform({
            "score": 50,
            "issues": [
                raw_issue("UNKNOWN_CODE", "odd thing", "<span>"),
                raw_issue("LOW_CONTRAST"),
            ],
        })

        unknown = result.issues[0]
        assert unknown.kind == IssueKind.INFO
        assert unknown.title == "Accessibility Issue"
        assert unknown.severity == Severity.LOW
        assert unknown.description == "odd thing"
        assert unknown.element == "<span>"
        assert result.suggestions == ["Increase color contrast for better text readability"]

    def test_only_unknown_codes_yield_generic_suggestions(self):
        result = transform({"score": 50, "issues": [raw_issue("UNKNOWN_CODE")]})
        assert result.suggestions == GENERIC_SUGGESTIONS

    def test_empty_issues_yield_generic_suggestions(self):
        result = transform({"score": 100, "issues": []})

        assert result.issues == []
        assert result.suggestions == [
            "Ensure all interactive elements are keyboard accessible",
            "Test your website with screen readers",
            "Add skip navigation links for better accessibility",
        ]

    def test_issue_order_is_preserved(self, sample_payload):
        result = transform(sample_payload)
        assert [i.description for i in result.issues] == [
            "img missing alt",
            "Text contrast 2.1:1",
            "logo missing alt",
            "Something else",
        ]

    def test_is_deterministic(self, sample_payload):
        assert transform(sample_payload) == transform(sample_payload)
        assert transform(sample_payload).model_dump() == transform(sample_payload).model_dump()

    def test_suggestions_ignore_order_and_duplicates(self):
        a = raw_issue("MISSING_ARIA_LABEL")
        b = raw_issue("INPUT_MISSING_LABEL")

        first = transform({"score": 60, "issues": [a, a, b]})
        second = transform({"score": 60, "issues": [b, a]})

        assert first.suggestions == second.suggestions
        assert first.suggestions == [
            "Add descriptive labels to all form input fields",
            "Add ARIA labels to interactive elements",
        ]

    def test_all_codes_follow_table_order(self):
        codes = [
            "MISSING_ARIA_LABEL",
            "MISSING_HEADING",
            "LOW_CONTRAST",
            "MISSING_ALT_TEXT",
            "INPUT_MISSING_LABEL",
        ]
        result = transform({"score": 10, "issues": [raw_issue(c) for c in codes]})

        assert result.suggestions == [
            "Add descriptive labels to all form input fields",
            "Add alternative text to all images for screen readers",
            "Increase color contrast for better text readability",
            "Implement proper heading hierarchy (h1, h2, h3, etc.)",
            "Add ARIA labels to interactive elements",
        ]

    def test_accepts_validated_payload(self, sample_payload):
        payload = AnalyzerPayload.model_validate(sample_payload)
        assert transform(payload) == transform(sample_payload)

    def test_missing_fields_become_empty_strings(self):
        result = transform({"score": 70, "issues": [{"type": "LOW_CONTRAST", "element": None}]})

        issue = result.issues[0]
        assert issue.description == ""
        assert issue.element == ""
        assert issue.title == "Low Color Contrast"

    def test_missing_issues_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            transform({"score": 70})

    def test_numeric_fields_are_kept_as_text(self):
        result = transform({
            "score": 80,
            "issues": [{"type": 404, "description": 12.5, "element": 7.0}],
        })

        issue = result.issues[0]
        assert issue.kind == IssueKind.INFO
        assert issue.title == "Accessibility Issue"
        assert issue.severity == Severity.LOW
        assert issue.description == "12.5"
        assert issue.element == "7"
        assert result.suggestions == GENERIC_SUGGESTIONS

    @pytest.mark.parametrize("score", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_score_is_rejected(self, score):
        with pytest.raises(PydanticValidationError):
            transform({"score": score, "issues": []})

    def test_fractional_score_keeps_raw_band(self):
        from app.features.accessibility.services.classifier import score_band

        result = transform({"score": 89.5, "issues": []})
        assert result.score == 89
        assert score_band(result.score).value == "good"

    def test_score_is_floored_and_clamped(self):
        assert transform({"score": 91.6, "issues": []}).score == 91
        assert transform({"score": 130, "issues": []}).score == 100
        assert transform({"score": -4, "issues": []}).score == 0


class TestHelpers:
    def test_generate_suggestions_accepts_any_iterable(self):
        assert generate_suggestions(iter(["MISSING_HEADING"])) == [
            "Implement proper heading hierarchy (h1, h2, h3, etc.)"
        ]

    def test_generic_suggestions_are_a_fresh_copy(self):
        suggestions = generate_suggestions([])
        suggestions.append("extra")
        assert len(GENERIC_SUGGESTIONS) == 3

    def test_normalize_score(self):
        assert normalize_score(89.4) == 89
        assert normalize_score(89.99) == 89
        assert normalize_score(0) == 0

    def test_summary_message_prefers_server_message(self, sample_payload):
        payload = AnalyzerPayload.model_validate(sample_payload)
        assert summary_message(payload) == "Analysis completed successfully"

    @pytest.mark.parametrize("message", [None, ""])
    def test_summary_message_counts_issues(self, sample_payload, message):
        sample_payload["message"] = message
        payload = AnalyzerPayload.model_validate(sample_payload)
        assert summary_message(payload) == "Found 4 accessibility issues"
