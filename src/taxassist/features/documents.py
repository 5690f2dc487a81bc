"""Simulated document analysis.

No model call is made: the pasted text is matched against a fixed set of
known issues by keyword. Two trigger words exist for demonstrating the
error and clean-result paths.
"""

from .models import ComplianceIssue, RiskLevel

ERROR_TRIGGER = "error_trigger"
NO_ISSUES_TRIGGER = "no_issues_trigger"

KEYWORDS = ("income", "expense", "signature", "1099", "business", "form")

KNOWN_ISSUES: tuple[ComplianceIssue, ...] = (
    ComplianceIssue(
        id="1",
        description="Unreported income from Form 1099-MISC.",
        risk_level=RiskLevel.HIGH,
        recommendation="Amend return to include all income sources.",
        reference="IRC §61",
    ),
    ComplianceIssue(
        id="2",
        description="Potentially overstated business expense for 'Office Supplies'.",
        risk_level=RiskLevel.MEDIUM,
        recommendation="Review receipts and ensure expenses are ordinary and necessary.",
        reference="IRC §162",
    ),
    ComplianceIssue(
        id="3",
        description="Missing Form 8879 (e-file signature authorization).",
        risk_level=RiskLevel.LOW,
        recommendation="Ensure Form 8879 is completed and retained for all e-filed returns.",
        reference="IRS Pub 1345",
    ),
)


class DocumentAnalysisError(ValueError):
    """The document could not be analyzed."""


def analyze_document(text: str) -> list[ComplianceIssue]:
    """Find compliance issues in pasted document text.

    An issue is reported when a keyword appears both in the document and
    in the issue's description or reference. When no keyword matches, the
    first known issue is reported.

    Raises:
        DocumentAnalysisError: Blank text, or the error trigger word
    """
    if not text.strip():
        raise DocumentAnalysisError("Please paste some document content to analyze.")

    lowered = text.lower()
    if ERROR_TRIGGER in lowered:
        raise DocumentAnalysisError("Simulated analysis error: Could not parse document structure.")
    if NO_ISSUES_TRIGGER in lowered:
        return []

    present = [keyword for keyword in KEYWORDS if keyword in lowered]
    found = [issue for issue in KNOWN_ISSUES if _mentions_any(issue, present)]
    return found or [KNOWN_ISSUES[0]]


def _mentions_any(issue: ComplianceIssue, keywords: list[str]) -> bool:
    haystacks = [issue.description.lower(), (issue.reference or "").lower()]
    return any(keyword in haystack for keyword in keywords for haystack in haystacks)
