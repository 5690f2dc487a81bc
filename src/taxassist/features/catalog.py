"""Dashboard catalog: which features exist and how they are grouped."""

from typing import assert_never

from .models import Feature, FeatureGroup, FeatureInfo

FEATURE_GROUPS: list[FeatureGroup] = [
    FeatureGroup(
        title="Analysis & Reporting",
        features=[
            FeatureInfo(
                feature=Feature.DOCUMENT_ANALYSIS,
                title="Document Analysis",
                description="Analyze tax documents for compliance issues.",
            ),
            FeatureInfo(
                feature=Feature.REGULATION_SUMMARIZER,
                title="Regulation Summarizer",
                description="Summarize complex tax regulations into concise, actionable insights.",
            ),
        ],
    ),
    FeatureGroup(
        title="Planning & Guidance",
        features=[
            FeatureInfo(
                feature=Feature.CHECKLIST_GENERATION,
                title="Checklist Generation",
                description="Generate compliance checklists by entity and jurisdiction.",
            ),
            FeatureInfo(
                feature=Feature.DEADLINE_TRACKING,
                title="Deadline Tracking",
                description="Guidance on tax filing deadlines and requirements.",
            ),
        ],
    ),
    FeatureGroup(
        title="Research & Communication",
        features=[
            FeatureInfo(
                feature=Feature.TAX_RESEARCH,
                title="Tax Research",
                description="AI-powered tax research and regulatory updates.",
            ),
            FeatureInfo(
                feature=Feature.CLIENT_COMMUNICATION,
                title="Client Communication",
                description="Draft client-friendly explanations of tax matters.",
            ),
        ],
    ),
    FeatureGroup(
        title="Help & Support",
        features=[
            FeatureInfo(
                feature=Feature.APP_EXPLANATION,
                title="App Explanation Assistant",
                description="Ask questions about this application and its features.",
            ),
        ],
    ),
    FeatureGroup(
        title="Application Settings & Info",
        features=[
            FeatureInfo(
                feature=Feature.SETTINGS,
                title="Settings",
                description="Configure application settings and view app information.",
            ),
        ],
    ),
]


def feature_info(feature: Feature) -> FeatureInfo:
    """Look up the dashboard card for a feature."""
    for group in FEATURE_GROUPS:
        for info in group.features:
            if info.feature is feature:
                return info
    raise KeyError(feature)


def requires_ai(feature: Feature) -> bool:
    """Whether the feature calls the model (and so needs a credential)."""
    match feature:
        case (
            Feature.TAX_RESEARCH
            | Feature.REGULATION_SUMMARIZER
            | Feature.CLIENT_COMMUNICATION
            | Feature.APP_EXPLANATION
        ):
            return True
        case (
            Feature.DOCUMENT_ANALYSIS
            | Feature.CHECKLIST_GENERATION
            | Feature.DEADLINE_TRACKING
            | Feature.SETTINGS
        ):
            return False
        case _:
            assert_never(feature)
