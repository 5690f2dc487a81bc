"""Dashboard features and their data.

- models.py: Feature enum and feature data types
- catalog.py: Dashboard grouping of features
- documents.py: Simulated document analysis
- checklists.py: Checklist templates
- deadlines.py: Deadline table and filters
- drafting.py: Prompts for the summarizer and the client drafter
"""

from .catalog import FEATURE_GROUPS, feature_info, requires_ai
from .checklists import ENTITY_TYPES, JURISDICTIONS, generate_checklist, progress, toggle_item
from .deadlines import (
    build_deadlines,
    entity_type_options,
    filter_deadlines,
    jurisdiction_options,
)
from .documents import DocumentAnalysisError, analyze_document
from .drafting import (
    AUDIENCE_OPTIONS,
    build_client_communication_prompt,
    build_regulation_summary_prompt,
)
from .models import (
    ChecklistItem,
    ComplianceIssue,
    Feature,
    FeatureGroup,
    FeatureInfo,
    RiskLevel,
    TaxDeadline,
)

__all__ = [
    "AUDIENCE_OPTIONS",
    "ENTITY_TYPES",
    "FEATURE_GROUPS",
    "JURISDICTIONS",
    "ChecklistItem",
    "ComplianceIssue",
    "DocumentAnalysisError",
    "Feature",
    "FeatureGroup",
    "FeatureInfo",
    "RiskLevel",
    "TaxDeadline",
    "analyze_document",
    "build_client_communication_prompt",
    "build_deadlines",
    "build_regulation_summary_prompt",
    "entity_type_options",
    "feature_info",
    "filter_deadlines",
    "generate_checklist",
    "jurisdiction_options",
    "progress",
    "requires_ai",
    "toggle_item",
]
