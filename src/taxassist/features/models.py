"""Data models for the dashboard features."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Feature(str, Enum):
    """Sections reachable from the dashboard.

    Closed set: every dispatch on a feature matches all members.
    """

    DOCUMENT_ANALYSIS = "document-analysis"
    CHECKLIST_GENERATION = "checklist-generation"
    DEADLINE_TRACKING = "deadline-tracking"
    TAX_RESEARCH = "tax-research"
    REGULATION_SUMMARIZER = "regulation-summarizer"
    CLIENT_COMMUNICATION = "client-communication"
    APP_EXPLANATION = "app-explanation"
    SETTINGS = "settings"


class FeatureInfo(BaseModel):
    """Dashboard card for one feature."""

    model_config = ConfigDict(frozen=True)

    feature: Feature
    title: str
    description: str


class FeatureGroup(BaseModel):
    """Titled row of dashboard cards."""

    model_config = ConfigDict(frozen=True)

    title: str
    features: list[FeatureInfo]


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ComplianceIssue(BaseModel):
    """Issue found by document analysis."""

    model_config = ConfigDict(frozen=True)

    id: str
    description: str
    risk_level: RiskLevel
    recommendation: str
    reference: str | None = Field(default=None, description="Code section or publication")


class ChecklistItem(BaseModel):
    """One step of a compliance checklist."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    completed: bool = False
    details: str | None = None


class TaxDeadline(BaseModel):
    """Filing or payment deadline."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    due_date: date
    jurisdiction: str
    entity_type: str | None = Field(default=None, description="None when it applies to every entity")
