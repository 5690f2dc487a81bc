"""Illustrative filing deadlines with jurisdiction and entity filters."""

from datetime import date

from .models import TaxDeadline

ALL = "All"


def build_deadlines(year: int | None = None) -> list[TaxDeadline]:
    """Deadlines for a tax year (defaults to the current year)."""
    year = year or date.today().year
    return [
        TaxDeadline(id="d1", name="Individual Tax Return (Form 1040)",
                    due_date=date(year, 4, 15), jurisdiction="Federal"),
        TaxDeadline(id="d2", name="Corporate Tax Return (Form 1120)",
                    due_date=date(year, 4, 15), jurisdiction="Federal", entity_type="C-Corporation"),
        TaxDeadline(id="d3", name="Partnership Return (Form 1065)",
                    due_date=date(year, 3, 15), jurisdiction="Federal", entity_type="Partnership"),
        TaxDeadline(id="d4", name="S-Corp Return (Form 1120-S)",
                    due_date=date(year, 3, 15), jurisdiction="Federal", entity_type="S-Corporation"),
        TaxDeadline(id="d5", name="Quarterly Estimated Tax Payment (Q1)",
                    due_date=date(year, 4, 15), jurisdiction="Federal"),
        TaxDeadline(id="d6", name="Quarterly Estimated Tax Payment (Q2)",
                    due_date=date(year, 6, 15), jurisdiction="Federal"),
        TaxDeadline(id="d7", name="Quarterly Estimated Tax Payment (Q3)",
                    due_date=date(year, 9, 15), jurisdiction="Federal"),
        TaxDeadline(id="d8", name="Quarterly Estimated Tax Payment (Q4)",
                    due_date=date(year + 1, 1, 15), jurisdiction="Federal"),
        TaxDeadline(id="d9", name="California Corporate Tax Return",
                    due_date=date(year, 4, 15), jurisdiction="California", entity_type="C-Corporation"),
        TaxDeadline(id="d10", name="New York State Personal Income Tax",
                    due_date=date(year, 4, 15), jurisdiction="New York"),
    ]


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def jurisdiction_options(deadlines: list[TaxDeadline]) -> list[str]:
    """Filter choices for jurisdiction, in first-seen order."""
    return [ALL, *_unique([d.jurisdiction for d in deadlines])]


def entity_type_options(deadlines: list[TaxDeadline]) -> list[str]:
    """Filter choices for entity type, in first-seen order."""
    return [ALL, *_unique([d.entity_type for d in deadlines if d.entity_type])]


def filter_deadlines(
    deadlines: list[TaxDeadline],
    jurisdiction: str = ALL,
    entity_type: str = ALL,
) -> list[TaxDeadline]:
    """Apply the filters and sort by date.

    Deadlines without an entity type apply to every entity, so they survive
    the entity filter. The sort is stable: equal dates keep their order.
    """
    selected = [
        d for d in deadlines
        if (jurisdiction == ALL or d.jurisdiction == jurisdiction)
        and (entity_type == ALL or d.entity_type is None or d.entity_type == entity_type)
    ]
    return sorted(selected, key=lambda d: d.due_date)
