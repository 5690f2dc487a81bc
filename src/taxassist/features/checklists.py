"""Compliance checklist generation from canned templates."""

from .models import ChecklistItem

ENTITY_TYPES = ["Corporate", "Partnership", "Sole Proprietorship", "S-Corporation", "LLC"]
JURISDICTIONS = ["Federal", "California", "New York", "Texas", "Florida"]

_TEMPLATES: dict[str, list[ChecklistItem]] = {
    "Corporate-Federal": [
        ChecklistItem(id="cf1", text="File Form 1120 by the deadline.",
                      details="U.S. Corporate Income Tax Return."),
        ChecklistItem(id="cf2", text="Make estimated tax payments if required.",
                      details="Based on expected tax liability."),
        ChecklistItem(id="cf3", text="Maintain records for income, deductions, and credits.",
                      completed=True, details="Keep for at least 3 years from filing date."),
        ChecklistItem(id="cf4", text="Reconcile book income to taxable income (Schedule M-1/M-3)."),
    ],
    "Partnership-Federal": [
        ChecklistItem(id="pf1", text="File Form 1065 by the deadline.",
                      details="U.S. Return of Partnership Income."),
        ChecklistItem(id="pf2", text="Issue Schedule K-1s to partners.",
                      details="Shows partner's share of income, deductions, credits, etc."),
        ChecklistItem(id="pf3", text="Comply with partnership audit rules (BBA)."),
    ],
    "SoleProprietorship-Federal": [
        ChecklistItem(id="spf1", text="Report profit or loss on Schedule C (Form 1040)."),
        ChecklistItem(id="spf2", text="Pay self-employment taxes (Schedule SE)."),
        ChecklistItem(id="spf3", text="Make estimated tax payments."),
    ],
}


def _template_key(entity_type: str, jurisdiction: str) -> str:
    return f"{entity_type.replace(' ', '')}-{jurisdiction.replace(' ', '')}"


def generate_checklist(entity_type: str, jurisdiction: str) -> list[ChecklistItem]:
    """Build a checklist for an entity type and jurisdiction.

    Known combinations use their template with every item reset to not
    completed; anything else gets a generic three-step checklist.
    """
    template = _TEMPLATES.get(_template_key(entity_type, jurisdiction))
    if template is not None:
        return [item.model_copy(update={"completed": False}) for item in template]

    return [
        ChecklistItem(id="gen1", text=f"Review {jurisdiction} filing requirements for {entity_type}."),
        ChecklistItem(id="gen2", text=f"Identify all applicable forms for {entity_type} in {jurisdiction}."),
        ChecklistItem(id="gen3", text="Confirm registration and good standing."),
    ]


def toggle_item(items: list[ChecklistItem], item_id: str) -> list[ChecklistItem]:
    """Return a new list with one item's completion flipped."""
    return [
        item.model_copy(update={"completed": not item.completed}) if item.id == item_id else item
        for item in items
    ]


def progress(items: list[ChecklistItem]) -> tuple[int, int]:
    """Completed and total item counts."""
    return sum(1 for item in items if item.completed), len(items)
