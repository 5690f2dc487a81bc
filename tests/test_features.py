"""Unit tests for the dashboard features."""
from datetime import date

import pytest
from hypothesis import given
from hypothesis import strategies as st

from taxassist.features import (
    AUDIENCE_OPTIONS,
    ENTITY_TYPES,
    FEATURE_GROUPS,
    JURISDICTIONS,
    DocumentAnalysisError,
    Feature,
    RiskLevel,
    analyze_document,
    build_client_communication_prompt,
    build_deadlines,
    build_regulation_summary_prompt,
    entity_type_options,
    feature_info,
    filter_deadlines,
    generate_checklist,
    jurisdiction_options,
    progress,
    requires_ai,
    toggle_item,
)


class TestCatalog:
    """Tests for the feature catalog."""

    def test_every_feature_on_dashboard_once(self):
        """Test that each feature appears on the dashboard exactly once."""
        listed = [info.feature for group in FEATURE_GROUPS for info in group.features]
        assert sorted(listed) == sorted(Feature)
        assert len(listed) == len(set(listed))

    def test_feature_info(self):
        """Test that feature metadata carries the display title."""
        assert feature_info(Feature.DEADLINE_TRACKING).title == "Deadline Tracking"

    def test_ai_features(self):
        """Test that only the model-backed features need a credential."""
        ai = {feature for feature in Feature if requires_ai(feature)}
        assert ai == {
            Feature.TAX_RESEARCH,
            Feature.REGULATION_SUMMARIZER,
            Feature.CLIENT_COMMUNICATION,
            Feature.APP_EXPLANATION,
        }

    @given(st.sampled_from(list(Feature)))
    def test_feature_values_round_trip(self, feature):
        """Test that a feature is recovered from its stored value."""
        assert Feature(feature.value) is feature

    def test_unknown_feature_value(self):
        """Test that an unknown feature value is rejected."""
        with pytest.raises(ValueError):
            Feature("tax-evasion")


class TestDocumentAnalysis:
    """Tests for the simulated document analysis."""

    @pytest.mark.parametrize("text", ["", "   \n  "])
    def test_blank_document(self, text):
        """Test that blank text is rejected with a request for content."""
        with pytest.raises(DocumentAnalysisError, match="paste some document content"):
            analyze_document(text)

    def test_error_trigger(self):
        """Test that the error keyword raises an analysis failure."""
        with pytest.raises(DocumentAnalysisError, match="Could not parse document structure"):
            analyze_document("Please ERROR_TRIGGER this")

    def test_no_issues_trigger(self):
        """Test that a clean document yields no issues."""
        assert analyze_document("clean return no_issues_trigger") == []

    def test_income_keyword(self):
        """Test that income text flags the income issue."""
        issues = analyze_document("Total income was $80,000.")
        assert [issue.id for issue in issues] == ["1"]
        assert issues[0].risk_level is RiskLevel.HIGH
        assert issues[0].reference == "IRC §61"

    def test_expense_keyword(self):
        """Test that expense text flags the expense issue."""
        assert [issue.id for issue in analyze_document("Office expense claims")] == ["2"]

    def test_signature_keyword(self):
        """Test that signature text flags the signature issue."""
        assert [issue.id for issue in analyze_document("signature missing")] == ["3"]

    def test_form_keyword_matches_several(self):
        """Test that a form keyword can flag several issues."""
        assert [issue.id for issue in analyze_document("See the attached form")] == ["1", "3"]

    def test_fallback_to_first_issue(self):
        """Test that unmatched text falls back to the first sample issue."""
        assert [issue.id for issue in analyze_document("Nothing relevant here")] == ["1"]


class TestChecklists:
    """Tests for checklist generation."""

    def test_known_template_starts_unchecked(self):
        """Test that a known checklist starts with every item unchecked."""
        items = generate_checklist("Corporate", "Federal")
        assert [item.id for item in items] == ["cf1", "cf2", "cf3", "cf4"]
        assert not any(item.completed for item in items)

    def test_entity_names_with_spaces(self):
        """Test that entity names containing spaces find their template."""
        items = generate_checklist("Sole Proprietorship", "Federal")
        assert [item.id for item in items] == ["spf1", "spf2", "spf3"]

    def test_generic_fallback(self):
        """Test that an unknown entity gets the generic checklist."""
        items = generate_checklist("LLC", "Texas")
        assert [item.id for item in items] == ["gen1", "gen2", "gen3"]
        assert "Texas" in items[0].text and "LLC" in items[0].text

    def test_toggle_returns_new_list(self):
        """Test that toggling returns a new list and leaves the input alone."""
        items = generate_checklist("Partnership", "Federal")
        toggled = toggle_item(items, "pf2")

        assert [item.completed for item in toggled] == [False, True, False]
        assert not items[1].completed
        assert toggle_item(toggled, "pf2")[1].completed is False

    def test_toggle_unknown_id(self):
        """Test that toggling an unknown item changes nothing."""
        items = generate_checklist("Partnership", "Federal")
        assert toggle_item(items, "missing") == items

    def test_progress(self):
        """Test that progress counts checked items."""
        items = toggle_item(generate_checklist("Corporate", "Federal"), "cf1")
        assert progress(items) == (1, 4)

    def test_options(self):
        """Test that entity and jurisdiction options are exposed."""
        assert "Sole Proprietorship" in ENTITY_TYPES
        assert JURISDICTIONS[0] == "Federal"


class TestDeadlines:
    """Tests for deadline data and filtering."""

    def test_build_for_year(self):
        """Test that deadlines are built for the requested year."""
        deadlines = build_deadlines(2025)
        assert len(deadlines) == 10
        by_id = {d.id: d for d in deadlines}
        assert by_id["d1"].due_date == date(2025, 4, 15)
        assert by_id["d8"].due_date == date(2026, 1, 15)

    def test_no_filter_sorts_by_date(self):
        """Test that an unfiltered list is sorted by date."""
        selected = filter_deadlines(build_deadlines(2025))
        assert len(selected) == 10
        assert [d.id for d in selected[:2]] == ["d3", "d4"]
        assert selected[-1].id == "d8"
        assert [d.due_date for d in selected] == sorted(d.due_date for d in selected)

    def test_jurisdiction_filter(self):
        """Test that the jurisdiction filter keeps matching deadlines."""
        selected = filter_deadlines(build_deadlines(2025), jurisdiction="California")
        assert [d.id for d in selected] == ["d9"]

    def test_entity_filter_keeps_general_deadlines(self):
        """Test that the entity filter keeps deadlines for all entities."""
        selected = filter_deadlines(build_deadlines(2025), entity_type="Partnership")
        assert {d.id for d in selected} == {"d1", "d3", "d5", "d6", "d7", "d8", "d10"}

    def test_combined_filters(self):
        """Test that both filters apply together."""
        selected = filter_deadlines(build_deadlines(2025), "Federal", "C-Corporation")
        assert [d.id for d in selected] == ["d1", "d2", "d5", "d6", "d7", "d8"]

    def test_filter_options(self):
        """Test that filter options list every jurisdiction and entity."""
        deadlines = build_deadlines(2025)
        assert jurisdiction_options(deadlines) == ["All", "Federal", "California", "New York"]
        assert entity_type_options(deadlines) == ["All", "C-Corporation", "Partnership", "S-Corporation"]

    def test_default_year(self):
        """Test that deadlines default to the current year."""
        assert build_deadlines()[0].due_date.year == date.today().year


class TestDrafting:
    """Tests for the summarizer and client communication prompts."""

    def test_regulation_prompt(self):
        """Test that the regulation prompt embeds the source text."""
        prompt = build_regulation_summary_prompt("Section 199A allows a deduction {of up to 20%}.")
        assert "Section 199A allows a deduction {of up to 20%}." in prompt

    def test_regulation_prompt_blank(self):
        """Test that blank regulation text builds no prompt."""
        with pytest.raises(ValueError, match="regulation text"):
            build_regulation_summary_prompt("  ")

    def test_client_prompt(self):
        """Test that the client prompt names topic and audience."""
        prompt = build_client_communication_prompt("Basis step-up at death.", "Investor")
        assert "Basis step-up at death." in prompt
        assert "Investor" in prompt

    def test_client_prompt_default_audience(self):
        """Test that the client prompt fills in a default audience."""
        assert AUDIENCE_OPTIONS[0] in build_client_communication_prompt("text")

    def test_client_prompt_blank(self):
        """Test that a blank topic builds no prompt."""
        with pytest.raises(ValueError, match="technical information"):
            build_client_communication_prompt("")
