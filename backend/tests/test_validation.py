from __future__ import annotations

from app.dashboard.models import Severity
from app.dashboard.store.memory import MemoryIncidentStore
from app.dashboard.validation import IncidentFormValidator


def test_empty_title_is_the_only_error():
    store = MemoryIncidentStore()
    form = IncidentFormValidator()

    result = form.submit(store, "", "Desc", "High")

    assert not result.ok
    assert result.errors == {"title": "Title is required"}
    assert result.incident is None
    assert store.incidents == []


def test_all_fields_missing_reports_every_error():
    form = IncidentFormValidator()
    result = form.validate("   ", "\n\t", None)
    assert result.errors == {
        "title": "Title is required",
        "description": "Description is required",
        "severity": "Severity is required",
    }
    assert form.errors == result.errors
    assert result.draft is None


def test_empty_severity_string_is_unset():
    result = IncidentFormValidator().validate("t", "d", "")
    assert result.errors == {"severity": "Severity is required"}


def test_unknown_severity_is_rejected():
    result = IncidentFormValidator().validate("t", "d", "Critical")
    assert set(result.errors) == {"severity"}
    assert "Low" in result.errors["severity"]


def test_valid_form_creates_incident_and_closes_form():
    store = MemoryIncidentStore()
    store.toggle_form()
    form = IncidentFormValidator()

    result = form.submit(store, "Test", "Desc", "High")

    assert result.ok
    inc = result.incident
    assert (inc.title, inc.description, inc.severity) == ("Test", "Desc", Severity.high)
    assert store.incidents == [inc]
    assert store.view.show_form is False


def test_fields_are_carried_through_untrimmed():
    result = IncidentFormValidator().validate("  padded  ", "line\n", Severity.low)
    assert result.draft.title == "  padded  "
    assert result.draft.description == "line\n"


def test_success_clears_previous_errors():
    store = MemoryIncidentStore()
    form = IncidentFormValidator()
    form.submit(store, "", "", "")
    assert form.errors

    form.submit(store, "t", "d", "Low")
    assert form.errors == {}


def test_non_text_fields_are_field_errors():
    store = MemoryIncidentStore()
    result = IncidentFormValidator().submit(store, 5, ["d"], 3)
    assert result.errors == {
        "title": "Title must be text",
        "description": "Description must be text",
        "severity": "Severity must be one of: Low, Medium, High",
    }
    assert store.incidents == []
