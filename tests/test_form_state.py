import pytest

from application_state import ApplicationForm
from schema import ApplicationDraft


def _fill_manager(form: ApplicationForm) -> None:
    form.set_field("full_name", "Jane Doe")
    form.set_field("email", "jane@x.com")
    form.set_field("phone_number", "5551234567")
    form.set_field("position", "Manager")
    form.set_field("management_experience", "5 years")
    form.toggle_skill("React", True)
    form.set_field("preferred_interview_time", "2024-01-01T10:00")


def test_new_form_is_empty():
    form = ApplicationForm()
    assert form.draft == ApplicationDraft()
    assert form.errors == {}
    assert form.summary_visible is False


def test_set_field_replaces_value():
    form = ApplicationForm()
    form.set_field("full_name", "Jane")
    form.set_field("full_name", "Jane Doe")
    assert form.draft.full_name == "Jane Doe"


def test_set_field_none_becomes_empty_string():
    form = ApplicationForm()
    form.set_field("relevant_experience", None)
    assert form.draft.relevant_experience == ""


def test_set_field_rejects_unknown_names():
    form = ApplicationForm()
    with pytest.raises(KeyError):
        form.set_field("salary", "1000")
    with pytest.raises(KeyError):
        form.set_field("additional_skills", "Python")


def test_set_field_does_not_validate():
    form = ApplicationForm()
    form.set_field("email", "abc")
    assert form.errors == {}


def test_toggle_skill_is_idempotent():
    form = ApplicationForm()
    form.toggle_skill("Python", True)
    form.toggle_skill("Python", True)
    assert form.draft.additional_skills == ["Python"]


def test_toggle_off_missing_skill_is_noop():
    form = ApplicationForm()
    form.toggle_skill("CSS", True)
    form.toggle_skill("React", False)
    assert form.draft.additional_skills == ["CSS"]


def test_toggle_skill_keeps_selection_order():
    form = ApplicationForm()
    for skill in ["Node.js", "CSS", "JavaScript"]:
        form.toggle_skill(skill, True)
    form.toggle_skill("CSS", False)
    form.toggle_skill("CSS", True)
    assert form.draft.additional_skills == ["Node.js", "JavaScript", "CSS"]


def test_toggle_skill_outside_catalog_raises():
    form = ApplicationForm()
    with pytest.raises(ValueError):
        form.toggle_skill("Cobol", True)


def test_submit_valid_draft_shows_summary():
    form = ApplicationForm()
    _fill_manager(form)
    assert form.submit() is True
    assert form.errors == {}
    assert form.summary_visible is True


def test_submit_invalid_draft_keeps_form():
    form = ApplicationForm()
    form.set_field("full_name", "Jane Doe")
    assert form.submit() is False
    assert form.summary_visible is False
    assert "full_name" not in form.errors
    assert "email" in form.errors


def test_failed_submit_hides_previous_summary():
    form = ApplicationForm()
    _fill_manager(form)
    form.submit()
    form.set_field("email", "")
    assert form.submit() is False
    assert form.summary_visible is False


def test_errors_recomputed_on_each_submit():
    form = ApplicationForm()
    form.submit()
    assert "full_name" in form.errors
    _fill_manager(form)
    form.submit()
    assert form.errors == {}


def test_position_switch_keeps_stale_values():
    form = ApplicationForm()
    _fill_manager(form)
    form.set_field("position", "Designer")
    form.set_field("position", "Manager")
    assert form.draft.management_experience == "5 years"
    assert form.submit() is True


def test_dismiss_summary():
    form = ApplicationForm()
    _fill_manager(form)
    form.submit()
    form.dismiss_summary()
    assert form.summary_visible is False
    assert form.draft.full_name == "Jane Doe"


def test_reset_clears_everything():
    form = ApplicationForm()
    _fill_manager(form)
    form.submit()
    form.reset()
    assert form.draft == ApplicationDraft()
    assert form.errors == {}
    assert form.summary_visible is False
