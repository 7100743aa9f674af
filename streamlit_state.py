import datetime
import math

import streamlit as st

from application_state import ApplicationForm
from constants import (
    F_PREFERRED_INTERVIEW_TIME,
    F_RELEVANT_EXPERIENCE,
    KEY_APPLICATION_FORM,
    SKILLS_CATALOG,
    W_FIELD_PREFIX,
    W_INTERVIEW_DATE,
    W_INTERVIEW_TIME,
    W_SKILL_PREFIX,
    field_widget_key,
    skill_widget_key,
)
from schema import SCALAR_FIELDS


def get_application_form() -> ApplicationForm:
    """Return the session's form, creating it on the first run."""
    form = st.session_state.get(KEY_APPLICATION_FORM, None)
    if not isinstance(form, ApplicationForm):
        form = ApplicationForm()
        st.session_state[KEY_APPLICATION_FORM] = form
    return form


def experience_to_number(value: str):
    """Numeric widget value for the stored years string, None when not a number."""
    try:
        return int(str(value).strip())
    except ValueError:
        pass
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def number_to_experience(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def split_interview_time(value: str) -> tuple:
    """`YYYY-MM-DDTHH:MM` -> (date, time); (None, None) for empty or unparsable text."""
    try:
        dt = datetime.datetime.fromisoformat(str(value or "").strip())
    except ValueError:
        return None, None
    return dt.date(), dt.time().replace(second=0, microsecond=0)


def join_interview_time(day, at) -> str:
    """Both parts are needed; a half-filled picker counts as empty."""
    if day is None or at is None:
        return ""
    return f"{day.isoformat()}T{at.strftime('%H:%M')}"


def seed_widget_state(form: ApplicationForm) -> None:
    """Write draft values into the field and skill widget keys before rendering.

    The draft is the source of truth: callbacks have already copied every
    edit into it, and a conditional field hidden on the last run must show
    its kept value again. The interview pickers only get a default, since a
    half-filled date/time pair is not stored in the draft.
    """
    draft = form.draft
    for name in SCALAR_FIELDS:
        if name == F_PREFERRED_INTERVIEW_TIME:
            continue
        value = getattr(draft, name)
        if name == F_RELEVANT_EXPERIENCE:
            value = experience_to_number(value)
        st.session_state[field_widget_key(name)] = value

    for skill in SKILLS_CATALOG:
        st.session_state[skill_widget_key(skill)] = skill in draft.additional_skills

    day, at = split_interview_time(draft.preferred_interview_time)
    st.session_state.setdefault(W_INTERVIEW_DATE, day)
    st.session_state.setdefault(W_INTERVIEW_TIME, at)


def clear_application_data():
    get_application_form().reset()

    keys_to_clear = [W_INTERVIEW_DATE, W_INTERVIEW_TIME]

    # also clear dynamic field/skill keys
    for k in list(st.session_state.keys()):
        if k.startswith(W_FIELD_PREFIX) or k.startswith(W_SKILL_PREFIX):
            keys_to_clear.append(k)

    for key in keys_to_clear:
        st.session_state.pop(key, None)
