import logging

import streamlit as st

from config import ENABLE_PDF_EXPORT
from constants import (
    BTN_CLEAR,
    BTN_CLOSE_SUMMARY,
    BTN_SUBMIT,
    DL_JSON,
    DL_PDF,
    F_ADDITIONAL_SKILLS,
    F_EMAIL,
    F_FULL_NAME,
    F_MANAGEMENT_EXPERIENCE,
    F_PHONE_NUMBER,
    F_PORTFOLIO_URL,
    F_POSITION,
    F_PREFERRED_INTERVIEW_TIME,
    F_RELEVANT_EXPERIENCE,
    FIELD_LABELS,
    POSITIONS,
    SKILLS_CATALOG,
    W_INTERVIEW_DATE,
    W_INTERVIEW_TIME,
    field_widget_key,
    skill_widget_key,
)
from application_state import ApplicationForm
from form_policy import visible_fields
from streamlit_state import (
    clear_application_data,
    get_application_form,
    join_interview_time,
    number_to_experience,
    seed_widget_state,
)
from summary import summary_json_bytes, summary_rows
from summary_pdf import create_summary_pdf


# ============================================================
# Widget callbacks -> state holder
# ============================================================
def _on_field_change(field: str) -> None:
    value = st.session_state.get(field_widget_key(field))
    if field == F_RELEVANT_EXPERIENCE:
        value = number_to_experience(value)
    get_application_form().set_field(field, value)


def _on_skill_change(skill: str) -> None:
    checked = bool(st.session_state.get(skill_widget_key(skill)))
    get_application_form().toggle_skill(skill, checked)


def _on_interview_time_change() -> None:
    value = join_interview_time(
        st.session_state.get(W_INTERVIEW_DATE),
        st.session_state.get(W_INTERVIEW_TIME),
    )
    get_application_form().set_field(F_PREFERRED_INTERVIEW_TIME, value)


def _on_submit() -> None:
    get_application_form().submit()


def _on_close_summary() -> None:
    get_application_form().dismiss_summary()


# ============================================================
# Field renderers
# ============================================================
def _render_error(form: ApplicationForm, field: str) -> None:
    message = form.errors.get(field)
    if message:
        st.error(message)


def _render_text(form: ApplicationForm, field: str) -> None:
    st.text_input(
        f"{FIELD_LABELS[field]}:",
        key=field_widget_key(field),
        on_change=_on_field_change,
        args=(field,),
    )


def _render_position(form: ApplicationForm, field: str) -> None:
    st.selectbox(
        "Applying for Position:",
        options=[""] + POSITIONS,
        format_func=lambda p: p or "Select a position",
        key=field_widget_key(field),
        on_change=_on_field_change,
        args=(field,),
    )


def _render_experience(form: ApplicationForm, field: str) -> None:
    st.number_input(
        "Relevant Experience (years):",
        value=None,
        step=1,
        key=field_widget_key(field),
        on_change=_on_field_change,
        args=(field,),
    )


def _render_skills(form: ApplicationForm, field: str) -> None:
    st.markdown(f"**{FIELD_LABELS[field]}:**")
    cols = st.columns(len(SKILLS_CATALOG))
    for col, skill in zip(cols, SKILLS_CATALOG):
        with col:
            st.checkbox(
                skill,
                key=skill_widget_key(skill),
                on_change=_on_skill_change,
                args=(skill,),
            )


def _render_interview_time(form: ApplicationForm, field: str) -> None:
    col_date, col_time = st.columns(2)
    with col_date:
        st.date_input(
            f"{FIELD_LABELS[field]} (date):",
            value=None,
            key=W_INTERVIEW_DATE,
            on_change=_on_interview_time_change,
        )
    with col_time:
        st.time_input(
            "Time:",
            value=None,
            key=W_INTERVIEW_TIME,
            step=900,
            on_change=_on_interview_time_change,
        )


FIELD_RENDERERS = {
    F_FULL_NAME: _render_text,
    F_EMAIL: _render_text,
    F_PHONE_NUMBER: _render_text,
    F_POSITION: _render_position,
    F_RELEVANT_EXPERIENCE: _render_experience,
    F_PORTFOLIO_URL: _render_text,
    F_MANAGEMENT_EXPERIENCE: _render_text,
    F_ADDITIONAL_SKILLS: _render_skills,
    F_PREFERRED_INTERVIEW_TIME: _render_interview_time,
}


# ============================================================
# Page sections
# ============================================================
def render_application_form() -> None:
    form = get_application_form()
    seed_widget_state(form)

    st.subheader("📝 Job Application Form")
    for field in visible_fields(form.draft.position):
        FIELD_RENDERERS[field](form, field)
        _render_error(form, field)

    col_submit, col_clear = st.columns(2)
    with col_submit:
        st.button("Submit", type="primary", key=BTN_SUBMIT, on_click=_on_submit)
    with col_clear:
        st.button("Clear form", key=BTN_CLEAR, on_click=clear_application_data)

    if form.errors:
        st.warning(f"⚠️ Please fix {len(form.errors)} field(s) before submitting.")

    if form.summary_visible:
        _render_summary(form)


def _render_summary(form: ApplicationForm) -> None:
    draft = form.draft
    with st.container(border=True):
        st.subheader("✅ Application Summary")
        for label, value in summary_rows(draft):
            st.markdown(f"**{label}:** {value}")

        st.download_button(
            label="📘 Download JSON",
            data=summary_json_bytes(draft),
            file_name="application_summary.json",
            mime="application/json",
            key=DL_JSON,
        )

        if ENABLE_PDF_EXPORT:
            try:
                pdf_bytes = create_summary_pdf(draft)
            except Exception as e:
                logging.error(f"❌ Summary PDF generation failed: {e}")
                st.error(f"❌ Could not create the PDF: {e}")
            else:
                st.download_button(
                    label="📄 Download PDF",
                    data=pdf_bytes,
                    file_name="application_summary.pdf",
                    mime="application/pdf",
                    key=DL_PDF,
                )

        st.button("Close", key=BTN_CLOSE_SUMMARY, on_click=_on_close_summary)
