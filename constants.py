"""Centralized field names, catalogs and Streamlit session/widget keys.

These constants are used across `app.py`, `streamlit_state.py`, `form_policy.py`
and `ui/` modules so names stay consistent and easy to refactor.
"""

# Positions and skills offered by the form
POSITIONS = ["Developer", "Designer", "Manager"]
SKILLS_CATALOG = ["JavaScript", "CSS", "Python", "React", "Node.js"]

# Draft field names
F_FULL_NAME = "full_name"
F_EMAIL = "email"
F_PHONE_NUMBER = "phone_number"
F_POSITION = "position"
F_RELEVANT_EXPERIENCE = "relevant_experience"
F_PORTFOLIO_URL = "portfolio_url"
F_MANAGEMENT_EXPERIENCE = "management_experience"
F_ADDITIONAL_SKILLS = "additional_skills"
F_PREFERRED_INTERVIEW_TIME = "preferred_interview_time"

# Form order
ALL_FIELDS = [
    F_FULL_NAME,
    F_EMAIL,
    F_PHONE_NUMBER,
    F_POSITION,
    F_RELEVANT_EXPERIENCE,
    F_PORTFOLIO_URL,
    F_MANAGEMENT_EXPERIENCE,
    F_ADDITIONAL_SKILLS,
    F_PREFERRED_INTERVIEW_TIME,
]

FIELD_LABELS = {
    F_FULL_NAME: "Full Name",
    F_EMAIL: "Email",
    F_PHONE_NUMBER: "Phone Number",
    F_POSITION: "Position",
    F_RELEVANT_EXPERIENCE: "Relevant Experience",
    F_PORTFOLIO_URL: "Portfolio URL",
    F_MANAGEMENT_EXPERIENCE: "Management Experience",
    F_ADDITIONAL_SKILLS: "Additional Skills",
    F_PREFERRED_INTERVIEW_TIME: "Preferred Interview Time",
}

# Core session data
KEY_APPLICATION_FORM = "application_form"

# Field widget keys
W_FIELD_PREFIX = "w_field_"
W_SKILL_PREFIX = "w_skill_"
W_INTERVIEW_DATE = "w_interview_date"
W_INTERVIEW_TIME = "w_interview_time"

# Button/download widget keys
BTN_SUBMIT = "btn_submit_application"
BTN_CLEAR = "btn_clear_application"
BTN_CLOSE_SUMMARY = "btn_close_summary"
DL_JSON = "download_summary_json"
DL_PDF = "download_summary_pdf"


def field_widget_key(field: str) -> str:
    return f"{W_FIELD_PREFIX}{field}"


def skill_widget_key(skill: str) -> str:
    return f"{W_SKILL_PREFIX}{skill}"
