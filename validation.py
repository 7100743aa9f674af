import re

from constants import (
    F_ADDITIONAL_SKILLS,
    F_EMAIL,
    F_FULL_NAME,
    F_MANAGEMENT_EXPERIENCE,
    F_PHONE_NUMBER,
    F_PORTFOLIO_URL,
    F_PREFERRED_INTERVIEW_TIME,
    F_RELEVANT_EXPERIENCE,
)
from form_policy import is_field_active
from schema import ApplicationDraft


# ============================================================
# Patterns
# ============================================================
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
PHONE_PATTERN = re.compile(r"[0-9]+")

# Domain labels are written as alnum runs joined by hyphen runs so the
# label repetition cannot backtrack exponentially on long hosts.
_LABEL = r"[a-z\d]+(?:-+[a-z\d]+)*"
URL_PATTERN = re.compile(
    rf"""
    (?:https?://)?                                  # scheme
    (?:
        {_LABEL}(?:\.{_LABEL})*\.?[a-z]{{2,}}       # domain name
        |
        (?:\d{{1,3}}\.){{3}}\d{{1,3}}               # OR ipv4 address
    )
    (?::\d+)?                                       # port
    (?:/[-a-z\d%_.~+]*)*                            # path
    (?:\?[;&a-z\d%_.~+=-]*)?                        # query string
    (?:\#[-a-z\d_]*)?                               # fragment
    """,
    re.IGNORECASE | re.VERBOSE | re.ASCII,
)

# ============================================================
# Messages
# ============================================================
MSG_FULL_NAME_REQUIRED = "Full Name is required"
MSG_EMAIL_REQUIRED = "Email is required"
MSG_EMAIL_INVALID = "Email address is invalid"
MSG_PHONE_REQUIRED = "Phone Number is required"
MSG_PHONE_INVALID = "Phone Number must be a valid number"
MSG_EXPERIENCE_INVALID = "Relevant Experience is required and must be greater than 0"
MSG_PORTFOLIO_INVALID = "Portfolio URL is required and must be a valid URL"
MSG_MANAGEMENT_REQUIRED = "Management Experience is required"
MSG_SKILLS_REQUIRED = "At least one skill must be selected"
MSG_INTERVIEW_TIME_REQUIRED = "Preferred Interview Time is required"


# Characters removed by a browser's String.prototype.trim(); differs from
# str.strip() on U+FEFF (trimmed here) and U+001C..U+001F, U+0085 (kept here).
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def _is_blank(value) -> bool:
    return not str(value or "").strip(TRIM_CHARS)


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.search(value or ""))


def is_valid_phone(value: str) -> bool:
    """Digits only. The raw value is checked, so surrounding spaces fail."""
    return bool(PHONE_PATTERN.fullmatch(value or ""))


def is_valid_url(value: str) -> bool:
    return bool(URL_PATTERN.fullmatch(value or ""))


def is_positive_number(value) -> bool:
    """True when the value parses as a number greater than zero.

    Empty and non-numeric strings are not positive.
    """
    if value is None:
        return False
    try:
        return float(str(value).strip()) > 0
    except ValueError:
        return False


# ============================================================
# Validation pass
# ============================================================
def validate(draft: ApplicationDraft) -> dict[str, str]:
    """Return field name -> error message for every failing rule.

    Every rule runs; an empty dict means the draft can be submitted.
    Fields the current position does not use are skipped.
    """
    errors: dict[str, str] = {}
    position = draft.position

    if _is_blank(draft.full_name):
        errors[F_FULL_NAME] = MSG_FULL_NAME_REQUIRED

    if _is_blank(draft.email):
        errors[F_EMAIL] = MSG_EMAIL_REQUIRED
    elif not is_valid_email(draft.email):
        errors[F_EMAIL] = MSG_EMAIL_INVALID

    if _is_blank(draft.phone_number):
        errors[F_PHONE_NUMBER] = MSG_PHONE_REQUIRED
    elif not is_valid_phone(draft.phone_number):
        errors[F_PHONE_NUMBER] = MSG_PHONE_INVALID

    if is_field_active(F_RELEVANT_EXPERIENCE, position):
        if not is_positive_number(draft.relevant_experience):
            errors[F_RELEVANT_EXPERIENCE] = MSG_EXPERIENCE_INVALID

    if is_field_active(F_PORTFOLIO_URL, position):
        if _is_blank(draft.portfolio_url) or not is_valid_url(draft.portfolio_url):
            errors[F_PORTFOLIO_URL] = MSG_PORTFOLIO_INVALID

    if is_field_active(F_MANAGEMENT_EXPERIENCE, position):
        if _is_blank(draft.management_experience):
            errors[F_MANAGEMENT_EXPERIENCE] = MSG_MANAGEMENT_REQUIRED

    if not draft.additional_skills:
        errors[F_ADDITIONAL_SKILLS] = MSG_SKILLS_REQUIRED

    if _is_blank(draft.preferred_interview_time):
        errors[F_PREFERRED_INTERVIEW_TIME] = MSG_INTERVIEW_TIME_REQUIRED

    return errors
