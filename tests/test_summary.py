import datetime
import json

from schema import ApplicationDraft
from streamlit_state import (
    experience_to_number,
    join_interview_time,
    number_to_experience,
    split_interview_time,
)
from summary import summary_json_bytes, summary_rows
from summary_pdf import create_summary_pdf


def _designer() -> ApplicationDraft:
    return ApplicationDraft(
        full_name="Jane Doe",
        email="jane@x.com",
        phone_number="5551234567",
        position="Designer",
        relevant_experience="4",
        portfolio_url="example.com",
        management_experience="stale",
        additional_skills=["CSS", "React"],
        preferred_interview_time="2024-01-01T10:00",
    )


def test_summary_rows_for_designer():
    rows = summary_rows(_designer())
    assert rows == [
        ("Full Name", "Jane Doe"),
        ("Email", "jane@x.com"),
        ("Phone Number", "5551234567"),
        ("Position", "Designer"),
        ("Relevant Experience", "4 years"),
        ("Portfolio URL", "example.com"),
        ("Additional Skills", "CSS, React"),
        ("Preferred Interview Time", "2024-01-01T10:00"),
    ]


def test_summary_json_skips_inactive_fields():
    data = json.loads(summary_json_bytes(_designer()).decode("utf-8"))
    assert "management_experience" not in data
    assert data["additional_skills"] == ["CSS", "React"]
    assert data["portfolio_url"] == "example.com"


def test_summary_pdf_bytes():
    pdf = create_summary_pdf(_designer())
    assert pdf.startswith(b"%PDF")


def test_summary_pdf_escapes_markup():
    draft = _designer()
    draft.full_name = "Jane <b>& Co"
    assert create_summary_pdf(draft).startswith(b"%PDF")


def test_interview_time_roundtrip_helpers():
    day, at = split_interview_time("2024-01-01T10:00")
    assert day == datetime.date(2024, 1, 1)
    assert at == datetime.time(10, 0)
    assert join_interview_time(day, at) == "2024-01-01T10:00"


def test_interview_time_half_filled_is_empty():
    assert join_interview_time(datetime.date(2024, 1, 1), None) == ""
    assert split_interview_time("") == (None, None)
    assert split_interview_time("tomorrow") == (None, None)


def test_experience_widget_conversion():
    assert experience_to_number("3") == 3
    assert experience_to_number("2.5") == 2.5
    assert experience_to_number("") is None
    assert number_to_experience(None) == ""
    assert number_to_experience(3.0) == "3"
    assert number_to_experience(-1) == "-1"
