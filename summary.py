import json

from constants import (
    F_ADDITIONAL_SKILLS,
    F_RELEVANT_EXPERIENCE,
    FIELD_LABELS,
)
from form_policy import visible_fields
from schema import ApplicationDraft


def _display_value(field: str, value) -> str:
    if field == F_ADDITIONAL_SKILLS:
        return ", ".join(value or [])
    if field == F_RELEVANT_EXPERIENCE:
        return f"{value} years"
    return str(value or "")


def summary_rows(draft: ApplicationDraft) -> list[tuple[str, str]]:
    """Label/value pairs for the summary panel, in form order.

    Conditional fields appear only when the selected position uses them,
    so stale values from another position are not echoed.
    """
    return [
        (FIELD_LABELS[f], _display_value(f, getattr(draft, f)))
        for f in visible_fields(draft.position)
    ]


def summary_json_bytes(draft: ApplicationDraft) -> bytes:
    data = {f: getattr(draft, f) for f in visible_fields(draft.position)}
    return json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")
