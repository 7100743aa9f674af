from constants import (
    ALL_FIELDS,
    F_MANAGEMENT_EXPERIENCE,
    F_PORTFOLIO_URL,
    F_RELEVANT_EXPERIENCE,
)


# ============================================================
# Position -> extra fields shown and required
# ============================================================
CONDITIONAL_FIELDS: dict[str, tuple[str, ...]] = {
    "Developer": (F_RELEVANT_EXPERIENCE,),
    "Designer": (F_RELEVANT_EXPERIENCE, F_PORTFOLIO_URL),
    "Manager": (F_MANAGEMENT_EXPERIENCE,),
}

# Fields that appear in at least one row of the table above
POSITION_DEPENDENT_FIELDS = frozenset(f for fields in CONDITIONAL_FIELDS.values() for f in fields)


def conditional_fields(position: str) -> tuple[str, ...]:
    """Extra fields for a position; nothing for an empty or unknown position."""
    return CONDITIONAL_FIELDS.get(position or "", ())


def is_field_active(field: str, position: str) -> bool:
    """Whether a field is shown and validated for the selected position."""
    if field not in POSITION_DEPENDENT_FIELDS:
        return True
    return field in conditional_fields(position)


def visible_fields(position: str) -> list[str]:
    return [f for f in ALL_FIELDS if is_field_active(f, position)]
