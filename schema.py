from dataclasses import asdict, dataclass, field, fields

from constants import F_ADDITIONAL_SKILLS


# ============================================================
# Application draft record
# ============================================================
@dataclass
class ApplicationDraft:
    """The in-progress, unsubmitted application.

    Every value is kept exactly as the UI delivered it; nothing is trimmed or
    coerced here. `additional_skills` keeps the order in which skills were picked.
    """

    full_name: str = ""
    email: str = ""
    phone_number: str = ""
    position: str = ""
    relevant_experience: str = ""
    portfolio_url: str = ""
    management_experience: str = ""
    additional_skills: list[str] = field(default_factory=list)
    preferred_interview_time: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


SCALAR_FIELDS = frozenset(
    f.name for f in fields(ApplicationDraft) if f.name != F_ADDITIONAL_SKILLS
)
