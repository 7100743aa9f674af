import logging

from constants import SKILLS_CATALOG
from schema import SCALAR_FIELDS, ApplicationDraft
from validation import validate


class ApplicationForm:
    """One form session: the draft, the last error map and the summary flag.

    Update operations never validate; validation only runs on `submit`.
    """

    def __init__(self, draft: ApplicationDraft | None = None):
        self.draft = draft if draft is not None else ApplicationDraft()
        self.errors: dict[str, str] = {}
        self.summary_visible = False

    def set_field(self, name: str, value) -> None:
        if name not in SCALAR_FIELDS:
            raise KeyError(f"Unknown form field: {name}")
        setattr(self.draft, name, "" if value is None else str(value))

    def toggle_skill(self, skill: str, selected: bool) -> None:
        if skill not in SKILLS_CATALOG:
            raise ValueError(f"Skill not in catalog: {skill}")
        skills = self.draft.additional_skills
        if selected:
            if skill not in skills:
                skills.append(skill)
        elif skill in skills:
            skills.remove(skill)

    def submit(self) -> bool:
        """Validate the draft and reveal the summary only if nothing failed."""
        self.errors = validate(self.draft)
        if self.errors:
            self.summary_visible = False
            logging.info(f"⚠️ Application not submitted, invalid fields: {', '.join(self.errors)}")
            return False
        self.summary_visible = True
        logging.info(f"✅ Application submitted for position: {self.draft.position or '-'}")
        return True

    def dismiss_summary(self) -> None:
        self.summary_visible = False

    def reset(self) -> None:
        self.draft = ApplicationDraft()
        self.errors = {}
        self.summary_visible = False
