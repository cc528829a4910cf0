"""Profile data model."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

from matchai.utils.text_processing import truncate


class ExperienceLevel(IntEnum):
    """Canonical ordered experience scale."""

    ENTRY = 1
    MID = 2
    SENIOR = 3
    EXECUTIVE = 4

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ExperienceLevel"]:
        """Map a stored level onto the scale. Unknown values have no ordinal."""
        if not value:
            return None
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            return None


def _clean_terms(values: Any) -> list[str]:
    """Coerce a stored list field into unique, non-empty strings in original order."""
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    elif not isinstance(values, Iterable):
        values = [values]

    terms = []
    for value in values:
        if value is None:
            continue
        text = str(value).strip()
        if text:
            terms.append(text)
    return list(dict.fromkeys(terms))


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass
class Profile:
    """A participant's professional profile, used as scoring input."""

    id: str = ""
    full_name: str = ""
    bio: str = ""
    company: str = ""
    position: str = ""
    industry: str = ""
    interests: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    goals: list[str] = field(default_factory=list)
    experience_level: str = ""

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Profile":
        """Build a profile from a store record, defaulting every missing field."""
        data = data or {}
        return cls(
            id=_clean_text(data.get("id")),
            full_name=_clean_text(data.get("full_name") or data.get("name")),
            bio=_clean_text(data.get("bio")),
            company=_clean_text(data.get("company")),
            position=_clean_text(data.get("position")),
            industry=_clean_text(data.get("industry")),
            interests=_clean_terms(data.get("interests")),
            skills=_clean_terms(data.get("skills")),
            goals=_clean_terms(data.get("goals")),
            experience_level=_clean_text(data.get("experience_level")).lower(),
        )

    @property
    def level(self) -> Optional[ExperienceLevel]:
        return ExperienceLevel.parse(self.experience_level)

    def to_prompt_string(self) -> str:
        """Render the profile as the text block sent to the AI model."""
        return "\n".join([
            f"Name: {self.full_name or 'Unknown'}",
            f"Bio: {truncate(self.bio, 500) if self.bio else 'No bio provided'}",
            f"Company: {self.company or 'Not specified'}",
            f"Position: {self.position or 'Not specified'}",
            f"Industry: {self.industry or 'Not specified'}",
            f"Interests: {', '.join(self.interests or [])}",
            f"Skills: {', '.join(self.skills or [])}",
            f"Goals: {', '.join(self.goals or [])}",
            f"Experience: {self.experience_level or 'Not specified'}",
        ])
