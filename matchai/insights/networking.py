"""Single-profile networking advice and summaries (deterministic)."""

from dataclasses import dataclass

from matchai.profile.models import Profile
from matchai.utils.text_processing import capitalize_first, join_terms

INSIGHT_COUNT = 3

GENERIC_EVENTS_INSIGHT = (
    "Attend industry events to meet professionals who share your expertise and interests."
)
GENERIC_GROUPS_INSIGHT = (
    "Join professional groups and communities to build meaningful connections."
)
GENERIC_MENTOR_INSIGHT = (
    "Look for mentors or peers who can help you achieve your professional goals."
)
PADDING_INSIGHT = (
    "Attend industry-specific events to expand your professional network "
    "and discover new opportunities."
)

DEFAULT_KEY_STRENGTH = "Professional expertise"


@dataclass(frozen=True)
class EnhancedSummary:
    summary: str
    key_strengths: tuple[str, ...] = ()
    networking_value: str = ""
    suggested_connections: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "key_strengths": list(self.key_strengths),
            "networking_value": self.networking_value,
            "suggested_connections": list(self.suggested_connections),
        }


def networking_insights(profile: Profile) -> list[str]:
    """Return exactly three pieces of advice for one profile."""
    skills = profile.skills or []
    interests = profile.interests or []
    goals = profile.goals or []

    insights = []

    if skills:
        insights.append(
            f"Focus on connecting with professionals who can help you develop "
            f"your {skills[0]} skills further."
        )
    else:
        insights.append(GENERIC_EVENTS_INSIGHT)

    if interests:
        insights.append(
            f"Seek out networking events and groups focused on {interests[0]} "
            "to meet like-minded professionals."
        )
    else:
        insights.append(GENERIC_GROUPS_INSIGHT)

    if goals:
        insights.append(
            f"Look for mentors or peers who have achieved similar goals to {goals[0].lower()}."
        )
    else:
        insights.append(GENERIC_MENTOR_INSIGHT)

    while len(insights) < INSIGHT_COUNT:
        insights.append(PADDING_INSIGHT)

    return insights[:INSIGHT_COUNT]


def profile_summary(profile: Profile) -> str:
    title = "Professional"
    if profile.experience_level:
        title = f"{capitalize_first(profile.experience_level)} professional"
    industry = profile.industry or "their field"
    skills = join_terms(profile.skills or []) or "various skills"
    return f"{title} in {industry} with expertise in {skills}."


def enhanced_summary(profile: Profile) -> EnhancedSummary:
    """Summary, strengths and connection suggestions for one profile."""
    experience = profile.experience_level or "professional"
    industry = profile.industry or "their field"
    skills = (profile.skills or [])[:3]
    interests = profile.interests or []

    first_skill = skills[0] if skills else ""
    first_interest = interests[0] if interests else "professional development"

    return EnhancedSummary(
        summary=profile_summary(profile),
        key_strengths=tuple(skills) or (DEFAULT_KEY_STRENGTH,),
        networking_value=(
            f"Brings {experience} experience in {industry} "
            f"with strong {first_skill or 'professional'} skills."
        ),
        suggested_connections=(
            f"Other {profile.industry} professionals" if profile.industry else "Industry professionals",
            f"People interested in {first_interest}",
            f"Mentors or mentees in {first_skill or 'their field'}",
        ),
    )
