"""Match explanations and conversation starters (deterministic)."""

from matchai.matching.models import CompatibilityResult
from matchai.profile.models import Profile
from matchai.utils.text_processing import join_terms

STARTER_COUNT = 3


def explain(a: Profile, b: Profile, result: CompatibilityResult) -> str:
    """Describe why two profiles scored the way they did."""
    clauses = []
    if result.shared_interests:
        clauses.append(f"shared interests in {join_terms(list(result.shared_interests))}")
    if result.complementary_skills:
        clauses.append(f"complementary skills in {join_terms(list(result.complementary_skills))}")

    basis = " and ".join(clauses) if clauses else "complementary professional backgrounds"

    return (
        f"{result.score}% compatibility based on {basis}. "
        "Great potential for mutual learning and collaboration."
    )


def conversation_starters(a: Profile, b: Profile, shared: list[str]) -> list[str]:
    """Return exactly three opening lines `a` could send to `b`."""
    starters = []
    name = b.full_name or "there"

    if shared:
        starters.append(
            f"Hi {name}! I noticed we both have an interest in {shared[0]}. "
            f"I'd love to learn more about your work at {b.company or 'your company'}."
        )

    if b.industry:
        starters.append(
            f"Great to connect! I see you're working in {b.industry}. "
            "I'd be interested to hear your perspective on current trends."
        )

    if a.industry and b.industry and a.industry != b.industry:
        starters.append(
            f"Hi there! I work in {a.industry} and I'm curious about your experience "
            f"in {b.industry}. Would love to exchange insights!"
        )
    else:
        starters.append(
            "Hi there! Our profiles seem to complement each other well. "
            "Would you be open to a brief chat about our shared interests?"
        )

    while len(starters) < STARTER_COUNT:
        starters.append(
            f"Hi {name}! I'd love to connect and learn more about your experience "
            f"in {b.industry or 'your field'}."
        )

    return starters[:STARTER_COUNT]
