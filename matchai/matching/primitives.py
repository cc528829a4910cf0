"""Set-overlap primitives shared by the scorer and the text generators."""

from matchai.profile.models import Profile
from matchai.utils.text_processing import normalize_term, term_keys


def shared_interests(a: Profile, b: Profile, policy: str = "exact") -> list[str]:
    """Interests of `a` that `b` also lists, in `a`'s order and spelling."""
    b_keys = term_keys(b.interests, policy)
    return [i for i in a.interests or [] if normalize_term(i, policy) in b_keys]


def complementary_skills(
    a: Profile,
    b: Profile,
    policy: str = "exact",
    strict: bool = False,
) -> list[str]:
    """Skills `a` offers that `b` lacks. Directional: A -> B.

    In strict mode a skill only counts when one of `b`'s goals mentions it.
    """
    b_keys = term_keys(b.skills, policy)
    skills = [s for s in a.skills or [] if normalize_term(s, policy) not in b_keys]

    if strict:
        goals = [g.lower() for g in b.goals or []]
        skills = [s for s in skills if any(s.lower() in g for g in goals)]

    return skills


def goal_alignment(a: Profile, b: Profile, policy: str = "exact") -> float:
    """Share of goals in common, relative to the longer goal list."""
    a_goals = a.goals or []
    b_goals = b.goals or []
    b_keys = term_keys(b_goals, policy)
    shared = [g for g in a_goals if normalize_term(g, policy) in b_keys]
    return len(shared) / max(len(a_goals), len(b_goals), 1)


def experience_proximity(a: Profile, b: Profile) -> bool:
    """True when both levels are on the scale and at most one step apart."""
    level_a, level_b = a.level, b.level
    if level_a is None or level_b is None:
        return False
    return abs(level_a - level_b) <= 1
