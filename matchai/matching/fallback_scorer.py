"""Deterministic compatibility scoring (default, no external AI)."""

import dataclasses
import logging

from matchai.matching.explain import conversation_starters, explain
from matchai.matching.models import CompatibilityResult
from matchai.matching.primitives import complementary_skills, shared_interests
from matchai.profile.models import Profile

logger = logging.getLogger("matchai.matching.fallback")

# Scoring weights
BASE_SCORE = 70
POINTS_PER_SHARED_INTEREST = 5
POINTS_PER_COMPLEMENTARY_SKILL = 3
# Ceiling below 100: a heuristic score never claims a perfect match
MAX_SCORE = 95

# Reported alignment when no AI analysis is available
ALIGNMENT_WITH_SHARED_INTERESTS = 0.8
ALIGNMENT_WITHOUT_SHARED_INTERESTS = 0.6

DEFAULT_MATCH_THRESHOLD = 60


def score_compatibility(
    a: Profile,
    b: Profile,
    policy: str = "exact",
    strict_complementary: bool = False,
) -> CompatibilityResult:
    """Score `a` against `b`.

    The score is 70 plus 5 per shared interest plus 3 per skill `a` offers
    that `b` lacks, capped at 95.
    """
    shared = shared_interests(a, b, policy)
    complementary = complementary_skills(a, b, policy, strict=strict_complementary)

    score = BASE_SCORE
    score += POINTS_PER_SHARED_INTEREST * len(shared)
    score += POINTS_PER_COMPLEMENTARY_SKILL * len(complementary)
    score = max(0, min(score, MAX_SCORE))

    result = CompatibilityResult(
        score=score,
        shared_interests=tuple(shared),
        complementary_skills=tuple(complementary),
        goal_alignment=(
            ALIGNMENT_WITH_SHARED_INTERESTS if shared else ALIGNMENT_WITHOUT_SHARED_INTERESTS
        ),
        conversation_starters=tuple(conversation_starters(a, b, shared)),
    )
    result = dataclasses.replace(result, explanation=explain(a, b, result))

    logger.debug(
        "Fallback scored %s -> %s: %d (%d shared, %d complementary)",
        a.id or a.full_name, b.id or b.full_name, score, len(shared), len(complementary),
    )
    return result


def is_match(result: CompatibilityResult, threshold: int = DEFAULT_MATCH_THRESHOLD) -> bool:
    """A pair qualifies only when its score is strictly above the threshold."""
    return result.score > threshold
