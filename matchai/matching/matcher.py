"""Batch matching: score one user against every other event participant."""

import logging
from concurrent.futures import ThreadPoolExecutor

from matchai.matching.fallback_scorer import DEFAULT_MATCH_THRESHOLD, is_match
from matchai.matching.models import MatchRecord
from matchai.profile.models import Profile
from matchai.service import MatchingService

logger = logging.getLogger("matchai.matching")


def score_candidates(
    user: Profile,
    candidates: list[Profile],
    service: MatchingService,
    event_id: str,
    threshold: int = DEFAULT_MATCH_THRESHOLD,
    max_workers: int = 1,
) -> list[MatchRecord]:
    """Score `user` against each candidate and keep those above the threshold.

    Records come back in candidate order. A candidate whose scoring raises
    is logged and skipped; the rest of the batch still completes.
    """
    if service.ai_available:
        logger.info("Using AI matching for %d candidates (fallback on error)", len(candidates))
    else:
        logger.info("Using fallback matching for %d candidates", len(candidates))

    if user.id:
        candidates = [c for c in candidates if c.id != user.id]

    if max_workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [pool.submit(service.analyze_compatibility, user, c) for c in candidates]
            outcomes = []
            for candidate, future in zip(candidates, futures):
                try:
                    outcomes.append((candidate, future.result()))
                except Exception as e:
                    logger.warning("Error analyzing compatibility for user %s: %s", candidate.id, e)
    else:
        outcomes = []
        for candidate in candidates:
            try:
                outcomes.append((candidate, service.analyze_compatibility(user, candidate)))
            except Exception as e:
                logger.warning("Error analyzing compatibility for user %s: %s", candidate.id, e)

    matched = [
        MatchRecord(user1_id=user.id, user2_id=candidate.id, event_id=event_id, result=result)
        for candidate, result in outcomes
        if is_match(result, threshold)
    ]

    logger.info(
        "Matched %d/%d candidates above threshold %d",
        len(matched), len(candidates), threshold,
    )

    return matched
