"""Matching service facade: external AI when available, deterministic fallback otherwise."""

import logging
import math
from typing import Callable, Optional, TypeVar

from matchai.ai import prompts
from matchai.ai.gemini_client import AIResponseError, AIUnavailableError, GeminiClient
from matchai.ai.parsing import extract_json_array, extract_json_object, extract_lines, string_list
from matchai.config import AppConfig
from matchai.insights.networking import (
    INSIGHT_COUNT,
    EnhancedSummary,
    enhanced_summary,
    networking_insights,
    profile_summary,
)
from matchai.matching.explain import STARTER_COUNT, conversation_starters
from matchai.matching.fallback_scorer import score_compatibility
from matchai.matching.models import CompatibilityResult
from matchai.matching.primitives import goal_alignment, shared_interests
from matchai.profile.models import Profile

logger = logging.getLogger("matchai.service")

CompletionFn = Callable[[str], str]
T = TypeVar("T")


def _pad(items: list[str], fallback: list[str], count: int) -> list[str]:
    """Top `items` up to `count` entries using unused fallback entries."""
    padded = list(items[:count])
    for item in fallback:
        if len(padded) >= count:
            break
        if item not in padded:
            padded.append(item)
    while len(padded) < count:
        padded.append(fallback[-1])
    return padded


def _number(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise AIResponseError(f"'{name}' missing or not numeric")
    try:
        result = float(value)
    except ValueError as e:
        raise AIResponseError(f"'{name}' is not numeric: {value!r}") from e
    # json.loads accepts NaN and Infinity literals
    if not math.isfinite(result):
        raise AIResponseError(f"'{name}' is not finite: {value!r}")
    return result


class MatchingService:
    """Runs each operation through the injected completion strategy.

    With no strategy, or when a call or its parsing fails, the
    deterministic engine answers instead with the same return type.
    """

    def __init__(
        self,
        completion: Optional[CompletionFn] = None,
        normalization: str = "exact",
        strict_complementary: bool = False,
    ):
        self.completion = completion
        self.normalization = normalization
        self.strict_complementary = strict_complementary

    @classmethod
    def from_config(cls, config: AppConfig) -> "MatchingService":
        try:
            completion: Optional[CompletionFn] = GeminiClient.from_config(config)
        except AIUnavailableError as e:
            # Turning AI off is a choice, a missing key is not
            log = logger.info if not config.ai.enabled else logger.warning
            log("%s Using fallback algorithms.", e)
            completion = None
        return cls(
            completion=completion,
            normalization=config.matching.normalization,
            strict_complementary=config.matching.strict_complementary,
        )

    @property
    def ai_available(self) -> bool:
        return self.completion is not None

    def _ask(
        self,
        operation: str,
        prompt: Callable[[], str],
        parse: Callable[[str], T],
        fallback: Callable[[], T],
    ) -> T:
        if self.completion is None:
            logger.debug("AI unavailable for %s, using fallback", operation)
            return fallback()

        try:
            return parse(self.completion(prompt()))
        except Exception as e:
            logger.warning("AI %s errored, using fallback: %s", operation, e)
            return fallback()

    # Pair operations

    def fallback_analysis(self, a: Profile, b: Profile) -> CompatibilityResult:
        return score_compatibility(
            a, b,
            policy=self.normalization,
            strict_complementary=self.strict_complementary,
        )

    def analyze_compatibility(self, a: Profile, b: Profile) -> CompatibilityResult:
        return self._ask(
            "compatibility analysis",
            lambda: prompts.compatibility_prompt(a, b),
            lambda text: self._result_from_ai(extract_json_object(text), a, b),
            lambda: self.fallback_analysis(a, b),
        )

    def _result_from_ai(self, data: dict, a: Profile, b: Profile) -> CompatibilityResult:
        score = _number(data.get("compatibility_score"), "compatibility_score")
        shared = string_list(data.get("shared_interests"))

        alignment = data.get("goal_alignment")
        if alignment is None:
            alignment = goal_alignment(a, b, self.normalization)
        alignment = max(0.0, min(1.0, _number(alignment, "goal_alignment")))

        fallback_starters = conversation_starters(
            a, b, shared or shared_interests(a, b, self.normalization)
        )
        starters = _pad(
            string_list(data.get("conversation_starters"), limit=STARTER_COUNT),
            fallback_starters,
            STARTER_COUNT,
        )

        explanation = str(data.get("explanation") or "").strip()

        result = CompatibilityResult(
            score=int(round(max(0.0, min(100.0, score)))),
            shared_interests=tuple(shared),
            complementary_skills=tuple(string_list(data.get("complementary_skills"))),
            goal_alignment=round(alignment, 3),
            explanation=explanation or "Compatibility analysis unavailable",
            conversation_starters=tuple(starters),
        )
        logger.debug("AI scored %s -> %s: %d", a.id, b.id, result.score)
        return result

    def suggest_conversation_starters(
        self, a: Profile, b: Profile, shared: list[str]
    ) -> list[str]:
        fallback = conversation_starters(a, b, shared)

        def parse(text: str) -> list[str]:
            try:
                starters = string_list(extract_json_array(text), limit=STARTER_COUNT)
            except AIResponseError:
                starters = extract_lines(text)
                if len(starters) < STARTER_COUNT:
                    raise
            return _pad(starters, fallback, STARTER_COUNT)

        return self._ask(
            "conversation starters",
            lambda: prompts.starters_prompt(a, b, shared),
            parse,
            lambda: fallback,
        )

    # Single-profile operations

    def generate_profile_summary(self, profile: Profile) -> str:
        def parse(text: str) -> str:
            summary = text.strip()
            if not summary:
                raise AIResponseError("Empty summary")
            return summary

        return self._ask(
            "profile summary",
            lambda: prompts.summary_prompt(profile),
            parse,
            lambda: profile_summary(profile),
        )

    def generate_enhanced_summary(self, profile: Profile) -> EnhancedSummary:
        fallback = enhanced_summary(profile)

        def parse(text: str) -> EnhancedSummary:
            data = extract_json_object(text)
            return EnhancedSummary(
                summary=str(data.get("summary") or "").strip() or fallback.summary,
                key_strengths=tuple(
                    string_list(data.get("key_strengths"), limit=4) or fallback.key_strengths
                ),
                networking_value=(
                    str(data.get("networking_value") or "").strip() or fallback.networking_value
                ),
                suggested_connections=tuple(_pad(
                    string_list(data.get("suggested_connections"), limit=3),
                    list(fallback.suggested_connections),
                    3,
                )),
            )

        return self._ask(
            "enhanced summary",
            lambda: prompts.enhanced_summary_prompt(profile),
            parse,
            lambda: fallback,
        )

    def generate_networking_insights(self, profile: Profile) -> list[str]:
        fallback = networking_insights(profile)
        return self._ask(
            "networking insights",
            lambda: prompts.insights_prompt(profile),
            lambda text: _pad(
                string_list(extract_json_array(text), limit=INSIGHT_COUNT),
                fallback,
                INSIGHT_COUNT,
            ),
            lambda: fallback,
        )
