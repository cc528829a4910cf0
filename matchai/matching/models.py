"""Match result data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CompatibilityResult:
    """Outcome of comparing two profiles. Never mutated once built."""

    score: int
    shared_interests: tuple[str, ...] = ()
    complementary_skills: tuple[str, ...] = ()
    goal_alignment: float = 0.0
    explanation: str = ""
    conversation_starters: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "compatibility_score": self.score,
            "shared_interests": list(self.shared_interests),
            "complementary_skills": list(self.complementary_skills),
            "goal_alignment": self.goal_alignment,
            "explanation": self.explanation,
            "conversation_starters": list(self.conversation_starters),
        }


@dataclass(frozen=True)
class MatchRecord:
    """A qualifying pair within an event, ready for persistence."""

    user1_id: str
    user2_id: str
    event_id: str
    result: CompatibilityResult
    status: str = "active"

    @property
    def match_score(self) -> int:
        return self.result.score

    def to_dict(self) -> dict:
        """Convert to the row shape stored by the match table."""
        return {
            "user1_id": self.user1_id,
            "user2_id": self.user2_id,
            "event_id": self.event_id,
            "match_score": self.result.score,
            "compatibility_factors": {
                "shared_interests": list(self.result.shared_interests),
                "complementary_skills": list(self.result.complementary_skills),
                "goal_alignment": self.result.goal_alignment,
            },
            "ai_explanation": self.result.explanation,
            "conversation_starters": list(self.result.conversation_starters),
            "status": self.status,
        }
