"""Tests for single-profile insights and summaries."""

from matchai.insights.networking import (
    DEFAULT_KEY_STRENGTH,
    GENERIC_EVENTS_INSIGHT,
    GENERIC_GROUPS_INSIGHT,
    GENERIC_MENTOR_INSIGHT,
    enhanced_summary,
    networking_insights,
    profile_summary,
)
from matchai.profile.models import Profile


def full_profile() -> Profile:
    return Profile(
        full_name="Ada",
        industry="Fintech",
        experience_level="senior",
        interests=["Open Banking", "AI"],
        skills=["Python", "Risk Modeling", "SQL", "Leadership"],
        goals=["Find A Cofounder"],
    )


class TestNetworkingInsights:
    def test_references_first_items(self):
        insights = networking_insights(full_profile())
        assert len(insights) == 3
        assert "Python" in insights[0]
        assert "Open Banking" in insights[1]
        assert insights[2].endswith("find a cofounder.")

    def test_empty_profile_gets_generic_advice(self):
        insights = networking_insights(Profile())
        assert insights == [GENERIC_EVENTS_INSIGHT, GENERIC_GROUPS_INSIGHT, GENERIC_MENTOR_INSIGHT]
        assert all(s.strip() for s in insights)

    def test_none_fields(self):
        insights = networking_insights(Profile(skills=None, interests=None, goals=None))
        assert len(insights) == 3

    def test_partial_profile(self):
        insights = networking_insights(Profile(interests=["Climate"]))
        assert insights[0] == GENERIC_EVENTS_INSIGHT
        assert "Climate" in insights[1]
        assert insights[2] == GENERIC_MENTOR_INSIGHT


class TestProfileSummary:
    def test_summary(self):
        assert profile_summary(full_profile()) == (
            "Senior professional in Fintech with expertise in Python and Risk Modeling."
        )

    def test_empty_profile(self):
        assert profile_summary(Profile()) == (
            "Professional in their field with expertise in various skills."
        )


class TestEnhancedSummary:
    def test_full_profile(self):
        summary = enhanced_summary(full_profile())
        assert summary.summary == profile_summary(full_profile())
        assert summary.key_strengths == ("Python", "Risk Modeling", "SQL")
        assert summary.networking_value == (
            "Brings senior experience in Fintech with strong Python skills."
        )
        assert summary.suggested_connections == (
            "Other Fintech professionals",
            "People interested in Open Banking",
            "Mentors or mentees in Python",
        )

    def test_empty_profile_defaults(self):
        summary = enhanced_summary(Profile())
        assert summary.key_strengths == (DEFAULT_KEY_STRENGTH,)
        assert len(summary.suggested_connections) == 3
        assert summary.suggested_connections[0] == "Industry professionals"
        assert "professional development" in summary.suggested_connections[1]
        assert "their field" in summary.suggested_connections[2]

    def test_to_dict(self):
        d = enhanced_summary(full_profile()).to_dict()
        assert set(d) == {"summary", "key_strengths", "networking_value", "suggested_connections"}
        assert isinstance(d["key_strengths"], list)
