"""Tests for SQLite match storage."""

import os
import tempfile

import pytest

from matchai.matching.models import CompatibilityResult, MatchRecord
from matchai.storage.database import MatchDatabase


@pytest.fixture
def db():
    """Create a temporary database for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = os.path.join(tmpdir, "test.db")
        database = MatchDatabase(db_path)
        yield database
        database.close()


def make_record(user2_id="u2", score=78, event_id="evt-1") -> MatchRecord:
    return MatchRecord(
        user1_id="u1",
        user2_id=user2_id,
        event_id=event_id,
        result=CompatibilityResult(
            score=score,
            shared_interests=("AI",),
            complementary_skills=("Python",),
            goal_alignment=0.8,
            explanation="Good match.",
            conversation_starters=("One?", "Two?", "Three?"),
        ),
    )


class TestMatchDatabase:
    def test_upsert_and_read_back(self, db):
        db.upsert_matches([make_record()])
        rows = db.get_matches("evt-1")
        assert len(rows) == 1
        assert rows[0]["match_score"] == 78
        assert rows[0]["compatibility_factors"]["shared_interests"] == ["AI"]
        assert rows[0]["conversation_starters"] == ["One?", "Two?", "Three?"]
        assert rows[0]["status"] == "active"

    def test_upsert_is_idempotent_per_pair_and_event(self, db):
        db.upsert_matches([make_record(score=78)])
        db.upsert_matches([make_record(score=90)])
        rows = db.get_matches("evt-1")
        assert len(rows) == 1
        assert rows[0]["match_score"] == 90

    def test_same_pair_different_event(self, db):
        db.upsert_matches([make_record(event_id="evt-1"), make_record(event_id="evt-2")])
        assert len(db.get_matches("evt-1")) == 1
        assert len(db.get_matches("evt-2")) == 1

    def test_matches_sorted_by_score(self, db):
        db.upsert_matches([make_record("u2", 70), make_record("u3", 90), make_record("u4", 80)])
        assert [r["user2_id"] for r in db.get_matches("evt-1")] == ["u3", "u4", "u2"]

    def test_filter_by_user(self, db):
        db.upsert_matches([make_record("u2")])
        assert len(db.get_matches("evt-1", user_id="u2")) == 1
        assert db.get_matches("evt-1", user_id="u9") == []

    def test_record_run(self, db):
        db.record_run(user_id="u1", event_id="evt-1", candidates_scored=3, matches_found=2, ai_used=True)

        stats = db.get_stats()
        assert stats["total_runs"] == 1
        assert stats["last_run"]["candidates_scored"] == 3
        assert stats["last_run"]["ai_used"] is True

    def test_record_failed_run(self, db):
        db.record_run(error_message="Unknown user id: u9")

        stats = db.get_stats()
        assert stats["last_run"]["error_message"] == "Unknown user id: u9"

    def test_stats_empty_db(self, db):
        stats = db.get_stats()
        assert stats["total_matches"] == 0
        assert stats["average_score"] is None
        assert stats["total_runs"] == 0
        assert "last_run" not in stats

    def test_stats_by_event(self, db):
        db.upsert_matches([make_record("u2", 70), make_record("u3", 80, event_id="evt-2")])
        stats = db.get_stats()
        assert stats["by_event"] == {"evt-1": 1, "evt-2": 1}
        assert stats["average_score"] == 75.0
