"""SQLite storage for event matches and run history."""

import json
import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from matchai.matching.models import MatchRecord

logger = logging.getLogger("matchai.storage")


class MatchDatabase:
    """SQLite database for persisting matches and matching runs."""

    def __init__(self, db_path: str = "data/matches.db"):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn: Optional[sqlite3.Connection] = None
        self._connect()
        self._create_tables()

    def _connect(self):
        self.conn = sqlite3.connect(str(self.db_path))
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA journal_mode=WAL")

    def _create_tables(self):
        self.conn.executescript("""
            CREATE TABLE IF NOT EXISTS matches (
                user1_id TEXT NOT NULL,
                user2_id TEXT NOT NULL,
                event_id TEXT NOT NULL,
                match_score INTEGER NOT NULL,
                compatibility_factors TEXT NOT NULL DEFAULT '{}',
                ai_explanation TEXT DEFAULT '',
                conversation_starters TEXT NOT NULL DEFAULT '[]',
                status TEXT NOT NULL DEFAULT 'active',
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                PRIMARY KEY (user1_id, user2_id, event_id)
            );

            CREATE TABLE IF NOT EXISTS run_history (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                run_at TEXT NOT NULL,
                user_id TEXT DEFAULT NULL,
                event_id TEXT DEFAULT NULL,
                candidates_scored INTEGER DEFAULT 0,
                matches_found INTEGER DEFAULT 0,
                ai_used INTEGER DEFAULT 0,
                error_message TEXT DEFAULT NULL
            );

            CREATE INDEX IF NOT EXISTS idx_matches_event
                ON matches(event_id);
        """)
        self.conn.commit()

    def upsert_matches(self, records: list[MatchRecord]) -> int:
        """Insert or refresh matches keyed by (user1_id, user2_id, event_id)."""
        now = datetime.now().isoformat()
        for record in records:
            row = record.to_dict()
            self.conn.execute(
                """INSERT INTO matches
                   (user1_id, user2_id, event_id, match_score, compatibility_factors,
                    ai_explanation, conversation_starters, status, created_at, updated_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                   ON CONFLICT(user1_id, user2_id, event_id) DO UPDATE SET
                       match_score = excluded.match_score,
                       compatibility_factors = excluded.compatibility_factors,
                       ai_explanation = excluded.ai_explanation,
                       conversation_starters = excluded.conversation_starters,
                       status = excluded.status,
                       updated_at = excluded.updated_at""",
                (
                    row["user1_id"], row["user2_id"], row["event_id"], row["match_score"],
                    json.dumps(row["compatibility_factors"]),
                    row["ai_explanation"],
                    json.dumps(row["conversation_starters"]),
                    row["status"], now, now,
                ),
            )
        self.conn.commit()
        logger.debug("Upserted %d matches", len(records))
        return len(records)

    def get_matches(self, event_id: str, user_id: Optional[str] = None) -> list[dict]:
        """Stored matches for an event, highest score first."""
        query = "SELECT * FROM matches WHERE event_id = ?"
        params: list = [event_id]
        if user_id is not None:
            query += " AND (user1_id = ? OR user2_id = ?)"
            params.extend([user_id, user_id])
        query += " ORDER BY match_score DESC, user2_id"

        rows = self.conn.execute(query, params).fetchall()
        return [
            {
                "user1_id": row["user1_id"],
                "user2_id": row["user2_id"],
                "event_id": row["event_id"],
                "match_score": row["match_score"],
                "compatibility_factors": json.loads(row["compatibility_factors"]),
                "ai_explanation": row["ai_explanation"],
                "conversation_starters": json.loads(row["conversation_starters"]),
                "status": row["status"],
            }
            for row in rows
        ]

    def record_run(
        self,
        user_id: Optional[str] = None,
        event_id: Optional[str] = None,
        candidates_scored: int = 0,
        matches_found: int = 0,
        ai_used: bool = False,
        error_message: Optional[str] = None,
    ):
        """Record a matching run in history."""
        self.conn.execute(
            """INSERT INTO run_history
               (run_at, user_id, event_id, candidates_scored, matches_found, ai_used, error_message)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (
                datetime.now().isoformat(),
                user_id,
                event_id,
                candidates_scored,
                matches_found,
                1 if ai_used else 0,
                error_message,
            ),
        )
        self.conn.commit()

    def get_stats(self) -> dict:
        """Get database statistics."""
        stats = {}

        row = self.conn.execute("SELECT COUNT(*) as cnt FROM matches").fetchone()
        stats["total_matches"] = row["cnt"]

        row = self.conn.execute("SELECT AVG(match_score) as avg FROM matches").fetchone()
        stats["average_score"] = round(row["avg"], 1) if row["avg"] is not None else None

        row = self.conn.execute("SELECT COUNT(*) as cnt FROM run_history").fetchone()
        stats["total_runs"] = row["cnt"]

        row = self.conn.execute(
            "SELECT * FROM run_history ORDER BY id DESC LIMIT 1"
        ).fetchone()
        if row:
            stats["last_run"] = {
                "run_at": row["run_at"],
                "user_id": row["user_id"],
                "event_id": row["event_id"],
                "candidates_scored": row["candidates_scored"],
                "matches_found": row["matches_found"],
                "ai_used": bool(row["ai_used"]),
                "error_message": row["error_message"],
            }

        rows = self.conn.execute(
            "SELECT event_id, COUNT(*) as cnt FROM matches GROUP BY event_id"
        ).fetchall()
        stats["by_event"] = {row["event_id"]: row["cnt"] for row in rows}

        return stats

    def close(self):
        if self.conn:
            self.conn.close()
            self.conn = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
