"""File-backed profile store (YAML or JSON)."""

import json
import logging
from pathlib import Path

import yaml

from matchai.profile.models import Profile

logger = logging.getLogger("matchai.profile")


class ProfileStore:
    """Read-only store of user profiles and event participant lists.

    Expected file layout::

        users:
          - id: u1
            full_name: Ada Lovelace
            interests: [AI, Mentoring]
        events:
          evt-1: [u1, u2, u3]
    """

    def __init__(self, users: list[Profile], events: dict[str, list[str]] | None = None):
        self._users: dict[str, Profile] = {}
        for profile in users:
            if not profile.id:
                logger.warning("Skipping profile without id: %s", profile.full_name or "<unnamed>")
                continue
            self._users[profile.id] = profile
        self._events = {str(k): [str(u) for u in (v or [])] for k, v in (events or {}).items()}

    @classmethod
    def from_file(cls, file_path: str) -> "ProfileStore":
        """Load a store from a .yaml/.yml or .json file."""
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Profile store not found: {file_path}")

        suffix = path.suffix.lower()
        with open(path, "r", encoding="utf-8") as f:
            if suffix in (".yaml", ".yml"):
                raw = yaml.safe_load(f) or {}
            elif suffix == ".json":
                raw = json.load(f)
            else:
                raise ValueError(f"Unsupported profile store format: {suffix} (supported: .yaml, .yml, .json)")

        if not isinstance(raw, dict):
            raise ValueError(f"Profile store must be a mapping with 'users' and 'events': {file_path}")

        users = [Profile.from_dict(u) for u in raw.get("users") or [] if isinstance(u, dict)]
        store = cls(users, raw.get("events") or {})
        logger.info("Loaded %d profiles and %d events from %s", len(store), len(store._events), path)
        return store

    def __len__(self) -> int:
        return len(self._users)

    def get(self, user_id: str) -> Profile:
        try:
            return self._users[str(user_id)]
        except KeyError:
            raise KeyError(f"Unknown user id: {user_id}") from None

    def event_participants(self, event_id: str, exclude: str | None = None) -> list[Profile]:
        """Profiles registered for an event, in registration order."""
        participants = []
        for user_id in self._events.get(str(event_id), []):
            if exclude is not None and user_id == str(exclude):
                continue
            profile = self._users.get(user_id)
            if profile is None:
                logger.warning("Event %s lists unknown user %s", event_id, user_id)
                continue
            participants.append(profile)
        return participants
