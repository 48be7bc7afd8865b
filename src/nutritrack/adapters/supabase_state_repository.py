"""Supabase repository for serialized tracker state."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutritrack.services.state import StateRepository

STATE_TABLE = "app_state"


@dataclass
class SupabaseStateRepository(StateRepository):
    """Stores each state document as a row keyed by its storage key."""

    client: Client

    def load_value(self, key: str) -> str | None:
        """Return the stored JSON text for a key."""
        response = (
            self.client.table(STATE_TABLE)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        return value if isinstance(value, str) else None

    def save_value(self, key: str, value: str) -> None:
        """Insert or replace the JSON text for a key."""
        self.client.table(STATE_TABLE).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()
