"""Tests for the Supabase state repository."""

from dataclasses import dataclass, field

from nutritrack.adapters.supabase_state_repository import (
    STATE_TABLE,
    SupabaseStateRepository,
)


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    rows: list[dict[str, object]] = field(default_factory=list)
    last_payload: object | None = None
    last_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(  # type: ignore[no-untyped-def]
        self, payload, on_conflict: str = ""
    ) -> "FakeTable":
        self._action = "upsert"
        self.last_payload = payload
        self.last_conflict = on_conflict
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        if self._action == "select":
            return FakeResponse(self.rows)
        return FakeResponse([self.last_payload])


@dataclass
class FakeSupabase:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        return self.tables.setdefault(name, FakeTable(name))


def test_load_value_returns_stored_text() -> None:
    client = FakeSupabase()
    client.table(STATE_TABLE).rows = [{"value": "[]"}]
    repository = SupabaseStateRepository(client)

    assert repository.load_value("nutritrack_water_logs") == "[]"
    assert client.tables[STATE_TABLE].last_filters == [
        ("key", "nutritrack_water_logs")
    ]


def test_load_value_missing_row() -> None:
    repository = SupabaseStateRepository(FakeSupabase())

    assert repository.load_value("nutritrack_profile_v2") is None


def test_save_value_upserts_by_key() -> None:
    client = FakeSupabase()
    repository = SupabaseStateRepository(client)

    repository.save_value("nutritrack_weight_logs", "[]")

    table = client.tables[STATE_TABLE]
    assert table.last_conflict == "key"
    assert table.last_payload["key"] == "nutritrack_weight_logs"
    assert table.last_payload["value"] == "[]"
    assert "updated_at" in table.last_payload
