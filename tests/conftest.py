from types import SimpleNamespace
from typing import Any

import pytest


class FakeQuery:
    """Chainable stand-in for a Supabase table query that records the calls made."""

    def __init__(self, table: "FakeTable") -> None:
        self.table = table
        self.filters: list[tuple[str, Any]] = []
        self.update_values: dict | None = None
        self.desc: bool | None = None

    def select(self, *_args, **_kwargs) -> "FakeQuery":
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeQuery":
        self.desc = desc
        return self

    def limit(self, _count: int) -> "FakeQuery":
        return self

    def update(self, values: dict) -> "FakeQuery":
        self.update_values = values
        return self

    def _matches(self, row: dict) -> bool:
        return all(str(row.get(column)) == str(value) for column, value in self.filters)

    def execute(self) -> SimpleNamespace:
        if self.table.error is not None:
            raise self.table.error
        matched = [row for row in self.table.rows if self._matches(row)]
        if self.update_values is not None:
            for row in matched:
                row.update(self.update_values)
        return SimpleNamespace(data=[dict(row) for row in matched])


class FakeTable:
    def __init__(self, rows: list[dict]) -> None:
        self.rows = rows
        self.error: Exception | None = None


class FakeFunctions:
    def __init__(self) -> None:
        self.invocations: list[tuple[str, dict]] = []

    def invoke(self, name: str, invoke_options: dict | None = None) -> None:
        self.invocations.append((name, invoke_options or {}))


class FakeSupabase:
    def __init__(self, tables: dict[str, list[dict]]) -> None:
        self.tables = {name: FakeTable(rows) for name, rows in tables.items()}
        self.functions = FakeFunctions()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self.tables.setdefault(name, FakeTable([])))


@pytest.fixture
def campus_tables() -> dict[str, list[dict]]:
    return {
        "profiles": [
            {"id": "cleaner-1", "location_lat": 7.3000, "location_lng": 5.1400, "full_name": "Ada"},
            {"id": "cleaner-2", "location_lat": None, "location_lng": None, "full_name": "Bola"},
        ],
        "waste_reports": [
            {
                "id": "r-far",
                "assigned_to": "cleaner-1",
                "location_lat": 7.3100,
                "location_lng": 5.1400,
                "location_address": "Library",
                "waste_type": "plastic",
                "severity": "low",
                "status": "in_progress",
            },
            {
                "id": "r-near",
                "assigned_to": "cleaner-1",
                "location_lat": 7.3010,
                "location_lng": 5.1400,
                "location_address": "Main gate",
                "waste_type": "organic",
                "severity": "high",
                "status": "pending",
            },
            {
                "id": "r-mid",
                "assigned_to": "cleaner-1",
                "location_lat": 7.3050,
                "location_lng": 5.1400,
                "location_address": "Hostel",
                "waste_type": "mixed",
                "severity": "medium",
                "status": "pending",
            },
            {
                "id": "r-done",
                "assigned_to": "cleaner-1",
                "location_lat": 7.3020,
                "location_lng": 5.1400,
                "status": "resolved",
            },
            {
                "id": "r-broken",
                "assigned_to": "cleaner-1",
                "location_lat": None,
                "location_lng": 5.1400,
                "status": "pending",
            },
            {
                "id": "r-other",
                "assigned_to": "cleaner-2",
                "location_lat": 7.3000,
                "location_lng": 5.1450,
                "status": "pending",
            },
        ],
    }


@pytest.fixture
def fake_supabase(monkeypatch: pytest.MonkeyPatch, campus_tables) -> FakeSupabase:
    from wasteroute.persistence import database

    client = FakeSupabase(campus_tables)
    monkeypatch.setattr(database, "get_supabase_client", lambda: client)
    return client
