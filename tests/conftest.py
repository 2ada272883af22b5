"""
Shared fixtures: an in-memory stand-in for the Supabase async client and a
change feed the tests can push events through.
"""

import copy
import datetime
import itertools
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from postgrest import APIError

from opsdesk.config import Settings
from opsdesk.domain.services.auth_service import StaticSessionProvider
from opsdesk.infrastructure.realtime.feed import ChangeFeed
from opsdesk.infrastructure.repositories import (
    SupabaseClientRepository,
    SupabaseCredentialRepository,
    SupabaseExpenseRepository,
    SupabaseIncomeRepository,
)


class FakeResponse:
    """Shape of a postgrest APIResponse as far as the repositories read it."""

    def __init__(self, data: List[Dict[str, Any]], count: Optional[int] = None):
        self.data = data
        self.count = count


class FakeQuery:
    """Chainable query builder recording what was asked of it."""

    def __init__(self, backend: "FakeSupabase", table: str):
        self.backend = backend
        self.table = table
        self.operation = "select"
        self.columns = "*"
        self.count_mode: Optional[str] = None
        self.head = False
        self.payload: Any = None
        self.filters: List[tuple] = []
        self.ordering: Optional[tuple] = None
        self.row_limit: Optional[int] = None

    def select(self, columns: str = "*", count: Optional[str] = None, head: bool = False):
        self.operation = "select"
        self.columns = columns
        self.count_mode = count
        self.head = head
        return self

    def insert(self, row):
        self.operation = "insert"
        self.payload = row
        return self

    def update(self, patch):
        self.operation = "update"
        self.payload = patch
        return self

    def delete(self):
        self.operation = "delete"
        return self

    def _filter(self, op: str, column: str, value: Any):
        self.filters.append((op, column, value))
        return self

    def eq(self, column, value):
        return self._filter("eq", column, value)

    def gte(self, column, value):
        return self._filter("gte", column, value)

    def lte(self, column, value):
        return self._filter("lte", column, value)

    def lt(self, column, value):
        return self._filter("lt", column, value)

    def ilike(self, column, pattern):
        return self._filter("ilike", column, pattern)

    def order(self, column, desc: bool = False):
        self.ordering = (column, desc)
        return self

    def limit(self, size: int):
        self.row_limit = size
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        for op, column, value in self.filters:
            current = row.get(column)
            if op == "eq":
                if current is None or str(current) != str(value):
                    return False
            elif op == "ilike":
                needle = str(value).strip("%").lower()
                if current is None or needle not in str(current).lower():
                    return False
            else:
                if current is None:
                    return False
                left, right = str(current), str(value)
                if op == "gte" and not left >= right:
                    return False
                if op == "lte" and not left <= right:
                    return False
                if op == "lt" and not left < right:
                    return False
        return True

    async def execute(self) -> FakeResponse:
        self.backend.executed.append(self)
        error = self.backend.failures.get(self.table)
        if error is not None:
            raise APIError(dict(error))
        return self.backend.run(self)


class FakeSupabase:
    """
    In-memory Supabase client.

    Tables are lists of row dicts; `upcoming_renewals` is derived from the
    credentials table the way the database view does it.
    """

    def __init__(self, today: Optional[datetime.date] = None):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.failures: Dict[str, Dict[str, str]] = {}
        self.executed: List[FakeQuery] = []
        self.today = today or datetime.date.today()
        self._ids = itertools.count(1)
        self._clock = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
        self.auth = MagicMock()
        self.auth.get_session = AsyncMock(return_value=None)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def fail(self, table: str, message: str = "permission denied", code: str = "42501") -> None:
        self.failures[table] = {"message": message, "code": code}

    def seed(self, table: str, **row) -> Dict[str, Any]:
        stored = self._stamp(row)
        self.tables.setdefault(table, []).append(stored)
        return copy.deepcopy(stored)

    def rows(self, table: str) -> List[Dict[str, Any]]:
        return self.tables.setdefault(table, [])

    def last(self, table: str) -> FakeQuery:
        return [q for q in self.executed if q.table == table][-1]

    def _stamp(self, row: Dict[str, Any]) -> Dict[str, Any]:
        stored = dict(row)
        if stored.get("id") is None:
            stored["id"] = next(self._ids)
        if stored.get("created_at") is None:
            self._clock += datetime.timedelta(seconds=1)
            stored["created_at"] = self._clock.isoformat()
        return stored

    def _source(self, table: str) -> List[Dict[str, Any]]:
        if table != "upcoming_renewals":
            return self.rows(table)
        view = []
        for row in self.rows("credentials"):
            if not row.get("expiry"):
                continue
            days_left = (datetime.date.fromisoformat(row["expiry"]) - self.today).days
            if days_left <= 30:
                view.append({
                    "client_name": row.get("client_name"),
                    "type": row.get("type"),
                    "provider": row.get("provider"),
                    "service_name": row.get("service_name"),
                    "expiry": row["expiry"],
                    "days_left": days_left,
                })
        return view

    def run(self, query: FakeQuery) -> FakeResponse:
        if query.operation == "insert":
            payload = query.payload if isinstance(query.payload, list) else [query.payload]
            created = [self._stamp(row) for row in payload]
            self.rows(query.table).extend(created)
            return FakeResponse(copy.deepcopy(created))

        matched = [row for row in self._source(query.table) if query._matches(row)]

        if query.operation == "update":
            for row in matched:
                row.update(query.payload)
            return FakeResponse(copy.deepcopy(matched))

        if query.operation == "delete":
            self.tables[query.table] = [row for row in self.rows(query.table) if row not in matched]
            return FakeResponse(copy.deepcopy(matched))

        if query.ordering:
            column, desc = query.ordering
            matched = sorted(matched, key=lambda r: str(r.get(column) or ""), reverse=desc)
        total = len(matched)
        if query.row_limit is not None:
            matched = matched[:query.row_limit]
        count = total if query.count_mode == "exact" else None
        return FakeResponse([] if query.head else copy.deepcopy(matched), count)


class FakeChangeFeed(ChangeFeed):
    """Change feed driven by the test through `emit`."""

    def __init__(self):
        self.subscriptions: Dict[int, tuple] = {}
        self.unsubscribed: List[int] = []
        self._handles = itertools.count(1)

    async def subscribe(self, table: str, callback: Callable[[Any], None]) -> int:
        handle = next(self._handles)
        self.subscriptions[handle] = (table, callback)
        return handle

    async def unsubscribe(self, handle: int) -> None:
        self.subscriptions.pop(handle, None)
        self.unsubscribed.append(handle)

    def emit(self, table: str, event_type: str, new: Optional[dict] = None, old: Optional[dict] = None) -> None:
        payload = {
            "data": {
                "table": table,
                "type": event_type,
                "record": new,
                "old_record": old,
            }
        }
        for subscribed_table, callback in list(self.subscriptions.values()):
            if subscribed_table == table:
                callback(payload)


@pytest.fixture
def settings():
    return Settings(
        environment="testing",
        supabase_jwt_secret="test-secret",
        default_list_limit=200,
        max_list_limit=1000,
    )


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def session_provider():
    return StaticSessionProvider("user-1")


@pytest.fixture
def client_repository(fake_supabase, session_provider, settings):
    return SupabaseClientRepository(fake_supabase, session_provider, settings)


@pytest.fixture
def credential_repository(fake_supabase, session_provider, settings):
    return SupabaseCredentialRepository(fake_supabase, session_provider, settings)


@pytest.fixture
def income_repository(fake_supabase, session_provider, settings):
    return SupabaseIncomeRepository(fake_supabase, session_provider, settings)


@pytest.fixture
def expense_repository(fake_supabase, session_provider, settings):
    return SupabaseExpenseRepository(fake_supabase, session_provider, settings)


@pytest.fixture
def change_feed():
    return FakeChangeFeed()
