import os

# Environnement de test figé avant tout import du package (config lue à l'import)
os.environ["SUPABASE_URL"] = ""
os.environ["SUPABASE_SERVICE_KEY"] = ""
os.environ["ACCESS_TOKEN_SECRET"] = "test-secret-please-change"
os.environ["STRIPE_SECRET_KEY"] = "sk_test_dummy"
os.environ["ALLOWED_HOSTS"] = "testserver,localhost"
os.environ["DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS"] = "1"
os.environ.pop("LOCAL_RATE_LIMIT_FALLBACK", None)

import uuid
import pytest
from typing import Any, Dict, Generator, List
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from foodparadise.app import app as fastapi_app
from foodparadise.auth.tokens import issue_token
from foodparadise.infra.supabase_client import get_db

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class _Resp:
    def __init__(self, data=None, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    """Sous-ensemble du query builder PostgREST utilisé par les repositories."""

    def __init__(self, store: "FakeSupabase", table: str):
        self._store = store
        self._table = table
        self._op = "select"
        self._payload: Any = None
        self._filters: List = []
        self._order = None
        self._range = None
        self._limit = None
        self._count = None

    def select(self, *columns, count=None):
        self._count = count
        return self

    def insert(self, data):
        self._op, self._payload = "insert", data
        return self

    def update(self, data):
        self._op, self._payload = "update", data
        return self

    def delete(self):
        self._op = "delete"
        return self

    def eq(self, col, value):
        self._filters.append(lambda r: r.get(col) == value)
        return self

    def gt(self, col, value):
        self._filters.append(lambda r: r.get(col) is not None and r.get(col) > value)
        return self

    def in_(self, col, values):
        wanted = {str(v) for v in values}
        self._filters.append(lambda r: str(r.get(col)) in wanted)
        return self

    def order(self, col, desc=False):
        self._order = (col, desc)
        return self

    def range(self, start, end):
        self._range = (start, end)
        return self

    def limit(self, n):
        self._limit = n
        return self

    def execute(self):
        self._store.calls.append((self._table, self._op))
        if (self._table, self._op) in self._store.fail_on:
            raise Exception(f"storage failure on {self._table}.{self._op}")
        rows = self._store.tables.setdefault(self._table, [])

        if self._op == "insert":
            items = self._payload if isinstance(self._payload, list) else [self._payload]
            created = []
            unique_col = self._store.unique.get(self._table)
            for item in items:
                row = dict(item)
                if unique_col and any(r.get(unique_col) == row.get(unique_col) for r in rows):
                    raise APIError({
                        "code": "23505",
                        "message": f"duplicate key value violates unique constraint on {unique_col}",
                        "details": None,
                        "hint": None,
                    })
                row.setdefault("id", uuid.uuid4().hex)
                rows.append(row)
                created.append(dict(row))
            return _Resp(created)

        matched = [r for r in rows if all(f(r) for f in self._filters)]
        if self._op == "update":
            for r in matched:
                r.update(self._payload)
            return _Resp([dict(r) for r in matched])
        if self._op == "delete":
            self._store.tables[self._table] = [r for r in rows if r not in matched]
            return _Resp([dict(r) for r in matched])

        if self._order:
            col, desc = self._order
            matched = sorted(matched, key=lambda r: (r.get(col) is None, r.get(col)), reverse=desc)
        count = len(matched) if self._count else None
        if self._range:
            start, end = self._range
            matched = matched[start:end + 1]
        if self._limit is not None:
            matched = matched[: self._limit]
        return _Resp([dict(r) for r in matched], count=count)


class FakeSupabase:
    """Client Supabase en mémoire: tables = {nom: [lignes]}."""

    def __init__(self):
        self.tables: Dict[str, List[dict]] = {}
        self.calls: List[tuple] = []
        self.fail_on: set = set()
        # Contraintes d'unicité {table: colonne}
        self.unique: Dict[str, str] = {"users": "email"}

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def seed(self, table: str, *rows: dict) -> List[dict]:
        created = []
        for row in rows:
            row = dict(row)
            row.setdefault("id", uuid.uuid4().hex)
            self.tables.setdefault(table, []).append(row)
            created.append(row)
        return created


@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def db() -> FakeSupabase:
    return FakeSupabase()

@pytest.fixture()
def client(app, db) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_db] = lambda: db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_db, None)

@pytest.fixture
def auth_headers():
    def _make(email: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {issue_token({'email': email})}"}
    return _make

@pytest.fixture
def admin_user(db) -> dict:
    return db.seed("users", {"id": "admin-1", "email": "admin@example.com", "role": "admin"})[0]

@pytest.fixture
def member_user(db) -> dict:
    return db.seed("users", {"id": "member-1", "email": "user@example.com", "role": "member"})[0]
