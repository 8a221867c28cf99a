"""
Shared fixtures: an in-memory stand-in for the supabase async client.
"""

import copy

import pytest
from fastapi.testclient import TestClient

from pizza_api.main import app, get_pizza_order_repository
from pizza_api.repository import PizzaOrderRepository


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Records one fluent query and applies it to the fake store on execute()."""

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.action = None
        self.payload = None
        self.filters = []

    def select(self, columns="*"):
        self.action = "select"
        return self

    def insert(self, rows):
        self.action = "insert"
        self.payload = rows if isinstance(rows, list) else [rows]
        return self

    def update(self, values):
        self.action = "update"
        self.payload = values
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    async def execute(self):
        self.client.calls.append((self.table, self.action, list(self.filters)))
        if self.client.error is not None:
            raise self.client.error

        rows = self.client.tables.setdefault(self.table, [])
        if self.action == "select":
            return FakeResponse([copy.deepcopy(row) for row in rows if self._matches(row)])
        if self.action == "insert":
            inserted = []
            for values in self.payload:
                self.client.next_id += 1
                row = {"id": self.client.next_id, **values}
                rows.append(row)
                inserted.append(copy.deepcopy(row))
            return FakeResponse(inserted)
        if self.action == "update":
            updated = []
            for row in rows:
                if self._matches(row):
                    row.update(self.payload)
                    updated.append(copy.deepcopy(row))
            return FakeResponse(updated)
        if self.action == "delete":
            deleted = [row for row in rows if self._matches(row)]
            self.client.tables[self.table] = [row for row in rows if not self._matches(row)]
            return FakeResponse(deleted)
        raise AssertionError(f"query on {self.table} executed without an action")


class FakeAsyncClient:
    def __init__(self):
        self.tables = {}
        self.calls = []
        self.next_id = 0
        self.error = None

    def table(self, name):
        return FakeQuery(self, name)


@pytest.fixture
def fake_client():
    return FakeAsyncClient()


@pytest.fixture
def repository(fake_client):
    return PizzaOrderRepository(fake_client)


@pytest.fixture
def api_client(repository):
    """TestClient with the repository dependency bound to the fake store."""
    app.dependency_overrides[get_pizza_order_repository] = lambda: repository
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
