"""Shared fixtures: an in-memory stand-in for a psycopg2 connection."""

from datetime import date
from decimal import Decimal

import pytest

from models.department import Department
from models.seller import Seller


class FakeCursor:
    """Replays the rows configured on its connection and records SQL."""

    def __init__(self, conn):
        self._conn = conn
        self.closed = False
        self.rowcount = -1

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def execute(self, sql, params=None):
        self._conn.executed.append((" ".join(sql.split()), params))
        if self._conn.error is not None:
            raise self._conn.error
        self.rowcount = self._conn.rowcount

    def fetchone(self):
        return self._conn.rows[0] if self._conn.rows else None

    def fetchall(self):
        return list(self._conn.rows)

    def close(self):
        self.closed = True


class FakeConnection:
    """
    Minimal psycopg2 connection double.

    Set `rows`, `rowcount` or `error` before calling a repository;
    inspect `executed`, `cursors`, `commits` and `rollbacks` afterwards.
    """

    def __init__(self):
        self.rows: list[tuple] = []
        self.rowcount = 1
        self.error = None
        self.executed: list[tuple] = []
        self.cursors: list[FakeCursor] = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = 0

    def cursor(self):
        cur = FakeCursor(self)
        self.cursors.append(cur)
        return cur

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = 1

    @property
    def last_sql(self) -> str:
        return self.executed[-1][0]

    @property
    def last_params(self):
        return self.executed[-1][1]


@pytest.fixture
def fake_conn():
    return FakeConnection()


@pytest.fixture
def sales():
    return Department(id=1, name="Sales")


@pytest.fixture
def alice(sales):
    return Seller(
        name="Alice",
        email="alice@example.com",
        birth_date=date(1990, 4, 21),
        base_salary=Decimal("3200.00"),
        department=sales,
    )
