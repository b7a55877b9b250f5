"""
Round-trip tests against a real PostgreSQL database.

Skipped unless TEST_DATABASE_URL points at a database the tests may wipe.
"""

import dataclasses
import os
from datetime import date
from decimal import Decimal

import psycopg2
import pytest

from db.exceptions import DataAccessError
from db.init_db import create_tables
from models.department import Department
from models.seller import Seller
from repositories.factory import create_department_repository, create_seller_repository

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = pytest.mark.skipif(
    not TEST_DATABASE_URL, reason="TEST_DATABASE_URL is not set"
)


@pytest.fixture
def pg_conn():
    conn = psycopg2.connect(TEST_DATABASE_URL)
    with conn.cursor() as cur:
        cur.execute("DROP TABLE IF EXISTS seller, department;")
    conn.commit()
    create_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def departments(pg_conn):
    return create_department_repository(pg_conn)


@pytest.fixture
def sellers(pg_conn):
    return create_seller_repository(pg_conn)


def make_seller(name, department, salary="2000.00"):
    return Seller(
        name=name,
        email=f"{name.lower()}@example.com",
        birth_date=date(1985, 6, 15),
        base_salary=Decimal(salary),
        department=department,
    )


@pytest.fixture
def fixture_sellers(departments, sellers):
    dept_a = departments.insert(Department(name="DeptA"))
    dept_b = departments.insert(Department(name="DeptB"))
    for name, dept in (("Bob", dept_a), ("Alice", dept_a), ("Zoe", dept_b)):
        sellers.insert(make_seller(name, dept))
    return dept_a, dept_b


def test_department_round_trip(departments):
    created = departments.insert(Department(name="Books"))

    assert created.id is not None
    assert departments.find_by_id(created.id) == created


def test_generated_ids_are_unique(departments):
    ids = {departments.insert(Department(name=f"D{i}")).id for i in range(5)}
    assert len(ids) == 5


def test_seller_round_trip(departments, sellers):
    dept = departments.insert(Department(name="Books"))
    created = sellers.insert(make_seller("Carol", dept, "3100.50"))

    found = sellers.find_by_id(created.id)

    assert found == created
    assert found.department == dept


def test_department_update_changes_only_name(departments):
    created = departments.insert(Department(name="Books"))
    departments.update(dataclasses.replace(created, name="Comics"))

    assert departments.find_by_id(created.id) == Department(id=created.id, name="Comics")


def test_salary_with_three_decimals_round_trips(departments, sellers):
    dept = departments.insert(Department(name="Books"))
    created = sellers.insert(make_seller("Carol", dept, "1000.005"))

    found = sellers.find_by_id(created.id)

    assert found.base_salary == Decimal("1000.005")
    assert found == created


def test_seller_update_changes_one_field(departments, sellers):
    dept = departments.insert(Department(name="Books"))
    created = sellers.insert(make_seller("Carol", dept))
    changed = dataclasses.replace(created, base_salary=Decimal("4000.00"))

    sellers.update(changed)

    assert sellers.find_by_id(created.id) == changed


def test_update_unknown_id_raises(departments):
    with pytest.raises(DataAccessError):
        departments.update(Department(id=999, name="Ghost"))


def test_delete_then_find_returns_none(departments, sellers):
    dept = departments.insert(Department(name="Books"))
    seller = sellers.insert(make_seller("Carol", dept))

    sellers.delete_by_id(seller.id)
    departments.delete_by_id(dept.id)

    assert sellers.find_by_id(seller.id) is None
    assert departments.find_by_id(dept.id) is None


def test_delete_missing_seller_is_noop(sellers):
    sellers.delete_by_id(12345)


def test_find_all_orders_by_name(fixture_sellers, sellers):
    result = sellers.find_all()

    assert [s.name for s in result] == ["Alice", "Bob", "Zoe"]
    assert result[0].department == result[1].department


def test_find_by_department(fixture_sellers, sellers, departments):
    dept_a, _ = fixture_sellers

    result = sellers.find_by_department(dept_a)

    assert [s.name for s in result] == ["Alice", "Bob"]
    assert all(s.department == dept_a for s in result)

    empty = departments.insert(Department(name="Empty"))
    assert sellers.find_by_department(empty) == []


def test_insert_with_unknown_department_leaves_no_row(sellers):
    with pytest.raises(DataAccessError):
        sellers.insert(make_seller("Dan", Department(id=999, name="Nowhere")))

    assert sellers.find_all() == []
