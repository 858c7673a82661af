"""
conftest.py - Shared pytest fixtures for the chicken farm backend test suite.

Tests run against an in-memory SQLite database shared through a single
connection, so no PostgreSQL server is needed.

Import-path bootstrapping:
    The ``backend/`` directory is inserted into sys.path so that the flat
    ``models``/``crud``/``services`` imports resolve regardless of where
    pytest is invoked.
"""

import os
import sys
import tempfile

import pytest

# ---------------------------------------------------------------------------
# Environment must be set before database.py / main.py are imported.
# ---------------------------------------------------------------------------
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "chicken-farm-test-logs"))
os.environ["EGG_PRICE"] = "10.0"

_BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)


@pytest.fixture
def db():
    """A session on freshly created tables; everything is dropped afterwards."""
    import models  # noqa: F401
    from database import Base, SessionLocal, engine

    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """TestClient whose requests share the ``db`` fixture's session."""
    from fastapi.testclient import TestClient
    from database import get_db
    from main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Record factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_chicken(db):
    from crud import chicken as crud_chicken
    from schemas.chicken import ChickenCreate

    def _make(cage_id=1, egg_per_month=20, weight=2.5, age=12, breed="Leghorn"):
        return crud_chicken.create_chicken(
            db,
            ChickenCreate(cage_id=cage_id, weight=weight, age=age, egg_per_month=egg_per_month, breed=breed),
        )
    return _make


@pytest.fixture
def make_employee(db):
    from crud import employee as crud_employee
    from schemas.employee import EmployeeCreate

    counter = {"n": 0}

    def _make(full_name="Ivanov Ivan", cages=(), salary=50000.0, passport_data=None):
        counter["n"] += 1
        if passport_data is None:
            passport_data = f"{1000 + counter['n']} {100000 + counter['n']}"
        return crud_employee.create_employee(
            db,
            EmployeeCreate(full_name=full_name, passport_data=passport_data, salary=salary, cages=list(cages)),
        )
    return _make


@pytest.fixture
def make_collection(db):
    from crud import egg_collection as crud_egg_collection
    from schemas.egg_collection import EggCollectionCreate

    def _make(collection_date, cage_id=1, egg_count=1, employee_id=None, chicken_id=None):
        return crud_egg_collection.create_collection(
            db,
            EggCollectionCreate(
                collection_date=collection_date,
                cage_id=cage_id,
                egg_count=egg_count,
                employee_id=employee_id,
                chicken_id=chicken_id,
            ),
        )
    return _make
