# tests/conftest.py
import os

# Keep the test run away from the on-disk default database.
os.environ.setdefault("POKEMON_API_DATABASE_URL", "sqlite://")
os.environ.setdefault("POKEMON_API_CREATE_TABLES", "false")

from datetime import datetime
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from pokemon_review_api.config import Settings
from pokemon_review_api.db.models import (
    Base,
    Category,
    Country,
    Owner,
    Pokemon,
    PokemonCategory,
    PokemonOwner,
    Review,
    Reviewer,
)
from pokemon_review_api.db.session import build_engine, build_session_factory, get_db
from pokemon_review_api.main import app


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory SQLite database per test, shared across connections."""
    engine = build_engine(
        Settings(database_url="sqlite://"),
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Iterator[Session]:
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(engine) -> Iterator[TestClient]:
    """
    TestClient whose requests each get their own session on the test database.
    """
    factory = build_session_factory(engine)

    def _get_test_db() -> Iterator[Session]:
        session = factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def override():
    """
    Register dependency overrides for one test and remove them afterwards.

        def test_x(override):
            override(get_category_repository, fake_repo)
    """
    registered = []

    def _override(dependency, value):
        app.dependency_overrides[dependency] = lambda: value
        registered.append(dependency)
        return value

    try:
        yield _override
    finally:
        for dependency in registered:
            app.dependency_overrides.pop(dependency, None)


@pytest.fixture
def api() -> TestClient:
    """TestClient for controller tests that mock every repository."""
    return TestClient(app)


@pytest.fixture
def seeded(db_session: Session) -> dict:
    """
    A small world: one country, owner, category, reviewer and pokemon with
    two reviews.
    """
    country = Country(name="Kanto")
    owner = Owner(first_name="Ash", last_name="Ketchum", gym="Pallet", country=country)
    category = Category(name="Electric")
    reviewer = Reviewer(first_name="Gary", last_name="Oak")
    pokemon = Pokemon(name="Pikachu", birth_date=datetime(1996, 2, 27))
    db_session.add_all(
        [
            country,
            owner,
            category,
            reviewer,
            pokemon,
            PokemonOwner(pokemon=pokemon, owner=owner),
            PokemonCategory(pokemon=pokemon, category=category),
            Review(title="Shocking", text="Great", rating=5, pokemon=pokemon, reviewer=reviewer),
            Review(title="Meh", text="Fine", rating=3, pokemon=pokemon, reviewer=reviewer),
        ]
    )
    db_session.commit()
    return {
        "country": country,
        "owner": owner,
        "category": category,
        "reviewer": reviewer,
        "pokemon": pokemon,
    }
