# tests/http_api/test_entity_contract.py

"""
Behaviour shared by every entity controller, checked once per entity with
all repositories mocked.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from pokemon_review_api.db.models import Country, Pokemon, Reviewer
from pokemon_review_api.repositories import (
    CategoryRepository,
    CountryRepository,
    OwnerRepository,
    PokemonRepository,
    ReviewerRepository,
    ReviewRepository,
)
from pokemon_review_api.routers.category import get_category_repository
from pokemon_review_api.routers.country import get_country_repository
from pokemon_review_api.routers.owner import get_owner_repository
from pokemon_review_api.routers.pokemon import get_pokemon_repository
from pokemon_review_api.routers.review import (
    get_pokemon_lookup,
    get_review_repository,
    get_reviewer_lookup,
)
from pokemon_review_api.routers.reviewer import get_reviewer_repository

# entity, valid body, create query params
ENTITIES = [
    ("category", {"name": "Water"}, {}),
    ("country", {"name": "Johto"}, {}),
    ("owner", {"firstName": "Brock", "lastName": "Harrison"}, {"countryId": 1}),
    ("pokemon", {"name": "Eevee", "birthDate": "2003-03-03T00:00:00"}, {"ownerId": 1, "catId": 1}),
    ("review", {"title": "Cute", "text": "Very", "rating": 5}, {"pokeId": 1, "reviewerId": 1}),
    ("reviewer", {"firstName": "Gary", "lastName": "Oak"}, {}),
]

IDS = [entity for entity, *_ in ENTITIES]


@pytest.fixture
def repos(override) -> dict:
    """Every repository factory replaced by a spec'd mock, keyed by entity."""
    mocks = {
        "category": override(get_category_repository, MagicMock(spec=CategoryRepository)),
        "country": override(get_country_repository, MagicMock(spec=CountryRepository)),
        "owner": override(get_owner_repository, MagicMock(spec=OwnerRepository)),
        "pokemon": override(get_pokemon_repository, MagicMock(spec=PokemonRepository)),
        "review": override(get_review_repository, MagicMock(spec=ReviewRepository)),
        "reviewer": override(get_reviewer_repository, MagicMock(spec=ReviewerRepository)),
    }
    pokemon_lookup = override(get_pokemon_lookup, MagicMock(spec=PokemonRepository))
    reviewer_lookup = override(get_reviewer_lookup, MagicMock(spec=ReviewerRepository))

    # Linked rows that create endpoints resolve before saving.
    mocks["category"].get_categories.return_value = []
    mocks["country"].get_countries.return_value = []
    mocks["country"].get_country.return_value = Country(id=1, name="Kanto")
    mocks["owner"].owner_exists.return_value = True
    mocks["category"].category_exists.return_value = True
    pokemon_lookup.get_pokemon.return_value = Pokemon(
        id=1, name="Pikachu", birth_date=datetime(1996, 2, 27)
    )
    reviewer_lookup.get_reviewer.return_value = Reviewer(id=1, first_name="Gary", last_name="Oak")
    return mocks


@pytest.mark.parametrize("entity,body,params", ENTITIES, ids=IDS)
def test_delete_missing_entity_skips_delete(api, repos, entity, body, params):
    repo = repos[entity]
    getattr(repo, f"{entity}_exists").return_value = False

    resp = api.delete(f"/api/{entity}/5")

    assert resp.status_code == 204
    assert resp.content == b""
    getattr(repo, f"{entity}_exists").assert_called_once_with(5)
    getattr(repo, f"get_{entity}").assert_not_called()
    getattr(repo, f"delete_{entity}").assert_not_called()


@pytest.mark.parametrize("entity,body,params", ENTITIES, ids=IDS)
def test_update_missing_entity_returns_no_content(api, repos, entity, body, params):
    repo = repos[entity]
    getattr(repo, f"{entity}_exists").return_value = False

    resp = api.put(f"/api/{entity}/5", json={"id": 5, **body})

    assert resp.status_code == 204
    getattr(repo, f"update_{entity}").assert_not_called()


@pytest.mark.parametrize("entity,body,params", ENTITIES, ids=IDS)
def test_update_without_body_returns_bad_request(api, repos, entity, body, params):
    resp = api.put(f"/api/{entity}/5")

    assert resp.status_code == 400
    getattr(repos[entity], f"update_{entity}").assert_not_called()


@pytest.mark.parametrize("entity,body,params", ENTITIES, ids=IDS)
def test_create_ignores_client_supplied_id(api, repos, entity, body, params):
    repo = repos[entity]
    getattr(repo, f"create_{entity}").return_value = True

    resp = api.post(f"/api/{entity}", params=params, json={"id": 42, **body})

    assert resp.status_code in (200, 201)
    assert resp.json() == "Successfully created"
    created = getattr(repo, f"create_{entity}").call_args.args[-1]
    assert created.id is None
