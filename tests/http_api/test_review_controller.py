# tests/http_api/test_review_controller.py

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from pokemon_review_api.db.models import Pokemon, Review, Reviewer
from pokemon_review_api.repositories import (
    PokemonRepository,
    ReviewerRepository,
    ReviewRepository,
)
from pokemon_review_api.routers.review import (
    get_pokemon_lookup,
    get_review_repository,
    get_reviewer_lookup,
)

BODY = {"title": "Cute", "text": "Very cute", "rating": 5}


@pytest.fixture
def repo(override) -> MagicMock:
    return override(get_review_repository, MagicMock(spec=ReviewRepository))


@pytest.fixture
def pokemons(override) -> MagicMock:
    return override(get_pokemon_lookup, MagicMock(spec=PokemonRepository))


@pytest.fixture
def reviewers(override) -> MagicMock:
    return override(get_reviewer_lookup, MagicMock(spec=ReviewerRepository))


def test_get_reviews_returns_ok(api, repo):
    repo.get_reviews.return_value = [Review(id=1, **BODY)]

    resp = api.get("/api/review")

    assert resp.status_code == 200
    assert resp.json() == [{"id": 1, **BODY}]


def test_get_review_returns_ok(api, repo):
    repo.review_exists.return_value = True
    repo.get_review.return_value = Review(id=1, **BODY)

    resp = api.get("/api/review/1")

    assert resp.status_code == 200
    assert resp.json()["title"] == "Cute"


def test_get_missing_review_returns_no_content(api, repo):
    repo.review_exists.return_value = False

    resp = api.get("/api/review/1")

    assert resp.status_code == 204


def test_get_reviews_of_pokemon_returns_ok(api, repo):
    repo.get_reviews_of_pokemon.return_value = []

    resp = api.get("/api/review/pokemon/5")

    assert resp.status_code == 200
    assert resp.json() == []
    repo.get_reviews_of_pokemon.assert_called_once_with(5)


def test_create_review_attaches_pokemon_and_reviewer(api, repo, pokemons, reviewers):
    pokemon = Pokemon(id=5, name="Eevee", birth_date=datetime(2003, 3, 3))
    reviewer = Reviewer(id=6, first_name="Gary", last_name="Oak")
    pokemons.get_pokemon.return_value = pokemon
    reviewers.get_reviewer.return_value = reviewer
    repo.create_review.return_value = True

    resp = api.post("/api/review", params={"pokeId": 5, "reviewerId": 6}, json=BODY)

    assert resp.status_code == 200
    assert resp.json() == "Successfully created"
    review = repo.create_review.call_args.args[0]
    assert review.pokemon is pokemon
    assert review.reviewer is reviewer
    assert (review.title, review.rating) == ("Cute", 5)


def test_create_review_for_unknown_reviewer_returns_not_found(api, repo, pokemons, reviewers):
    pokemons.get_pokemon.return_value = Pokemon(id=5, name="Eevee", birth_date=datetime(2003, 3, 3))
    reviewers.get_reviewer.return_value = None

    resp = api.post("/api/review", params={"pokeId": 5, "reviewerId": 6}, json=BODY)

    assert resp.status_code == 404
    assert resp.json() == {"reviewerId": ["Reviewer 6 does not exist"]}
    repo.create_review.assert_not_called()


def test_create_review_without_body_returns_bad_request(api, repo, pokemons, reviewers):
    resp = api.post("/api/review", params={"pokeId": 5, "reviewerId": 6})

    assert resp.status_code == 400
    repo.create_review.assert_not_called()


def test_update_review_returns_no_content(api, repo):
    repo.review_exists.return_value = True
    repo.update_review.return_value = True

    resp = api.put("/api/review/1", json={"id": 1, **BODY})

    assert resp.status_code == 204
    repo.update_review.assert_called_once()


def test_update_review_with_mismatched_id_returns_bad_request(api, repo):
    resp = api.put("/api/review/1", json={"id": 3, **BODY})

    assert resp.status_code == 400
    repo.update_review.assert_not_called()


def test_delete_review_returns_no_content(api, repo):
    review = Review(id=1, **BODY)
    repo.review_exists.return_value = True
    repo.get_review.return_value = review
    repo.delete_review.return_value = True

    resp = api.delete("/api/review/1")

    assert resp.status_code == 204
    repo.delete_review.assert_called_once_with(review)
