# tests/http_api/test_reviewer_controller.py

from unittest.mock import MagicMock

import pytest

from pokemon_review_api.db.models import Review, Reviewer
from pokemon_review_api.repositories import ReviewerRepository
from pokemon_review_api.routers.reviewer import get_reviewer_repository


@pytest.fixture
def repo(override) -> MagicMock:
    return override(get_reviewer_repository, MagicMock(spec=ReviewerRepository))


def test_get_reviewers_returns_ok(api, repo):
    repo.get_reviewers.return_value = [Reviewer(id=1, first_name="Gary", last_name="Oak")]

    resp = api.get("/api/reviewer")

    assert resp.status_code == 200
    assert resp.json() == [{"id": 1, "firstName": "Gary", "lastName": "Oak"}]


def test_get_reviewer_returns_ok(api, repo):
    repo.reviewer_exists.return_value = True
    repo.get_reviewer.return_value = Reviewer(id=7, first_name="Gary", last_name="Oak")

    resp = api.get("/api/reviewer/7")

    assert resp.status_code == 200
    assert resp.json()["firstName"] == "Gary"


def test_get_reviews_by_reviewer_returns_ok(api, repo):
    repo.reviewer_exists.return_value = True
    repo.get_reviews_by_reviewer.return_value = [
        Review(id=2, title="Nice", text="Very nice", rating=4),
    ]

    resp = api.get("/api/reviewer/7/reviews")

    assert resp.status_code == 200
    assert resp.json() == [{"id": 2, "title": "Nice", "text": "Very nice", "rating": 4}]
    repo.get_reviews_by_reviewer.assert_called_once_with(7)


def test_get_reviews_by_missing_reviewer_returns_no_content(api, repo):
    repo.reviewer_exists.return_value = False

    resp = api.get("/api/reviewer/7/reviews")

    assert resp.status_code == 204
    repo.get_reviews_by_reviewer.assert_not_called()


def test_create_reviewer_returns_created(api, repo):
    repo.create_reviewer.return_value = True

    resp = api.post("/api/reviewer", json={"firstName": "Gary", "lastName": "Oak"})

    assert resp.status_code == 201
    assert resp.json() == "Successfully created"
    reviewer = repo.create_reviewer.call_args.args[0]
    assert (reviewer.first_name, reviewer.last_name) == ("Gary", "Oak")


def test_create_reviewer_accepts_snake_case_fields(api, repo):
    repo.create_reviewer.return_value = True

    resp = api.post("/api/reviewer", json={"first_name": "Gary", "last_name": "Oak"})

    assert resp.status_code == 201


def test_create_reviewer_with_missing_field_returns_bad_request(api, repo):
    resp = api.post("/api/reviewer", json={"firstName": "Gary"})

    assert resp.status_code == 400
    assert "lastName" in resp.json()
    repo.create_reviewer.assert_not_called()


def test_update_reviewer_returns_no_content(api, repo):
    repo.reviewer_exists.return_value = True
    repo.update_reviewer.return_value = True

    resp = api.put("/api/reviewer/7", json={"id": 7, "firstName": "Gary", "lastName": "Oak"})

    assert resp.status_code == 204
    repo.update_reviewer.assert_called_once()


def test_update_reviewer_with_mismatched_id_returns_bad_request(api, repo):
    resp = api.put("/api/reviewer/7", json={"id": 8, "firstName": "Gary", "lastName": "Oak"})

    assert resp.status_code == 400
    repo.reviewer_exists.assert_not_called()


def test_delete_reviewer_returns_no_content(api, repo):
    reviewer = Reviewer(id=7, first_name="Gary", last_name="Oak")
    repo.reviewer_exists.return_value = True
    repo.get_reviewer.return_value = reviewer
    repo.delete_reviewer.return_value = True

    resp = api.delete("/api/reviewer/7")

    assert resp.status_code == 204
    repo.reviewer_exists.assert_called_once_with(7)
    repo.get_reviewer.assert_called_once_with(7)
    repo.delete_reviewer.assert_called_once_with(reviewer)


def test_delete_missing_reviewer_returns_no_content(api, repo):
    repo.reviewer_exists.return_value = False

    resp = api.delete("/api/reviewer/7")

    assert resp.status_code == 204
    repo.get_reviewer.assert_not_called()
    repo.delete_reviewer.assert_not_called()
