# tests/test_errors.py

from pokemon_review_api.errors import ApiError, ValidationState


def test_validation_state_groups_messages_by_key():
    state = ValidationState()
    assert state.is_valid

    state.add_error("countryId", "Country 9 does not exist")
    state.add_error("countryId", "Try another")
    state.add_error("", "Something went wrong")

    assert not state.is_valid
    assert state.errors == {
        "countryId": ["Country 9 does not exist", "Try another"],
        "": ["Something went wrong"],
    }


def test_validation_state_errors_is_a_copy():
    state = ValidationState()
    state.add_error("name", "Required")

    state.errors["name"].append("mutated")

    assert state.errors == {"name": ["Required"]}


def test_api_error_with_message():
    err = ApiError.with_message(404, "Owner 3 does not exist", key="ownerId")

    assert err.status_code == 404
    assert err.state.errors == {"ownerId": ["Owner 3 does not exist"]}


def test_request_validation_errors_use_the_same_map(api):
    resp = api.post("/api/reviewer", json={"firstName": "Gary"})

    assert resp.status_code == 400
    assert list(resp.json()) == ["lastName"]
    assert all(isinstance(m, str) for m in resp.json()["lastName"])
