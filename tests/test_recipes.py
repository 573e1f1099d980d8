"""
Tests for recipe browsing, favorites and feedback.
"""

import pytest

from tests.conftest import USER_ID, OTHER_USER_ID


@pytest.fixture
def recipes(db):
    salmon, chicken, tuna = db.seed("recipes", [
        {"name": "Omega-3 Rich Salmon Bowl", "description": "Heart-healthy salmon with quinoa",
         "species_type": "human", "instructions": "Cook.",
         "ingredients": [{"ingredient": "Salmon", "quantity": 6, "unit": "oz"}]},
        {"name": "Chicken & Sweet Potato Bowl", "description": "Simple meal for dogs",
         "species_type": "dog", "instructions": "Boil.", "ingredients": []},
        {"name": "Tuna Salad", "description": None, "species_type": "human",
         "instructions": "Mix.", "ingredients": [], "condition_tags": None},
    ])
    return {"salmon": salmon, "chicken": chicken, "tuna": tuna}


def test_default_species_is_human_newest_first(client, recipes):
    response = client.get("/api/v1/recipes")
    assert response.status_code == 200
    assert [r["name"] for r in response.json()] == ["Tuna Salad", "Omega-3 Rich Salmon Bowl"]


def test_all_species(client, recipes):
    response = client.get("/api/v1/recipes", params={"species": "all"})
    assert len(response.json()) == 3


def test_unknown_species_is_400(client, recipes):
    assert client.get("/api/v1/recipes", params={"species": "parrot"}).status_code == 400


def test_search_matches_name_or_description(client, recipes):
    response = client.get("/api/v1/recipes", params={"species": "all", "search": "QUINOA"})
    assert [r["name"] for r in response.json()] == ["Omega-3 Rich Salmon Bowl"]

    response = client.get("/api/v1/recipes", params={"species": "all", "search": "bowl"})
    assert len(response.json()) == 2


def test_get_recipe(client, recipes):
    response = client.get(f"/api/v1/recipes/{recipes['salmon']['id']}")
    assert response.status_code == 200
    assert response.json()["ingredients"][0]["ingredient"] == "Salmon"
    assert client.get("/api/v1/recipes/missing").status_code == 404


def test_toggle_favorite_creates_then_flips(client, db, recipes):
    url = f"/api/v1/recipes/{recipes['salmon']['id']}/favorite"
    first = client.post(url).json()
    assert first["is_favorite"] is True
    assert first["profile_id"] == USER_ID

    listed = client.get("/api/v1/recipes").json()
    assert {r["name"]: r["is_favorite"] for r in listed}["Omega-3 Rich Salmon Bowl"] is True

    second = client.post(url).json()
    assert second["is_favorite"] is False
    assert len(db.rows("user_recipes")) == 1


def test_other_users_favorites_are_not_shown(client, db, recipes):
    db.seed("user_recipes", [{"profile_id": OTHER_USER_ID, "recipe_id": recipes["tuna"]["id"], "is_favorite": True}])
    listed = client.get("/api/v1/recipes").json()
    assert not any(r["is_favorite"] for r in listed)


def test_feedback_upserts_one_row(client, db, recipes):
    url = f"/api/v1/recipes/{recipes['salmon']['id']}/feedback"
    client.post(f"/api/v1/recipes/{recipes['salmon']['id']}/favorite")

    response = client.put(url, json={"tried": True, "rating": 4, "notes": "Good"})
    assert response.status_code == 200
    response = client.put(url, json={"tried": True, "rating": 5})
    body = response.json()
    assert body["rating"] == 5
    assert body["is_favorite"] is True

    rows = db.rows("user_recipes")
    assert len(rows) == 1
    mine = client.get("/api/v1/recipes/mine").json()
    assert mine[0]["rating"] == 5


def test_rating_out_of_range_is_422(client, recipes):
    response = client.put(f"/api/v1/recipes/{recipes['salmon']['id']}/feedback", json={"rating": 6})
    assert response.status_code == 422
