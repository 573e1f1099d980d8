"""
Tests for the ingredient catalog endpoints.
"""

import pytest


@pytest.fixture
def catalog(db):
    salmon, chicken, chocolate = db.seed("ingredients", [
        {"name": "Salmon", "category": "protein", "species_safe": {"human": True, "dog": True, "cat": True}},
        {"name": "Chicken Breast", "category": "protein", "species_safe": {"human": True, "dog": True, "cat": True}},
        {"name": "Chocolate", "category": "sweet", "species_safe": {"human": True, "dog": False, "cat": False},
         "toxicity_warnings": [{"species": ["dog", "cat"], "compound": "theobromine", "effect": "toxic"}]},
    ])
    db.seed("ingredient_contraindications", [
        {"ingredient_id": salmon["id"], "condition_name": "Gout", "contraindication_type": "limit",
         "species_type": "human"},
        {"ingredient_id": salmon["id"], "condition_name": "Pancreatitis", "contraindication_type": "avoid",
         "species_type": "dog"},
    ])
    db.seed("ingredient_substitutions", [
        {"original_ingredient_id": salmon["id"], "substitute_ingredient_id": chicken["id"],
         "substitution_ratio": 1.0, "notes": "Leaner"},
    ])
    return {"salmon": salmon, "chicken": chicken, "chocolate": chocolate}


@pytest.fixture
def super_user(current_user):
    current_user["app_metadata"] = {"type": "super_user"}
    return current_user


def test_list_sorted_by_name(client, catalog):
    names = [i["name"] for i in client.get("/api/v1/ingredients").json()]
    assert names == ["Chicken Breast", "Chocolate", "Salmon"]


def test_filter_by_category_and_search(client, catalog):
    names = [i["name"] for i in client.get("/api/v1/ingredients", params={"category": "protein"}).json()]
    assert names == ["Chicken Breast", "Salmon"]

    names = [i["name"] for i in client.get("/api/v1/ingredients", params={"search": "CHOC"}).json()]
    assert names == ["Chocolate"]


def test_get_ingredient(client, catalog):
    body = client.get(f"/api/v1/ingredients/{catalog['chocolate']['id']}").json()
    assert body["toxicity_warnings"][0]["compound"] == "theobromine"
    assert client.get("/api/v1/ingredients/missing").status_code == 404


def test_contraindications_species_filter(client, catalog):
    url = f"/api/v1/ingredients/{catalog['salmon']['id']}/contraindications"
    assert len(client.get(url).json()) == 2
    dog_only = client.get(url, params={"species_type": "dog"}).json()
    assert [c["condition_name"] for c in dog_only] == ["Pancreatitis"]


def test_substitutions_include_names(client, catalog):
    body = client.get(f"/api/v1/ingredients/{catalog['salmon']['id']}/substitutions").json()
    assert body[0]["substitute_name"] == "Chicken Breast"
    assert body[0]["notes"] == "Leaner"
    assert client.get(f"/api/v1/ingredients/{catalog['chicken']['id']}/substitutions").json() == []


def test_create_requires_super_user(client, catalog):
    response = client.post("/api/v1/ingredients", json={"name": "Kale", "category": "vegetable"})
    assert response.status_code == 403


def test_super_user_creates_ingredient(client, db, catalog, super_user):
    response = client.post("/api/v1/ingredients", json={
        "name": "Grapes", "category": "fruit",
        "species_safe": {"human": True, "dog": False},
        "toxicity_warnings": [{"species": ["dog"], "effect": "kidney failure"}],
    })
    assert response.status_code == 201
    assert any(row["name"] == "Grapes" for row in db.rows("ingredients"))


def test_duplicate_name_is_400(client, catalog, super_user):
    response = client.post("/api/v1/ingredients", json={"name": "salmon", "category": "protein"})
    assert response.status_code == 400


def test_super_user_adds_contraindication(client, catalog, super_user):
    url = f"/api/v1/ingredients/{catalog['chocolate']['id']}/contraindications"
    response = client.post(url, json={
        "condition_name": "Migraine", "contraindication_type": "caution", "rationale": "Trigger food",
    })
    assert response.status_code == 201
    assert response.json()["species_type"] == "human"

    bad = client.post(url, json={"condition_name": "X", "contraindication_type": "never"})
    assert bad.status_code == 422
