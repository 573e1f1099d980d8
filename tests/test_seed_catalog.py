"""
Tests for the catalog seed script.
"""

from precision_health.config import catalog_seed
from precision_health.scripts.seed_catalog import seed_all, upsert_by_key
from tests.fakes import FakeSupabase


def test_first_run_creates_catalog():
    db = FakeSupabase()
    seed_all(db)

    assert len(db.rows("ingredients")) == len(catalog_seed.INGREDIENTS)
    assert len(db.rows("medications")) == len(catalog_seed.MEDICATIONS)
    assert len(db.rows("medication_interactions")) == len(catalog_seed.MEDICATION_INTERACTIONS)
    assert len(db.rows("ingredient_substitutions")) == len(catalog_seed.SUBSTITUTIONS)
    assert len(db.rows("dishes")) == sum(len(r["dishes"]) for r in catalog_seed.RESTAURANTS)
    assert all(dish["available"] for dish in db.rows("dishes"))


def test_rerun_updates_instead_of_duplicating():
    db = FakeSupabase()
    seed_all(db)
    before = {name: len(rows) for name, rows in db.tables.items()}
    seed_all(db)
    assert {name: len(rows) for name, rows in db.tables.items()} == before


def test_upsert_by_key_reports_created():
    db = FakeSupabase()
    row_id, created = upsert_by_key(db, "medications", {"name": "Aspirin"}, {"species": "human"})
    assert created is True
    same_id, created = upsert_by_key(db, "medications", {"name": "Aspirin"}, {"species": "all"})
    assert (same_id, created) == (row_id, False)
    assert db.rows("medications")[0]["species"] == "all"
