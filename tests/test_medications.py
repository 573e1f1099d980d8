"""
Tests for medication tracking: dose scheduling, today's doses,
interaction alerts and adherence.
"""

from datetime import date, datetime, timedelta

import pytest

from precision_health.modules.medications.scheduler import build_dose_schedule, parse_schedule_time
from tests.conftest import USER_ID, OTHER_USER_ID


# ============================================================================
# Scheduler
# ============================================================================

def test_schedule_every_day_every_time():
    doses = build_dose_schedule("um-1", USER_ID, date(2026, 3, 1), date(2026, 3, 3), ["20:00", "08:00"], 30)
    assert len(doses) == 6
    assert doses[0] == {
        "user_medication_id": "um-1",
        "profile_id": USER_ID,
        "scheduled_time": "2026-03-01T08:00:00",
        "status": "scheduled",
    }
    assert doses[-1]["scheduled_time"] == "2026-03-03T20:00:00"


def test_open_ended_schedule_uses_horizon():
    doses = build_dose_schedule("um-1", USER_ID, date(2026, 3, 1), None, ["09:00"], 30)
    assert len(doses) == 31
    assert doses[-1]["scheduled_time"] == "2026-03-31T09:00:00"


def test_no_times_means_no_doses():
    assert build_dose_schedule("um-1", USER_ID, date(2026, 3, 1), None, [], 30) == []


@pytest.mark.parametrize("value", ["8am", "25:00", "12:60", "", "12:3:00"])
def test_invalid_times_are_rejected(value):
    with pytest.raises(ValueError):
        parse_schedule_time(value)


# ============================================================================
# User medications
# ============================================================================

@pytest.fixture
def catalog(db):
    levo, metformin, lisinopril, carprofen = db.seed("medications", [
        {"name": "Levothyroxine", "species": "human"},
        {"name": "Metformin", "species": "human"},
        {"name": "Lisinopril", "species": "human"},
        {"name": "Carprofen", "species": "dog"},
    ])
    db.seed("medications", [{"name": "Omega-3 Fish Oil", "species": "all"}])
    db.seed("medication_interactions", [
        {"interaction_type": "drug_food", "medication_id_1": levo["id"], "interacting_substance": "Coffee",
         "severity": "minor", "effect": "May reduce absorption",
         "recommendation": "Wait 30 minutes before coffee"},
        {"interaction_type": "drug_supplement", "medication_id_1": levo["id"],
         "interacting_substance": "Iron supplements", "severity": "major",
         "effect": "Significantly reduces thyroid hormone absorption",
         "recommendation": "Space doses at least 4 hours apart"},
        {"interaction_type": "drug_drug", "medication_id_1": metformin["id"], "medication_id_2": lisinopril["id"],
         "severity": "moderate", "effect": "May increase hypoglycemia risk",
         "recommendation": "Monitor blood glucose"},
    ])
    return {"levo": levo, "metformin": metformin, "lisinopril": lisinopril}


def new_med(name, **overrides):
    body = {
        "medication_name": name,
        "dosage": "50mcg",
        "frequency": "once daily",
        "schedule_times": ["08:00"],
        "start_date": "2026-03-01",
        "end_date": "2026-03-07",
    }
    body.update(overrides)
    return body


def test_catalog_for_species_includes_all(client, catalog):
    response = client.get("/api/v1/medications/catalog", params={"species": "dog"})
    assert [m["name"] for m in response.json()] == ["Carprofen", "Omega-3 Fish Oil"]


def test_add_medication_schedules_doses(client, db, catalog):
    response = client.post("/api/v1/medications", json=new_med("Levothyroxine", schedule_times=["08:00", "20:00"]))
    assert response.status_code == 201
    body = response.json()
    assert body["active"] is True
    assert body["medication_id"] == catalog["levo"]["id"]

    doses = db.rows("medication_doses")
    assert len(doses) == 14
    assert {d["user_medication_id"] for d in doses} == {body["id"]}


def test_adding_second_medication_does_not_duplicate_first_schedule(client, db, catalog):
    first = client.post("/api/v1/medications", json=new_med("Levothyroxine")).json()
    client.post("/api/v1/medications", json=new_med("Metformin"))
    first_doses = [d for d in db.rows("medication_doses") if d["user_medication_id"] == first["id"]]
    assert len(first_doses) == 7


def test_invalid_schedule_time_is_400_and_nothing_written(client, db, catalog):
    response = client.post("/api/v1/medications", json=new_med("Levothyroxine", schedule_times=["8am"]))
    assert response.status_code == 400
    assert db.rows("user_medications") == []


def test_end_before_start_is_rejected(client, catalog):
    response = client.post("/api/v1/medications", json=new_med("Levothyroxine", end_date="2026-02-01"))
    assert response.status_code == 422


def test_schedule_longer_than_limit_is_rejected(client, db, catalog):
    response = client.post(
        "/api/v1/medications",
        json=new_med("Levothyroxine", end_date="2100-01-01", schedule_times=["06:00", "12:00", "18:00", "22:00"]),
    )
    assert response.status_code == 422
    assert db.rows("user_medications") == []
    assert db.rows("medication_doses") == []


def test_year_long_schedule_is_allowed(client, db, catalog):
    response = client.post("/api/v1/medications", json=new_med("Levothyroxine", end_date="2027-02-28"))
    assert response.status_code == 201
    assert len(db.rows("medication_doses")) == 365


def test_catalog_match_treats_wildcards_literally(client, catalog):
    """An underscore in the name must not match any single character"""
    body = client.post("/api/v1/medications", json=new_med("Met_ormin")).json()
    assert body["medication_id"] is None


def test_list_and_deactivate(client, catalog):
    med = client.post("/api/v1/medications", json=new_med("Levothyroxine")).json()
    assert len(client.get("/api/v1/medications").json()) == 1

    response = client.delete(f"/api/v1/medications/{med['id']}")
    assert response.status_code == 200
    assert response.json()["active"] is False
    assert client.get("/api/v1/medications").json() == []


def test_deactivate_unknown_is_404(client):
    assert client.delete("/api/v1/medications/missing").status_code == 404


# ============================================================================
# Interactions
# ============================================================================

def test_food_and_supplement_interactions_always_alert(client, db, catalog):
    client.post("/api/v1/medications", json=new_med("levothyroxine"))
    alerts = client.get("/api/v1/medications/alerts").json()
    # Most severe first
    assert [a["severity"] for a in alerts] == ["major", "minor"]
    assert alerts[0]["message"] == (
        "levothyroxine + Iron supplements: Significantly reduces thyroid hormone absorption"
    )
    assert alerts[0]["alert_type"] == "drug_supplement"


def test_drug_drug_needs_both_medications(client, db, catalog):
    client.post("/api/v1/medications", json=new_med("Metformin"))
    assert client.get("/api/v1/medications/alerts").json() == []

    lisinopril = client.post("/api/v1/medications", json=new_med("Lisinopril")).json()
    alerts = client.get("/api/v1/medications/alerts").json()
    assert len(alerts) == 1
    assert alerts[0]["message"] == "Lisinopril + Metformin: May increase hypoglycemia risk"
    assert lisinopril["id"] in alerts[0]["user_medication_ids"]
    assert len(alerts[0]["user_medication_ids"]) == 2


def test_interaction_is_not_alerted_twice(client, db, catalog):
    client.post("/api/v1/medications", json=new_med("Levothyroxine"))
    client.post("/api/v1/medications", json=new_med("Levothyroxine", dosage="75mcg"))
    assert len(db.rows("user_interaction_alerts")) == 2


def test_acknowledged_alert_is_hidden(client, db, catalog):
    client.post("/api/v1/medications", json=new_med("Levothyroxine"))
    alert = client.get("/api/v1/medications/alerts").json()[0]

    response = client.post(f"/api/v1/medications/alerts/{alert['id']}/acknowledge")
    assert response.status_code == 200
    assert response.json()["acknowledged"] is True
    assert response.json()["acknowledged_at"]
    assert len(client.get("/api/v1/medications/alerts").json()) == 1


def test_alerts_sorted_by_severity_then_newest(client, db):
    db.seed("user_interaction_alerts", [
        {"profile_id": USER_ID, "alert_type": "drug_food", "severity": "moderate", "message": "old moderate",
         "recommendation": "-", "acknowledged": False, "dismissed": False, "user_medication_ids": []},
        {"profile_id": USER_ID, "alert_type": "drug_food", "severity": "severe", "message": "severe",
         "recommendation": "-", "acknowledged": False, "dismissed": False, "user_medication_ids": []},
        {"profile_id": USER_ID, "alert_type": "drug_food", "severity": "moderate", "message": "new moderate",
         "recommendation": "-", "acknowledged": False, "dismissed": False, "user_medication_ids": []},
        {"profile_id": USER_ID, "alert_type": "drug_food", "severity": "major", "message": "dismissed",
         "recommendation": "-", "acknowledged": False, "dismissed": True, "user_medication_ids": []},
        {"profile_id": OTHER_USER_ID, "alert_type": "drug_food", "severity": "severe", "message": "theirs",
         "recommendation": "-", "acknowledged": False, "dismissed": False, "user_medication_ids": []},
    ])
    messages = [a["message"] for a in client.get("/api/v1/medications/alerts").json()]
    assert messages == ["severe", "new moderate", "old moderate"]


# ============================================================================
# Doses
# ============================================================================

def test_todays_doses_with_names(client, db, catalog):
    med = client.post("/api/v1/medications", json=new_med("Levothyroxine", schedule_times=["20:00", "08:00"])).json()
    db.seed("medication_doses", [{"user_medication_id": "gone", "profile_id": USER_ID,
                                  "scheduled_time": "2026-03-02T12:00:00", "status": "scheduled"}])

    response = client.get("/api/v1/medications/doses/today", params={"day": "2026-03-02"})
    doses = response.json()
    assert [d["scheduled_time"] for d in doses] == [
        "2026-03-02T08:00:00", "2026-03-02T12:00:00", "2026-03-02T20:00:00",
    ]
    assert [d["medication_name"] for d in doses] == ["Levothyroxine", "Unknown", "Levothyroxine"]
    assert doses[0]["user_medication_id"] == med["id"]


def test_mark_taken_and_skip(client, db, catalog):
    client.post("/api/v1/medications", json=new_med("Levothyroxine"))
    dose_a, dose_b = db.rows("medication_doses")[:2]

    taken = client.post(f"/api/v1/medications/doses/{dose_a['id']}/taken").json()
    assert taken["status"] == "taken"
    assert taken["taken_time"]
    assert taken["medication_name"] == "Levothyroxine"

    skipped = client.post(
        f"/api/v1/medications/doses/{dose_b['id']}/skip", json={"missed_reason": "Nauseous"}
    ).json()
    assert skipped["status"] == "skipped"
    assert skipped["missed_reason"] == "Nauseous"


def test_other_users_dose_is_404(client, db):
    dose = db.seed("medication_doses", [{"user_medication_id": "x", "profile_id": OTHER_USER_ID,
                                         "scheduled_time": "2026-03-02T08:00:00", "status": "scheduled"}])[0]
    assert client.post(f"/api/v1/medications/doses/{dose['id']}/taken").status_code == 404


def test_adherence(client, db, catalog):
    today = date.today()
    med = client.post("/api/v1/medications", json=new_med(
        "Levothyroxine", start_date=(today + timedelta(days=2)).isoformat(), end_date=None,
    )).json()
    now = datetime.utcnow()
    db.seed("medication_doses", [
        {"user_medication_id": med["id"], "profile_id": USER_ID,
         "scheduled_time": (now - timedelta(days=d, hours=1)).isoformat(), "status": status}
        for d, status in [(0, "taken"), (1, "taken"), (2, "missed"), (3, "skipped"), (10, "taken")]
    ])

    body = client.get(f"/api/v1/medications/{med['id']}/adherence", params={"days": 7}).json()
    assert body["doses_due"] == 4
    assert body["doses_taken"] == 2
    assert body["doses_missed"] == 1
    assert body["doses_skipped"] == 1
    assert body["adherence_rate"] == 50.0


def test_adherence_with_nothing_due_is_zero(client, catalog):
    future = (date.today() + timedelta(days=5)).isoformat()
    med = client.post("/api/v1/medications", json=new_med("Levothyroxine", start_date=future, end_date=future)).json()
    body = client.get(f"/api/v1/medications/{med['id']}/adherence").json()
    assert body["doses_due"] == 0
    assert body["adherence_rate"] == 0.0
