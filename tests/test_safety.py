"""
Tests for the food and dish safety rules in core/safety.py.
"""

from precision_health.core.safety import (
    AVOID, CAUTION, NEUTRAL, SAFE,
    DishRiskScorer, classify_food, effective_species, matches_risk_filter,
    severity_rank, toxic_warning_for, unassessed_dish,
    NOT_IN_DATABASE_RATIONALE, GENERALLY_SAFE_RATIONALE, DISH_SAFE_RATIONALE,
)

ONION = {
    "id": "ing-onion",
    "name": "Onion",
    "species_safe": {"human": True, "dog": False, "cat": False},
    "toxicity_warnings": [{"species": ["dog", "cat"], "compound": "thiosulfate", "effect": "hemolytic_anemia"}],
}
SWEET_POTATO = {
    "id": "ing-sp",
    "name": "Sweet Potato",
    "species_safe": {"human": True, "dog": True, "cat": False},
    "toxicity_warnings": [],
}
SALMON = {
    "id": "ing-salmon",
    "name": "Salmon",
    "species_safe": {"human": True, "dog": True, "cat": True},
    "toxicity_warnings": [],
}


def contra(kind, condition="Chronic Kidney Disease", rationale="High phosphorus"):
    return {"condition_name": condition, "contraindication_type": kind, "rationale": rationale}


# ============================================================================
# effective_species
# ============================================================================

def test_effective_species_for_pet_uses_pet_species():
    """A pet profile resolves to its pet species"""
    assert effective_species({"species_type": "pet", "pet_species": "Dog"}) == "dog"
    assert effective_species({"species_type": "pet", "pet_species": "cat"}) == "cat"


def test_effective_species_defaults_to_human():
    assert effective_species(None) == "human"
    assert effective_species({"species_type": "human"}) == "human"
    assert effective_species({"species_type": "pet", "pet_species": "parrot"}) == "human"


# ============================================================================
# classify_food
# ============================================================================

def test_unknown_food_is_caution():
    assert classify_food(None, "human") == (CAUTION, NOT_IN_DATABASE_RATIONALE)


def test_toxic_food_is_avoid_with_danger_message():
    classification, rationale = classify_food(ONION, "dog")
    assert classification == AVOID
    assert rationale == "DANGER: Onion is toxic to dogs. hemolytic_anemia"


def test_toxic_warning_without_effect_uses_default_text():
    ingredient = {**ONION, "toxicity_warnings": [{"species": ["cat"]}]}
    _, rationale = classify_food(ingredient, "cat")
    assert rationale == "DANGER: Onion is toxic to cats. Can cause serious health issues."


def test_species_unsafe_food_is_avoid():
    classification, rationale = classify_food(SWEET_POTATO, "cat")
    assert classification == AVOID
    assert rationale == "Sweet Potato is not safe for cat consumption."


def test_missing_species_key_is_not_unsafe():
    ingredient = {"name": "Kale", "species_safe": {"human": True}, "toxicity_warnings": []}
    assert classify_food(ingredient, "dog")[0] == SAFE


def test_avoid_contraindication_gives_caution():
    classification, rationale = classify_food(SALMON, "human", [contra("avoid"), contra("avoid", "Gout")])
    assert classification == CAUTION
    assert rationale == "Use caution: Salmon should be avoided if you have Chronic Kidney Disease, Gout."


def test_limit_contraindication_gives_monitor_message():
    classification, rationale = classify_food(SALMON, "human", [contra("limit")])
    assert classification == CAUTION
    assert rationale == "Monitor intake: Salmon should be limited if you have Chronic Kidney Disease."


def test_toxicity_wins_over_contraindications():
    """First match wins: a contraindication never softens an avoid"""
    classification, _ = classify_food(ONION, "dog", [contra("avoid")])
    assert classification == AVOID


def test_safe_food():
    assert classify_food(SALMON, "human") == (SAFE, GENERALLY_SAFE_RATIONALE)


def test_toxic_warning_for_other_species_is_ignored():
    assert toxic_warning_for(ONION, "human") is None


# ============================================================================
# DishRiskScorer
# ============================================================================

def test_dish_with_no_flags_is_safe():
    scorer = DishRiskScorer("human")
    scorer.apply_species_rules(SALMON)
    result = scorer.result()
    assert result["risk_classification"] == SAFE
    assert result["risk_score"] == 20
    assert result["rationale"] == DISH_SAFE_RATIONALE


def test_toxic_ingredient_stops_scoring():
    scorer = DishRiskScorer("dog")
    assert scorer.apply_species_rules(ONION) is True
    result = scorer.result()
    assert result["risk_classification"] == AVOID
    assert result["risk_score"] == 95
    assert result["contraindications"] == [
        {"ingredient": "Onion", "reason": "toxic", "severity": "critical"}
    ]
    assert scorer.flagged_ingredient_ids == ["ing-onion"]


def test_toxic_dish_rationale_keeps_text_after_missing_effect():
    scorer = DishRiskScorer("cat")
    scorer.apply_species_rules({**ONION, "toxicity_warnings": [{"species": ["cat"]}]})
    assert scorer.result()["rationale"] == "DANGER: Onion is toxic to cats. "


def test_unsafe_ingredient_scores_90():
    scorer = DishRiskScorer("cat")
    assert scorer.apply_species_rules(SWEET_POTATO) is True
    result = scorer.result()
    assert result["risk_score"] == 90
    assert result["contraindications"][0]["reason"] == "unsafe_for_species"
    assert result["contraindications"][0]["severity"] == "high"


def test_avoid_contraindication_in_dish():
    scorer = DishRiskScorer("human")
    scorer.apply_contraindication(SALMON, contra("avoid", rationale="Too much phosphorus"))
    result = scorer.result()
    assert result["risk_classification"] == CAUTION
    assert result["risk_score"] == 70
    assert result["rationale"] == "Contains Salmon: Too much phosphorus"
    assert result["contraindications"][0]["severity"] == "medium"


def test_limit_contraindication_only_applies_while_neutral():
    scorer = DishRiskScorer("human")
    scorer.apply_contraindication(SALMON, contra("limit"))
    assert scorer.classification == CAUTION
    assert scorer.score == 60
    # A later avoid raises the score but a later limit does not lower it
    scorer.apply_contraindication(SALMON, contra("avoid"))
    scorer.apply_contraindication(SALMON, contra("limit"))
    assert scorer.score == 70


def test_limit_only_dish_stays_caution():
    """A limit contraindication adds no entry but still keeps the dish out of safe"""
    scorer = DishRiskScorer("human")
    scorer.apply_contraindication(SALMON, contra("caution"))
    result = scorer.result()
    assert result["risk_classification"] == CAUTION
    assert result["contraindications"] == []


def test_unassessed_dish_is_neutral():
    result = unassessed_dish()
    assert result["risk_classification"] == NEUTRAL
    assert result["risk_score"] == 50
    assert result["recommended_substitutions"] == []


# ============================================================================
# Filters and severity
# ============================================================================

def test_risk_filters():
    assert matches_risk_filter("caution", "all")
    assert not matches_risk_filter("avoid", "all")
    assert matches_risk_filter("beneficial", "safe")
    assert not matches_risk_filter("neutral", "safe")
    assert matches_risk_filter("beneficial", "beneficial")
    assert not matches_risk_filter("safe", "beneficial")


def test_severity_rank_order():
    ranks = [severity_rank(s) for s in ("minor", "moderate", "major", "severe")]
    assert ranks == sorted(ranks)
    assert severity_rank("unknown") == 0
