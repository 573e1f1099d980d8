"""
Food and dish safety rules.

Pure functions over rows already fetched from Supabase. Callers do the lookups
(ingredient by name, contraindications by ingredient and species) and pass the
rows in. Rules are evaluated in a fixed order and the first match wins:

    species toxicity warning -> species-unsafe flag -> contraindication -> safe
"""

from typing import Any, Dict, List, Optional, Tuple

SAFE = "safe"
BENEFICIAL = "beneficial"
NEUTRAL = "neutral"
CAUTION = "caution"
AVOID = "avoid"

RISK_FILTERS = ("all", "safe", "beneficial")

PET_SPECIES = ("dog", "cat")

SEVERITY_RANK = {"minor": 1, "moderate": 2, "major": 3, "severe": 4}

NOT_IN_DATABASE_RATIONALE = (
    "This food is not in our database yet. Please consult with a healthcare "
    "professional if you have specific dietary concerns."
)
GENERALLY_SAFE_RATIONALE = "This food appears to be generally safe for consumption."
DISH_REVIEWED_RATIONALE = "This dish has been reviewed for your profile."
DISH_SAFE_RATIONALE = "This dish appears safe based on your health profile."
DISH_UNASSESSED_RATIONALE = "Unable to assess risk at this time."


def effective_species(profile: Optional[Dict[str, Any]]) -> str:
    """Species key used in ingredient safety data: dog/cat for pets, human otherwise."""
    if not profile:
        return "human"
    if profile.get("species_type") == "pet":
        pet_species = (profile.get("pet_species") or "").strip().lower()
        if pet_species in PET_SPECIES:
            return pet_species
    return "human"


def toxic_warning_for(ingredient: Dict[str, Any], species: str) -> Optional[Dict[str, Any]]:
    """First toxicity warning that lists the species, or None."""
    for warning in ingredient.get("toxicity_warnings") or []:
        if species in (warning.get("species") or []):
            return warning
    return None


def is_unsafe_for_species(ingredient: Dict[str, Any], species: str) -> bool:
    # A missing key means "unknown", not unsafe
    species_safe = ingredient.get("species_safe") or {}
    return species_safe.get(species) is False


def _condition_names(rows: List[Dict[str, Any]]) -> str:
    return ", ".join(row["condition_name"] for row in rows)


def classify_food(
    ingredient: Optional[Dict[str, Any]],
    species: str,
    contraindications: Optional[List[Dict[str, Any]]] = None,
) -> Tuple[str, str]:
    """
    Classify a single looked-up food for a species.

    Returns (classification, rationale) where classification is one of
    safe / caution / avoid.
    """
    if ingredient is None:
        return CAUTION, NOT_IN_DATABASE_RATIONALE

    name = ingredient["name"]

    toxic = toxic_warning_for(ingredient, species)
    if toxic:
        effect = toxic.get("effect") or "Can cause serious health issues."
        return AVOID, f"DANGER: {name} is toxic to {species}s. {effect}"

    if is_unsafe_for_species(ingredient, species):
        return AVOID, f"{name} is not safe for {species} consumption."

    contraindications = contraindications or []
    avoid_rows = [c for c in contraindications if c.get("contraindication_type") == "avoid"]
    limit_rows = [
        c for c in contraindications
        if c.get("contraindication_type") in ("caution", "limit")
    ]
    if avoid_rows:
        return CAUTION, (
            f"Use caution: {name} should be avoided if you have {_condition_names(avoid_rows)}."
        )
    if limit_rows:
        return CAUTION, (
            f"Monitor intake: {name} should be limited if you have {_condition_names(limit_rows)}."
        )

    return SAFE, GENERALLY_SAFE_RATIONALE


class DishRiskScorer:
    """Folds a dish's ingredients into one risk assessment for a species."""

    def __init__(self, species: str):
        self.species = species
        self.classification = NEUTRAL
        self.score = 50
        self.rationale = DISH_REVIEWED_RATIONALE
        self.contraindications: List[Dict[str, Any]] = []
        self.flagged_ingredient_ids: List[str] = []
        self.stopped = False

    def _flag(self, ingredient: Dict[str, Any], reason: str, severity: str) -> None:
        self.contraindications.append({
            "ingredient": ingredient["name"],
            "reason": reason,
            "severity": severity,
        })
        if ingredient.get("id"):
            self.flagged_ingredient_ids.append(ingredient["id"])

    def apply_species_rules(self, ingredient: Dict[str, Any]) -> bool:
        """Apply toxicity and species-safety rules. Returns True once the dish is settled as avoid."""
        name = ingredient["name"]

        toxic = toxic_warning_for(ingredient, self.species)
        if toxic:
            self.classification = AVOID
            self.score = 95
            self.rationale = f"DANGER: {name} is toxic to {self.species}s. {toxic.get('effect') or ''}"
            self._flag(ingredient, "toxic", "critical")
            self.stopped = True
            return True

        if is_unsafe_for_species(ingredient, self.species):
            self.classification = AVOID
            self.score = 90
            self.rationale = f"{name} is not safe for {self.species} consumption."
            self._flag(ingredient, "unsafe_for_species", "high")
            self.stopped = True
            return True

        return False

    def apply_contraindication(
        self, ingredient: Dict[str, Any], contraindication: Optional[Dict[str, Any]]
    ) -> None:
        if not contraindication:
            return
        kind = contraindication.get("contraindication_type")
        if kind == "avoid":
            self.classification = CAUTION
            self.score = max(self.score, 70)
            reason = contraindication.get("rationale") or "contraindicated for a listed condition"
            self.rationale = f"Contains {ingredient['name']}: {reason}"
            self._flag(ingredient, reason, "medium")
        elif kind in ("limit", "caution") and self.classification == NEUTRAL:
            self.classification = CAUTION
            self.score = max(self.score, 60)

    def result(self) -> Dict[str, Any]:
        if self.classification == NEUTRAL and not self.contraindications:
            self.classification = SAFE
            self.score = 20
            self.rationale = DISH_SAFE_RATIONALE
        return {
            "risk_classification": self.classification,
            "risk_score": self.score,
            "rationale": self.rationale,
            "contraindications": list(self.contraindications),
        }


def unassessed_dish() -> Dict[str, Any]:
    return {
        "risk_classification": NEUTRAL,
        "risk_score": 50,
        "rationale": DISH_UNASSESSED_RATIONALE,
        "contraindications": [],
        "recommended_substitutions": [],
    }


def matches_risk_filter(classification: Optional[str], risk_filter: str) -> bool:
    """Dish list filter. 'all' still hides avoid."""
    if risk_filter == "safe":
        return classification in (SAFE, BENEFICIAL)
    if risk_filter == "beneficial":
        return classification == BENEFICIAL
    return classification != AVOID


def severity_rank(severity: Optional[str]) -> int:
    return SEVERITY_RANK.get((severity or "").lower(), 0)
