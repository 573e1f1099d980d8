from supabase import Client
from precision_health.core.safety import classify_food
from precision_health.config.settings import settings
from precision_health.modules.food_lookup.schemas import (
    FoodLookupRequest, FoodLookupResponse, FoodLookupHistoryResponse
)
from precision_health.modules.ingredients.service import IngredientService
from precision_health.modules.profiles.service import ProfileService
from typing import List, Optional
from fastapi import HTTPException
from datetime import datetime
import logging

logger = logging.getLogger(__name__)


class FoodLookupService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.ingredients = IngredientService(supabase)
        self.profiles = ProfileService(supabase)

    def lookup(self, profile_id: str, request: FoodLookupRequest) -> FoodLookupResponse:
        """
        Classify a food for the caller's effective species and record the lookup.

        The ingredient is matched by case-insensitive substring. Contraindications
        are only loaded for the species the profile resolves to.
        """
        food_name = request.food_name.strip()
        if not food_name:
            raise HTTPException(status_code=400, detail="food_name is required")

        try:
            species = self.profiles.get_species(profile_id)
            ingredient = self.ingredients.find_by_substring(food_name)

            contraindications = []
            if ingredient:
                contraindications = self.ingredients.contraindications_for(ingredient["id"], species)

            classification, rationale = classify_food(ingredient, species, contraindications)
            identified = [ingredient["name"]] if ingredient else []

            self._record(profile_id, food_name, classification, rationale, identified)

            logger.debug("Food lookup %r for %s -> %s", food_name, species, classification)
            return FoodLookupResponse(
                food_name=food_name,
                safety_classification=classification,
                rationale=rationale,
                species=species,
                ingredients_identified=identified,
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error looking up food: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def _record(self, profile_id: str, food_name: str, classification: str, rationale: str,
                identified: List[str]) -> None:
        """Append to food_lookup_history. A failed write is logged; the lookup result still stands."""
        try:
            self.supabase.table("food_lookup_history").insert({
                "profile_id": profile_id,
                "food_name": food_name,
                "safety_classification": classification,
                "rationale": rationale,
                "ingredients_identified": identified,
                "lookup_date": datetime.utcnow().isoformat(),
            }).execute()
        except Exception as e:
            logger.warning(f"Could not record food lookup {food_name!r}: {e}")

    def recent(self, profile_id: str, limit: Optional[int] = None) -> List[FoodLookupHistoryResponse]:
        try:
            result = self.supabase.table("food_lookup_history")\
                .select("*")\
                .eq("profile_id", profile_id)\
                .order("lookup_date", desc=True)\
                .limit(limit or settings.recent_lookups_limit)\
                .execute()
            return [
                FoodLookupHistoryResponse(**{**row, "ingredients_identified": row.get("ingredients_identified") or []})
                for row in result.data or []
            ]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
