from supabase import Client
from precision_health.modules.recipes.schemas import RecipeResponse, RecipeFeedback, UserRecipeResponse
from typing import Any, Dict, List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

RECIPE_SPECIES = ("human", "dog", "cat")
_LIST_FIELDS = ("ingredients", "condition_tags", "cultural_tags", "dietary_tags")


def _to_recipe(row: Dict[str, Any], is_favorite: bool = False) -> RecipeResponse:
    data = dict(row)
    for field in _LIST_FIELDS:
        if data.get(field) is None:
            data[field] = []
    data["is_favorite"] = is_favorite
    return RecipeResponse(**data)


def _matches_search(row: Dict[str, Any], term: str) -> bool:
    return term in (row.get("name") or "").lower() or term in (row.get("description") or "").lower()


class RecipeService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _favorite_ids(self, profile_id: str) -> set:
        result = self.supabase.table("user_recipes")\
            .select("recipe_id")\
            .eq("profile_id", profile_id)\
            .eq("is_favorite", True)\
            .execute()
        return {row["recipe_id"] for row in result.data or []}

    def _user_recipe_row(self, profile_id: str, recipe_id: str) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("user_recipes")\
            .select("*")\
            .eq("profile_id", profile_id)\
            .eq("recipe_id", recipe_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            return None
        return result.data

    def _require_recipe(self, recipe_id: str) -> Dict[str, Any]:
        result = self.supabase.table("recipes")\
            .select("*")\
            .eq("id", recipe_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=404, detail="Recipe not found")
        return result.data

    def list_recipes(self, profile_id: str, species: str = "human", search: Optional[str] = None) -> List[RecipeResponse]:
        """Recipes for a species ('all' for every species), newest first, with favorites marked"""
        try:
            if species != "all" and species not in RECIPE_SPECIES:
                raise HTTPException(status_code=400, detail=f"Unknown species: {species}")

            query = self.supabase.table("recipes").select("*")
            if species != "all":
                query = query.eq("species_type", species)
            rows = query.order("created_at", desc=True).execute().data or []

            term = (search or "").strip().lower()
            if term:
                rows = [row for row in rows if _matches_search(row, term)]

            favorites = self._favorite_ids(profile_id)
            return [_to_recipe(row, row["id"] in favorites) for row in rows]
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error loading recipes: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_recipe(self, profile_id: str, recipe_id: str) -> RecipeResponse:
        try:
            row = self._require_recipe(recipe_id)
            user_row = self._user_recipe_row(profile_id, recipe_id)
            return _to_recipe(row, bool(user_row and user_row.get("is_favorite")))
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_recipes_by_ids(self, recipe_ids: List[str]) -> List[Dict[str, Any]]:
        """Raw recipe rows, used when building shopping lists from a meal plan"""
        if not recipe_ids:
            return []
        result = self.supabase.table("recipes")\
            .select("*")\
            .in_("id", recipe_ids)\
            .execute()
        return result.data or []

    def list_user_recipes(self, profile_id: str) -> List[UserRecipeResponse]:
        try:
            result = self.supabase.table("user_recipes")\
                .select("*")\
                .eq("profile_id", profile_id)\
                .order("created_at", desc=True)\
                .execute()
            return [UserRecipeResponse(**row) for row in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def toggle_favorite(self, profile_id: str, recipe_id: str) -> UserRecipeResponse:
        """Flip is_favorite, creating the user_recipes row on first favorite"""
        try:
            self._require_recipe(recipe_id)
            existing = self._user_recipe_row(profile_id, recipe_id)

            if existing:
                result = self.supabase.table("user_recipes")\
                    .update({"is_favorite": not existing.get("is_favorite")})\
                    .eq("id", existing["id"])\
                    .eq("profile_id", profile_id)\
                    .execute()
            else:
                result = self.supabase.table("user_recipes").insert({
                    "profile_id": profile_id,
                    "recipe_id": recipe_id,
                    "is_favorite": True,
                }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to update favorite")

            return UserRecipeResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def record_feedback(self, profile_id: str, recipe_id: str, feedback: RecipeFeedback) -> UserRecipeResponse:
        try:
            self._require_recipe(recipe_id)
            payload = {
                "profile_id": profile_id,
                "recipe_id": recipe_id,
                **feedback.model_dump(),
            }
            existing = self._user_recipe_row(profile_id, recipe_id)
            if existing:
                payload["is_favorite"] = existing.get("is_favorite", False)

            result = self.supabase.table("user_recipes")\
                .upsert(payload, on_conflict="profile_id,recipe_id")\
                .execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to save feedback")

            return UserRecipeResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
