from supabase import Client
from precision_health.database.supabase_client import escape_like
from precision_health.modules.ingredients.schemas import (
    IngredientCreate, IngredientResponse,
    ContraindicationCreate, ContraindicationResponse, SubstitutionResponse
)
from typing import Any, Dict, List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class IngredientService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    # ------------------------------------------------------------------
    # Lookups shared with food_lookup and restaurants
    # ------------------------------------------------------------------

    def find_by_substring(self, query: str) -> Optional[Dict[str, Any]]:
        """First ingredient whose name contains the query, case-insensitive"""
        result = self.supabase.table("ingredients")\
            .select("*")\
            .ilike("name", f"%{escape_like(query.strip())}%")\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def find_by_exact_name(self, name: str) -> Optional[Dict[str, Any]]:
        """Ingredient with exactly this name, ignoring case"""
        result = self.supabase.table("ingredients")\
            .select("*")\
            .ilike("name", escape_like(name.strip()))\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def contraindications_for(self, ingredient_id: str, species: str) -> List[Dict[str, Any]]:
        result = self.supabase.table("ingredient_contraindications")\
            .select("*")\
            .eq("ingredient_id", ingredient_id)\
            .eq("species_type", species)\
            .execute()
        return result.data or []

    def substitute_names(self, ingredient_ids: List[str]) -> List[str]:
        """Names of substitute ingredients for any of the given ingredients, in first-seen order"""
        if not ingredient_ids:
            return []
        subs = self.supabase.table("ingredient_substitutions")\
            .select("substitute_ingredient_id")\
            .in_("original_ingredient_id", ingredient_ids)\
            .execute()
        substitute_ids = []
        for row in subs.data or []:
            if row["substitute_ingredient_id"] not in substitute_ids:
                substitute_ids.append(row["substitute_ingredient_id"])
        if not substitute_ids:
            return []
        names = self.supabase.table("ingredients")\
            .select("id, name")\
            .in_("id", substitute_ids)\
            .execute()
        by_id = {row["id"]: row["name"] for row in names.data or []}
        return [by_id[i] for i in substitute_ids if i in by_id]

    # ------------------------------------------------------------------
    # Catalog endpoints
    # ------------------------------------------------------------------

    def list_ingredients(self, category: Optional[str] = None, search: Optional[str] = None) -> List[IngredientResponse]:
        try:
            query = self.supabase.table("ingredients").select("*")
            if category:
                query = query.eq("category", category)
            if search and search.strip():
                query = query.ilike("name", f"%{escape_like(search.strip())}%")
            result = query.order("name").execute()
            return [IngredientResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error listing ingredients: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def get_ingredient(self, ingredient_id: str) -> IngredientResponse:
        try:
            result = self.supabase.table("ingredients")\
                .select("*")\
                .eq("id", ingredient_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Ingredient not found")

            return IngredientResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def create_ingredient(self, ingredient_data: IngredientCreate) -> IngredientResponse:
        try:
            if self.find_by_exact_name(ingredient_data.name):
                raise HTTPException(status_code=400, detail="Ingredient with this name already exists")

            payload = ingredient_data.model_dump()
            result = self.supabase.table("ingredients").insert(payload).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create ingredient")

            logger.info("Created ingredient %s", ingredient_data.name)
            return IngredientResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_contraindications(self, ingredient_id: str, species_type: Optional[str] = None) -> List[ContraindicationResponse]:
        try:
            self.get_ingredient(ingredient_id)
            query = self.supabase.table("ingredient_contraindications")\
                .select("*")\
                .eq("ingredient_id", ingredient_id)
            if species_type:
                query = query.eq("species_type", species_type)
            result = query.execute()
            return [ContraindicationResponse(**row) for row in result.data or []]
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def add_contraindication(self, ingredient_id: str, data: ContraindicationCreate) -> ContraindicationResponse:
        try:
            self.get_ingredient(ingredient_id)
            payload = data.model_dump()
            payload["ingredient_id"] = ingredient_id
            result = self.supabase.table("ingredient_contraindications").insert(payload).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create contraindication")

            return ContraindicationResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_substitutions(self, ingredient_id: str) -> List[SubstitutionResponse]:
        try:
            self.get_ingredient(ingredient_id)
            result = self.supabase.table("ingredient_substitutions")\
                .select("*")\
                .eq("original_ingredient_id", ingredient_id)\
                .execute()
            rows = result.data or []
            if not rows:
                return []

            names = self.supabase.table("ingredients")\
                .select("id, name")\
                .in_("id", [row["substitute_ingredient_id"] for row in rows])\
                .execute()
            by_id = {row["id"]: row["name"] for row in names.data or []}

            return [
                SubstitutionResponse(
                    id=row["id"],
                    substitute_ingredient_id=row["substitute_ingredient_id"],
                    substitute_name=by_id.get(row["substitute_ingredient_id"]),
                    substitution_ratio=row.get("substitution_ratio"),
                    notes=row.get("notes"),
                )
                for row in rows
            ]
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
