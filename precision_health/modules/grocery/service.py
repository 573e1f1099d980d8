from supabase import Client
from precision_health.database.supabase_client import escape_like
from precision_health.config.settings import settings
from precision_health.modules.grocery import cart
from precision_health.modules.grocery.schemas import (
    StoreResponse, ProductResponse, ShoppingListCreate, GenerateFromMealPlanRequest,
    ShoppingListResponse
)
from precision_health.modules.meal_plans.service import MealPlanService, planned_meal_counts, planned_recipe_ids
from precision_health.modules.recipes.service import RecipeService
from typing import Any, Callable, Dict, List, Optional
from fastapi import HTTPException
from datetime import date
import logging

logger = logging.getLogger(__name__)

EDITABLE_STATUSES = ("draft", "ready")


def aggregate_recipe_ingredients(
    recipes: List[Dict[str, Any]], servings: Optional[Dict[str, int]] = None
) -> Dict[str, float]:
    """
    Sum ingredient quantities by name across recipes.

    Each recipe is weighted by its entry in servings (default 1). Missing
    quantities count as 1.
    """
    totals: Dict[str, float] = {}
    for recipe in recipes:
        portions = (servings or {}).get(recipe.get("id"), 1)
        for ingredient in recipe.get("ingredients") or []:
            name = (ingredient.get("ingredient") or "").strip()
            if not name:
                continue
            totals[name] = totals.get(name, 0) + (ingredient.get("quantity") or 1) * portions
    return totals


class GroceryService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.meal_plans = MealPlanService(supabase)
        self.recipes = RecipeService(supabase)

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def list_stores(self) -> List[StoreResponse]:
        try:
            result = self.supabase.table("grocery_stores")\
                .select("*")\
                .eq("delivery_available", True)\
                .order("name")\
                .execute()
            return [StoreResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error loading stores: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def list_products(self, store_id: str, search: Optional[str] = None) -> List[ProductResponse]:
        try:
            query = self.supabase.table("grocery_products")\
                .select("*")\
                .eq("store_id", store_id)\
                .eq("in_stock", True)
            if search and search.strip():
                query = query.ilike("name", f"%{escape_like(search.strip())}%")
            result = query.order("name").execute()
            return [ProductResponse(**row) for row in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def _get_product(self, product_id: str) -> Dict[str, Any]:
        result = self.supabase.table("grocery_products")\
            .select("*")\
            .eq("id", product_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=404, detail="Product not found")
        return result.data

    def _first_product_matching(self, ingredient_name: str, store_id: Optional[str]) -> Optional[Dict[str, Any]]:
        query = self.supabase.table("grocery_products")\
            .select("*")\
            .ilike("name", f"%{escape_like(ingredient_name)}%")\
            .eq("in_stock", True)
        if store_id:
            query = query.eq("store_id", store_id)
        result = query.limit(1).execute()
        return result.data[0] if result.data else None

    # ------------------------------------------------------------------
    # Shopping lists
    # ------------------------------------------------------------------

    def list_lists(self, profile_id: str) -> List[ShoppingListResponse]:
        try:
            result = self.supabase.table("smart_shopping_lists")\
                .select("*")\
                .eq("profile_id", profile_id)\
                .order("created_at", desc=True)\
                .execute()
            return [ShoppingListResponse(**row) for row in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def _get_list_row(self, profile_id: str, list_id: str) -> Dict[str, Any]:
        result = self.supabase.table("smart_shopping_lists")\
            .select("*")\
            .eq("id", list_id)\
            .eq("profile_id", profile_id)\
            .maybe_single()\
            .execute()
        if not result or not result.data:
            raise HTTPException(status_code=404, detail="Shopping list not found")
        return result.data

    def create_list(self, profile_id: str, list_data: ShoppingListCreate) -> ShoppingListResponse:
        try:
            result = self.supabase.table("smart_shopping_lists").insert({
                "profile_id": profile_id,
                "name": f"Shopping List - {date.today().isoformat()}",
                "store_id": list_data.store_id,
                "items": [],
                "total_cost": 0,
                "list_type": "weekly",
                "status": "draft",
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create shopping list")

            return ShoppingListResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def _edit_items(
        self,
        profile_id: str,
        list_id: str,
        edit: Callable[[List[Dict[str, Any]]], List[Dict[str, Any]]],
        product_id: Optional[str] = None,
    ) -> ShoppingListResponse:
        """Apply a cart rule to a list's items and persist items plus total_cost"""
        try:
            row = self._get_list_row(profile_id, list_id)
            if row.get("status") not in EDITABLE_STATUSES:
                raise HTTPException(status_code=400, detail=f"Cannot edit a list that is {row.get('status')}")

            items = row.get("items") or []
            if product_id is not None and not cart.contains(items, product_id):
                raise HTTPException(status_code=404, detail="Item not in shopping list")

            items = edit(items)
            result = self.supabase.table("smart_shopping_lists")\
                .update({"items": items, "total_cost": cart.calculate_total(items)})\
                .eq("id", list_id)\
                .eq("profile_id", profile_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Shopping list not found")

            return ShoppingListResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def add_item(self, profile_id: str, list_id: str, product_id: str) -> ShoppingListResponse:
        product = self._get_product(product_id)
        if not product.get("in_stock", True):
            raise HTTPException(status_code=400, detail="Product is out of stock")
        return self._edit_items(profile_id, list_id, lambda items: cart.add_item(items, product))

    def change_quantity(self, profile_id: str, list_id: str, product_id: str, delta: int) -> ShoppingListResponse:
        return self._edit_items(
            profile_id, list_id,
            lambda items: cart.change_quantity(items, product_id, delta),
            product_id=product_id,
        )

    def remove_item(self, profile_id: str, list_id: str, product_id: str) -> ShoppingListResponse:
        return self._edit_items(
            profile_id, list_id,
            lambda items: cart.remove_item(items, product_id),
            product_id=product_id,
        )

    def toggle_item(self, profile_id: str, list_id: str, product_id: str) -> ShoppingListResponse:
        return self._edit_items(
            profile_id, list_id,
            lambda items: cart.toggle_checked(items, product_id),
            product_id=product_id,
        )

    def finalize_list(self, profile_id: str, list_id: str) -> ShoppingListResponse:
        """Mark a list ready for checkout"""
        try:
            row = self._get_list_row(profile_id, list_id)
            items = row.get("items") or []
            if not items:
                raise HTTPException(status_code=400, detail="Shopping list is empty")

            result = self.supabase.table("smart_shopping_lists")\
                .update({"status": "ready", "total_cost": cart.calculate_total(items)})\
                .eq("id", list_id)\
                .eq("profile_id", profile_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Shopping list not found")

            return ShoppingListResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def generate_from_meal_plan(self, profile_id: str, request: GenerateFromMealPlanRequest) -> ShoppingListResponse:
        """
        Build a ready shopping list from the latest active meal plan.

        Ingredient quantities are summed over every planned meal, so a recipe
        planned on three days counts three times. Each ingredient is matched to
        the first in-stock product whose name contains it; ingredients that
        resolve to the same product share one line. Ingredients with no
        matching product are left out.
        """
        try:
            plan = self.meal_plans.get_latest_active_plan(profile_id)
            if not plan:
                raise HTTPException(status_code=404, detail="No active meal plan found. Create a meal plan first.")

            recipe_ids = planned_recipe_ids(plan)[:settings.meal_plan_recipe_limit]
            totals = aggregate_recipe_ingredients(
                self.recipes.get_recipes_by_ids(recipe_ids), planned_meal_counts(plan)
            )

            items = []
            for ingredient_name, quantity in totals.items():
                product = self._first_product_matching(ingredient_name, request.store_id)
                if product:
                    items = cart.add_quantity(items, product, quantity)
                else:
                    logger.debug("No product found for ingredient %s", ingredient_name)

            if not items:
                raise HTTPException(status_code=404, detail="No matching products found for meal plan ingredients.")

            result = self.supabase.table("smart_shopping_lists").insert({
                "profile_id": profile_id,
                "name": f"Meal Plan Shopping List - {date.today().isoformat()}",
                "store_id": request.store_id,
                "source_meal_plan_id": plan["id"],
                "items": items,
                "total_cost": cart.calculate_total(items),
                "list_type": "weekly",
                "status": "ready",
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create shopping list")

            logger.info("Generated shopping list with %d items from meal plan %s", len(items), plan["id"])
            return ShoppingListResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error generating shopping list: {e}")
            raise HTTPException(status_code=500, detail=str(e))
