from supabase import Client
from precision_health.modules.meal_plans.schemas import MealPlanCreate, MealPlanStatusUpdate, MealPlanResponse
from typing import Any, Dict, List, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def planned_meal_counts(plan: Dict[str, Any]) -> Dict[str, int]:
    """How many planned meals use each recipe, keyed in day order of first use"""
    counts: Dict[str, int] = {}
    for meals in (plan.get("meals_by_day") or {}).values():
        for meal in meals or []:
            recipe_id = meal.get("recipe_id") if isinstance(meal, dict) else None
            if recipe_id:
                counts[recipe_id] = counts.get(recipe_id, 0) + 1
    return counts


def planned_recipe_ids(plan: Dict[str, Any]) -> List[str]:
    """Distinct recipe ids referenced by a plan, in day order"""
    return list(planned_meal_counts(plan))


class MealPlanService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_plans(self, profile_id: str) -> List[MealPlanResponse]:
        try:
            result = self.supabase.table("weekly_meal_plans")\
                .select("*")\
                .eq("profile_id", profile_id)\
                .order("created_at", desc=True)\
                .execute()
            return [MealPlanResponse(**row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error loading meal plans: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    def create_plan(self, profile_id: str, plan_data: MealPlanCreate) -> MealPlanResponse:
        if plan_data.end_date < plan_data.start_date:
            raise HTTPException(status_code=400, detail="end_date must be on or after start_date")
        try:
            payload = plan_data.model_dump()
            payload["start_date"] = plan_data.start_date.isoformat()
            payload["end_date"] = plan_data.end_date.isoformat()
            payload["profile_id"] = profile_id
            payload["status"] = "active"
            result = self.supabase.table("weekly_meal_plans").insert(payload).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create meal plan")

            return MealPlanResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_plan(self, profile_id: str, plan_id: str) -> MealPlanResponse:
        try:
            result = self.supabase.table("weekly_meal_plans")\
                .select("*")\
                .eq("id", plan_id)\
                .eq("profile_id", profile_id)\
                .maybe_single()\
                .execute()

            if not result or not result.data:
                raise HTTPException(status_code=404, detail="Meal plan not found")

            return MealPlanResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def update_status(self, profile_id: str, plan_id: str, status_data: MealPlanStatusUpdate) -> MealPlanResponse:
        try:
            result = self.supabase.table("weekly_meal_plans")\
                .update({"status": status_data.status})\
                .eq("id", plan_id)\
                .eq("profile_id", profile_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Meal plan not found")

            return MealPlanResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_latest_active_plan(self, profile_id: str) -> Optional[Dict[str, Any]]:
        """Most recently created active plan row, or None"""
        result = self.supabase.table("weekly_meal_plans")\
            .select("*")\
            .eq("profile_id", profile_id)\
            .eq("status", "active")\
            .order("created_at", desc=True)\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None
