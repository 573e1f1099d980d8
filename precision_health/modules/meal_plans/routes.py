from fastapi import APIRouter, Depends
from precision_health.database.supabase_client import get_supabase
from precision_health.modules.meal_plans.schemas import MealPlanCreate, MealPlanStatusUpdate, MealPlanResponse
from precision_health.modules.meal_plans.service import MealPlanService
from precision_health.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/meal-plans", tags=["meal-plans"])


def get_meal_plan_service(supabase: Client = Depends(get_supabase)) -> MealPlanService:
    return MealPlanService(supabase)


@router.get("", response_model=List[MealPlanResponse])
async def list_meal_plans(
    user_data: Dict = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service)
):
    return service.list_plans(user_data["id"])


@router.post("", response_model=MealPlanResponse, status_code=201)
async def create_meal_plan(
    plan_data: MealPlanCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service)
):
    """Create a weekly meal plan (starts active)"""
    return service.create_plan(user_data["id"], plan_data)


@router.get("/{plan_id}", response_model=MealPlanResponse)
async def get_meal_plan(
    plan_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service)
):
    return service.get_plan(user_data["id"], plan_id)


@router.patch("/{plan_id}/status", response_model=MealPlanResponse)
async def update_meal_plan_status(
    plan_id: str,
    status_data: MealPlanStatusUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service)
):
    return service.update_status(user_data["id"], plan_id, status_data)
