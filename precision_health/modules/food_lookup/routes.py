from fastapi import APIRouter, Depends
from precision_health.database.supabase_client import get_supabase
from precision_health.modules.food_lookup.schemas import (
    FoodLookupRequest, FoodLookupResponse, FoodLookupHistoryResponse
)
from precision_health.modules.food_lookup.service import FoodLookupService
from precision_health.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/food-lookup", tags=["food-lookup"])


def get_food_lookup_service(supabase: Client = Depends(get_supabase)) -> FoodLookupService:
    return FoodLookupService(supabase)


@router.post("", response_model=FoodLookupResponse)
async def lookup_food(
    request: FoodLookupRequest,
    user_data: Dict = Depends(get_current_user_id),
    service: FoodLookupService = Depends(get_food_lookup_service)
):
    """Check whether a food is safe for the current profile"""
    return service.lookup(user_data["id"], request)


@router.get("/recent", response_model=List[FoodLookupHistoryResponse])
async def recent_lookups(
    user_data: Dict = Depends(get_current_user_id),
    service: FoodLookupService = Depends(get_food_lookup_service)
):
    return service.recent(user_data["id"])
