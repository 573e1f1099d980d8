from fastapi import APIRouter, Depends
from precision_health.database.supabase_client import get_supabase
from precision_health.modules.restaurants.schemas import (
    RestaurantResponse, DishResponse, OrderCreate, OrderResponse
)
from precision_health.modules.restaurants.service import RestaurantService
from precision_health.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict, Optional

router = APIRouter(prefix="/restaurants", tags=["restaurants"])


def get_restaurant_service(supabase: Client = Depends(get_supabase)) -> RestaurantService:
    return RestaurantService(supabase)


@router.get("", response_model=List[RestaurantResponse])
async def list_restaurants(
    cuisine: Optional[str] = None,
    user_data: Dict = Depends(get_current_user_id),
    service: RestaurantService = Depends(get_restaurant_service)
):
    """List restaurants, best rated first"""
    return service.list_restaurants(cuisine)


@router.get("/cuisines", response_model=List[str])
async def list_cuisines(
    user_data: Dict = Depends(get_current_user_id),
    service: RestaurantService = Depends(get_restaurant_service)
):
    return service.list_cuisines()


@router.get("/orders/mine", response_model=List[OrderResponse])
async def list_my_orders(
    user_data: Dict = Depends(get_current_user_id),
    service: RestaurantService = Depends(get_restaurant_service)
):
    return service.list_orders(user_data["id"])


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
async def get_restaurant(
    restaurant_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: RestaurantService = Depends(get_restaurant_service)
):
    return service.get_restaurant(restaurant_id)


@router.get("/{restaurant_id}/dishes", response_model=List[DishResponse])
async def list_dishes(
    restaurant_id: str,
    risk_filter: str = "all",
    user_data: Dict = Depends(get_current_user_id),
    service: RestaurantService = Depends(get_restaurant_service)
):
    """Menu with a per-dish risk assessment for the current profile"""
    return service.list_dishes(user_data["id"], restaurant_id, risk_filter)


@router.post("/{restaurant_id}/orders", response_model=OrderResponse, status_code=201)
async def place_order(
    restaurant_id: str,
    order_data: OrderCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: RestaurantService = Depends(get_restaurant_service)
):
    return service.place_order(user_data["id"], restaurant_id, order_data)
