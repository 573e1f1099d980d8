from fastapi import APIRouter, Depends
from precision_health.database.supabase_client import get_supabase
from precision_health.modules.grocery.schemas import (
    StoreResponse, ProductResponse, ShoppingListCreate, GenerateFromMealPlanRequest,
    AddItemRequest, QuantityChange, ShoppingListResponse
)
from precision_health.modules.grocery.service import GroceryService
from precision_health.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict, Optional

router = APIRouter(prefix="/grocery", tags=["grocery"])


def get_grocery_service(supabase: Client = Depends(get_supabase)) -> GroceryService:
    return GroceryService(supabase)


@router.get("/stores", response_model=List[StoreResponse])
async def list_stores(
    user_data: Dict = Depends(get_current_user_id),
    service: GroceryService = Depends(get_grocery_service)
):
    """Stores that deliver"""
    return service.list_stores()


@router.get("/stores/{store_id}/products", response_model=List[ProductResponse])
async def list_products(
    store_id: str,
    search: Optional[str] = None,
    user_data: Dict = Depends(get_current_user_id),
    service: GroceryService = Depends(get_grocery_service)
):
    return service.list_products(store_id, search)


@router.get("/lists", response_model=List[ShoppingListResponse])
async def list_shopping_lists(
    user_data: Dict = Depends(get_current_user_id),
    service: GroceryService = Depends(get_grocery_service)
):
    return service.list_lists(user_data["id"])


@router.post("/lists", response_model=ShoppingListResponse, status_code=201)
async def create_shopping_list(
    list_data: ShoppingListCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: GroceryService = Depends(get_grocery_service)
):
    return service.create_list(user_data["id"], list_data)


@router.post("/lists/from-meal-plan", response_model=ShoppingListResponse, status_code=201)
async def generate_from_meal_plan(
    request: GenerateFromMealPlanRequest,
    user_data: Dict = Depends(get_current_user_id),
    service: GroceryService = Depends(get_grocery_service)
):
    """Build a shopping list from the latest active meal plan"""
    return service.generate_from_meal_plan(user_data["id"], request)


@router.post("/lists/{list_id}/items", response_model=ShoppingListResponse)
async def add_item(
    list_id: str,
    request: AddItemRequest,
    user_data: Dict = Depends(get_current_user_id),
    service: GroceryService = Depends(get_grocery_service)
):
    return service.add_item(user_data["id"], list_id, request.product_id)


@router.patch("/lists/{list_id}/items/{product_id}", response_model=ShoppingListResponse)
async def change_quantity(
    list_id: str,
    product_id: str,
    change: QuantityChange,
    user_data: Dict = Depends(get_current_user_id),
    service: GroceryService = Depends(get_grocery_service)
):
    return service.change_quantity(user_data["id"], list_id, product_id, change.delta)


@router.delete("/lists/{list_id}/items/{product_id}", response_model=ShoppingListResponse)
async def remove_item(
    list_id: str,
    product_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: GroceryService = Depends(get_grocery_service)
):
    return service.remove_item(user_data["id"], list_id, product_id)


@router.post("/lists/{list_id}/items/{product_id}/toggle", response_model=ShoppingListResponse)
async def toggle_item(
    list_id: str,
    product_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: GroceryService = Depends(get_grocery_service)
):
    return service.toggle_item(user_data["id"], list_id, product_id)


@router.post("/lists/{list_id}/finalize", response_model=ShoppingListResponse)
async def finalize_list(
    list_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: GroceryService = Depends(get_grocery_service)
):
    return service.finalize_list(user_data["id"], list_id)
