from fastapi import APIRouter, Depends
from precision_health.database.supabase_client import get_supabase
from precision_health.modules.recipes.schemas import RecipeResponse, RecipeFeedback, UserRecipeResponse
from precision_health.modules.recipes.service import RecipeService
from precision_health.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict, Optional

router = APIRouter(prefix="/recipes", tags=["recipes"])


def get_recipe_service(supabase: Client = Depends(get_supabase)) -> RecipeService:
    return RecipeService(supabase)


@router.get("", response_model=List[RecipeResponse])
async def list_recipes(
    species: str = "human",
    search: Optional[str] = None,
    user_data: Dict = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service)
):
    """Browse recipes. species is human, dog, cat or all"""
    return service.list_recipes(user_data["id"], species=species, search=search)


@router.get("/mine", response_model=List[UserRecipeResponse])
async def list_my_recipes(
    user_data: Dict = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service)
):
    """Favorites, ratings and notes for the current user"""
    return service.list_user_recipes(user_data["id"])


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service)
):
    return service.get_recipe(user_data["id"], recipe_id)


@router.post("/{recipe_id}/favorite", response_model=UserRecipeResponse)
async def toggle_favorite(
    recipe_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service)
):
    return service.toggle_favorite(user_data["id"], recipe_id)


@router.put("/{recipe_id}/feedback", response_model=UserRecipeResponse)
async def record_feedback(
    recipe_id: str,
    feedback: RecipeFeedback,
    user_data: Dict = Depends(get_current_user_id),
    service: RecipeService = Depends(get_recipe_service)
):
    return service.record_feedback(user_data["id"], recipe_id, feedback)
