from fastapi import APIRouter, Depends
from precision_health.database.supabase_client import get_supabase
from precision_health.modules.ingredients.schemas import (
    IngredientCreate, IngredientResponse,
    ContraindicationCreate, ContraindicationResponse, SubstitutionResponse
)
from precision_health.modules.ingredients.service import IngredientService
from precision_health.core.dependencies import get_current_user_id, require_super_user
from supabase import Client
from typing import List, Dict, Optional

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


def get_ingredient_service(supabase: Client = Depends(get_supabase)) -> IngredientService:
    return IngredientService(supabase)


@router.get("", response_model=List[IngredientResponse])
async def list_ingredients(
    category: Optional[str] = None,
    search: Optional[str] = None,
    user_data: Dict = Depends(get_current_user_id),
    service: IngredientService = Depends(get_ingredient_service)
):
    """List catalog ingredients ordered by name"""
    return service.list_ingredients(category=category, search=search)


@router.post("", response_model=IngredientResponse, status_code=201)
async def create_ingredient(
    ingredient_data: IngredientCreate,
    user_data: Dict = Depends(require_super_user),
    service: IngredientService = Depends(get_ingredient_service)
):
    """Add an ingredient to the catalog (super user only)"""
    return service.create_ingredient(ingredient_data)


@router.get("/{ingredient_id}", response_model=IngredientResponse)
async def get_ingredient(
    ingredient_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: IngredientService = Depends(get_ingredient_service)
):
    return service.get_ingredient(ingredient_id)


@router.get("/{ingredient_id}/contraindications", response_model=List[ContraindicationResponse])
async def list_contraindications(
    ingredient_id: str,
    species_type: Optional[str] = None,
    user_data: Dict = Depends(get_current_user_id),
    service: IngredientService = Depends(get_ingredient_service)
):
    return service.list_contraindications(ingredient_id, species_type)


@router.post("/{ingredient_id}/contraindications", response_model=ContraindicationResponse, status_code=201)
async def add_contraindication(
    ingredient_id: str,
    data: ContraindicationCreate,
    user_data: Dict = Depends(require_super_user),
    service: IngredientService = Depends(get_ingredient_service)
):
    """Attach a condition contraindication to an ingredient (super user only)"""
    return service.add_contraindication(ingredient_id, data)


@router.get("/{ingredient_id}/substitutions", response_model=List[SubstitutionResponse])
async def list_substitutions(
    ingredient_id: str,
    user_data: Dict = Depends(get_current_user_id),
    service: IngredientService = Depends(get_ingredient_service)
):
    return service.list_substitutions(ingredient_id)
