from pydantic import BaseModel, Field
from typing import Optional, List, Any, Dict
from datetime import datetime


class RecipeIngredient(BaseModel):
    ingredient: str
    quantity: Optional[float] = None
    unit: Optional[str] = None


class RecipeResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    species_type: str
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
    instructions: str
    prep_time_minutes: Optional[int] = None
    cook_time_minutes: Optional[int] = None
    servings: Optional[int] = None
    difficulty_level: Optional[str] = None
    nutritional_breakdown: Optional[Dict[str, Any]] = None
    condition_tags: List[str] = Field(default_factory=list)
    cultural_tags: List[str] = Field(default_factory=list)
    dietary_tags: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    is_favorite: bool = False

    class Config:
        from_attributes = True


class RecipeFeedback(BaseModel):
    tried: bool = True
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = None


class UserRecipeResponse(BaseModel):
    id: str
    profile_id: str
    recipe_id: str
    is_favorite: bool = False
    adherence_score: Optional[float] = None
    tried: bool = False
    rating: Optional[int] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
