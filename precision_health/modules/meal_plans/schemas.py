from pydantic import BaseModel, Field
from typing import Optional, List, Literal, Any, Dict
from datetime import datetime, date


class PlannedMeal(BaseModel):
    recipe_id: str
    meal: Optional[str] = None


class MealPlanCreate(BaseModel):
    plan_name: str = Field(..., min_length=1)
    start_date: date
    end_date: date
    meals_by_day: Dict[str, List[PlannedMeal]] = Field(default_factory=dict)
    nutritional_targets: Dict[str, Any] = Field(default_factory=dict)
    adherence_optimization_enabled: bool = True


class MealPlanStatusUpdate(BaseModel):
    status: Literal["active", "completed", "archived"]


class MealPlanResponse(BaseModel):
    id: str
    profile_id: str
    plan_name: str
    start_date: date
    end_date: date
    meals_by_day: Dict[str, List[PlannedMeal]] = Field(default_factory=dict)
    nutritional_targets: Optional[Dict[str, Any]] = None
    adherence_optimization_enabled: bool = True
    status: str = "active"
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
