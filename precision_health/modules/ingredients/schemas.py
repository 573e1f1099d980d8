from pydantic import BaseModel, Field
from typing import Optional, List, Literal, Any, Dict
from datetime import datetime


class ToxicityWarning(BaseModel):
    species: List[Literal["human", "dog", "cat"]]
    compound: Optional[str] = None
    effect: Optional[str] = None


class IngredientCreate(BaseModel):
    name: str = Field(..., min_length=1)
    category: str
    nutritional_data: Dict[str, Any] = Field(default_factory=dict)
    species_safe: Dict[str, bool] = Field(default_factory=dict)
    toxicity_warnings: List[ToxicityWarning] = Field(default_factory=list)


class IngredientResponse(BaseModel):
    id: str
    name: str
    category: str
    nutritional_data: Optional[Dict[str, Any]] = None
    species_safe: Optional[Dict[str, Any]] = None
    toxicity_warnings: Optional[List[Dict[str, Any]]] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ContraindicationCreate(BaseModel):
    condition_name: str
    contraindication_type: Literal["avoid", "caution", "limit"]
    rationale: Optional[str] = None
    max_daily_amount: Optional[float] = Field(default=None, ge=0)
    species_type: Literal["human", "dog", "cat"] = "human"


class ContraindicationResponse(BaseModel):
    id: str
    ingredient_id: str
    condition_name: str
    contraindication_type: str
    rationale: Optional[str] = None
    max_daily_amount: Optional[float] = None
    species_type: str


class SubstitutionResponse(BaseModel):
    id: str
    substitute_ingredient_id: str
    substitute_name: Optional[str] = None
    substitution_ratio: Optional[float] = 1.0
    notes: Optional[str] = None
