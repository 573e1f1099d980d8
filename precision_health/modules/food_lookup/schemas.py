from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class FoodLookupRequest(BaseModel):
    food_name: str = Field(..., max_length=200)


class FoodLookupResponse(BaseModel):
    food_name: str
    safety_classification: str
    rationale: str
    species: str
    ingredients_identified: List[str] = Field(default_factory=list)


class FoodLookupHistoryResponse(BaseModel):
    id: str
    food_name: str
    safety_classification: str
    rationale: Optional[str] = None
    ingredients_identified: List[str] = Field(default_factory=list)
    lookup_date: Optional[datetime] = None
