from pydantic import BaseModel, Field
from typing import Optional, List, Any, Dict
from datetime import datetime


class RestaurantResponse(BaseModel):
    id: str
    name: str
    cuisine_type: Optional[str] = None
    delivery_platform: str
    location: Optional[str] = None
    rating: Optional[float] = None
    delivery_time_minutes: Optional[int] = None
    minimum_order: Optional[float] = None
    delivery_fee: Optional[float] = None
    is_clinical_partner: bool = False
    metadata: Optional[Dict[str, Any]] = None

    class Config:
        from_attributes = True


class DishContraindication(BaseModel):
    ingredient: str
    reason: str
    severity: str


class DishRiskAssessment(BaseModel):
    risk_classification: str
    risk_score: float
    rationale: str
    contraindications: List[DishContraindication] = Field(default_factory=list)
    recommended_substitutions: List[str] = Field(default_factory=list)


class DishResponse(BaseModel):
    id: str
    restaurant_id: str
    name: str
    description: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list)
    allergens: List[str] = Field(default_factory=list)
    price: float
    category: Optional[str] = None
    image_url: Optional[str] = None
    available: bool = True
    risk_assessment: DishRiskAssessment


class OrderCreate(BaseModel):
    dish_ids: List[str] = Field(..., min_length=1)
    special_instructions: Optional[str] = None


class OrderedDish(BaseModel):
    dish_id: str
    name: str
    price: float


class OrderResponse(BaseModel):
    id: str
    profile_id: str
    restaurant_id: str
    dishes: List[OrderedDish]
    total_cost: float
    delivery_platform: Optional[str] = None
    order_status: str = "pending"
    special_instructions: Optional[str] = None
    safety_verified: bool = False
    created_at: Optional[datetime] = None
