from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class StoreResponse(BaseModel):
    id: str
    name: str
    region: Optional[str] = None
    delivery_available: bool = True
    api_available: bool = False
    checkout_integration_type: Optional[str] = None
    logo_url: Optional[str] = None


class ProductResponse(BaseModel):
    id: str
    store_id: str
    sku: str
    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    price: float
    unit: Optional[str] = None
    in_stock: bool = True
    image_url: Optional[str] = None
    product_url: Optional[str] = None


class ShoppingListItem(BaseModel):
    product_id: str
    product_name: str
    quantity: float
    unit: Optional[str] = None
    price: float
    store_id: Optional[str] = None
    checked: bool = False


class ShoppingListCreate(BaseModel):
    store_id: Optional[str] = None


class GenerateFromMealPlanRequest(BaseModel):
    store_id: Optional[str] = None


class AddItemRequest(BaseModel):
    product_id: str


class QuantityChange(BaseModel):
    delta: int = Field(..., description="Amount to add (negative to remove)")


class ShoppingListResponse(BaseModel):
    id: str
    profile_id: str
    name: str
    store_id: Optional[str] = None
    source_meal_plan_id: Optional[str] = None
    items: List[ShoppingListItem] = Field(default_factory=list)
    total_cost: float = 0
    list_type: Optional[str] = "weekly"
    status: str = "draft"
    checkout_url: Optional[str] = None
    created_at: Optional[datetime] = None
    ordered_at: Optional[datetime] = None
