from pydantic import BaseModel, Field
from typing import Optional, Literal
from datetime import datetime, date


class ProfileCreate(BaseModel):
    full_name: str
    species_type: Literal["human", "pet"] = "human"
    pet_species: Optional[Literal["dog", "cat"]] = None
    pet_breed: Optional[str] = None


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    species_type: Optional[Literal["human", "pet"]] = None
    pet_species: Optional[Literal["dog", "cat"]] = None
    pet_breed: Optional[str] = None
    weight_kg: Optional[float] = Field(default=None, gt=0)
    height_cm: Optional[float] = Field(default=None, gt=0)
    biological_sex: Optional[str] = None


class ProfileResponse(BaseModel):
    id: str
    full_name: str
    date_of_birth: Optional[date] = None
    species_type: str = "human"
    pet_species: Optional[str] = None
    pet_breed: Optional[str] = None
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    biological_sex: Optional[str] = None
    effective_species: str = "human"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
