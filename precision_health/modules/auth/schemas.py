from pydantic import BaseModel, EmailStr, model_validator
from typing import Optional, Literal


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str
    full_name: str
    species_type: Literal["human", "pet"] = "human"
    pet_species: Optional[Literal["dog", "cat"]] = None
    pet_breed: Optional[str] = None

    @model_validator(mode="after")
    def check_pet_species(self):
        # Runs before sign_up: a rejected request must not create an auth user
        if self.species_type == "pet" and not self.pet_species:
            raise ValueError("Pet profiles require pet_species (dog or cat)")
        return self


class RegisterResponse(BaseModel):
    user_id: str
    email: str
    message: str


class SetSuperUserRequest(BaseModel):
    user_id: str
    is_super_user: bool = True
