from fastapi import APIRouter, Depends, HTTPException
from precision_health.modules.auth.schemas import (
    LoginRequest, RegisterRequest, TokenResponse, RegisterResponse,
    SetSuperUserRequest
)
from precision_health.modules.auth.service import AuthService
from precision_health.modules.profiles.schemas import ProfileCreate
from precision_health.modules.profiles.service import ProfileService
from precision_health.modules.profiles.routes import get_profile_service
from precision_health.core.dependencies import get_auth_service, get_current_token, get_current_user_id, is_super_user
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    register_data: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """Register a new user and create their profile"""
    registered = service.register(register_data)
    profile_service.create_profile(
        registered.user_id,
        ProfileCreate(
            full_name=register_data.full_name,
            species_type=register_data.species_type,
            pet_species=register_data.pet_species,
            pet_breed=register_data.pet_breed,
        ),
    )
    return registered


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    return service.login(login_data)


@router.post("/logout", status_code=200)
async def logout(
    token: str = Depends(get_current_token),
    service: AuthService = Depends(get_auth_service)
):
    """Logout and invalidate token"""
    service.logout(token)
    return {"message": "Logged out successfully"}


@router.get("/me")
async def get_current_user(
    current_user: Dict = Depends(get_current_user_id),
):
    """Get current authenticated user"""
    return {**current_user, "is_super_user": is_super_user(current_user)}


@router.post("/set-super-user", status_code=200)
async def set_super_user(
    request: SetSuperUserRequest,
    current_user: Dict = Depends(get_current_user_id),
    service: AuthService = Depends(get_auth_service)
):
    """Set super_user status for a user (requires current user to be super_user)"""
    if not is_super_user(current_user):
        raise HTTPException(status_code=403, detail="Only super users can set super_user status")

    service.set_super_user(request.user_id, request.is_super_user)
    return {
        "message": f"User {request.user_id} super_user status set to {request.is_super_user}",
        "user_id": request.user_id,
        "is_super_user": request.is_super_user
    }
