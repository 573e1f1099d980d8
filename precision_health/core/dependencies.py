"""
Core dependencies for route protection
"""

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from precision_health.database.supabase_client import get_auth_client
from precision_health.modules.auth.service import AuthService
from supabase import Client
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()


def get_auth_service(supabase: Client = Depends(get_auth_client)) -> AuthService:
    return AuthService(supabase)


def get_current_token(
    credentials: HTTPAuthorizationCredentials = Security(security)
) -> str:
    """Extract JWT token from Authorization header"""
    return credentials.credentials


def get_current_user_id(
    token: str = Depends(get_current_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> Dict[str, Any]:
    """Extract current user info from JWT token"""
    return auth_service.get_current_user(token)


def is_super_user(user_data: Dict[str, Any]) -> bool:
    """Check if user is a super user from app_metadata"""
    # app_metadata is set server-side and cannot be modified by users
    app_metadata = user_data.get("app_metadata") or {}
    return app_metadata.get("type") == "super_user"


def require_super_user(
    user_data: Dict[str, Any] = Depends(get_current_user_id)
) -> Dict[str, Any]:
    """Dependency for catalog writes (ingredients, contraindications)"""
    if not is_super_user(user_data):
        logger.warning("User %s attempted a super user action", user_data.get("id"))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only super users can modify the catalog"
        )
    return user_data
