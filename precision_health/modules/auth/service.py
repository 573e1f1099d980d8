import hashlib
import logging
import time
from supabase import Client, create_client
from precision_health.modules.auth.schemas import LoginRequest, RegisterRequest, TokenResponse, RegisterResponse
from precision_health.config.settings import settings
from fastapi import HTTPException
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class TokenCache:
    """Resolved users keyed by the SHA-256 of their bearer token, kept for auth_cache_ttl_sec."""

    def __init__(self):
        self._entries: Dict[str, Tuple[Dict[str, Any], float]] = {}

    @staticmethod
    def _key(token: str) -> str:
        return hashlib.sha256(token.encode()).hexdigest()

    def get(self, token: str) -> Optional[Dict[str, Any]]:
        key = self._key(token)
        entry = self._entries.get(key)
        if not entry:
            return None
        user_data, expires_at = entry
        if time.monotonic() >= expires_at:
            del self._entries[key]
            return None
        return user_data

    def put(self, token: str, user_data: Dict[str, Any]) -> None:
        # Full cache: skip rather than evict
        if len(self._entries) < settings.auth_cache_max_size:
            self._entries[self._key(token)] = (user_data, time.monotonic() + settings.auth_cache_ttl_sec)

    def evict(self, token: str) -> None:
        self._entries.pop(self._key(token), None)

    def clear(self) -> None:
        self._entries.clear()


token_cache = TokenCache()


def clear_auth_cache() -> None:
    token_cache.clear()


def _user_payload(user) -> Dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "user_metadata": user.user_metadata or {},
        "app_metadata": user.app_metadata or {},
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def _mentions(message: str, *needles: str) -> bool:
    lowered = message.lower()
    return any(needle.lower() in lowered for needle in needles)


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def register(self, register_data: RegisterRequest) -> RegisterResponse:
        """Sign up with Supabase Auth. The profile row is created by the caller."""
        metadata = {"full_name": register_data.full_name, "species_type": register_data.species_type}
        if register_data.pet_species:
            metadata["pet_species"] = register_data.pet_species

        try:
            auth_response = self.supabase.auth.sign_up({
                "email": register_data.email,
                "password": register_data.password,
                "options": {"data": metadata},
            })
        except Exception as e:
            if _mentions(str(e), "already registered", "already exists"):
                raise HTTPException(status_code=400, detail="User already exists")
            raise HTTPException(status_code=500, detail=f"Registration failed: {e}")

        user = auth_response.user
        if not user:
            raise HTTPException(status_code=400, detail="Failed to register user")

        logger.info("Registered user %s", user.id)
        return RegisterResponse(
            user_id=user.id,
            email=user.email or register_data.email,
            message="User registered successfully"
        )

    def login(self, login_data: LoginRequest) -> TokenResponse:
        try:
            auth_response = self.supabase.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })
        except Exception as e:
            if _mentions(str(e), "invalid", "credentials"):
                raise HTTPException(status_code=401, detail="Invalid email or password")
            raise HTTPException(status_code=500, detail=f"Login failed: {e}")

        if not auth_response.user or not auth_response.session:
            raise HTTPException(status_code=401, detail="Invalid credentials")

        return TokenResponse(
            access_token=auth_response.session.access_token,
            user_id=auth_response.user.id,
            email=auth_response.user.email or login_data.email
        )

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Resolve a bearer token to the Supabase user, served from the token cache when fresh"""
        cached = token_cache.get(token)
        if cached is not None:
            return cached

        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            logger.warning("Token check failed: %s", e)
            if _mentions(str(e), "jwt", "expired", "invalid"):
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            raise HTTPException(status_code=401, detail="Authentication failed")

        if not user_response or not user_response.user:
            raise HTTPException(status_code=401, detail="Invalid or expired token")

        user_data = _user_payload(user_response.user)
        token_cache.put(token, user_data)
        return user_data

    def logout(self, token: str) -> bool:
        token_cache.evict(token)
        try:
            # Supabase tokens are stateless JWTs; they still expire on their own
            self.supabase.auth.sign_out()
            return True
        except Exception as e:
            logger.warning("Sign out failed: %s", e)
            return False

    def set_super_user(self, user_id: str, is_super_user: bool = True) -> bool:
        """Write app_metadata.type through the admin API (service-role key only)"""
        service_role_key = settings.supabase_service_role_key
        if not service_role_key:
            raise HTTPException(
                status_code=500,
                detail="Service role key not configured. Cannot update app_metadata."
            )

        try:
            admin_client = create_client(settings.supabase_url, service_role_key)
            response = admin_client.auth.admin.update_user_by_id(
                user_id,
                {"app_metadata": {"type": "super_user"} if is_super_user else {}}
            )
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Failed to update super_user status: {e}")

        if not response.user:
            raise HTTPException(status_code=404, detail="User not found")

        logger.info("Set super_user=%s for user %s", is_super_user, user_id)
        return True
