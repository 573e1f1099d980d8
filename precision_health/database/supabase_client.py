from supabase import create_client, Client
from precision_health.config.settings import settings
from typing import Dict, Optional
import logging

logger = logging.getLogger(__name__)


class SupabaseClient:
    """
    Lazily created Supabase clients, one per key.

    The anon client talks to Supabase Auth. Table access prefers the
    service-role client (RLS bypassed), so services must scope user rows by
    profile_id themselves.
    """
    _clients: Dict[str, Client] = {}

    @classmethod
    def _for_key(cls, key: str) -> Client:
        if key not in cls._clients:
            cls._clients[key] = create_client(settings.supabase_url, key)
        return cls._clients[key]

    @classmethod
    def anon(cls) -> Client:
        return cls._for_key(settings.supabase_key)

    @classmethod
    def data(cls) -> Client:
        service_key: Optional[str] = settings.supabase_service_role_key
        return cls._for_key(service_key) if service_key else cls.anon()

    @classmethod
    def reset_client(cls):
        cls._clients = {}


def get_supabase() -> Client:
    return SupabaseClient.data()


def get_auth_client() -> Client:
    return SupabaseClient.anon()


def escape_like(value: str) -> str:
    """Escape ilike wildcards so user text matches literally"""
    return value.replace("\\", "\\\\").replace("%", r"\%").replace("_", r"\_")


def check_service_role_key() -> bool:
    """Warn when table queries would fall back to the shared anon client"""
    if settings.supabase_service_role_key:
        return True
    logger.warning(
        "SUPABASE_SERVICE_ROLE_KEY is not set: table queries use the anon client, "
        "whose auth session belongs to whichever user signed in last"
    )
    return False
