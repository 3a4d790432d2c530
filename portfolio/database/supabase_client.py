from supabase import create_client, Client
from portfolio.config import settings
from typing import Dict
import logging

logger = logging.getLogger(__name__)


class SupabaseClient:
    """Process-wide Supabase clients, created on first use and keyed by role"""

    _clients: Dict[str, Client] = {}

    @classmethod
    def _get_or_create(cls, role: str, key: str) -> Client:
        if role not in cls._clients:
            if not settings.supabase_url or not key:
                raise RuntimeError(f"Supabase {role} client is not configured (SUPABASE_URL / key missing)")
            cls._clients[role] = create_client(settings.supabase_url, key)
            logger.info(f"Created Supabase {role} client for {settings.supabase_url}")
        return cls._clients[role]

    @classmethod
    def get_client(cls) -> Client:
        """Anon key client: content tables, storage bucket and Auth sign-in"""
        return cls._get_or_create("anon", settings.supabase_key)

    @classmethod
    def get_service_client(cls) -> Client:
        """Service role client for auth.admin; the anon client when no service key is set."""
        if not settings.supabase_service_role_key:
            return cls.get_client()
        return cls._get_or_create("service", settings.supabase_service_role_key)


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def get_service_supabase() -> Client:
    return SupabaseClient.get_service_client()
