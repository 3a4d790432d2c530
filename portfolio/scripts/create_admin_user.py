"""
Create Admin User Script
Creates (or promotes) the site administrator: a Supabase Auth user plus a
users row with role 'admin'. Safe to run more than once.

Environment: ADMIN_EMAIL (default admin@example.com), ADMIN_PASSWORD (required),
ADMIN_NAME (default Admin). Requires SUPABASE_SERVICE_ROLE_KEY.
"""

import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from portfolio.config import settings
from portfolio.database.supabase_client import SupabaseClient
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def ensure_auth_user(admin_client: Client, email: str, password: str, name: str) -> str:
    """Return the auth user id, creating the user when it does not exist"""
    try:
        response = admin_client.auth.admin.create_user({
            "email": email,
            "password": password,
            "email_confirm": True,
            "user_metadata": {"name": name}
        })
        logger.info(f"Created auth user {email}")
        return response.user.id
    except Exception as e:
        message = str(e).lower()
        if "already" not in message and "exists" not in message:
            raise
    logger.info(f"Auth user {email} already exists")
    for user in admin_client.auth.admin.list_users():
        if (user.email or "").lower() == email.lower():
            return user.id
    raise RuntimeError(f"Auth user {email} exists but could not be found")


def ensure_site_user(supabase: Client, auth_id: str, email: str, name: str) -> dict:
    existing = supabase.table("users")\
        .select("id")\
        .eq("email", email)\
        .execute()
    if existing.data:
        result = supabase.table("users")\
            .update({"role": "admin", "auth_id": auth_id})\
            .eq("email", email)\
            .execute()
        logger.info(f"Promoted existing user {email} to admin")
    else:
        result = supabase.table("users").insert({
            "name": name,
            "email": email,
            "role": "admin",
            "auth_id": auth_id
        }).execute()
        logger.info(f"Created admin user {email}")
    return result.data[0] if result.data else {}


def main():
    email = os.environ.get("ADMIN_EMAIL", "admin@example.com")
    password = os.environ.get("ADMIN_PASSWORD")
    name = os.environ.get("ADMIN_NAME", "Admin")
    if not password:
        logger.error("ADMIN_PASSWORD must be set")
        sys.exit(1)
    if not settings.supabase_service_role_key:
        logger.error("SUPABASE_SERVICE_ROLE_KEY must be set")
        sys.exit(1)

    admin_client = SupabaseClient.get_service_client()
    try:
        auth_id = ensure_auth_user(admin_client, email, password, name)
        user = ensure_site_user(admin_client, auth_id, email, name)
        logger.info(f"Admin ready: id={user.get('id')} email={email}")
    except Exception as e:
        logger.error(f"Failed to create admin user: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
