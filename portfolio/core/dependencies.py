"""
Core dependencies for route protection and permission checking
"""

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from portfolio.database.supabase_client import get_supabase, get_service_supabase
from portfolio.modules.auth.service import AuthService
from portfolio.config.permissions_config import (
    normalize_role, has_permission, is_manager_or_above
)
from portfolio.core.security_logger import log_access_violation
from supabase import Client
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_auth_service(
    supabase: Client = Depends(get_supabase),
    admin_client: Client = Depends(get_service_supabase)
) -> AuthService:
    return AuthService(supabase, admin_client)


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def load_site_user(auth_user: Dict[str, Any], supabase: Client) -> Optional[Dict[str, Any]]:
    """Join the Supabase Auth user with its row in the users table (role, numeric id)."""
    try:
        result = supabase.table("users")\
            .select("id, name, email, role")\
            .eq("email", auth_user["email"])\
            .limit(1)\
            .execute()
    except Exception as e:
        logger.error(f"Error loading site user {auth_user.get('email')}: {e}")
        return None
    if not result.data:
        return None
    row = result.data[0]
    return {
        "id": row["id"],
        "auth_id": auth_user.get("id"),
        "email": row.get("email") or auth_user.get("email"),
        "name": row.get("name") or (auth_user.get("user_metadata") or {}).get("name"),
        "role": normalize_role(row.get("role")),
    }


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service),
    supabase: Client = Depends(get_supabase)
) -> Dict[str, Any]:
    """Resolve the bearer token to the site user; 401 when missing or invalid"""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    auth_user = auth_service.get_current_user(credentials.credentials)
    user = load_site_user(auth_user, supabase)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service),
    supabase: Client = Depends(get_supabase)
) -> Optional[Dict[str, Any]]:
    """Like get_current_user but returns None for anonymous requests"""
    if credentials is None or not credentials.credentials:
        return None
    try:
        return get_current_user(credentials, auth_service, supabase)
    except HTTPException:
        return None


def require_permission(required_permission: str):
    """Factory function to create permission check dependency"""
    def check_permission(
        request: Request,
        user_data: Dict = Depends(get_current_user)
    ) -> Dict:
        if not has_permission(user_data.get("role"), required_permission):
            log_access_violation(user_data.get("id"), request.url.path, user_data.get("role"), client_ip(request))
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Forbidden: Insufficient permissions. Required: {required_permission}"
            )
        return user_data
    return check_permission


def require_manager(
    request: Request,
    user_data: Dict = Depends(get_current_user)
) -> Dict:
    """Admin or manager role required"""
    if not is_manager_or_above(user_data.get("role")):
        log_access_violation(user_data.get("id"), request.url.path, user_data.get("role"), client_ip(request))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: Admin access required"
        )
    return user_data
