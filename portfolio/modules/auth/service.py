import hashlib
import time
from supabase import Client
from portfolio.modules.auth.schemas import LoginRequest, TokenResponse
from portfolio.config.permissions_config import normalize_role
from fastapi import HTTPException
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

# Token -> (auth user, expiry). Admin pages fire several requests per view with one token.
_TOKEN_CACHE: Dict[str, tuple] = {}
_TOKEN_CACHE_TTL_SEC = 60
_TOKEN_CACHE_MAX_SIZE = 500


def _token_key(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def _cached_user(token: str) -> Optional[Dict[str, Any]]:
    key = _token_key(token)
    entry = _TOKEN_CACHE.get(key)
    if entry is None:
        return None
    user, expires_at = entry
    if time.monotonic() >= expires_at:
        _TOKEN_CACHE.pop(key, None)
        return None
    return user


def _cache_user(token: str, user: Dict[str, Any]) -> None:
    if len(_TOKEN_CACHE) < _TOKEN_CACHE_MAX_SIZE:
        _TOKEN_CACHE[_token_key(token)] = (user, time.monotonic() + _TOKEN_CACHE_TTL_SEC)


def clear_auth_cache():
    _TOKEN_CACHE.clear()


def _auth_user_dict(user) -> Dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "user_metadata": user.user_metadata or {},
    }


def _looks_like_bad_credentials(error: Exception) -> bool:
    message = str(error).lower()
    return "invalid" in message or "credentials" in message or "jwt" in message or "expired" in message


class AuthService:
    """Supabase Auth for sessions; the users table for site roles"""

    def __init__(self, supabase: Client, admin_client: Optional[Client] = None):
        self.supabase = supabase
        self.admin_client = admin_client or supabase

    def _get_role(self, email: str) -> str:
        try:
            result = self.supabase.table("users")\
                .select("role")\
                .eq("email", email)\
                .limit(1)\
                .execute()
            if result.data:
                return normalize_role(result.data[0].get("role"))
        except Exception as e:
            logger.warning(f"Could not load role for {email}: {e}")
        return normalize_role(None)

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Password sign-in; the token carries the user's site role alongside it"""
        try:
            session_response = self.supabase.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })
        except Exception as e:
            if _looks_like_bad_credentials(e):
                raise HTTPException(status_code=401, detail="Invalid email or password")
            logger.error(f"Supabase sign-in failed for {login_data.email}: {e}")
            raise HTTPException(status_code=500, detail=f"Login failed: {str(e)}")

        if not session_response.user or not session_response.session:
            raise HTTPException(status_code=401, detail="Invalid email or password")

        email = session_response.user.email or login_data.email
        return TokenResponse(
            access_token=session_response.session.access_token,
            user_id=session_response.user.id,
            email=email,
            role=self._get_role(email)
        )

    def verify_password(self, email: str, password: str) -> bool:
        """True when Supabase Auth accepts the credentials."""
        try:
            return bool(self.supabase.auth.sign_in_with_password({"email": email, "password": password}).user)
        except Exception as e:
            logger.info(f"Password check failed for {email}: {e}")
            return False

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Auth user behind a bearer token, served from a short-lived cache when possible"""
        cached = _cached_user(token)
        if cached is not None:
            return cached
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            if _looks_like_bad_credentials(e):
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            logger.warning(f"Token lookup failed: {e}")
            raise HTTPException(status_code=401, detail="Authentication failed")
        if not user_response or not user_response.user:
            raise HTTPException(status_code=401, detail="Invalid or expired token")
        user = _auth_user_dict(user_response.user)
        _cache_user(token, user)
        return user

    def logout(self, token: str) -> bool:
        _TOKEN_CACHE.pop(_token_key(token), None)
        try:
            self.supabase.auth.sign_out()
            return True
        except Exception as e:
            logger.warning(f"Supabase sign-out failed: {e}")
            return False

    def update_auth_user(self, auth_id: str, attributes: Dict[str, Any]) -> Dict[str, Any]:
        """Change email, password or user_metadata of an auth user (service role key)"""
        if not auth_id:
            raise HTTPException(status_code=400, detail="User is not linked to an auth account")
        try:
            response = self.admin_client.auth.admin.update_user_by_id(auth_id, attributes)
        except Exception as e:
            logger.error(f"Auth admin update failed for {auth_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update auth user: {str(e)}")
        if not response or not response.user:
            raise HTTPException(status_code=404, detail="User not found")
        logger.info(f"Updated auth user {auth_id} ({', '.join(sorted(attributes))})")
        return _auth_user_dict(response.user)
