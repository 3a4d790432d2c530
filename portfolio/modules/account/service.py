from supabase import Client
from portfolio.config.permissions_config import normalize_role
from portfolio.core.security import validate_account_email, validate_password_strength
from portfolio.modules.account.schemas import AccountUpdate
from portfolio.modules.auth.service import AuthService, clear_auth_cache
from portfolio.modules.home.service import ProfileService
from fastapi import HTTPException
from datetime import datetime
from typing import Dict, Any
import logging

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "email", "password")


class AccountService:
    def __init__(self, supabase: Client, auth_service: AuthService):
        self.supabase = supabase
        self.auth = auth_service
        self.profiles = ProfileService(supabase)

    def get_account(self, user: Dict[str, Any]) -> Dict[str, Any]:
        try:
            result = self.supabase.table("users")\
                .select("*")\
                .eq("id", user["id"])\
                .limit(1)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=404, detail="User not found in database")
            row = result.data[0]
            profile = None
            try:
                profile = self.profiles.get_profile_row(user["id"])
            except Exception as e:
                logger.warning(f"Could not load profile for user {user['id']}: {e}")
            return {
                "user": {
                    "id": row["id"],
                    "name": (profile or {}).get("name") or row.get("name") or user.get("name"),
                    "email": row.get("email") or user["email"],
                    "role": normalize_role(row.get("role")),
                    "created_at": row.get("created_at"),
                    "updated_at": row.get("updated_at"),
                    "profile": profile,
                }
            }
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching account for user {user['id']}: {e}")
            raise HTTPException(status_code=500, detail="Internal server error")

    def update(self, user: Dict[str, Any], body: AccountUpdate) -> Dict[str, Any]:
        if not body.field or body.value is None:
            raise HTTPException(status_code=400, detail="Field and value are required")
        if body.field not in UPDATABLE_FIELDS:
            raise HTTPException(status_code=400, detail="Invalid field specified")
        if body.field == "password":
            return self.update_password(user, body.value, body.current_password)
        if body.field == "email":
            return self.update_email(user, body.value)
        return self.update_name(user, body.value)

    def update_password(self, user: Dict[str, Any], new_password: str, current_password: str) -> Dict[str, Any]:
        if not current_password:
            raise HTTPException(status_code=400, detail="Current password is required to update password")
        if not self.auth.verify_password(user["email"], current_password):
            raise HTTPException(status_code=400, detail="Current password is incorrect")
        errors = validate_password_strength(new_password)
        if errors:
            raise HTTPException(status_code=400, detail=errors[0])
        self.auth.update_auth_user(user.get("auth_id"), {"password": new_password})
        return {"message": "Password updated successfully"}

    def update_email(self, user: Dict[str, Any], email: str) -> Dict[str, Any]:
        error = validate_account_email(email)
        if error:
            raise HTTPException(status_code=400, detail=error)
        auth_user = self.auth.update_auth_user(user.get("auth_id"), {"email": email})
        try:
            self.supabase.table("users")\
                .update({"email": email, "updated_at": datetime.utcnow().isoformat()})\
                .eq("id", user["id"])\
                .execute()
        except Exception as e:
            logger.error(f"Error updating email in users table for user {user['id']}: {e}")
        # cached token lookups still carry the old email
        clear_auth_cache()
        return {
            "user": {"id": user["id"], "email": auth_user.get("email") or email, "name": user.get("name")},
            "message": "Email updated successfully",
        }

    def update_name(self, user: Dict[str, Any], name: str) -> Dict[str, Any]:
        name = name.strip()
        if not name:
            raise HTTPException(status_code=400, detail="Name cannot be empty")
        self.auth.update_auth_user(user.get("auth_id"), {"user_metadata": {"name": name}})
        try:
            self.supabase.table("users")\
                .update({"name": name, "updated_at": datetime.utcnow().isoformat()})\
                .eq("id", user["id"])\
                .execute()
            self.profiles.update_name(user["id"], name)
        except Exception as e:
            logger.error(f"Error updating name in database for user {user['id']}: {e}")
        return {
            "user": {"id": user["id"], "email": user["email"], "name": name},
            "message": "Name updated successfully",
        }
