from supabase import Client
from portfolio.config.permissions_config import ROLE_TYPES, normalize_role
from portfolio.core.security import validate_password_strength
from portfolio.modules.auth.service import AuthService
from portfolio.modules.users.schemas import UserUpdate, UserResponse
from fastapi import HTTPException
from datetime import datetime
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, supabase: Client, auth_service: AuthService):
        self.supabase = supabase
        self.auth = auth_service

    def list_users(self) -> List[UserResponse]:
        try:
            result = self.supabase.table("users")\
                .select("id, name, email, role")\
                .order("id", desc=True)\
                .execute()
            return [
                UserResponse(**{**user, "role": normalize_role(user.get("role"))})
                for user in result.data or []
            ]
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Failed to fetch users: {str(e)}")

    def update_user(self, raw_id: Optional[str], user_data: UserUpdate) -> UserResponse:
        if raw_id is None or raw_id == "":
            raise HTTPException(status_code=400, detail="User ID parameter is missing")
        try:
            user_id = int(raw_id)
        except (TypeError, ValueError):
            raise HTTPException(status_code=400, detail="Invalid user ID")
        if user_data.role is not None and user_data.role.lower() not in ROLE_TYPES:
            raise HTTPException(status_code=400, detail="Invalid role")
        if user_data.password:
            errors = validate_password_strength(user_data.password)
            if errors:
                raise HTTPException(status_code=400, detail=errors[0])

        try:
            existing = self.supabase.table("users")\
                .select("*")\
                .eq("id", user_id)\
                .limit(1)\
                .execute()
            if not existing.data:
                raise HTTPException(status_code=404, detail="User not found")
            auth_id = existing.data[0].get("auth_id")

            auth_changes = {}
            if user_data.email:
                auth_changes["email"] = user_data.email
            if user_data.password:
                auth_changes["password"] = user_data.password
            if auth_changes:
                self.auth.update_auth_user(auth_id, auth_changes)

            update_data = {"updated_at": datetime.utcnow().isoformat()}
            if user_data.email:
                update_data["email"] = user_data.email
            if user_data.role:
                update_data["role"] = user_data.role.lower()
            result = self.supabase.table("users")\
                .update(update_data)\
                .eq("id", user_id)\
                .execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to update user")
            row = result.data[0]
            return UserResponse(
                id=row["id"],
                name=row.get("name"),
                email=row["email"],
                role=normalize_role(row.get("role")),
            )
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Failed to update user: {str(e)}")
