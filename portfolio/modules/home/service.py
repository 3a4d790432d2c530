from supabase import Client
from portfolio.config import settings
from portfolio.core.parsing import parse_string_list
from portfolio.modules.home.schemas import ProfileUpdate
from portfolio.modules.storage.service import StorageFolderService
from fastapi import HTTPException
from datetime import datetime
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

PROFILE_IMAGE_PREFIX = "profile-images/"


def default_profile(public: bool = False) -> Dict[str, Any]:
    return {
        "name": settings.default_profile_name,
        "title": settings.default_profile_title,
        "about": settings.default_profile_about,
        "image": settings.default_public_image if public else settings.default_profile_image,
        "skills": settings.get_default_skills(),
        "location": settings.default_profile_location,
        "phone": settings.default_profile_phone,
        "career_focus": settings.default_profile_career_focus,
    }


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.storage = StorageFolderService(supabase)

    def to_response(self, row: Optional[Dict[str, Any]], fallback_name: Optional[str] = None,
                    public: bool = False) -> Dict[str, Any]:
        """Profile row -> response, filling blanks from the configured defaults"""
        defaults = default_profile(public)
        if not row:
            if fallback_name is not None:
                defaults["name"] = fallback_name
            return defaults
        return {
            "name": row.get("name") or fallback_name or defaults["name"],
            "title": row.get("title") or defaults["title"],
            "about": row.get("about") or defaults["about"],
            "image": row.get("image") or defaults["image"],
            "skills": parse_string_list(row.get("skills"), default=defaults["skills"]),
            "location": row.get("location") or defaults["location"],
            "phone": row.get("phone") or defaults["phone"],
            "career_focus": row.get("career_focus") or defaults["career_focus"],
        }

    def get_profile_row(self, user_id: int) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("user_profiles")\
            .select("*")\
            .eq("user_id", user_id)\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def get_public_profile(self) -> Dict[str, Any]:
        """Most recent profile; its name wins over the owning user's name"""
        try:
            result = self.supabase.table("user_profiles")\
                .select("*")\
                .order("id", desc=True)\
                .limit(1)\
                .execute()
            if not result.data:
                return self.to_response(None, public=True)
            row = result.data[0]
            user_name = None
            if row.get("user_id") is not None:
                user_result = self.supabase.table("users")\
                    .select("name, email")\
                    .eq("id", row["user_id"])\
                    .limit(1)\
                    .execute()
                if user_result.data:
                    user_name = user_result.data[0].get("name")
            return self.to_response(row, fallback_name=user_name, public=True)
        except Exception as e:
            logger.error(f"Error fetching home data: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch home data")

    def get_user_profile(self, user: Dict[str, Any]) -> Dict[str, Any]:
        try:
            row = self.get_profile_row(user["id"])
        except Exception as e:
            logger.error(f"Error fetching profile for user {user['id']}: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch home data")
        profile = self.to_response(row, fallback_name=user.get("name") or "")
        profile["email"] = user.get("email") or ""
        return profile

    def _remove_replaced_image(self, old_image: Optional[str], new_image: Optional[str]) -> None:
        if not old_image or not new_image or old_image == new_image:
            return
        if not old_image.startswith(PROFILE_IMAGE_PREFIX):
            logger.debug(f"Skipping deletion of non profile-images path: {old_image}")
            return
        try:
            self.supabase.storage.from_(settings.storage_bucket).remove([old_image])
            logger.info(f"Deleted replaced profile image {old_image}")
        except Exception as e:
            logger.error(f"Error deleting old profile image {old_image}: {e}")

    def save_profile(self, user_id: int, data: ProfileUpdate) -> Dict[str, Any]:
        """
        Update the user's profile, inserting it when none exists. Only fields
        present in the request are written. A replaced profile-images/ object
        is removed from the bucket; failures there are logged and ignored.
        """
        try:
            existing = self.get_profile_row(user_id)
            values = data.model_dump(exclude_unset=True, by_alias=False)
            if values.get("image"):
                values["image"] = self.storage.stored_reference(values["image"])
                if existing:
                    self._remove_replaced_image(existing.get("image"), values["image"])
            if "skills" in values:
                values["skills"] = parse_string_list(values["skills"])
            values["updated_at"] = datetime.utcnow().isoformat()
            result = self.supabase.table("user_profiles")\
                .update(values)\
                .eq("user_id", user_id)\
                .execute()
            if not result.data:
                values["user_id"] = user_id
                result = self.supabase.table("user_profiles")\
                    .insert(values)\
                    .execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to update home data")
            return result.data[0]
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating profile for user {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to update home data")

    def update_name(self, user_id: int, name: str) -> Dict[str, Any]:
        """Set the profile display name, creating a bare profile if needed"""
        now = datetime.utcnow().isoformat()
        result = self.supabase.table("user_profiles")\
            .update({"name": name, "updated_at": now})\
            .eq("user_id", user_id)\
            .execute()
        if result.data:
            return result.data[0]
        result = self.supabase.table("user_profiles")\
            .insert({"user_id": user_id, "name": name})\
            .execute()
        return result.data[0] if result.data else {}
