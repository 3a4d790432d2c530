from supabase import Client
from portfolio.database.bulk import replace_all, with_order_index
from portfolio.modules.about.schemas import AboutUpdate
from portfolio.modules.home.schemas import ProfileUpdate
from portfolio.modules.home.service import ProfileService
from fastapi import HTTPException
from typing import Dict, Any, List
import logging

logger = logging.getLogger(__name__)

PROFILE_FIELDS = set(ProfileUpdate.model_fields.keys())

# response key -> (table, columns written on save)
ABOUT_LISTS = {
    "education": ("education", ["school", "degree", "period", "description"]),
    "experiences": ("experience", ["title", "company", "period", "description"]),
    "certifications": ("certifications", ["title", "description"]),
}


class AboutService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.profiles = ProfileService(supabase)

    def _list(self, table: str) -> List[Dict[str, Any]]:
        result = self.supabase.table(table)\
            .select("*")\
            .order("order_index")\
            .execute()
        return result.data or []

    def _lists(self) -> Dict[str, List[Dict[str, Any]]]:
        return {key: self._list(table) for key, (table, _) in ABOUT_LISTS.items()}

    def get_public_about(self) -> Dict[str, Any]:
        try:
            return {**self.profiles.get_public_profile(), **self._lists()}
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching about data: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch about data")

    def get_user_about(self, user: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return {**self.profiles.get_user_profile(user), **self._lists()}
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error fetching about data: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch about data")

    def save_about(self, user_id: int, data: AboutUpdate) -> Dict[str, Any]:
        """Save profile fields, then replace each submitted list in submission order"""
        profile_values = data.model_dump(exclude_unset=True, include=PROFILE_FIELDS)
        row = self.profiles.save_profile(user_id, ProfileUpdate(**profile_values))
        try:
            saved = {}
            for key, (table, columns) in ABOUT_LISTS.items():
                items = getattr(data, key)
                if items is None:
                    continue
                rows = [{c: getattr(item, c) for c in columns} for item in items]
                saved[key] = replace_all(self.supabase, table, with_order_index(rows))
            return {"message": "About data updated successfully", "profile": row, **saved}
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating about data: {e}")
            raise HTTPException(status_code=500, detail="Failed to update about data")
