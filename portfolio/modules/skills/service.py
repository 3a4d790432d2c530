from supabase import Client
from portfolio.database.bulk import replace_all
from portfolio.modules.skills.schemas import SkillsPayload
from fastapi import HTTPException
from typing import Dict, Any
import logging

logger = logging.getLogger(__name__)


class SkillService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_skills(self) -> Dict[str, Any]:
        try:
            categories = self.supabase.table("skill_categories")\
                .select("*")\
                .order("order_index")\
                .execute()
            skills = self.supabase.table("skills")\
                .select("*")\
                .order("order_index")\
                .execute()
            additional = self.supabase.table("additional_skills")\
                .select("*")\
                .order("order_index")\
                .execute()

            by_category = {}
            for skill in skills.data or []:
                by_category.setdefault(skill.get("category_id"), []).append(
                    {"name": skill["name"], "level": skill.get("level") or 0}
                )
            return {
                "skill_categories": [
                    {
                        "id": category["id"],
                        "title": category["title"],
                        "order_index": category.get("order_index"),
                        "skills": by_category.get(category["id"], []),
                    }
                    for category in categories.data or []
                ],
                "additional_skills": [row["name"] for row in additional.data or []],
            }
        except Exception as e:
            logger.error(f"Error fetching skills: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch skills data")

    def replace_skills(self, payload: SkillsPayload) -> None:
        """Clear skills, categories and additional skills, then reinsert in submitted order"""
        try:
            # skills first; category rows are referenced by them
            self.supabase.table("skills").delete().gte("id", 0).execute()
            self.supabase.table("skill_categories").delete().gte("id", 0).execute()

            for index, category in enumerate(payload.skill_categories):
                inserted = self.supabase.table("skill_categories")\
                    .insert({"title": category.title, "order_index": index})\
                    .execute()
                if not inserted.data:
                    raise HTTPException(status_code=500, detail="Failed to save skill category")
                category_id = inserted.data[0]["id"]
                if category.skills:
                    self.supabase.table("skills").insert([
                        {
                            "name": skill.name,
                            "level": skill.level,
                            "category_id": category_id,
                            "order_index": skill_index,
                        }
                        for skill_index, skill in enumerate(category.skills)
                    ]).execute()

            names = [name.strip() for name in payload.additional_skills if name and name.strip()]
            replace_all(
                self.supabase,
                "additional_skills",
                [{"name": name, "order_index": index} for index, name in enumerate(names)],
            )
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating skills: {e}")
            raise HTTPException(status_code=500, detail="Failed to update skills")
