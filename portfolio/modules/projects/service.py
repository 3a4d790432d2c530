from supabase import Client
from portfolio.core.parsing import parse_string_list
from portfolio.database.bulk import replace_all, with_order_index
from portfolio.modules.projects.schemas import ProjectIn
from portfolio.modules.storage.service import StorageFolderService
from fastapi import HTTPException
from typing import List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.storage = StorageFolderService(supabase)

    def list_projects(self) -> List[Dict[str, Any]]:
        """Projects ordered by order_index, stack parsed to a list"""
        try:
            result = self.supabase.table("projects")\
                .select("*")\
                .order("order_index")\
                .execute()
            return [
                {**row, "stack": parse_string_list(row.get("stack"), split_commas=True)}
                for row in result.data or []
            ]
        except Exception as e:
            logger.error(f"Error fetching projects: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch projects data")

    def replace_projects(self, projects: List[ProjectIn]) -> List[Dict[str, Any]]:
        try:
            rows = []
            for project in projects:
                rows.append({
                    "title": project.title,
                    "description": project.description,
                    "image": self.storage.stored_reference(project.image),
                    "link": project.link,
                    "github": project.github,
                    "stack": parse_string_list(project.stack, split_commas=True),
                    "category": project.category,
                })
            return replace_all(self.supabase, "projects", with_order_index(rows))
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating projects: {e}")
            raise HTTPException(status_code=500, detail="Failed to update projects")

    def delete_project(self, project_id) -> None:
        if not project_id:
            raise HTTPException(status_code=400, detail="Project ID is required")
        try:
            self.supabase.table("projects")\
                .delete()\
                .eq("id", project_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting project {project_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete project")
