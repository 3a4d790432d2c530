from fastapi import APIRouter, Depends, Request
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.projects.schemas import ProjectIn, ProjectResponse, ProjectDelete
from portfolio.modules.projects.service import ProjectService
from portfolio.core.dependencies import require_permission, client_ip
from portfolio.core.security import ensure_no_xss
from portfolio.core.security_logger import log_data_access
from supabase import Client
from typing import List, Dict

router = APIRouter(tags=["projects"])


def get_project_service(supabase: Client = Depends(get_supabase)) -> ProjectService:
    return ProjectService(supabase)


@router.get("/projects", response_model=List[ProjectResponse])
async def list_projects(service: ProjectService = Depends(get_project_service)):
    return service.list_projects()


@router.get("/admin/projects", response_model=List[ProjectResponse])
async def list_admin_projects(
    user_data: Dict = Depends(require_permission("project:read")),
    service: ProjectService = Depends(get_project_service)
):
    return service.list_projects()


@router.put("/admin/projects")
async def replace_projects(
    request: Request,
    projects: List[ProjectIn],
    user_data: Dict = Depends(require_permission("project:update")),
    service: ProjectService = Depends(get_project_service)
):
    """Replace every project; list position becomes order_index"""
    for project in projects:
        ensure_no_xss(project.title, project.description, project.category)
    service.replace_projects(projects)
    log_data_access(user_data["id"], "replace", "projects", None, client_ip(request))
    return {"message": "Projects updated successfully"}


@router.delete("/admin/projects")
async def delete_project(
    request: Request,
    body: ProjectDelete,
    user_data: Dict = Depends(require_permission("project:delete")),
    service: ProjectService = Depends(get_project_service)
):
    service.delete_project(body.id)
    log_data_access(user_data["id"], "delete", "project", str(body.id), client_ip(request))
    return {"message": "Project deleted successfully"}
