from fastapi import APIRouter, Depends, Request
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.about.schemas import AboutUpdate, AboutResponse
from portfolio.modules.about.service import AboutService
from portfolio.core.dependencies import require_permission, get_current_user, client_ip
from portfolio.core.security import ensure_no_xss
from portfolio.core.security_logger import log_data_access
from supabase import Client
from typing import Dict

router = APIRouter(tags=["about"])


def get_about_service(supabase: Client = Depends(get_supabase)) -> AboutService:
    return AboutService(supabase)


@router.get("/about", response_model=AboutResponse)
async def get_about(service: AboutService = Depends(get_about_service)):
    return service.get_public_about()


@router.get("/admin/about", response_model=AboutResponse)
async def get_admin_about(
    user_data: Dict = Depends(get_current_user),
    service: AboutService = Depends(get_about_service)
):
    return service.get_user_about(user_data)


@router.put("/admin/about")
async def update_about(
    request: Request,
    body: AboutUpdate,
    user_data: Dict = Depends(require_permission("education:update")),
    service: AboutService = Depends(get_about_service)
):
    """Profile fields plus full replacement of education, experiences and certifications"""
    ensure_no_xss(body.name, body.title, body.about, body.location, body.career_focus)
    result = service.save_about(user_data["id"], body)
    log_data_access(user_data["id"], "update", "about", None, client_ip(request))
    return result
