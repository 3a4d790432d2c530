from fastapi import APIRouter, Depends, Request
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.home.schemas import ProfileUpdate, ProfileResponse
from portfolio.modules.home.service import ProfileService
from portfolio.core.dependencies import require_permission, get_current_user, client_ip
from portfolio.core.security import ensure_no_xss
from portfolio.core.security_logger import log_data_access
from supabase import Client
from typing import Dict

router = APIRouter(tags=["home"])


def get_profile_service(supabase: Client = Depends(get_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.get("/home", response_model=ProfileResponse)
async def get_home(service: ProfileService = Depends(get_profile_service)):
    """Public home page content"""
    return service.get_public_profile()


@router.get("/admin/home", response_model=ProfileResponse)
async def get_admin_home(
    user_data: Dict = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    return service.get_user_profile(user_data)


@router.put("/admin/home")
async def update_home(
    request: Request,
    body: ProfileUpdate,
    user_data: Dict = Depends(require_permission("admin:access")),
    service: ProfileService = Depends(get_profile_service)
):
    """Save the signed-in user's profile; returns the stored row"""
    ensure_no_xss(body.name, body.title, body.about, body.location, body.career_focus)
    row = service.save_profile(user_data["id"], body)
    log_data_access(user_data["id"], "update", "profile", str(row.get("id")), client_ip(request))
    return row
