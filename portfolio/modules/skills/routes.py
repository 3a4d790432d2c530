from fastapi import APIRouter, Depends, Request
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.skills.schemas import SkillsPayload
from portfolio.modules.skills.service import SkillService
from portfolio.core.dependencies import require_permission, client_ip
from portfolio.core.security import ensure_no_xss
from portfolio.core.security_logger import log_data_access
from supabase import Client
from typing import Dict

router = APIRouter(tags=["skills"])


def get_skill_service(supabase: Client = Depends(get_supabase)) -> SkillService:
    return SkillService(supabase)


@router.get("/skills", response_model=SkillsPayload)
async def get_skills(service: SkillService = Depends(get_skill_service)):
    return service.get_skills()


@router.get("/admin/skills", response_model=SkillsPayload)
async def get_admin_skills(
    user_data: Dict = Depends(require_permission("skill:read")),
    service: SkillService = Depends(get_skill_service)
):
    return service.get_skills()


@router.put("/admin/skills")
async def replace_skills(
    request: Request,
    payload: SkillsPayload,
    user_data: Dict = Depends(require_permission("skill:update")),
    service: SkillService = Depends(get_skill_service)
):
    for category in payload.skill_categories:
        ensure_no_xss(category.title, *[s.name for s in category.skills])
    ensure_no_xss(*payload.additional_skills)
    service.replace_skills(payload)
    log_data_access(user_data["id"], "replace", "skills", None, client_ip(request))
    return {"message": "Skills updated successfully"}
