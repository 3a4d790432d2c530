from fastapi import APIRouter, Depends, Request
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.account.schemas import AccountUpdate, AccountResponse
from portfolio.modules.account.service import AccountService
from portfolio.modules.auth.service import AuthService
from portfolio.core.dependencies import get_current_user, get_auth_service, client_ip
from portfolio.core.security import ensure_no_xss
from portfolio.core.security_logger import log_auth_event
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/admin/account", tags=["account"])


def get_account_service(
    supabase: Client = Depends(get_supabase),
    auth_service: AuthService = Depends(get_auth_service)
) -> AccountService:
    return AccountService(supabase, auth_service)


@router.get("", response_model=AccountResponse)
async def get_account(
    user_data: Dict = Depends(get_current_user),
    service: AccountService = Depends(get_account_service)
):
    return service.get_account(user_data)


@router.put("")
async def update_account(
    request: Request,
    body: AccountUpdate,
    user_data: Dict = Depends(get_current_user),
    service: AccountService = Depends(get_account_service)
):
    """Change one of name, email or password for the signed-in user"""
    if body.field == "name":
        ensure_no_xss(body.value)
    result = service.update(user_data, body)
    if body.field in ("password", "email"):
        log_auth_event(f"{body.field}_change", user_data["id"], client_ip(request))
    return result
