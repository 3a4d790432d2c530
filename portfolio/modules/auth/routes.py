from fastapi import APIRouter, Depends, Request, Security, HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from portfolio.config import settings
from portfolio.config.permissions_config import get_role_permissions
from portfolio.modules.auth.schemas import LoginRequest, TokenResponse, MeResponse
from portfolio.modules.auth.service import AuthService
from portfolio.core.dependencies import get_auth_service, get_current_user, client_ip, security
from portfolio.core.limiter import limiter
from portfolio.core.security_logger import log_auth_event
from typing import Dict, Optional

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
@limiter.limit(lambda: settings.auth_rate_limit)
async def login(
    request: Request,
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    try:
        token = service.login(login_data)
    except HTTPException as e:
        log_auth_event("login_failure", login_data.email, client_ip(request), {"status": e.status_code})
        raise
    log_auth_event("login_success", token.user_id, client_ip(request))
    return token


@router.post("/logout", status_code=200)
async def logout(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    current_user: Dict = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service)
):
    """Logout and invalidate token"""
    service.logout(credentials.credentials)
    log_auth_event("logout", current_user["id"], client_ip(request))
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=MeResponse)
async def me(current_user: Dict = Depends(get_current_user)):
    """Current user with role and effective permissions (for the admin UI)"""
    return {**current_user, "permissions": get_role_permissions(current_user["role"])}
