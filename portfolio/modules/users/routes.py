from fastapi import APIRouter, Depends, Request
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.auth.service import AuthService
from portfolio.modules.users.schemas import UserUpdate, UserResponse, UserUpdateResponse
from portfolio.modules.users.service import UserService
from portfolio.core.dependencies import require_manager, get_auth_service, client_ip
from portfolio.core.security_logger import log_data_access
from supabase import Client
from typing import List, Dict, Optional

router = APIRouter(prefix="/admin/users", tags=["users"])


def get_user_service(
    supabase: Client = Depends(get_supabase),
    auth_service: AuthService = Depends(get_auth_service)
) -> UserService:
    return UserService(supabase, auth_service)


@router.get("", response_model=List[UserResponse])
async def list_users(
    user_data: Dict = Depends(require_manager),
    service: UserService = Depends(get_user_service)
):
    """All site users, newest first (admin or manager)"""
    return service.list_users()


@router.put("", response_model=UserUpdateResponse)
async def update_user(
    request: Request,
    body: UserUpdate,
    id: Optional[str] = None,
    user_data: Dict = Depends(require_manager),
    service: UserService = Depends(get_user_service)
):
    """Update email, password or role of the user given by ?id="""
    user = service.update_user(id, body)
    log_data_access(user_data["id"], "update", "user", str(user.id), client_ip(request))
    return {"message": "User updated successfully", "user": user}
