from fastapi import APIRouter, Depends, File, UploadFile, Request
from portfolio.config import settings
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.profile_images.schemas import ProfileImage
from portfolio.modules.profile_images.service import ProfileImageService
from portfolio.modules.storage.schemas import UploadResponse
from portfolio.core.dependencies import require_permission, client_ip
from portfolio.core.security import validate_upload, ALLOWED_IMAGE_TYPES
from portfolio.core.security_logger import log_data_access
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/admin", tags=["profile-images"])


def get_profile_image_service(supabase: Client = Depends(get_supabase)) -> ProfileImageService:
    return ProfileImageService(supabase)


@router.post("/profile-image", response_model=UploadResponse, status_code=201)
async def upload_profile_image(
    request: Request,
    file: UploadFile = File(...),
    user_data: Dict = Depends(require_permission("admin:access")),
    service: ProfileImageService = Depends(get_profile_image_service)
):
    """Upload a new profile picture; save the returned path with PUT /admin/home"""
    content = await file.read()
    validate_upload(file.filename, file.content_type, len(content), ALLOWED_IMAGE_TYPES, settings.max_image_size_mb)
    result = service.upload(user_data["id"], file.filename, content, file.content_type)
    log_data_access(user_data["id"], "upload", "profile_image", result["path"], client_ip(request))
    return result


@router.get("/profile-images", response_model=List[ProfileImage])
async def list_profile_images(
    user_data: Dict = Depends(require_permission("admin:access")),
    service: ProfileImageService = Depends(get_profile_image_service)
):
    return service.list_for_user(user_data["id"])
