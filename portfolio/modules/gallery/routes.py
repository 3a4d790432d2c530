from fastapi import APIRouter, Depends, File, Form, UploadFile, Request
from portfolio.config import settings
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.gallery.schemas import GalleryItem, GalleryItemIn, GalleryAlbum, GalleryDelete
from portfolio.modules.gallery.service import GalleryService
from portfolio.core.dependencies import require_permission, client_ip
from portfolio.core.security import validate_upload, ALLOWED_IMAGE_TYPES
from portfolio.core.security_logger import log_data_access
from supabase import Client
from typing import List, Dict

router = APIRouter(tags=["gallery"])


def get_gallery_service(supabase: Client = Depends(get_supabase)) -> GalleryService:
    return GalleryService(supabase)


@router.get("/gallery", response_model=List[GalleryAlbum])
async def list_gallery(service: GalleryService = Depends(get_gallery_service)):
    """Public gallery grouped into albums by category"""
    return service.list_albums()


@router.get("/admin/gallery", response_model=List[GalleryItem])
async def list_admin_gallery(
    user_data: Dict = Depends(require_permission("gallery:read")),
    service: GalleryService = Depends(get_gallery_service)
):
    return service.list_items()


@router.get("/admin/categories", response_model=List[str])
async def list_categories(
    user_data: Dict = Depends(require_permission("gallery:read")),
    service: GalleryService = Depends(get_gallery_service)
):
    return service.list_categories()


@router.put("/admin/gallery")
async def update_gallery(
    items: List[GalleryItemIn],
    user_data: Dict = Depends(require_permission("gallery:update")),
    service: GalleryService = Depends(get_gallery_service)
):
    count = service.validate_items(items)
    return {"message": "Gallery updated successfully", "count": count}


@router.delete("/admin/gallery")
async def delete_gallery_item(
    request: Request,
    body: GalleryDelete,
    user_data: Dict = Depends(require_permission("gallery:delete")),
    service: GalleryService = Depends(get_gallery_service)
):
    key = service.delete_item(body.src)
    log_data_access(user_data["id"], "delete", "gallery", key, client_ip(request))
    return {"message": "Gallery item deleted successfully", "path": key}


@router.post("/admin/gallery/upload", status_code=201)
async def upload_gallery_image(
    request: Request,
    file: UploadFile = File(...),
    category: str = Form(...),
    user_data: Dict = Depends(require_permission("gallery:create")),
    service: GalleryService = Depends(get_gallery_service)
):
    """Upload an image to gallery/<category>/"""
    content = await file.read()
    validate_upload(file.filename, file.content_type, len(content), ALLOWED_IMAGE_TYPES, settings.max_image_size_mb)
    result = service.upload_image(category, file.filename, content, file.content_type)
    log_data_access(user_data["id"], "upload", "gallery", result["path"], client_ip(request))
    return result
