from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, Request
from portfolio.config import settings
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.storage.schemas import (
    FolderListing, FolderCreate, FolderEntry, PathRequest, RenameRequest, UploadResponse
)
from portfolio.modules.storage.service import StorageFolderService
from portfolio.core.dependencies import require_permission, client_ip
from portfolio.core.security import validate_upload, ALLOWED_FILE_TYPES
from portfolio.core.security_logger import log_data_access
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/admin/storage", tags=["storage"])


def get_storage_service(supabase: Client = Depends(get_supabase)) -> StorageFolderService:
    return StorageFolderService(supabase)


@router.get("/list", response_model=FolderListing)
async def list_folder(
    path: str = "",
    user_data: Dict = Depends(require_permission("document:read")),
    service: StorageFolderService = Depends(get_storage_service)
):
    """List folders and files directly under a bucket path"""
    return service.list_folder(service.ensure_allowed_path(path))


@router.post("/folders", response_model=FolderEntry, status_code=201)
async def create_folder(
    body: FolderCreate,
    user_data: Dict = Depends(require_permission("document:create")),
    service: StorageFolderService = Depends(get_storage_service)
):
    return service.create_folder(service.ensure_allowed_path(body.parent), body.name)


@router.delete("/folders")
async def delete_folder(
    request: Request,
    body: PathRequest,
    user_data: Dict = Depends(require_permission("document:delete")),
    service: StorageFolderService = Depends(get_storage_service)
):
    """Delete a folder and every object below it"""
    result = service.delete_folder(service.ensure_allowed_path(body.path))
    log_data_access(user_data["id"], "delete_folder", "storage", result["path"], client_ip(request))
    return result


@router.delete("/files")
async def delete_file(
    request: Request,
    body: PathRequest,
    user_data: Dict = Depends(require_permission("document:delete")),
    service: StorageFolderService = Depends(get_storage_service)
):
    result = service.delete_file(service.ensure_allowed_path(body.path))
    log_data_access(user_data["id"], "delete_file", "storage", result["path"], client_ip(request))
    return result


@router.post("/rename")
async def rename(
    body: RenameRequest,
    user_data: Dict = Depends(require_permission("document:update")),
    service: StorageFolderService = Depends(get_storage_service)
):
    """Rename a file or folder (copy, then remove the old keys)"""
    return service.rename(service.ensure_allowed_path(body.path), body.new_name, body.type == "folder")


@router.post("/upload", response_model=UploadResponse, status_code=201)
async def upload(
    request: Request,
    file: UploadFile = File(...),
    path: str = Form(...),
    user_data: Dict = Depends(require_permission("document:create")),
    service: StorageFolderService = Depends(get_storage_service)
):
    folder = service.ensure_allowed_path(path)
    if not folder:
        raise HTTPException(status_code=400, detail="Upload path is required")
    content = await file.read()
    validate_upload(file.filename, file.content_type, len(content), ALLOWED_FILE_TYPES, settings.max_document_size_mb)
    result = service.upload_file(folder, file.filename, content, file.content_type)
    log_data_access(user_data["id"], "upload", "storage", result["path"], client_ip(request))
    return result
