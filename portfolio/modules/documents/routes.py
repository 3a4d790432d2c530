from fastapi import APIRouter, Depends, File, Form, UploadFile, Request
from portfolio.config import settings
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.documents.schemas import (
    DocumentIn, DocumentResponse, DocumentDelete, DocumentAlbum, DocumentFolders
)
from portfolio.modules.documents.service import DocumentService, DocumentFolderService
from portfolio.modules.storage.schemas import FolderListing, UploadResponse
from portfolio.core.dependencies import require_permission, get_optional_user, client_ip
from portfolio.core.security import validate_upload, ensure_no_xss, ALLOWED_DOCUMENT_TYPES
from portfolio.core.security_logger import log_data_access
from supabase import Client
from typing import List, Dict, Optional

router = APIRouter(tags=["documents"])


def get_document_service(supabase: Client = Depends(get_supabase)) -> DocumentService:
    return DocumentService(supabase)


def get_document_folder_service(supabase: Client = Depends(get_supabase)) -> DocumentFolderService:
    return DocumentFolderService(supabase)


@router.get("/admin/documents", response_model=List[DocumentResponse])
async def list_admin_documents(
    user_data: Dict = Depends(require_permission("document:read")),
    service: DocumentService = Depends(get_document_service)
):
    return service.list_documents()


@router.put("/admin/documents")
async def replace_documents(
    request: Request,
    documents: List[DocumentIn],
    user_data: Dict = Depends(require_permission("document:update")),
    service: DocumentService = Depends(get_document_service)
):
    for doc in documents:
        ensure_no_xss(doc.title, doc.description)
    service.replace_documents(documents)
    log_data_access(user_data["id"], "replace", "documents", None, client_ip(request))
    return {"message": "Documents updated successfully"}


@router.delete("/admin/documents")
async def delete_document(
    request: Request,
    body: DocumentDelete,
    user_data: Dict = Depends(require_permission("document:delete")),
    service: DocumentService = Depends(get_document_service)
):
    service.delete_document(body.id, body.file)
    log_data_access(user_data["id"], "delete", "document", str(body.id or body.file), client_ip(request))
    return {"message": "Document deleted successfully"}


@router.post("/admin/documents/upload", response_model=UploadResponse, status_code=201)
async def upload_document(
    request: Request,
    file: UploadFile = File(...),
    category: Optional[str] = Form(None),
    user_data: Dict = Depends(require_permission("document:create")),
    service: DocumentFolderService = Depends(get_document_folder_service)
):
    """Upload a document into documents/<category>/"""
    content = await file.read()
    validate_upload(file.filename, file.content_type, len(content), ALLOWED_DOCUMENT_TYPES, settings.max_document_size_mb)
    result = service.upload_document(category, file.filename, content, file.content_type)
    log_data_access(user_data["id"], "upload", "document", result["path"], client_ip(request))
    return result


@router.get("/documents", response_model=List[DocumentResponse])
async def list_documents(service: DocumentService = Depends(get_document_service)):
    return service.list_documents()


@router.get("/documents/browse", response_model=FolderListing)
async def browse_documents(
    path: str = "",
    user_data: Optional[Dict] = Depends(get_optional_user),
    service: DocumentFolderService = Depends(get_document_folder_service)
):
    """Public folder browser over rootdocs/"""
    return service.browse(path, user_data)


@router.get("/documents/albums", response_model=List[DocumentAlbum])
async def list_albums(service: DocumentFolderService = Depends(get_document_folder_service)):
    return service.get_albums()


@router.get("/documents/folders", response_model=DocumentFolders)
async def list_document_folders(service: DocumentFolderService = Depends(get_document_folder_service)):
    return service.list_root()


@router.get("/documents/folders/{folder:path}", response_model=DocumentFolders)
async def list_document_folder(
    folder: str,
    service: DocumentFolderService = Depends(get_document_folder_service)
):
    return service.list_folder(folder)


@router.get("/documents/{category}", response_model=DocumentAlbum)
async def get_document_category(
    category: str,
    service: DocumentFolderService = Depends(get_document_folder_service)
):
    """Album whose slug (lowercase, spaces to dashes) matches category"""
    return service.get_album(category)
