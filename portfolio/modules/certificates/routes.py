from fastapi import APIRouter, Depends, Request
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.certificates.schemas import (
    CertificateResponse, CertificateIn, CertificateMetadata, CertificateDelete
)
from portfolio.modules.certificates.service import CertificateService
from portfolio.core.dependencies import require_permission, client_ip
from portfolio.core.security import ensure_no_xss
from portfolio.core.security_logger import log_data_access
from supabase import Client
from typing import List, Dict

router = APIRouter(tags=["certificates"])


def get_certificate_service(supabase: Client = Depends(get_supabase)) -> CertificateService:
    return CertificateService(supabase)


@router.get("/certificates", response_model=List[CertificateResponse])
async def list_certificates(service: CertificateService = Depends(get_certificate_service)):
    return service.list_certificates()


@router.get("/admin/certificates", response_model=List[CertificateResponse])
async def list_admin_certificates(
    user_data: Dict = Depends(require_permission("certification:read")),
    service: CertificateService = Depends(get_certificate_service)
):
    return service.list_certificates()


@router.put("/admin/certificates")
async def update_certificates(
    certificates: List[CertificateIn],
    user_data: Dict = Depends(require_permission("certification:update")),
    service: CertificateService = Depends(get_certificate_service)
):
    for cert in certificates:
        ensure_no_xss(cert.title, cert.description)
    updated = service.update_all(certificates)
    return {"message": "Certificate metadata updated successfully", "updated": updated}


@router.post("/admin/certificates")
async def update_certificate(
    body: CertificateMetadata,
    user_data: Dict = Depends(require_permission("certification:update")),
    service: CertificateService = Depends(get_certificate_service)
):
    ensure_no_xss(body.title, body.description)
    key = service.update_one(body.file_path, body.title, body.description)
    return {"message": "Certificate metadata updated successfully", "filePath": key}


@router.delete("/admin/certificates")
async def delete_certificate(
    request: Request,
    body: CertificateDelete,
    user_data: Dict = Depends(require_permission("certification:delete")),
    service: CertificateService = Depends(get_certificate_service)
):
    key = service.delete(body.file)
    log_data_access(user_data["id"], "delete", "certificate", key, client_ip(request))
    return {"message": "Certificate deleted successfully"}
