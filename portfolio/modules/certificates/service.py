from supabase import Client
from portfolio.config import settings
from portfolio.modules.certificates.schemas import CertificateIn
from portfolio.modules.storage.service import StorageFolderService, strip_extension
from fastapi import HTTPException
from typing import List, Dict, Any
import logging

logger = logging.getLogger(__name__)

CERTIFICATES_PREFIX = "documents/certificates"


class CertificateService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.storage = StorageFolderService(supabase)

    def list_certificates(self) -> List[Dict[str, Any]]:
        listing = self.storage.list_folder(CERTIFICATES_PREFIX, settings.storage_list_limit)
        certificates = []
        for index, entry in enumerate(listing["files"]):
            metadata = entry.get("metadata") or {}
            certificates.append({
                "id": index + 1,
                "title": metadata.get("title") or strip_extension(entry["name"]),
                "file": entry["url"],
                "description": metadata.get("description") or f"Certificate document: {entry['name']}",
                "created_at": entry.get("created_at"),
            })
        return certificates

    def update_all(self, certificates: List[CertificateIn]) -> int:
        """Write title/description metadata for each bucket file; failures are skipped"""
        updated = 0
        for cert in certificates:
            if not cert.file or not cert.file.startswith(settings.storage_public_prefix):
                continue
            try:
                key = self.storage.normalize_key(cert.file)
                self.storage.update_metadata(key, {"title": cert.title, "description": cert.description})
                updated += 1
            except Exception as e:
                logger.error(f"Error updating certificate metadata for {cert.file}: {e}")
        return updated

    def update_one(self, file_path: str, title: str, description: str) -> str:
        if not file_path:
            raise HTTPException(status_code=400, detail="File path is required")
        key = self.storage.normalize_key(file_path)
        self.storage.update_metadata(key, {"title": title, "description": description})
        return key

    def delete(self, file: str) -> str:
        if not file:
            raise HTTPException(status_code=400, detail="File path is required")
        key = self.storage.normalize_key(file)
        self.storage.delete_file(key)
        return key
