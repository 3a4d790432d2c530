from supabase import Client
from portfolio.core.security import sanitize_document_category, sanitize_filename, slugify_album
from portfolio.database.bulk import replace_all, with_order_index
from portfolio.modules.documents.schemas import DocumentIn
from portfolio.modules.storage.service import (
    StorageFolderService, join_key, strip_extension
)
from fastapi import HTTPException
from typing import List, Dict, Any, Optional
import logging
import time

logger = logging.getLogger(__name__)

DOCUMENTS_ROOT = "documents"
PUBLIC_DOCS_ROOT = "rootdocs"
ROOT_ALBUM_NAME = "Documents"
PRIVATE_FOLDER = "private"


class DocumentService:
    """Documents stored as rows of the documents table"""

    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.storage = StorageFolderService(supabase)

    def list_documents(self) -> List[Dict[str, Any]]:
        try:
            result = self.supabase.table("documents")\
                .select("*")\
                .order("order_index")\
                .execute()
            return [{**row, "category": row.get("category") or "documents"} for row in result.data or []]
        except Exception as e:
            logger.error(f"Error fetching documents: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch documents")

    def replace_documents(self, documents: List[DocumentIn]) -> List[Dict[str, Any]]:
        """Replace every row; items without a file are dropped"""
        try:
            rows = [
                {
                    "title": doc.title,
                    "file": self.storage.stored_reference(doc.file),
                    "description": doc.description,
                }
                for doc in documents if doc.file
            ]
            return replace_all(self.supabase, "documents", with_order_index(rows))
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating documents: {e}")
            raise HTTPException(status_code=500, detail="Failed to update documents")

    def delete_document(self, document_id: Optional[int] = None, file: Optional[str] = None) -> None:
        if not document_id and not file:
            raise HTTPException(status_code=400, detail="Document ID or file is required")
        try:
            query = self.supabase.table("documents").delete()
            if document_id:
                query = query.eq("id", document_id)
            else:
                query = query.eq("file", file)
            query.execute()
        except Exception as e:
            logger.error(f"Error deleting document: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete document")


class DocumentFolderService:
    """Documents stored as objects under documents/ and rootdocs/ in the bucket"""

    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.storage = StorageFolderService(supabase)

    def _file_item(self, index: int, entry: Dict[str, Any], folder: str) -> Dict[str, Any]:
        where = f"{folder} folder" if folder != DOCUMENTS_ROOT else "root folder"
        return {
            "id": index + 1,
            "title": strip_extension(entry["name"]),
            "file": entry["url"],
            "description": f"Document in {where}",
            "category": folder,
            "order_index": index,
            "type": "file",
        }

    def _folder_item(self, index: int, entry: Dict[str, Any], parent: str) -> Dict[str, Any]:
        return {
            "id": index + 1,
            "title": entry["name"][:1].upper() + entry["name"][1:],
            "file": entry["path"],
            "description": "Folder containing documents" if parent == DOCUMENTS_ROOT else f"Subfolder in {parent}",
            "category": "folder",
            "order_index": index,
            "type": "folder",
        }

    def list_root(self) -> Dict[str, Any]:
        """Folders and files directly under documents/"""
        listing = self.storage.list_folder(DOCUMENTS_ROOT)
        return {
            "folders": [self._folder_item(i, f, DOCUMENTS_ROOT) for i, f in enumerate(listing["folders"])],
            "files": [self._file_item(i, f, DOCUMENTS_ROOT) for i, f in enumerate(listing["files"])],
        }

    def list_folder(self, folder: str) -> Dict[str, Any]:
        path = self.storage.normalize_key(join_key(DOCUMENTS_ROOT, folder))
        listing = self.storage.list_folder(path)
        name = folder.strip("/")
        return {
            "folders": [self._folder_item(i, f, name) for i, f in enumerate(listing["folders"])],
            "files": [self._file_item(i, f, name) for i, f in enumerate(listing["files"])],
        }

    def get_albums(self) -> List[Dict[str, Any]]:
        """Root files form the Documents album; each subfolder with files is its own album"""
        root = self.storage.list_folder(DOCUMENTS_ROOT)
        albums = []
        if root["files"]:
            albums.append({
                "name": ROOT_ALBUM_NAME,
                "items": [self._file_item(i, f, DOCUMENTS_ROOT) for i, f in enumerate(root["files"])],
            })
        for folder in root["folders"]:
            listing = self.storage.list_folder(folder["path"])
            if not listing["files"]:
                continue
            albums.append({
                "name": folder["name"][:1].upper() + folder["name"][1:],
                "items": [self._file_item(i, f, folder["name"]) for i, f in enumerate(listing["files"])],
            })
        return albums

    def get_album(self, category: str) -> Dict[str, Any]:
        wanted = slugify_album(category)
        for album in self.get_albums():
            if slugify_album(album["name"]) == wanted:
                return album
        raise HTTPException(status_code=404, detail="Category not found")

    def upload_document(self, category: Optional[str], filename: str, content: bytes, content_type: str) -> Dict[str, Any]:
        """Store under documents/<category>/<ts>_<filename>, overwriting an existing key"""
        folder = join_key(DOCUMENTS_ROOT, sanitize_document_category(category))
        safe_name = sanitize_filename(filename) or "document"
        key = join_key(folder, f"{int(time.time() * 1000)}_{safe_name}")
        return self.storage.upload(key, content, content_type, upsert=True)

    def browse(self, path: str, user: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Public document browser rooted at rootdocs/; private folders need a signed-in user"""
        relative = self.storage.normalize_key(path or "").strip("/")
        if relative.startswith(PUBLIC_DOCS_ROOT + "/") or relative == PUBLIC_DOCS_ROOT:
            relative = relative[len(PUBLIC_DOCS_ROOT):].strip("/")
        if is_private_path(relative) and user is None:
            raise HTTPException(status_code=401, detail="Authentication required")
        listing = self.storage.list_folder(join_key(PUBLIC_DOCS_ROOT, relative))
        listing["folders"] = [
            {**f, "private": f["name"].lower() == PRIVATE_FOLDER} for f in listing["folders"]
        ]
        return listing


def is_private_path(path: str) -> bool:
    return any(part.lower() == PRIVATE_FOLDER for part in path.split("/") if part)
