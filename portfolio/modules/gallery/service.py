from supabase import Client
from portfolio.config import settings
from portfolio.core.security import slugify_gallery_category, file_extension
from portfolio.modules.gallery.schemas import GalleryItemIn
from portfolio.modules.storage.service import (
    StorageFolderService, join_key, strip_extension, unique_name
)
from fastapi import HTTPException
from typing import List, Dict, Any
import logging

logger = logging.getLogger(__name__)

GALLERY_ROOT = "gallery"
ROOT_CATEGORY = "General"


class GalleryService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.storage = StorageFolderService(supabase)

    def _item(self, item_id: int, entry: Dict[str, Any], category: str) -> Dict[str, Any]:
        return {
            "id": item_id,
            "src": entry["url"],
            "alt": strip_extension(entry["name"]),
            "category": category,
            "name": entry["name"],
            "type": "file",
        }

    def list_items(self) -> List[Dict[str, Any]]:
        """Every image under gallery/, one folder level deep"""
        root = self.storage.list_folder(GALLERY_ROOT, settings.gallery_list_limit)
        items = []
        for folder in root["folders"]:
            listing = self.storage.list_folder(folder["path"], settings.gallery_list_limit)
            for entry in listing["files"]:
                items.append(self._item(len(items) + 1, entry, folder["name"]))
        for entry in root["files"]:
            items.append(self._item(len(items) + 1, entry, ROOT_CATEGORY))
        return items

    def list_albums(self) -> List[Dict[str, Any]]:
        """One album per gallery folder holding files; root files stay out of albums"""
        albums = {}
        for item in self.list_items():
            if item["category"] == ROOT_CATEGORY:
                continue
            albums.setdefault(item["category"], []).append(item)
        return [{"name": name, "items": items} for name, items in albums.items()]

    def list_categories(self) -> List[str]:
        root = self.storage.list_folder(GALLERY_ROOT, settings.gallery_list_limit)
        return sorted(folder["name"] for folder in root["folders"])

    def validate_items(self, items: List[GalleryItemIn]) -> int:
        """Items live in storage; nothing is moved. Returns the count of items with a source."""
        return len([item for item in items if item.src])

    def resolve_key(self, src: str) -> str:
        if not src:
            raise HTTPException(status_code=400, detail="Source path (src) is required")
        if src.startswith("/") and not src.startswith(f"/{GALLERY_ROOT}/"):
            return self.storage.normalize_key(f"{GALLERY_ROOT}{src}")
        return self.storage.normalize_key(src)

    def delete_item(self, src: str) -> str:
        key = self.resolve_key(src)
        try:
            self.storage.bucket.remove([key])
        except Exception as e:
            logger.error(f"Failed to delete gallery item {key}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete gallery item from storage")
        logger.info(f"Deleted gallery item {key}")
        return key

    def upload_image(self, category: str, filename: str, content: bytes, content_type: str) -> Dict[str, Any]:
        folder = slugify_gallery_category(category)
        if not folder:
            raise HTTPException(status_code=400, detail="Category is required")
        key = join_key(GALLERY_ROOT, folder, unique_name(file_extension(filename, "jpg")))
        result = self.storage.upload(key, content, content_type)
        return {**result, "category": folder}
