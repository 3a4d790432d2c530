from supabase import Client
from portfolio.core.security import file_extension
from portfolio.modules.storage.service import StorageFolderService, join_key, unique_name
from typing import List, Dict, Any

PROFILE_IMAGES_ROOT = "profile-images"


class ProfileImageService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.storage = StorageFolderService(supabase)

    def upload(self, user_id, filename: str, content: bytes, content_type: str) -> Dict[str, Any]:
        key = join_key(PROFILE_IMAGES_ROOT, str(user_id), unique_name(file_extension(filename, "jpg")))
        return self.storage.upload(key, content, content_type)

    def list_for_user(self, user_id) -> List[Dict[str, Any]]:
        """Newest first"""
        listing = self.storage.list_folder(join_key(PROFILE_IMAGES_ROOT, str(user_id)))
        images = [
            {"name": f["name"], "path": f["path"], "url": f["url"], "created_at": f.get("created_at")}
            for f in listing["files"]
        ]
        return sorted(images, key=lambda i: i["created_at"] or i["name"], reverse=True)
