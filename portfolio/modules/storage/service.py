from supabase import Client
from portfolio.config import settings
from portfolio.core.security import is_path_traversal, sanitize_filename
from fastapi import HTTPException
from typing import List, Dict, Any, Optional
from urllib.parse import unquote
import logging
import time
import uuid

logger = logging.getLogger(__name__)

PLACEHOLDER_NAME = ".folder-placeholder"
HIDDEN_NAMES = {PLACEHOLDER_NAME, ".emptyFolderPlaceholder"}

# Top-level prefixes managed through the admin storage browser
ALLOWED_ROOTS = ("profile-images", "gallery", "documents", "rootdocs")


def join_key(*parts: str) -> str:
    return "/".join(p.strip("/") for p in parts if p and p.strip("/"))


def parent_of(key: str) -> str:
    key = key.strip("/")
    return key.rsplit("/", 1)[0] if "/" in key else ""


def basename(key: str) -> str:
    return key.strip("/").rsplit("/", 1)[-1]


def strip_extension(name: str) -> str:
    return name.rsplit(".", 1)[0] if "." in name else name


def is_prefix_entry(entry: Dict[str, Any]) -> bool:
    """Storage listings return prefixes as entries with no object id and no metadata."""
    return entry.get("id") is None or entry.get("metadata") is None


def is_folder_entry(entry: Dict[str, Any]) -> bool:
    """Shown as a folder: a prefix entry, or an object whose name has no extension"""
    return is_prefix_entry(entry) or "." not in entry.get("name", "")


def unique_name(extension: str, separator: str = "-") -> str:
    suffix = f".{extension}" if extension else ""
    return f"{int(time.time() * 1000)}{separator}{uuid.uuid4().hex[:6]}{suffix}"


class StorageFolderService:
    """Treats the flat key namespace of the storage bucket as a folder tree"""

    def __init__(self, supabase: Client, bucket: Optional[str] = None):
        self.supabase = supabase
        self.bucket_name = bucket or settings.storage_bucket

    @property
    def bucket(self):
        return self.supabase.storage.from_(self.bucket_name)

    def public_url(self, key: str) -> str:
        url = self.bucket.get_public_url(key)
        return url.rstrip("?") if isinstance(url, str) else url

    def normalize_key(self, value: Optional[str]) -> str:
        """Public URL, '/'-prefixed path or key -> bucket key. Rejects traversal."""
        if not value:
            return ""
        key = value.strip()
        prefix = settings.storage_public_prefix
        if key.startswith(prefix):
            key = key[len(prefix):]
        elif "/storage/v1/object/public/" in key:
            key = key.split("/storage/v1/object/public/", 1)[1]
            if key.startswith(f"{self.bucket_name}/"):
                key = key[len(self.bucket_name) + 1:]
        key = unquote(key.split("?", 1)[0]).lstrip("/")
        if is_path_traversal(key):
            raise HTTPException(status_code=400, detail="Invalid path")
        return key

    def is_bucket_url(self, value: str) -> bool:
        return value.startswith(settings.storage_public_prefix)

    def stored_reference(self, value: Optional[str]) -> Optional[str]:
        """Public URLs of this bucket are stored as keys; other links and site paths stay as given"""
        if not value:
            return value
        reference = value.strip()
        if is_path_traversal(reference):
            raise HTTPException(status_code=400, detail="Invalid path")
        if self.is_bucket_url(reference):
            return self.normalize_key(reference)
        return reference

    def ensure_allowed_path(self, path: str) -> str:
        key = self.normalize_key(path).strip("/")
        if key and key.split("/", 1)[0] not in ALLOWED_ROOTS:
            raise HTTPException(
                status_code=400,
                detail=f"Path must be inside one of: {', '.join(ALLOWED_ROOTS)}"
            )
        return key

    def list_raw(self, prefix: str, limit: Optional[int] = None, search: Optional[str] = None) -> List[Dict[str, Any]]:
        options = {
            "limit": limit or settings.storage_list_limit,
            "offset": 0,
            "sortBy": {"column": "name", "order": "asc"},
        }
        if search:
            options["search"] = search
        try:
            return self.bucket.list(prefix.strip("/"), options) or []
        except Exception as e:
            logger.error(f"Failed to list storage prefix '{prefix}': {e}")
            raise HTTPException(status_code=500, detail="Failed to list storage folder")

    def _file_entry(self, prefix: str, entry: Dict[str, Any]) -> Dict[str, Any]:
        key = join_key(prefix, entry["name"])
        metadata = entry.get("metadata") or {}
        return {
            "name": entry["name"],
            "path": key,
            "type": "file",
            "url": self.public_url(key),
            "size": metadata.get("size"),
            "mimetype": metadata.get("mimetype"),
            "metadata": entry.get("user_metadata") or {},
            "created_at": entry.get("created_at"),
            "updated_at": entry.get("updated_at"),
        }

    def list_folder(self, path: str = "", limit: Optional[int] = None) -> Dict[str, Any]:
        """Split one listing into synthesized folders and files, placeholders hidden"""
        prefix = path.strip("/")
        folders = []
        files = []
        for entry in self.list_raw(prefix, limit):
            name = entry.get("name")
            if not name or name in HIDDEN_NAMES:
                continue
            if is_folder_entry(entry):
                folders.append({"name": name, "path": join_key(prefix, name), "type": "folder"})
            else:
                files.append(self._file_entry(prefix, entry))
        folders.sort(key=lambda f: f["name"].lower())
        files.sort(key=lambda f: f["name"].lower())
        return {"path": prefix, "folders": folders, "files": files}

    def create_folder(self, parent: str, name: str) -> Dict[str, Any]:
        folder_name = (name or "").strip()
        if not folder_name or "/" in folder_name or "\\" in folder_name or is_path_traversal(folder_name) or folder_name in (".", ".."):
            raise HTTPException(status_code=400, detail="Invalid folder name")
        folder_path = join_key(parent, folder_name)
        try:
            self.bucket.upload(
                join_key(folder_path, PLACEHOLDER_NAME),
                b"",
                file_options={"content-type": "text/plain"}
            )
            logger.info(f"Created folder {folder_path}")
        except Exception as e:
            message = str(e).lower()
            if "already exists" not in message and "duplicate" not in message:
                logger.error(f"Failed to create folder {folder_path}: {e}")
                raise HTTPException(status_code=500, detail="Failed to create folder")
        return {"name": folder_name, "path": folder_path, "type": "folder"}

    def collect_keys(self, prefix: str) -> List[str]:
        """Every object key below prefix, walking synthesized folders depth first"""
        keys = []
        for entry in self.list_raw(prefix, settings.gallery_list_limit):
            name = entry.get("name")
            if not name:
                continue
            if is_prefix_entry(entry):
                keys.extend(self.collect_keys(join_key(prefix, name)))
            else:
                keys.append(join_key(prefix, name))
        return keys

    def delete_folder(self, path: str) -> Dict[str, Any]:
        prefix = path.strip("/")
        if not prefix or prefix in ALLOWED_ROOTS:
            raise HTTPException(status_code=400, detail="Cannot delete a root folder")
        keys = self.collect_keys(prefix)
        if keys:
            self.remove(keys)
        logger.info(f"Deleted folder {prefix} ({len(keys)} objects)")
        return {"path": prefix, "deleted": len(keys)}

    def remove(self, keys: List[str]) -> None:
        try:
            self.bucket.remove(keys)
        except Exception as e:
            logger.error(f"Failed to remove {keys}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete from storage")

    def delete_file(self, key: str) -> Dict[str, Any]:
        key = key.strip("/")
        if not key:
            raise HTTPException(status_code=400, detail="File path is required")
        self.remove([key])
        logger.info(f"Deleted file {key}")
        return {"path": key}

    def rename(self, path: str, new_name: str, is_folder: bool = False) -> Dict[str, Any]:
        source = path.strip("/")
        target_name = (new_name or "").strip()
        if not source or not target_name or "/" in target_name or is_path_traversal(target_name):
            raise HTTPException(status_code=400, detail="Invalid rename request")
        target = join_key(parent_of(source), target_name)
        if target == source:
            return {"path": target, "cleanup_failed": False}

        if is_folder:
            moves = [(k, target + k[len(source):]) for k in self.collect_keys(source)]
        else:
            moves = [(source, target)]
        if not moves:
            raise HTTPException(status_code=404, detail="Nothing to rename")

        for old_key, new_key in moves:
            try:
                self.bucket.copy(old_key, new_key)
            except Exception as e:
                logger.error(f"Failed to copy {old_key} -> {new_key}: {e}")
                raise HTTPException(status_code=500, detail="Failed to rename")

        cleanup_failed = False
        try:
            self.bucket.remove([old for old, _ in moves])
        except Exception as e:
            cleanup_failed = True
            logger.warning(f"Renamed {source} -> {target} but old objects remain: {e}")
        return {"path": target, "cleanup_failed": cleanup_failed}

    def upload(self, key: str, content: bytes, content_type: str, upsert: bool = False) -> Dict[str, Any]:
        file_options = {"content-type": content_type or "application/octet-stream"}
        if upsert:
            file_options["upsert"] = "true"
        try:
            self.bucket.upload(key, content, file_options=file_options)
        except Exception as e:
            logger.error(f"Supabase Storage upload failed for {key}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to upload to storage: {str(e)}")
        logger.info(f"Uploaded {key} ({len(content)} bytes)")
        return {"path": key, "url": self.public_url(key)}

    def upload_file(self, folder: str, filename: str, content: bytes, content_type: str) -> Dict[str, Any]:
        """Upload under folder with a timestamped, sanitized file name"""
        safe_name = sanitize_filename(filename) or "file"
        key = join_key(folder, f"{int(time.time() * 1000)}_{safe_name}")
        return self.upload(key, content, content_type)

    def exists(self, key: str) -> bool:
        name = basename(key)
        try:
            entries = self.bucket.list(parent_of(key), {"limit": settings.storage_list_limit, "offset": 0, "search": name}) or []
        except Exception as e:
            logger.warning(f"Existence check failed for {key}: {e}")
            return False
        return any(e.get("name") == name and not is_prefix_entry(e) for e in entries)

    def update_metadata(self, key: str, metadata: Dict[str, Any]) -> None:
        """Re-upload the object in place with new user metadata"""
        try:
            content = self.bucket.download(key)
            self.bucket.update(key, content, file_options={"upsert": "true", "metadata": metadata})
        except Exception as e:
            logger.error(f"Failed to update metadata for {key}: {e}")
            raise HTTPException(status_code=500, detail="Failed to update file metadata")
