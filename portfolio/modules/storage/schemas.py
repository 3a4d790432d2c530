from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


class FolderEntry(BaseModel):
    name: str
    path: str
    type: str = "folder"
    private: bool = False


class FileEntry(BaseModel):
    name: str
    path: str
    type: str = "file"
    url: str
    size: Optional[int] = None
    mimetype: Optional[str] = None
    metadata: Dict[str, Any] = {}
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class FolderListing(BaseModel):
    path: str
    folders: List[FolderEntry] = []
    files: List[FileEntry] = []


class FolderCreate(BaseModel):
    parent: str = ""
    name: str


class PathRequest(BaseModel):
    path: str


class RenameRequest(BaseModel):
    path: str
    new_name: str = Field(alias="newName")
    type: str = "file"  # file | folder

    class Config:
        populate_by_name = True


class UploadResponse(BaseModel):
    path: str
    url: str
