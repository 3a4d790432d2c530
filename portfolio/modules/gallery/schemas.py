from pydantic import BaseModel
from typing import Optional, List, Any


class GalleryItem(BaseModel):
    id: int
    src: str
    alt: str
    category: str
    name: str
    type: str = "file"


class GalleryItemIn(BaseModel):
    id: Optional[Any] = None
    src: Optional[str] = None
    alt: Optional[str] = None
    category: Optional[str] = None


class GalleryAlbum(BaseModel):
    name: str
    items: List[GalleryItem] = []


class GalleryDelete(BaseModel):
    id: Optional[Any] = None
    src: Optional[str] = None
