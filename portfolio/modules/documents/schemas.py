from pydantic import BaseModel, Field
from typing import Optional, List


class DocumentIn(BaseModel):
    id: Optional[int] = None
    title: str = ""
    file: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None


class DocumentResponse(BaseModel):
    id: int
    title: str
    file: str
    description: Optional[str] = None
    category: str = "documents"
    order_index: Optional[int] = Field(default=None, alias="orderIndex")

    class Config:
        populate_by_name = True


class DocumentDelete(BaseModel):
    id: Optional[int] = None
    file: Optional[str] = None


class DocumentItem(BaseModel):
    id: int
    title: str
    file: str
    description: str
    category: str
    order_index: int = Field(default=0, alias="orderIndex")
    type: str = "file"

    class Config:
        populate_by_name = True


class DocumentAlbum(BaseModel):
    name: str
    items: List[DocumentItem] = []


class DocumentFolders(BaseModel):
    folders: List[DocumentItem] = []
    files: List[DocumentItem] = []
