from pydantic import BaseModel, Field
from typing import Optional


class CertificateResponse(BaseModel):
    id: int
    title: str
    file: str
    description: str
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    class Config:
        populate_by_name = True


class CertificateIn(BaseModel):
    id: Optional[int] = None
    title: Optional[str] = None
    file: Optional[str] = None
    description: Optional[str] = None


class CertificateMetadata(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    file_path: Optional[str] = Field(default=None, alias="filePath")

    class Config:
        populate_by_name = True


class CertificateDelete(BaseModel):
    file: Optional[str] = None
