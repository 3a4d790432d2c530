from pydantic import BaseModel, Field
from typing import Optional, List, Union, Any
from datetime import datetime


class ProjectIn(BaseModel):
    id: Optional[int] = None
    title: str
    description: str = ""
    image: Optional[str] = None
    link: Optional[str] = None
    github: Optional[str] = None
    stack: Optional[Union[List[str], str]] = None
    category: Optional[str] = None

    class Config:
        populate_by_name = True


class ProjectResponse(BaseModel):
    id: int
    title: str
    description: str = ""
    image: Optional[str] = None
    link: Optional[str] = None
    github: Optional[str] = None
    stack: List[str] = []
    category: Optional[str] = None
    order_index: Optional[int] = Field(default=None, alias="orderIndex")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        populate_by_name = True
        from_attributes = True


class ProjectDelete(BaseModel):
    id: Optional[Any] = None
