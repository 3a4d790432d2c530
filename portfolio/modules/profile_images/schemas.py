from pydantic import BaseModel
from typing import Optional


class ProfileImage(BaseModel):
    name: str
    path: str
    url: str
    created_at: Optional[str] = None
