from pydantic import BaseModel
from typing import Optional


class ContactRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(BaseModel):
    message: str
    whatsappUrl: str
