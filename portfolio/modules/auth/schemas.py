from pydantic import BaseModel, EmailStr
from typing import Optional, List


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str
    role: str = "user"


class MeResponse(BaseModel):
    id: Optional[int] = None
    auth_id: Optional[str] = None
    email: str
    name: Optional[str] = None
    role: str
    permissions: List[str] = []
