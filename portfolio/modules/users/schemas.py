from pydantic import BaseModel, EmailStr
from typing import Optional


class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[str] = None


class UserResponse(BaseModel):
    id: int
    name: Optional[str] = None
    email: str
    role: str

    class Config:
        from_attributes = True


class UserUpdateResponse(BaseModel):
    message: str
    user: UserResponse
