from pydantic import BaseModel, Field
from typing import Optional, Any, Dict


class AccountUpdate(BaseModel):
    field: Optional[str] = None
    value: Optional[str] = None
    current_password: Optional[str] = Field(default=None, alias="currentPassword")

    class Config:
        populate_by_name = True


class AccountUser(BaseModel):
    id: int
    name: Optional[str] = None
    email: str
    role: str
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    profile: Optional[Dict[str, Any]] = None

    class Config:
        populate_by_name = True


class AccountResponse(BaseModel):
    user: AccountUser
