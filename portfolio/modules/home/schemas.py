from pydantic import BaseModel, Field
from typing import Optional, List, Union


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    title: Optional[str] = None
    about: Optional[str] = None
    image: Optional[str] = None
    skills: Optional[Union[List[str], str]] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    career_focus: Optional[str] = Field(default=None, alias="careerFocus")

    class Config:
        populate_by_name = True


class ProfileResponse(BaseModel):
    name: str = ""
    title: str = ""
    about: str = ""
    image: str = ""
    skills: List[str] = []
    location: str = ""
    phone: str = ""
    career_focus: str = Field(default="", alias="careerFocus")
    email: Optional[str] = None

    class Config:
        populate_by_name = True
