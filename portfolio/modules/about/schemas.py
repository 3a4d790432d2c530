from pydantic import BaseModel, Field
from typing import Optional, List
from portfolio.modules.home.schemas import ProfileUpdate, ProfileResponse


class EducationItem(BaseModel):
    id: Optional[int] = None
    school: str
    degree: str
    period: Optional[str] = None
    description: Optional[str] = None
    order_index: Optional[int] = Field(default=None, alias="orderIndex")

    class Config:
        populate_by_name = True


class ExperienceItem(BaseModel):
    id: Optional[int] = None
    title: str
    company: Optional[str] = None
    period: Optional[str] = None
    description: Optional[str] = None
    order_index: Optional[int] = Field(default=None, alias="orderIndex")

    class Config:
        populate_by_name = True


class CertificationItem(BaseModel):
    id: Optional[int] = None
    title: str
    description: Optional[str] = None
    order_index: Optional[int] = Field(default=None, alias="orderIndex")

    class Config:
        populate_by_name = True


class AboutUpdate(ProfileUpdate):
    education: Optional[List[EducationItem]] = None
    experiences: Optional[List[ExperienceItem]] = None
    certifications: Optional[List[CertificationItem]] = None


class AboutResponse(ProfileResponse):
    education: List[EducationItem] = []
    experiences: List[ExperienceItem] = []
    certifications: List[CertificationItem] = []
