from pydantic import BaseModel, Field
from typing import Optional, List


class SkillItem(BaseModel):
    name: str
    level: int = Field(default=0, ge=0, le=100)


class SkillCategoryItem(BaseModel):
    id: Optional[int] = None
    title: str
    order_index: Optional[int] = Field(default=None, alias="orderIndex")
    skills: List[SkillItem] = []

    class Config:
        populate_by_name = True


class SkillsPayload(BaseModel):
    skill_categories: List[SkillCategoryItem] = Field(default=[], alias="skillCategories")
    additional_skills: List[str] = Field(default=[], alias="additionalSkills")

    class Config:
        populate_by_name = True
