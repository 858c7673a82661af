from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


def check_not_blank(v):
    if v is not None:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
    return v


class ChickenBase(BaseModel):
    cage_id: int = Field(..., ge=1)
    weight: float = Field(..., gt=0, description="Weight in kilograms")
    age: int = Field(..., ge=1, description="Age in months")
    egg_per_month: int = Field(0, ge=0)
    breed: str = Field(..., min_length=1)

    @field_validator('breed')
    @classmethod
    def validate_breed(cls, v):
        return check_not_blank(v)

class ChickenCreate(ChickenBase):
    pass

class ChickenUpdate(BaseModel):
    cage_id: Optional[int] = Field(None, ge=1)
    weight: Optional[float] = Field(None, gt=0)
    age: Optional[int] = Field(None, ge=1)
    egg_per_month: Optional[int] = Field(None, ge=0)
    breed: Optional[str] = Field(None, min_length=1)

    @field_validator('breed')
    @classmethod
    def validate_breed(cls, v):
        return check_not_blank(v)

class Chicken(ChickenBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
