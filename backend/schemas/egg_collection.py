from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime

class EggCollectionBase(BaseModel):
    collection_date: date
    cage_id: int = Field(..., ge=1)
    chicken_id: Optional[int] = Field(None, ge=1)
    employee_id: Optional[int] = Field(None, ge=1)
    egg_count: int = Field(1, ge=0)

class EggCollectionCreate(EggCollectionBase):
    pass

class EggCollection(EggCollectionBase):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
