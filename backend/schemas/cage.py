from pydantic import BaseModel, Field
from typing import Optional

class CageCreate(BaseModel):
    id: Optional[int] = Field(None, ge=1)
    number: int = Field(..., ge=1)

class Cage(BaseModel):
    id: int
    number: int

    class Config:
        from_attributes = True
