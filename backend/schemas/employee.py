from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
import re

from schemas.chicken import check_not_blank

PASSPORT_PATTERN = re.compile(r"^\d{4} \d{6}$")


def normalize_cages(cages):
    """Drop duplicate cage ids, keeping the first occurrence."""
    if cages is None:
        return None
    if any(cage_id < 1 for cage_id in cages):
        raise ValueError("cage ids must be positive integers")
    return list(dict.fromkeys(cages))


def check_passport(v):
    if v is not None and not PASSPORT_PATTERN.match(v):
        raise ValueError("passport_data must look like 'DDDD DDDDDD'")
    return v


class EmployeeBase(BaseModel):
    full_name: str = Field(..., min_length=1)
    passport_data: str
    salary: float = Field(..., gt=0)
    cages: List[int] = []

    @field_validator('full_name')
    @classmethod
    def validate_full_name(cls, v):
        return check_not_blank(v)

    @field_validator('passport_data')
    @classmethod
    def validate_passport_data(cls, v):
        return check_passport(v)

    @field_validator('cages')
    @classmethod
    def validate_cages(cls, v):
        return normalize_cages(v)

class EmployeeCreate(EmployeeBase):
    pass

class EmployeeUpdate(BaseModel):
    full_name: Optional[str] = Field(None, min_length=1)
    passport_data: Optional[str] = None
    salary: Optional[float] = Field(None, gt=0)
    # Replaces the whole assignment list when given
    cages: Optional[List[int]] = None

    @field_validator('full_name')
    @classmethod
    def validate_full_name(cls, v):
        return check_not_blank(v)

    @field_validator('passport_data')
    @classmethod
    def validate_passport_data(cls, v):
        return check_passport(v)

    @field_validator('cages')
    @classmethod
    def validate_cages(cls, v):
        return normalize_cages(v)

class Employee(EmployeeBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
