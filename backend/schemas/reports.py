from pydantic import BaseModel
from typing import Optional
from datetime import date

from services.aggregation import WorkloadTier

class EggStats(BaseModel):
    start_date: date
    end_date: date
    total_eggs: int
    total_cost: float
    price_per_egg: float

class EmployeeEggStat(BaseModel):
    employee_id: int
    employee_name: str
    egg_count: int
    percentage: float

class EmployeeChickenCount(BaseModel):
    employee_id: int
    employee_name: str
    chicken_count: int
    workload_tier: WorkloadTier

class MostProductiveChicken(BaseModel):
    chicken_id: int
    cage_id: int
    cage_number: int
    egg_per_month: int

class AverageEggProduction(BaseModel):
    chicken_count: int
    average: float
    # Rounded to one decimal place for display
    average_display: float

class AverageEggsByWeightAndAge(BaseModel):
    weight: float
    age: int
    average: float

class CageEggTotal(BaseModel):
    cage_id: int
    cage_number: int
    egg_count: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None

class EmployeeCount(BaseModel):
    employee_id: int
    count: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
