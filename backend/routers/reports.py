from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional

from database import get_db
from schemas.chicken import Chicken
from schemas.reports import (
    AverageEggProduction,
    AverageEggsByWeightAndAge,
    CageEggTotal,
    EggStats,
    EmployeeChickenCount,
    EmployeeEggStat,
    MostProductiveChicken,
)
from services import report_service

router = APIRouter(
    prefix="/api/reports",
    tags=["reports"],
)

@router.get("/egg-stats", response_model=EggStats)
def get_egg_stats(start_date: date, end_date: date, db: Session = Depends(get_db)):
    """Total eggs and their cost between start_date and end_date (inclusive)."""
    return report_service.get_egg_stats(db, start_date, end_date)

@router.get("/employee-egg-stats", response_model=List[EmployeeEggStat])
def get_employee_egg_stats(start_date: date, end_date: date, db: Session = Depends(get_db)):
    """Eggs collected by each employee in the range and their share of the total."""
    return report_service.get_employee_egg_stats(db, start_date, end_date)

@router.get("/most-productive-chicken", response_model=Optional[MostProductiveChicken])
def get_most_productive_chicken(db: Session = Depends(get_db)):
    return report_service.get_most_productive_chicken(db)

@router.get("/low-productivity-chickens", response_model=List[Chicken])
def get_low_productivity_chickens(db: Session = Depends(get_db)):
    """Chickens laying fewer eggs per month than the flock average."""
    return report_service.get_low_productivity_chickens(db)

@router.get("/employee-chicken-counts", response_model=List[EmployeeChickenCount])
def get_employee_chicken_counts(db: Session = Depends(get_db)):
    return report_service.get_employee_chicken_counts(db)

@router.get("/average-egg-production", response_model=AverageEggProduction)
def get_average_egg_production(db: Session = Depends(get_db)):
    return report_service.get_average_egg_production(db)

@router.get("/avg-eggs", response_model=AverageEggsByWeightAndAge)
def get_avg_eggs_by_weight_and_age(
    weight: float = Query(..., gt=0),
    age: int = Query(..., ge=1),
    db: Session = Depends(get_db),
):
    """Average monthly eggs of chickens with this exact weight and age."""
    return report_service.get_average_eggs_by_weight_and_age(db, weight, age)

@router.get("/cage-with-most-eggs", response_model=Optional[CageEggTotal])
def get_cage_with_most_eggs(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db),
):
    return report_service.get_cage_with_most_eggs(db, start_date, end_date)
