from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional

from database import get_db
from schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from schemas.reports import EmployeeChickenCount, EmployeeCount, EmployeeEggStat
from crud import employee as crud_employee
from services import report_service
from exceptions import NotFoundError

router = APIRouter(prefix="/api/employees", tags=["Employees"])

@router.get("/", response_model=List[Employee])
def read_employees(skip: int = 0, limit: Optional[int] = None, db: Session = Depends(get_db)):
    """Retrieve a list of employees with their cages."""
    return crud_employee.get_employees(db=db, skip=skip, limit=limit)

# Declared before /{employee_id} so these paths are not parsed as ids
@router.get("/chicken-counts", response_model=List[EmployeeChickenCount])
def read_all_employee_chicken_counts(db: Session = Depends(get_db)):
    """Chicken count and workload tier for every employee."""
    return report_service.get_employee_chicken_counts(db)

@router.get("/egg-counts", response_model=List[EmployeeEggStat])
def read_all_employee_egg_counts(start_date: date, end_date: date, db: Session = Depends(get_db)):
    """Eggs collected by every employee between start_date and end_date (inclusive)."""
    return report_service.get_employee_egg_stats(db, start_date, end_date)

@router.get("/{employee_id}", response_model=Employee)
def read_employee(employee_id: int, db: Session = Depends(get_db)):
    """Retrieve a single employee by ID."""
    db_employee = crud_employee.get_employee(db=db, employee_id=employee_id)
    if db_employee is None:
        raise NotFoundError("Employee", employee_id)
    return db_employee

@router.post("/", response_model=Employee, status_code=status.HTTP_201_CREATED)
def create_employee(employee: EmployeeCreate, db: Session = Depends(get_db)):
    """Hire a new employee and assign their cages."""
    return crud_employee.create_employee(db=db, employee=employee)

@router.put("/{employee_id}", response_model=Employee)
def update_employee(employee_id: int, employee: EmployeeUpdate, db: Session = Depends(get_db)):
    """Update an employee. A provided cages list replaces the current one."""
    return crud_employee.update_employee(db=db, employee_id=employee_id, employee=employee)

@router.delete("/{employee_id}", status_code=status.HTTP_200_OK)
def delete_employee(employee_id: int, db: Session = Depends(get_db)):
    """Delete an employee and their cage assignments."""
    crud_employee.delete_employee(db=db, employee_id=employee_id)
    return {"message": "Employee deleted successfully."}

@router.get("/{employee_id}/chicken-count", response_model=EmployeeCount)
def read_employee_chicken_count(employee_id: int, db: Session = Depends(get_db)):
    return report_service.get_employee_chicken_count(db, employee_id)

@router.get("/{employee_id}/egg-count", response_model=EmployeeCount)
def read_employee_egg_count(employee_id: int, start_date: date, end_date: date, db: Session = Depends(get_db)):
    return report_service.get_employee_egg_count(db, employee_id, start_date, end_date)
