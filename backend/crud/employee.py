from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from typing import List
import logging

from models.employee import Employee, EmployeeCage
from schemas.employee import EmployeeCreate, EmployeeUpdate
from exceptions import NotFoundError, ValidationError, translate_db_errors

logger = logging.getLogger(__name__)


def _duplicate_passport(db: Session, passport_data: str, exclude_id: int = None) -> bool:
    query = db.query(Employee.id).filter(Employee.passport_data == passport_data)
    if exclude_id is not None:
        query = query.filter(Employee.id != exclude_id)
    return query.first() is not None


def _commit(db: Session):
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ValidationError("Employee with this passport data already exists") from e


@translate_db_errors
def get_employee(db: Session, employee_id: int):
    return (
        db.query(Employee)
        .options(selectinload(Employee.cage_assignments))
        .filter(Employee.id == employee_id)
        .first()
    )


@translate_db_errors
def get_employees(db: Session, skip: int = 0, limit: int = None) -> List[Employee]:
    query = (
        db.query(Employee)
        .options(selectinload(Employee.cage_assignments))
        .order_by(Employee.id)
        .offset(skip)
    )
    if limit is not None:
        query = query.limit(limit)
    return query.all()


@translate_db_errors
def create_employee(db: Session, employee: EmployeeCreate) -> Employee:
    if _duplicate_passport(db, employee.passport_data):
        raise ValidationError("Employee with this passport data already exists")

    db_employee = Employee(**employee.model_dump(exclude={"cages"}))
    db_employee.cage_assignments = [EmployeeCage(cage_id=cage_id) for cage_id in employee.cages]
    db.add(db_employee)
    _commit(db)
    db.refresh(db_employee)
    logger.info(f"Created employee {db_employee.id} serving cages {db_employee.cages}")
    return db_employee


@translate_db_errors
def update_employee(db: Session, employee_id: int, employee: EmployeeUpdate) -> Employee:
    db_employee = get_employee(db, employee_id)
    if db_employee is None:
        raise NotFoundError("Employee", employee_id)

    update_data = employee.model_dump(exclude_unset=True, exclude_none=True)
    passport_data = update_data.get("passport_data")
    if passport_data and _duplicate_passport(db, passport_data, exclude_id=employee_id):
        raise ValidationError("Employee with this passport data already exists")

    cages = update_data.pop("cages", None)
    for key, value in update_data.items():
        setattr(db_employee, key, value)
    if cages is not None:
        # Assignments are replaced, not merged; old rows go first so the
        # (employee_id, cage_id) constraint never sees both
        db_employee.cage_assignments.clear()
        db.flush()
        db_employee.cage_assignments = [EmployeeCage(cage_id=cage_id) for cage_id in cages]
    _commit(db)
    db.refresh(db_employee)
    logger.info(f"Updated employee {employee_id}: {sorted(update_data) + (['cages'] if cages is not None else [])}")
    return db_employee


@translate_db_errors
def delete_employee(db: Session, employee_id: int):
    db_employee = get_employee(db, employee_id)
    if db_employee is None:
        raise NotFoundError("Employee", employee_id)
    db.delete(db_employee)
    db.commit()
    logger.info(f"Deleted employee {employee_id}")
