"""
Report service.

Fetches records through the crud layer and hands them to the aggregation
engine. Every function is read-only, so reports can run concurrently and be
retried freely. Date-ranged reports are inclusive on both ends and reject an
inverted range instead of swapping it.
"""

from sqlalchemy.orm import Session
from datetime import date
from typing import Dict, List, Optional
from decimal import Decimal, ROUND_HALF_UP
import logging

from crud import app_config as crud_app_config
from crud import cage as crud_cage
from crud import chicken as crud_chicken
from crud import egg_collection as crud_egg_collection
from crud import employee as crud_employee
from exceptions import NotFoundError, ValidationError
from services import aggregation

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int) -> float:
    """Round for display, halves away from zero (0.25 -> 0.3, not 0.2)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def validate_date_range(start_date: Optional[date], end_date: Optional[date]):
    if start_date is not None and end_date is not None and start_date > end_date:
        logger.warning(f"Rejected inverted date range {start_date} .. {end_date}")
        raise ValidationError(
            f"start_date {start_date.isoformat()} must not be after end_date {end_date.isoformat()}"
        )


def get_egg_stats(db: Session, start_date: date, end_date: date) -> Dict:
    """Total eggs collected in the window and what they are worth at the configured egg price."""
    validate_date_range(start_date, end_date)
    events = crud_egg_collection.get_collections_by_date_range(db, start_date, end_date)
    total_eggs = sum(event.egg_count for event in events)
    total_cost = total_eggs * crud_app_config.get_egg_price(db)
    return {
        "start_date": start_date,
        "end_date": end_date,
        "total_eggs": total_eggs,
        "total_cost": total_cost,
        "price_per_egg": aggregation.price_per_egg(total_cost, total_eggs),
    }


def get_employee_egg_stats(db: Session, start_date: date, end_date: date) -> List[Dict]:
    """Eggs credited to each employee in the window, with their share of the total."""
    validate_date_range(start_date, end_date)
    employees = crud_employee.get_employees(db)
    events = crud_egg_collection.get_collections_by_date_range(db, start_date, end_date)

    stats = aggregation.employee_egg_counts(employees, events)
    total = sum(stat["egg_count"] for stat in stats)
    for stat in stats:
        stat["percentage"] = round_half_up(aggregation.percentage_of_total(stat["egg_count"], total), 2)
    return stats


def get_most_productive_chicken(db: Session) -> Optional[Dict]:
    chicken = aggregation.most_productive_chicken(crud_chicken.get_chickens(db))
    if chicken is None:
        return None
    return {
        "chicken_id": chicken.id,
        "cage_id": chicken.cage_id,
        "cage_number": crud_cage.resolve_cage_number(db, chicken.cage_id),
        "egg_per_month": chicken.egg_per_month,
    }


def get_low_productivity_chickens(db: Session) -> List:
    return aggregation.low_productivity_chickens(crud_chicken.get_chickens(db))


def get_employee_chicken_counts(db: Session) -> List[Dict]:
    employees = crud_employee.get_employees(db)
    chickens = crud_chicken.get_chickens(db)

    counts = aggregation.employee_chicken_counts(employees, chickens)
    for count in counts:
        count["workload_tier"] = aggregation.workload_tier(count["chicken_count"])
    return counts


def get_average_egg_production(db: Session) -> Dict:
    chickens = crud_chicken.get_chickens(db)
    average = aggregation.average_egg_production(chickens)
    return {
        "chicken_count": len(chickens),
        "average": average,
        "average_display": round_half_up(average, 1),
    }


def get_average_eggs_by_weight_and_age(db: Session, weight: float, age: int) -> Dict:
    if weight <= 0 or age < 1:
        raise ValidationError("weight must be positive and age at least 1 month")
    chickens = crud_chicken.get_chickens(db)
    return {
        "weight": weight,
        "age": age,
        "average": aggregation.average_eggs_by_weight_and_age(chickens, weight, age),
    }


def get_cage_with_most_eggs(
    db: Session, start_date: Optional[date] = None, end_date: Optional[date] = None
) -> Optional[Dict]:
    validate_date_range(start_date, end_date)
    events = crud_egg_collection.get_collections_by_date_range(db, start_date, end_date)
    best = aggregation.cage_with_most_eggs(events)
    if best is None:
        return None
    cage_id, egg_count = best
    return {
        "cage_id": cage_id,
        "cage_number": crud_cage.resolve_cage_number(db, cage_id),
        "egg_count": egg_count,
        "start_date": start_date,
        "end_date": end_date,
    }


def get_empty_cages(db: Session) -> List:
    return aggregation.empty_cages(crud_cage.get_cages(db), crud_chicken.get_chickens(db))


def _require_employee(db: Session, employee_id: int):
    employee = crud_employee.get_employee(db, employee_id)
    if employee is None:
        logger.warning(f"Employee {employee_id} not found for report")
        raise NotFoundError("Employee", employee_id)
    return employee


def get_employee_chicken_count(db: Session, employee_id: int) -> Dict:
    employee = _require_employee(db, employee_id)
    counts = aggregation.employee_chicken_counts([employee], crud_chicken.get_chickens(db))
    return {"employee_id": employee_id, "count": counts[0]["chicken_count"]}


def get_employee_egg_count(db: Session, employee_id: int, start_date: date, end_date: date) -> Dict:
    validate_date_range(start_date, end_date)
    employee = _require_employee(db, employee_id)
    events = crud_egg_collection.get_collections_by_date_range(
        db, start_date, end_date, employee_id=employee_id
    )
    counts = aggregation.employee_egg_counts([employee], events)
    return {
        "employee_id": employee_id,
        "count": counts[0]["egg_count"],
        "start_date": start_date,
        "end_date": end_date,
    }
