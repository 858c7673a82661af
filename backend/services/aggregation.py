"""
Aggregation engine for farm reports.

Pure functions over sequences of already-fetched records. Records are only
read through their attributes (``egg_per_month``, ``cage_id``, ``cages`` ...),
so ORM rows, pydantic schemas and plain test doubles all work. Nothing here
touches the database or rounds for display.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple


class WorkloadTier(str, Enum):
    NONE = "None"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# (minimum chicken count, tier), checked from the top down
WORKLOAD_THRESHOLDS: Tuple[Tuple[int, WorkloadTier], ...] = (
    (5, WorkloadTier.HIGH),
    (3, WorkloadTier.MEDIUM),
    (1, WorkloadTier.LOW),
)


def average_egg_production(chickens: Sequence) -> float:
    """Mean ``egg_per_month`` across the chickens, 0.0 when there are none."""
    if not chickens:
        return 0.0
    return sum(c.egg_per_month for c in chickens) / len(chickens)


def most_productive_chicken(chickens: Iterable):
    """Chicken with the highest ``egg_per_month``; the first one wins a tie."""
    best = None
    for chicken in chickens:
        if best is None or chicken.egg_per_month > best.egg_per_month:
            best = chicken
    return best


def low_productivity_chickens(chickens: Sequence, threshold: Optional[float] = None) -> List:
    """
    Chickens laying strictly fewer eggs than ``threshold``.

    The threshold defaults to the average of the same input, so a cohort where
    every chicken lays the same amount has no low performers.
    """
    if threshold is None:
        threshold = average_egg_production(chickens)
    return [c for c in chickens if c.egg_per_month < threshold]


def employee_egg_counts(employees: Iterable, events: Iterable) -> List[Dict]:
    """
    Eggs attributed to each employee by the ``employee_id`` on the events.

    ``events`` must already be limited to the reporting window. Employees with
    no attributed events are listed with a zero count.
    """
    totals: Dict[int, int] = {}
    for event in events:
        if event.employee_id is None:
            continue
        totals[event.employee_id] = totals.get(event.employee_id, 0) + (event.egg_count or 0)

    return [
        {
            "employee_id": employee.id,
            "employee_name": employee.full_name,
            "egg_count": totals.get(employee.id, 0),
        }
        for employee in employees
    ]


def employee_chicken_counts(employees: Iterable, chickens: Sequence) -> List[Dict]:
    """Number of chickens housed in the cages each employee looks after."""
    per_cage: Dict[int, int] = {}
    for chicken in chickens:
        per_cage[chicken.cage_id] = per_cage.get(chicken.cage_id, 0) + 1

    results = []
    for employee in employees:
        # a repeated cage id must not count its chickens twice
        cages = set(employee.cages or [])
        results.append({
            "employee_id": employee.id,
            "employee_name": employee.full_name,
            "chicken_count": sum(per_cage.get(cage_id, 0) for cage_id in cages),
        })
    return results


def workload_tier(chicken_count: int, thresholds=WORKLOAD_THRESHOLDS) -> WorkloadTier:
    for minimum, tier in thresholds:
        if chicken_count >= minimum:
            return tier
    return WorkloadTier.NONE


def percentage_of_total(count: float, total: float) -> float:
    if not total:
        return 0.0
    return count / total * 100


def price_per_egg(total_cost: float, total_eggs: int) -> float:
    if not total_eggs:
        return 0.0
    return total_cost / total_eggs


def average_eggs_by_weight_and_age(chickens: Iterable, weight: float, age: int) -> float:
    """Mean ``egg_per_month`` of the chickens with exactly this weight and age."""
    matching = [c for c in chickens if c.weight == weight and c.age == age]
    return average_egg_production(matching)


def cage_egg_totals(events: Iterable) -> Dict[int, int]:
    """Eggs collected per cage, in order of first appearance."""
    totals: Dict[int, int] = {}
    for event in events:
        totals[event.cage_id] = totals.get(event.cage_id, 0) + (event.egg_count or 0)
    return totals


def cage_with_most_eggs(events: Iterable) -> Optional[Tuple[int, int]]:
    """``(cage_id, egg_count)`` of the most productive cage, or None without events."""
    best = None
    for cage_id, total in cage_egg_totals(events).items():
        if best is None or total > best[1]:
            best = (cage_id, total)
    return best


def empty_cages(cages: Iterable, chickens: Iterable) -> List:
    """Registered cages that no chicken occupies."""
    occupied = {c.cage_id for c in chickens}
    return [cage for cage in cages if cage.id not in occupied]
