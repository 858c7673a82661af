"""
test_aggregation.py - Unit tests for the pure aggregation engine.

Records are stand-ins built with SimpleNamespace; no database is involved.
"""

from types import SimpleNamespace

import pytest

from services.aggregation import (
    WorkloadTier,
    average_egg_production,
    average_eggs_by_weight_and_age,
    cage_with_most_eggs,
    employee_chicken_counts,
    employee_egg_counts,
    empty_cages,
    low_productivity_chickens,
    most_productive_chicken,
    percentage_of_total,
    price_per_egg,
    workload_tier,
)


def chicken(egg_per_month, cage_id=1, chicken_id=None, weight=2.5, age=12):
    return SimpleNamespace(id=chicken_id, cage_id=cage_id, egg_per_month=egg_per_month, weight=weight, age=age)


def employee(employee_id, cages, name=None):
    return SimpleNamespace(id=employee_id, full_name=name or f"Employee {employee_id}", cages=cages)


def event(employee_id=None, egg_count=1, cage_id=1):
    return SimpleNamespace(employee_id=employee_id, egg_count=egg_count, cage_id=cage_id)


# ===========================================================================
# Average / most productive / low productivity
# ===========================================================================

class TestChickenProductivity:

    def test_flock_of_three(self):
        flock = [chicken(10, chicken_id=1), chicken(30, chicken_id=2), chicken(20, chicken_id=3)]

        assert average_egg_production(flock) == 20
        assert [c.id for c in low_productivity_chickens(flock)] == [1]
        assert most_productive_chicken(flock).id == 2

    def test_average_of_empty_flock_is_zero(self):
        assert average_egg_production([]) == 0

    def test_average_is_not_rounded(self):
        assert average_egg_production([chicken(1), chicken(2), chicken(2)]) == pytest.approx(5 / 3)

    @pytest.mark.parametrize("eggs", [[7], [0, 0, 0], [3, 9, 27, 1], [12, 13, 13, 40, 2]])
    def test_average_between_min_and_max(self, eggs):
        avg = average_egg_production([chicken(e) for e in eggs])
        assert min(eggs) <= avg <= max(eggs)

    def test_most_productive_of_empty_flock_is_none(self):
        assert most_productive_chicken([]) is None

    def test_most_productive_of_singleton(self):
        only = chicken(4, chicken_id=9)
        assert most_productive_chicken([only]) is only

    def test_most_productive_tie_goes_to_first(self):
        flock = [chicken(5, chicken_id=1), chicken(25, chicken_id=2), chicken(25, chicken_id=3)]
        assert most_productive_chicken(flock).id == 2

    @pytest.mark.parametrize("eggs", [[10, 30, 20], [5, 5, 5], [0, 1], [8, 2, 2, 9, 4]])
    def test_low_productivity_strictly_below_average(self, eggs):
        flock = [chicken(e) for e in eggs]
        avg = average_egg_production(flock)
        assert all(c.egg_per_month < avg for c in low_productivity_chickens(flock))

    def test_low_productivity_keeps_input_order(self):
        flock = [chicken(3, chicken_id=1), chicken(50, chicken_id=2), chicken(1, chicken_id=3), chicken(2, chicken_id=4)]
        assert [c.id for c in low_productivity_chickens(flock)] == [1, 3, 4]

    def test_uniform_flock_has_no_low_performers(self):
        assert low_productivity_chickens([chicken(12), chicken(12)]) == []

    def test_explicit_threshold(self):
        flock = [chicken(10, chicken_id=1), chicken(30, chicken_id=2)]
        assert [c.id for c in low_productivity_chickens(flock, threshold=31)] == [1, 2]

    def test_average_by_weight_and_age(self):
        flock = [
            chicken(20, weight=2.5, age=12),
            chicken(30, weight=2.5, age=12),
            chicken(99, weight=3.0, age=12),
        ]
        assert average_eggs_by_weight_and_age(flock, 2.5, 12) == 25
        assert average_eggs_by_weight_and_age(flock, 4.0, 1) == 0


# ===========================================================================
# Employee counts
# ===========================================================================

class TestEmployeeCounts:

    def test_chicken_count_shared_cage(self):
        staff = [employee(1, [4, 5])]
        flock = [chicken(1, cage_id=4), chicken(1, cage_id=4), chicken(1, cage_id=5), chicken(1, cage_id=6)]

        assert employee_chicken_counts(staff, flock)[0]["chicken_count"] == 3

    def test_duplicate_cage_ids_do_not_double_count(self):
        flock = [chicken(1, cage_id=4), chicken(1, cage_id=5)]
        once = employee_chicken_counts([employee(1, [4, 5])], flock)
        twice = employee_chicken_counts([employee(1, [4, 4, 5, 5])], flock)
        assert once == twice

    def test_total_bounded_by_assignments(self):
        staff = [employee(1, [1, 2]), employee(2, [2, 3]), employee(3, [])]
        flock = [chicken(1, cage_id=c) for c in (1, 2, 3, 7)]
        counts = employee_chicken_counts(staff, flock)

        assert [c["chicken_count"] for c in counts] == [2, 2, 0]
        assert sum(c["chicken_count"] for c in counts) <= 4

    def test_egg_counts_attributed_by_employee_id(self):
        staff = [employee(1, [1], name="Ivanov"), employee(2, [1], name="Petrov")]
        events = [event(1, 3), event(1, 2), event(None, 10), event(5, 7)]

        assert employee_egg_counts(staff, events) == [
            {"employee_id": 1, "employee_name": "Ivanov", "egg_count": 5},
            {"employee_id": 2, "employee_name": "Petrov", "egg_count": 0},
        ]

    def test_egg_counts_without_employees(self):
        assert employee_egg_counts([], [event(1, 3)]) == []


# ===========================================================================
# Workload tiers and zero-safe arithmetic
# ===========================================================================

class TestWorkloadAndRatios:

    @pytest.mark.parametrize("count,tier", [
        (0, WorkloadTier.NONE),
        (1, WorkloadTier.LOW),
        (2, WorkloadTier.LOW),
        (3, WorkloadTier.MEDIUM),
        (4, WorkloadTier.MEDIUM),
        (5, WorkloadTier.HIGH),
        (100, WorkloadTier.HIGH),
    ])
    def test_workload_tier(self, count, tier):
        assert workload_tier(count) is tier

    def test_workload_tier_custom_thresholds(self):
        thresholds = ((10, WorkloadTier.HIGH), (1, WorkloadTier.LOW))
        assert workload_tier(9, thresholds) is WorkloadTier.LOW
        assert workload_tier(10, thresholds) is WorkloadTier.HIGH

    def test_percentage_of_zero_total(self):
        assert percentage_of_total(0, 0) == 0

    def test_percentage_of_total(self):
        assert percentage_of_total(1, 4) == 25

    def test_price_per_egg_without_eggs(self):
        assert price_per_egg(0, 0) == 0

    def test_price_per_egg(self):
        assert price_per_egg(50.0, 5) == 10.0


# ===========================================================================
# Cages
# ===========================================================================

class TestCages:

    def test_cage_with_most_eggs(self):
        events = [event(cage_id=1, egg_count=2), event(cage_id=2, egg_count=3), event(cage_id=1, egg_count=2)]
        assert cage_with_most_eggs(events) == (1, 4)

    def test_cage_with_most_eggs_tie_goes_to_first(self):
        events = [event(cage_id=2, egg_count=3), event(cage_id=1, egg_count=3)]
        assert cage_with_most_eggs(events) == (2, 3)

    def test_cage_with_most_eggs_without_events(self):
        assert cage_with_most_eggs([]) is None

    def test_empty_cages(self):
        cages = [SimpleNamespace(id=i, number=i * 10) for i in (1, 2, 3)]
        flock = [chicken(1, cage_id=2)]
        assert [c.id for c in empty_cages(cages, flock)] == [1, 3]
