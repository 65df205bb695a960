"""Household Expenditure Measure (HEM) lookup"""

from homeloan_gateway.domain.models import HemTable, HouseholdProfile
from homeloan_gateway.utils.numeric import to_count

DEFAULT_HEM_TABLE = HemTable()


def lookup_hem(household: HouseholdProfile, table: HemTable = DEFAULT_HEM_TABLE) -> float:
    """
    Estimate annual living expenses for a household.

    Tiers (indicative figures):
    - 1 adult: $25,000
    - 2 adults: $35,000 (larger households are capped at this tier)
    - Each child adds $5,000, uncapped

    Adult counts below 1 are treated as a single adult.
    """
    adults = to_count(household.adult_count, minimum=1)
    children = to_count(household.child_count, minimum=0)

    hem = table.couple if adults >= 2 else table.single_adult
    return hem + children * table.per_child
