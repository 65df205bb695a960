"""Stamp duty engine - progressive bracket schedule with first home buyer exemption"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from homeloan_gateway.domain.exceptions import InvalidScheduleError
from homeloan_gateway.domain.models import StampDutyInput, StampDutyResult
from homeloan_gateway.utils.numeric import finite_or_zero, to_flag, to_non_negative

FIRST_HOME_EXEMPTION_THRESHOLD = 600_000


@dataclass(frozen=True)
class StampDutyBracket:
    """One band of the schedule: base + (value - lower_bound) / 100 * rate_per_hundred"""

    lower_bound: float
    upper_bound: float  # inclusive; math.inf for the top band
    base_duty: float
    rate_per_hundred: float  # dollars of duty per $100 of value in this band

    def duty_for(self, value: float) -> float:
        return self.base_duty + (value - self.lower_bound) / 100 * self.rate_per_hundred


class StampDutySchedule:
    """
    Ordered, validated bracket table.

    Validation rules:
    - At least one bracket, starting at 0 and ending open-ended (math.inf)
    - Bands are contiguous: each lower bound equals the previous upper bound
    - Marginal rates never decrease
    - Duty never falls at a boundary: each base duty is at least the previous
      band's duty at its ceiling
    - With require_continuity, each base duty must equal that ceiling duty
    """

    def __init__(self, brackets: Sequence[StampDutyBracket], require_continuity: bool = False):
        self.brackets: Tuple[StampDutyBracket, ...] = tuple(brackets)
        self.require_continuity = require_continuity
        self._validate()

    def _validate(self) -> None:
        if not self.brackets:
            raise InvalidScheduleError("Schedule has no brackets")

        if self.brackets[0].lower_bound != 0:
            raise InvalidScheduleError("First bracket must start at 0")

        if not math.isinf(self.brackets[-1].upper_bound):
            raise InvalidScheduleError("Last bracket must be open-ended")

        for bracket in self.brackets:
            if bracket.upper_bound <= bracket.lower_bound:
                raise InvalidScheduleError(
                    f"Bracket upper bound {bracket.upper_bound} must exceed lower bound {bracket.lower_bound}"
                )

        for previous, current in zip(self.brackets, self.brackets[1:]):
            if current.lower_bound != previous.upper_bound:
                raise InvalidScheduleError(
                    f"Gap or overlap between brackets at {previous.upper_bound} and {current.lower_bound}"
                )
            if current.rate_per_hundred < previous.rate_per_hundred:
                raise InvalidScheduleError(
                    f"Marginal rate decreases at {current.lower_bound}"
                )
            ceiling_duty = previous.duty_for(previous.upper_bound)
            continuous = math.isclose(current.base_duty, ceiling_duty, rel_tol=1e-9, abs_tol=1e-6)
            if not continuous and current.base_duty < ceiling_duty:
                raise InvalidScheduleError(
                    f"Base duty {current.base_duty} at {current.lower_bound} is below "
                    f"{ceiling_duty} from the previous bracket"
                )
            if not continuous and self.require_continuity:
                raise InvalidScheduleError(
                    f"Base duty {current.base_duty} at {current.lower_bound} does not match "
                    f"{ceiling_duty} from the previous bracket"
                )

    def bracket_for(self, value: float) -> StampDutyBracket:
        for bracket in self.brackets:
            if value <= bracket.upper_bound:
                return bracket
        return self.brackets[-1]

    def duty_for(self, value: float) -> float:
        return self.bracket_for(value).duty_for(value)


# Indicative general rates for Victoria, Australia. The published 55,070 base
# sits 2,400 above the 52,670 the 6% band reaches at 960,000.
VICTORIA_GENERAL_SCHEDULE = StampDutySchedule(
    [
        StampDutyBracket(lower_bound=0, upper_bound=25_000, base_duty=0, rate_per_hundred=1.4),
        StampDutyBracket(lower_bound=25_000, upper_bound=130_000, base_duty=350, rate_per_hundred=2.4),
        StampDutyBracket(lower_bound=130_000, upper_bound=960_000, base_duty=2_870, rate_per_hundred=6),
        StampDutyBracket(lower_bound=960_000, upper_bound=math.inf, base_duty=55_070, rate_per_hundred=6.5),
    ]
)


def compute_stamp_duty(
    purchase: StampDutyInput,
    schedule: StampDutySchedule = VICTORIA_GENERAL_SCHEDULE,
    first_home_exemption_threshold: float = FIRST_HOME_EXEMPTION_THRESHOLD,
) -> StampDutyResult:
    """
    Calculate duty payable on a property purchase.

    Rules:
    - First home buyers at or below the exemption threshold pay nothing
    - Everyone else pays the standard schedule; there is no sliding
      concession above the threshold
    """
    property_value = to_non_negative(purchase.property_value)

    if to_flag(purchase.is_first_home_buyer) and property_value <= first_home_exemption_threshold:
        return StampDutyResult(duty_payable=0.0, exemption_applied=True)

    duty = schedule.duty_for(property_value)
    return StampDutyResult(duty_payable=finite_or_zero(duty), exemption_applied=False)
