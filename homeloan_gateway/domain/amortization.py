"""Amortization engine - periodic repayments and the inverse principal solver"""

import math
from typing import Any, Optional

from homeloan_gateway.domain.models import (
    LoanInput,
    RepaymentComparison,
    RepaymentFrequency,
    RepaymentResult,
    RepaymentType,
)
from homeloan_gateway.utils.numeric import finite_or_zero, to_non_negative

PERIODS_PER_YEAR = {
    RepaymentFrequency.MONTHLY: 12,
    RepaymentFrequency.FORTNIGHTLY: 26,
    RepaymentFrequency.WEEKLY: 52,
}

ZERO_REPAYMENT = RepaymentResult(periodic_payment=0.0, total_paid=0.0, total_interest=0.0)


def parse_frequency(value: Any) -> RepaymentFrequency:
    """Map a raw frequency value to the enum; anything unrecognised is monthly"""
    if isinstance(value, RepaymentFrequency):
        return value
    text = str(value or "").strip().lower()
    for frequency in RepaymentFrequency:
        if text in (frequency.value, frequency.name.lower()):
            return frequency
    return RepaymentFrequency.MONTHLY


def parse_repayment_type(value: Any) -> RepaymentType:
    """Map a raw repayment type to the enum; anything unrecognised is P&I"""
    if isinstance(value, RepaymentType):
        return value
    text = str(value or "").strip().lower()
    for repayment_type in RepaymentType:
        if text in (repayment_type.value.lower(), repayment_type.name.lower()):
            return repayment_type
    return RepaymentType.PRINCIPAL_AND_INTEREST


def periods_per_year(frequency: Any) -> int:
    """Number of repayments per year: monthly 12, fortnightly 26, weekly 52"""
    return PERIODS_PER_YEAR[parse_frequency(frequency)]


def _compound(rate: float, periods: float) -> Optional[float]:
    """(1 + rate) ** periods, or None when the result overflows a float"""
    try:
        return (1 + rate) ** periods
    except OverflowError:
        return None


def _has_non_finite(*values: Any) -> bool:
    return any(isinstance(v, (int, float)) and not math.isfinite(v) for v in values)


def compute_repayment(loan: LoanInput) -> RepaymentResult:
    """
    Calculate periodic repayment, total repaid and total interest for a loan.

    Requirements:
    - Rate and term are converted to per-period values using the frequency
    - Principal-and-interest uses the standard amortizing payment formula,
      or straight-line principal / periods when the rate is zero
    - Interest-only pays the periodic interest; every payment counts as interest
    - Zero or negative term, or any non-finite input, gives an all-zero result

    Example:
        $500,000 at 6.5% over 30 years, monthly P&I
        → $3,160.34 per month, $637,722 total interest
    """
    if _has_non_finite(loan.principal, loan.annual_rate_percent, loan.term_years):
        return ZERO_REPAYMENT

    principal = to_non_negative(loan.principal)
    annual_rate_percent = to_non_negative(loan.annual_rate_percent)
    term_years = to_non_negative(loan.term_years)
    payments_per_year = periods_per_year(loan.frequency)

    effective_rate = annual_rate_percent / 100 / payments_per_year
    effective_term = term_years * payments_per_year

    if effective_term <= 0:
        return ZERO_REPAYMENT

    if parse_repayment_type(loan.repayment_type) is RepaymentType.INTEREST_ONLY:
        payment = principal * (annual_rate_percent / 100) / payments_per_year
        total_paid = payment * effective_term
        return RepaymentResult(
            periodic_payment=finite_or_zero(payment),
            total_paid=finite_or_zero(total_paid),
            total_interest=finite_or_zero(total_paid),
        )

    compound = _compound(effective_rate, effective_term) if effective_rate > 0 else None

    if effective_rate > 0 and compound is None:
        # (1+r)^n overflowed: the payment converges to the periodic interest
        payment = principal * effective_rate
    elif effective_rate > 0 and compound - 1 > 0:
        payment = principal * effective_rate * compound / (compound - 1)
    else:
        # Zero rate, or a rate below float resolution
        payment = principal / effective_term
        return RepaymentResult(
            periodic_payment=finite_or_zero(payment),
            total_paid=finite_or_zero(principal),
            total_interest=0.0,
        )

    total_paid = payment * effective_term
    total_interest = total_paid - principal

    return RepaymentResult(
        periodic_payment=finite_or_zero(payment),
        total_paid=finite_or_zero(total_paid),
        total_interest=finite_or_zero(total_interest),
    )


def compare_repayment_types(loan: LoanInput) -> RepaymentComparison:
    """Evaluate the same loan as principal-and-interest and as interest-only"""
    return RepaymentComparison(
        principal_and_interest=compute_repayment(
            LoanInput(
                principal=loan.principal,
                annual_rate_percent=loan.annual_rate_percent,
                term_years=loan.term_years,
                repayment_type=RepaymentType.PRINCIPAL_AND_INTEREST,
                frequency=loan.frequency,
            )
        ),
        interest_only=compute_repayment(
            LoanInput(
                principal=loan.principal,
                annual_rate_percent=loan.annual_rate_percent,
                term_years=loan.term_years,
                repayment_type=RepaymentType.INTEREST_ONLY,
                frequency=loan.frequency,
            )
        ),
    )


def principal_from_payment(
    payment: float,
    annual_rate: float,
    payments_per_year: int,
    term_years: float,
) -> float:
    """
    Invert the amortizing payment formula: the principal a fixed payment retires.

    Formula: P = A * ((1+r)^n - 1) / (r * (1+r)^n)
    where A is the periodic payment, r = annual_rate / payments_per_year
    (annual_rate as a fraction, 0.09 for 9%) and n = term_years * payments_per_year.
    """
    payment = to_non_negative(payment)
    rate = to_non_negative(annual_rate) / payments_per_year
    periods = to_non_negative(term_years) * payments_per_year

    if periods <= 0:
        return 0.0

    if rate <= 0:
        return finite_or_zero(payment * periods)

    compound = _compound(rate, periods)
    if compound is None:
        return finite_or_zero(payment / rate)

    numerator = compound - 1
    denominator = rate * compound
    if numerator <= 0:
        return finite_or_zero(payment * periods)

    return finite_or_zero(payment * (numerator / denominator))
