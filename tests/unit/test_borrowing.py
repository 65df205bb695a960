"""Unit tests for borrowing capacity and HEM lookup"""

import math
import pytest
from dataclasses import replace
from homeloan_gateway.domain.amortization import compute_repayment
from homeloan_gateway.domain.borrowing import (
    calculate_annual_commitments,
    compute_borrowing_capacity,
)
from homeloan_gateway.domain.hem import lookup_hem
from homeloan_gateway.domain.models import (
    BorrowingInput,
    HemTable,
    HouseholdProfile,
    LoanInput,
    ServiceabilityParameters,
)


def test_lookup_hem_tiers():
    """Test single and couple base amounts"""
    assert lookup_hem(HouseholdProfile(adult_count=1, child_count=0)) == 25_000
    assert lookup_hem(HouseholdProfile(adult_count=2, child_count=0)) == 35_000


def test_lookup_hem_children_added_linearly():
    """Test each child adds $5,000 with no cap"""
    assert lookup_hem(HouseholdProfile(adult_count=1, child_count=1)) == 30_000
    assert lookup_hem(HouseholdProfile(adult_count=2, child_count=2)) == 45_000
    assert lookup_hem(HouseholdProfile(adult_count=2, child_count=8)) == 75_000


def test_lookup_hem_more_than_two_adults_capped():
    """Test households above two adults use the couple tier"""
    assert lookup_hem(HouseholdProfile(adult_count=3, child_count=0)) == 35_000
    assert lookup_hem(HouseholdProfile(adult_count=5, child_count=1)) == 40_000


def test_lookup_hem_invalid_counts():
    """Test zero/blank adults become one adult and negative children become zero"""
    assert lookup_hem(HouseholdProfile(adult_count=0, child_count=0)) == 25_000
    assert lookup_hem(HouseholdProfile(adult_count="", child_count=None)) == 25_000
    assert lookup_hem(HouseholdProfile(adult_count=1, child_count=-2)) == 25_000


def test_lookup_hem_custom_table():
    """Test tiers can be overridden"""
    table = HemTable(single_adult=30_000, couple=42_000, per_child=7_500)

    assert lookup_hem(HouseholdProfile(adult_count=2, child_count=2), table) == 57_000


def test_compute_borrowing_capacity_single_earner(single_earner: BorrowingInput):
    """Test $100k single income at 6% + 3% buffer over 30 years"""
    result = compute_borrowing_capacity(single_earner)

    # (100,000 - 25,000) / 12 = 6,250 per month, annuity factor ~124.28 at 0.75%/month
    assert result.max_principal == pytest.approx(776_762, rel=1e-3)
    assert result.applied_hem_amount == 25_000


def test_compute_borrowing_capacity_round_trip(single_earner: BorrowingInput):
    """Test the capacity loan at the assessment rate costs exactly the monthly surplus"""
    result = compute_borrowing_capacity(single_earner)

    repayment = compute_repayment(
        LoanInput(principal=result.max_principal, annual_rate_percent=9, term_years=30)
    )

    assert repayment.periodic_payment == pytest.approx(6_250, rel=1e-9)


def test_compute_borrowing_capacity_zero_when_expenses_exceed_income():
    """Test zero capacity when HEM alone exceeds income"""
    borrowing = BorrowingInput(primary_income=20_000)
    result = compute_borrowing_capacity(borrowing)

    assert result.max_principal == 0
    assert result.applied_hem_amount == 25_000


def test_compute_borrowing_capacity_zero_when_surplus_exactly_zero():
    """Test income exactly covering commitments gives zero capacity"""
    borrowing = BorrowingInput(
        primary_income=40_000,
        household=HouseholdProfile(adult_count=2, child_count=1),
    )

    assert compute_borrowing_capacity(borrowing).max_principal == 0


def test_compute_borrowing_capacity_missing_income_is_zero():
    """Test blank and missing income never raise"""
    borrowing = BorrowingInput(primary_income=None, other_income="")
    result = compute_borrowing_capacity(borrowing)

    assert result.max_principal == 0
    assert result.applied_hem_amount == 25_000


def test_compute_borrowing_capacity_nan_income_is_zero():
    """Test NaN income is treated as zero rather than propagating"""
    result = compute_borrowing_capacity(BorrowingInput(primary_income=math.nan, other_income=50_000))

    assert result.max_principal == compute_borrowing_capacity(BorrowingInput(primary_income=50_000)).max_principal


def test_compute_borrowing_capacity_other_income_added(single_earner: BorrowingInput):
    """Test other income adds to primary income"""
    split = replace(single_earner, primary_income=80_000, other_income=20_000)

    assert compute_borrowing_capacity(split).max_principal == pytest.approx(
        compute_borrowing_capacity(single_earner).max_principal
    )


def test_compute_borrowing_capacity_credit_card_servicing(single_earner: BorrowingInput):
    """Test 3% of total card limits is deducted from income"""
    with_cards = replace(single_earner, credit_card_total_limit=10_000)
    # 3% of $10,000 = $300 less income
    equivalent = replace(single_earner, primary_income=99_700)

    assert compute_borrowing_capacity(with_cards).max_principal == pytest.approx(
        compute_borrowing_capacity(equivalent).max_principal
    )


def test_compute_borrowing_capacity_debt_repayments_as_supplied(single_earner: BorrowingInput):
    """Test existing repayments are deducted unchanged by default"""
    with_debts = replace(single_earner, existing_monthly_debt_repayments=1_000)
    equivalent = replace(single_earner, primary_income=99_000)

    assert compute_borrowing_capacity(with_debts).max_principal == pytest.approx(
        compute_borrowing_capacity(equivalent).max_principal
    )


def test_compute_borrowing_capacity_debt_repayments_annualized(single_earner: BorrowingInput):
    """Test annualize_debt_repayments multiplies existing repayments by 12"""
    parameters = ServiceabilityParameters(annualize_debt_repayments=True)
    with_debts = replace(single_earner, existing_monthly_debt_repayments=1_000)
    equivalent = replace(single_earner, primary_income=88_000)

    assert compute_borrowing_capacity(with_debts, parameters).max_principal == pytest.approx(
        compute_borrowing_capacity(equivalent, parameters).max_principal
    )


def test_calculate_annual_commitments():
    """Test commitment components are summed"""
    borrowing = BorrowingInput(existing_monthly_debt_repayments=500, credit_card_total_limit=20_000)

    # 25,000 HEM + 500 repayments + 600 card servicing
    assert calculate_annual_commitments(borrowing, 25_000) == pytest.approx(26_100)
    assert calculate_annual_commitments(
        borrowing, 25_000, ServiceabilityParameters(annualize_debt_repayments=True)
    ) == pytest.approx(31_600)


def test_compute_borrowing_capacity_higher_buffer_lowers_capacity(single_earner: BorrowingInput):
    """Test a larger serviceability buffer reduces capacity"""
    default = compute_borrowing_capacity(single_earner)
    stressed = compute_borrowing_capacity(single_earner, ServiceabilityParameters(buffer=0.05))

    assert 0 < stressed.max_principal < default.max_principal


def test_compute_borrowing_capacity_custom_hem_table_echoed(single_earner: BorrowingInput):
    """Test the applied HEM reflects the table used"""
    result = compute_borrowing_capacity(single_earner, hem_table=HemTable(single_adult=31_000))

    assert result.applied_hem_amount == 31_000


def test_compute_borrowing_capacity_is_idempotent(single_earner: BorrowingInput):
    """Test identical inputs give identical outputs"""
    assert compute_borrowing_capacity(single_earner) == compute_borrowing_capacity(single_earner)
