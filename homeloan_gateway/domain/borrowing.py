"""Borrowing capacity engine - serviceability test at a buffered assessment rate"""

from homeloan_gateway.domain.amortization import principal_from_payment
from homeloan_gateway.domain.hem import DEFAULT_HEM_TABLE, lookup_hem
from homeloan_gateway.domain.models import (
    BorrowingInput,
    BorrowingResult,
    HemTable,
    ServiceabilityParameters,
)
from homeloan_gateway.utils.numeric import finite_or_zero, to_non_negative

DEFAULT_SERVICEABILITY = ServiceabilityParameters()


def calculate_annual_commitments(
    borrowing: BorrowingInput,
    hem: float,
    parameters: ServiceabilityParameters = DEFAULT_SERVICEABILITY,
) -> float:
    """
    Sum the annual outgoings deducted from income before servicing a new loan.

    Components:
    - HEM living expenses
    - Existing debt repayments, taken as supplied unless
      annualize_debt_repayments is set (then multiplied by 12)
    - Credit card servicing: credit_card_servicing_rate of the total limit
    """
    debt_repayments = to_non_negative(borrowing.existing_monthly_debt_repayments)
    if parameters.annualize_debt_repayments:
        debt_repayments *= 12

    credit_card_servicing = (
        to_non_negative(borrowing.credit_card_total_limit) * parameters.credit_card_servicing_rate
    )

    return hem + debt_repayments + credit_card_servicing


def compute_borrowing_capacity(
    borrowing: BorrowingInput,
    parameters: ServiceabilityParameters = DEFAULT_SERVICEABILITY,
    hem_table: HemTable = DEFAULT_HEM_TABLE,
) -> BorrowingResult:
    """
    Estimate the largest loan the borrower can service.

    Flow:
    1. Total annual income (missing values count as zero)
    2. Subtract HEM, existing repayments and credit card servicing
    3. Zero or negative surplus means zero capacity
    4. Spread the surplus over 12 monthly repayments and solve for the
       principal those repayments retire at base rate + buffer over the
       assessment term

    The applied HEM is always returned so callers can display it.
    """
    total_income = to_non_negative(borrowing.primary_income) + to_non_negative(
        borrowing.other_income
    )
    hem = lookup_hem(borrowing.household, hem_table)

    net_serviceable_income = total_income - calculate_annual_commitments(borrowing, hem, parameters)

    if not net_serviceable_income > 0:
        return BorrowingResult(max_principal=0.0, applied_hem_amount=hem)

    monthly_serviceable = net_serviceable_income / 12
    max_principal = principal_from_payment(
        monthly_serviceable,
        parameters.assessment_rate,
        12,
        parameters.assessment_term_years,
    )

    return BorrowingResult(max_principal=finite_or_zero(max_principal), applied_hem_amount=hem)
