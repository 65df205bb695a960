"""Domain models - immutable dataclasses for calculation inputs and results"""

from dataclasses import dataclass, field
from enum import Enum


class RepaymentType(str, Enum):
    """How each repayment is applied to the loan"""

    PRINCIPAL_AND_INTEREST = "principalAndInterest"
    INTEREST_ONLY = "interestOnly"


class RepaymentFrequency(str, Enum):
    """How often repayments are made"""

    MONTHLY = "monthly"
    FORTNIGHTLY = "fortnightly"
    WEEKLY = "weekly"


@dataclass(frozen=True)
class LoanInput:
    """Loan scenario entered by the user"""

    principal: float
    annual_rate_percent: float  # 6.5 means 6.5% p.a.
    term_years: float
    repayment_type: RepaymentType = RepaymentType.PRINCIPAL_AND_INTEREST
    frequency: RepaymentFrequency = RepaymentFrequency.MONTHLY


@dataclass(frozen=True)
class RepaymentResult:
    """Repayment figures for one loan scenario"""

    periodic_payment: float
    total_paid: float
    total_interest: float


@dataclass(frozen=True)
class RepaymentComparison:
    """Both repayment types evaluated for the same loan"""

    principal_and_interest: RepaymentResult
    interest_only: RepaymentResult


@dataclass(frozen=True)
class HouseholdProfile:
    """Household composition used for the living-expense estimate"""

    adult_count: int = 1
    child_count: int = 0


@dataclass(frozen=True)
class HemTable:
    """Annual Household Expenditure Measure tiers"""

    single_adult: float = 25_000
    couple: float = 35_000
    per_child: float = 5_000


@dataclass(frozen=True)
class ServiceabilityParameters:
    """Lender assumptions for the serviceability test"""

    base_rate: float = 0.06
    buffer: float = 0.03
    assessment_term_years: int = 30
    credit_card_servicing_rate: float = 0.03  # share of total card limits
    # False keeps the supplied repayment figure as-is in the annual sum
    annualize_debt_repayments: bool = False

    @property
    def assessment_rate(self) -> float:
        return self.base_rate + self.buffer


@dataclass(frozen=True)
class BorrowingInput:
    """Income and commitments entered by the user"""

    primary_income: float = 0.0
    other_income: float = 0.0
    household: HouseholdProfile = field(default_factory=HouseholdProfile)
    existing_monthly_debt_repayments: float = 0.0
    credit_card_total_limit: float = 0.0


@dataclass(frozen=True)
class BorrowingResult:
    """Output of the serviceability assessment"""

    max_principal: float
    applied_hem_amount: float


@dataclass(frozen=True)
class StampDutyInput:
    """Property purchase entered by the user"""

    property_value: float
    is_first_home_buyer: bool = False


@dataclass(frozen=True)
class StampDutyResult:
    """Duty payable on a property purchase"""

    duty_payable: float
    exemption_applied: bool
