"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Optional, Union

# Form fields arrive as numbers, numeric strings, or blanks; the engines coerce them
RawNumber = Optional[Union[float, str]]
RawFlag = Optional[Union[bool, str]]


class RepaymentRequest(BaseModel):
    """Request body for POST /v1/repayment and /v1/repayment/comparison"""

    principal: RawNumber = Field(None, description="Loan amount")
    annual_rate_percent: RawNumber = Field(None, description="Annual interest rate, e.g. 6.5")
    term_years: RawNumber = Field(None, description="Loan term in years")
    repayment_type: Optional[str] = Field(
        "principalAndInterest", description="principalAndInterest or interestOnly"
    )
    frequency: Optional[str] = Field("monthly", description="monthly, fortnightly or weekly")


class RepaymentResponse(BaseModel):
    """Response for POST /v1/repayment"""

    repayment_type: str
    frequency: str
    periodic_payment: float
    total_paid: float
    total_interest: float


class RepaymentComparisonResponse(BaseModel):
    """Response for POST /v1/repayment/comparison"""

    principal_and_interest: RepaymentResponse
    interest_only: RepaymentResponse


class BorrowingCapacityRequest(BaseModel):
    """Request body for POST /v1/borrowing-capacity"""

    primary_income: RawNumber = Field(None, description="Annual income before tax")
    other_income: RawNumber = Field(None, description="Other annual income, e.g. rental")
    adult_count: RawNumber = Field(1, description="Adults in the household")
    child_count: RawNumber = Field(0, description="Dependent children")
    existing_monthly_debt_repayments: RawNumber = Field(None, description="Existing loan repayments")
    credit_card_total_limit: RawNumber = Field(None, description="Combined limit of all credit cards")


class BorrowingCapacityResponse(BaseModel):
    """Response for POST /v1/borrowing-capacity"""

    max_principal: float
    applied_hem_amount: float


class StampDutyRequest(BaseModel):
    """Request body for POST /v1/stamp-duty"""

    property_value: RawNumber = Field(None, description="Purchase price of the property")
    is_first_home_buyer: RawFlag = Field(False, description="Buyer has never owned a home")


class StampDutyResponse(BaseModel):
    """Response for POST /v1/stamp-duty"""

    duty_payable: float
    exemption_applied: bool
