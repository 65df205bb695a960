"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from homeloan_gateway.api.main import create_app
from homeloan_gateway.domain.models import (
    BorrowingInput,
    HouseholdProfile,
    LoanInput,
    RepaymentFrequency,
    RepaymentType,
)


@pytest.fixture
def app():
    """Fresh application instance per test"""
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def standard_loan() -> LoanInput:
    """$500k over 30 years at 6.5%, monthly principal and interest"""
    return LoanInput(
        principal=500_000,
        annual_rate_percent=6.5,
        term_years=30,
        repayment_type=RepaymentType.PRINCIPAL_AND_INTEREST,
        frequency=RepaymentFrequency.MONTHLY,
    )


@pytest.fixture
def single_earner() -> BorrowingInput:
    """Single adult on $100k with no dependants or debts"""
    return BorrowingInput(
        primary_income=100_000,
        other_income=0,
        household=HouseholdProfile(adult_count=1, child_count=0),
        existing_monthly_debt_repayments=0,
        credit_card_total_limit=0,
    )
