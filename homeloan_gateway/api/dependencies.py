"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from homeloan_gateway.config import settings
from homeloan_gateway.domain.models import HemTable, ServiceabilityParameters


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_serviceability_parameters() -> ServiceabilityParameters:
    """Provide lender serviceability assumptions from settings"""
    return ServiceabilityParameters(
        base_rate=settings.serviceability_base_rate,
        buffer=settings.serviceability_buffer,
        assessment_term_years=settings.assessment_term_years,
        credit_card_servicing_rate=settings.credit_card_servicing_rate,
        annualize_debt_repayments=settings.annualize_debt_repayments,
    )


def get_hem_table() -> HemTable:
    """Provide HEM tiers from settings"""
    return HemTable(
        single_adult=settings.hem_single_adult,
        couple=settings.hem_couple,
        per_child=settings.hem_per_child,
    )


def get_first_home_exemption_threshold() -> float:
    """Provide the first home buyer full exemption ceiling from settings"""
    return settings.first_home_exemption_threshold
