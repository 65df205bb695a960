"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "homeloan-gateway"
    log_level: str = "INFO"

    # Serviceability test
    serviceability_base_rate: float = 0.06
    serviceability_buffer: float = 0.03
    assessment_term_years: int = 30
    credit_card_servicing_rate: float = 0.03
    annualize_debt_repayments: bool = False  # True multiplies supplied debt repayments by 12

    # Household Expenditure Measure (annual)
    hem_single_adult: float = 25_000
    hem_couple: float = 35_000
    hem_per_child: float = 5_000

    # Stamp duty
    first_home_exemption_threshold: float = 600_000


settings = Settings()
