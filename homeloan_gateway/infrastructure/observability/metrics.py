"""Prometheus metrics for calculator usage, exemptions and borrowing capacity"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "homeloan_calculation_total",
    "Total calculations performed",
    ["calculator"],  # repayment | repayment_comparison | borrowing_capacity | stamp_duty
)

stamp_duty_exemption_counter = Counter(
    "homeloan_stamp_duty_exemption_total",
    "Stamp duty calculations by first home buyer exemption outcome",
    ["outcome"],  # exempt | standard
)

borrowing_capacity_bucket_counter = Counter(
    "homeloan_borrowing_capacity_bucket",
    "Borrowing capacity estimates by bucket",
    ["bucket"],  # $0, $0-$250k, $250k-$500k, $500k-$1m, $1m+
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(calculator: str) -> None:
    """Count one completed calculation"""
    calculation_counter.labels(calculator=calculator).inc()


def record_stamp_duty(exemption_applied: bool) -> None:
    """Record stamp duty metrics for monitoring first home buyer exemption rates"""
    record_calculation("stamp_duty")
    outcome = "exempt" if exemption_applied else "standard"
    stamp_duty_exemption_counter.labels(outcome=outcome).inc()


def record_borrowing_capacity(max_principal: float) -> None:
    """Record borrowing capacity distribution"""
    record_calculation("borrowing_capacity")

    if max_principal <= 0:
        bucket = "$0"
    elif max_principal <= 250_000:
        bucket = "$0-$250k"
    elif max_principal <= 500_000:
        bucket = "$250k-$500k"
    elif max_principal <= 1_000_000:
        bucket = "$500k-$1m"
    else:
        bucket = "$1m+"

    borrowing_capacity_bucket_counter.labels(bucket=bucket).inc()
