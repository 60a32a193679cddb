"""Prometheus metrics for monitoring calculation volume, rejections, and latency"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "mela_calculation_total",
    "Total repayment calculations made",
    ["credit_type", "outcome"],  # outcome: penalty | no_penalty
)

rejection_counter = Counter(
    "mela_calculation_rejected_total",
    "Calculation requests rejected as invalid",
    ["reason"],  # exception class name
)

loan_amount_histogram = Histogram(
    "mela_loan_amount",
    "Requested loan amounts (ETB)",
    buckets=[500, 1000, 2000, 5000, 10000, 50000, 100000, 1_000_000, 6_000_000],
)

loan_period_histogram = Histogram(
    "mela_loan_period_days",
    "Requested loan periods in days",
    buckets=[1, 7, 14, 30, 50, 90, 180, 365],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(credit_type: str, loan_amount: float, loan_period_days: int, penalty_fee: float) -> None:
    """Record metrics for a completed calculation"""
    outcome = "penalty" if penalty_fee > 0 else "no_penalty"
    calculation_counter.labels(credit_type=credit_type, outcome=outcome).inc()
    loan_amount_histogram.observe(loan_amount)
    loan_period_histogram.observe(loan_period_days)


def record_rejection(error: Exception) -> None:
    rejection_counter.labels(reason=type(error).__name__).inc()
