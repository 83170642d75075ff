"""
Prometheus metrics for fieldcheck

Counts validate_object outcomes and failing fields, and times object
validation. Metrics live in a private registry so embedding services can
expose or merge them as they see fit.
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Registry for fieldcheck metrics
REGISTRY = CollectorRegistry()


# Objects validated
validations_total = Counter(
    name="fieldcheck_validations_total",
    documentation="Total number of objects validated",
    labelnames=["status"],  # status: valid, invalid, error
    registry=REGISTRY,
)

# Failing fields
field_failures_total = Counter(
    name="fieldcheck_field_failures_total",
    documentation="Total number of fields that failed validation",
    labelnames=["field_name", "code"],
    registry=REGISTRY,
)

# Object validation duration
validation_duration_seconds = Histogram(
    name="fieldcheck_validation_duration_seconds",
    documentation="Time spent validating objects in seconds",
    labelnames=["operation"],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_duration_seconds, operation="validate_object"):
            ...
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def record_validation(status: str) -> None:
    """Record the outcome of one object validation (valid, invalid or error)."""
    increment_counter(validations_total, 1, status=status)


def record_field_failure(field_name: str, code: str) -> None:
    """
    Record a failing field.

    Args:
        field_name: Name of the field that failed validation
        code: Error code, or "nested" for per-element reports
    """
    increment_counter(field_failures_total, 1, field_name=field_name, code=code)
