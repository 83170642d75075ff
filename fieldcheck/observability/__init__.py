"""
Logging and metrics for fieldcheck.
"""

from .logger import get_logger, log_operation, setup_logger
from .metrics import generate_metrics, record_field_failure, record_validation

__all__ = [
    "get_logger",
    "setup_logger",
    "log_operation",
    "generate_metrics",
    "record_validation",
    "record_field_failure",
]
