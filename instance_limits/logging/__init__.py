"""
Instance Limits Logging Module

Structured logging shared by the client and the limit store.
"""

from .structured import (
    setup_logging,
    get_logger,
    JSONFormatter,
    service_name_var,
    instance_var,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "JSONFormatter",
    "service_name_var",
    "instance_var",
]
