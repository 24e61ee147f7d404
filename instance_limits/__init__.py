"""
Instance Limits
===============
Client-side rate limit budget for chat instances.

Fetches an instance's limits policy and tracks the remaining quota of every
rate limit bucket so requests can be held back before the server rejects them.
"""

__version__ = "0.1.0"

# Config
from instance_limits.config import InstanceConfig, UrlBundle, parse_url

# Limits
from instance_limits.limits import (
    UNLIMITED,
    BUCKET_ORDER,
    Limit,
    LimitType,
    LimitStore,
    LimitTypeNotFound,
    apply_delta,
    build_limits,
)

# Policies
from instance_limits.policies import GeneralConfiguration, LimitsConfiguration

# HTTP
from instance_limits.http import (
    PolicyClient,
    InstanceError,
    InstanceRequestError,
    InstanceTimeoutError,
    InstanceStatusError,
    InstanceServerError,
    PolicyDecodeError,
)

# Session
from instance_limits.session import InstanceSession

# Logging
from instance_limits.logging import setup_logging, get_logger

__all__ = [
    # Config
    "InstanceConfig",
    "UrlBundle",
    "parse_url",
    # Limits
    "UNLIMITED",
    "BUCKET_ORDER",
    "Limit",
    "LimitType",
    "LimitStore",
    "LimitTypeNotFound",
    "apply_delta",
    "build_limits",
    # Policies
    "GeneralConfiguration",
    "LimitsConfiguration",
    # HTTP
    "PolicyClient",
    "InstanceError",
    "InstanceRequestError",
    "InstanceTimeoutError",
    "InstanceStatusError",
    "InstanceServerError",
    "PolicyDecodeError",
    # Session
    "InstanceSession",
    # Logging
    "setup_logging",
    "get_logger",
]
