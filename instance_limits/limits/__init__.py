"""
Instance Limits - Rate Limit Buckets
=====================================
Local accounting of an instance's advertised rate limits.

Usage:
    from instance_limits.limits import build_limits, LimitType

    store = build_limits(config)
    store.apply_delta(LimitType.CHANNEL, -1)
    print(store.get(LimitType.CHANNEL))
"""

from .models import UNLIMITED, Limit, LimitType
from .exceptions import LimitTypeNotFound
from .store import BUCKET_ORDER, LimitStore, apply_delta
from .mapper import build_limits

__all__ = [
    # Models
    "UNLIMITED",
    "Limit",
    "LimitType",
    # Exceptions
    "LimitTypeNotFound",
    # Store
    "BUCKET_ORDER",
    "LimitStore",
    "apply_delta",
    # Mapper
    "build_limits",
]
