from .client import PolicyClient, LIMITS_PATH, GENERAL_PATH
from .exceptions import (
    InstanceError,
    InstanceRequestError,
    InstanceTimeoutError,
    InstanceStatusError,
    InstanceServerError,
    PolicyDecodeError,
)

__all__ = [
    "PolicyClient",
    "LIMITS_PATH",
    "GENERAL_PATH",
    "InstanceError",
    "InstanceRequestError",
    "InstanceTimeoutError",
    "InstanceStatusError",
    "InstanceServerError",
    "PolicyDecodeError",
]
