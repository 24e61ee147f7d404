"""
Limit Mapper
============
Turns an instance's limits policy into a populated LimitStore.
"""

from typing import Dict

import structlog

from ..policies.models import LimitsConfiguration
from .models import Limit, LimitType
from .store import LimitStore

logger = structlog.get_logger(__name__)


def _windowed_limits(config: LimitsConfiguration) -> Dict[LimitType, Limit]:
    rate = config.rate
    routes = rate.routes
    absolute = config.absolute_rate

    windows = {
        LimitType.ABSOLUTE_MESSAGE: (absolute.send_message.limit, absolute.send_message.window),
        LimitType.ABSOLUTE_REGISTER: (absolute.register_.limit, absolute.register_.window),
        LimitType.AUTH_LOGIN: (routes.auth.login.count, routes.auth.login.window),
        LimitType.AUTH_REGISTER: (routes.auth.register_.count, routes.auth.register_.window),
        LimitType.GUILD: (routes.guild.count, routes.guild.window),
        LimitType.WEBHOOK: (routes.webhook.count, routes.webhook.window),
        LimitType.CHANNEL: (routes.channel.count, routes.channel.window),
        LimitType.IP: (rate.ip.count, rate.ip.window),
        LimitType.GLOBAL: (rate.global_.count, rate.global_.window),
        LimitType.ERROR: (rate.error.count, rate.error.window),
    }
    return {
        bucket: Limit.from_window(bucket, count, window)
        for bucket, (count, window) in windows.items()
    }


def build_limits(config: LimitsConfiguration) -> LimitStore:
    """
    Build the initial quotas for every bucket.

    When rate limiting is disabled instance-wide every bucket is unlimited.
    The absolute register/send-message toggles are applied afterwards in
    either case, so a disabled absolute limit is always unlimited.

    Args:
        config: Decoded limits policy

    Returns:
        LimitStore with all ten buckets populated
    """
    if not config.rate.enabled:
        limits = {bucket: Limit.unlimited(bucket) for bucket in LimitType}
    else:
        limits = _windowed_limits(config)

    if not config.absolute_rate.register_.enabled:
        limits[LimitType.ABSOLUTE_REGISTER] = Limit.unlimited(LimitType.ABSOLUTE_REGISTER)

    if not config.absolute_rate.send_message.enabled:
        limits[LimitType.ABSOLUTE_MESSAGE] = Limit.unlimited(LimitType.ABSOLUTE_MESSAGE)

    logger.info(
        "limits_built",
        rate_enabled=config.rate.enabled,
        unlimited=[str(limit.bucket) for limit in limits.values() if limit.is_unlimited],
    )
    return LimitStore(limits)
