"""
Instance Session
================
Owns the limit store for one connection to an instance.
"""

from typing import Optional

import structlog

from .config import InstanceConfig, UrlBundle
from .http import PolicyClient
from .limits import Limit, LimitStore, LimitType
from .logging import instance_var
from .policies import GeneralConfiguration

logger = structlog.get_logger(__name__)


class InstanceSession:
    """
    A connected instance and its rate limit budget.

    Example:
        session = await InstanceSession.connect(InstanceConfig(api_url="chat.example.org/api"))

        if session.can_request(LimitType.CHANNEL):
            ...
            session.consume(LimitType.CHANNEL)
    """

    def __init__(
        self,
        config: InstanceConfig,
        general: GeneralConfiguration,
        limits: LimitStore,
    ):
        self.config = config
        self.urls: UrlBundle = config.urls
        self.general = general
        self.limits = limits

    @classmethod
    async def connect(cls, config: Optional[InstanceConfig] = None) -> "InstanceSession":
        """
        Fetch the instance's policies and build its limit store.

        Raises:
            InstanceError: If either document cannot be fetched or decoded.
                No session is created in that case.
        """
        config = config or InstanceConfig()
        async with PolicyClient(config) as client:
            general = await client.get_general_configuration()
            limits = await client.check_limits()

        instance_var.set(config.urls.api)
        logger.info("instance_connected", api=config.urls.api, instance=general.instance_name)
        return cls(config, general, limits)

    async def refresh_limits(self) -> LimitStore:
        """Refetch the limits policy and replace the whole store."""
        async with PolicyClient(self.config) as client:
            self.limits = await client.check_limits()
        return self.limits

    def can_request(self, bucket: LimitType) -> bool:
        return self.limits.can_request(bucket)

    def consume(self, bucket: LimitType, count: int = 1) -> Limit:
        """Debit ``count`` requests from a bucket."""
        return self.limits.apply_delta(bucket, -count)

    def reset_limit(self, bucket: LimitType) -> Limit:
        return self.limits.reset_limit(bucket)
