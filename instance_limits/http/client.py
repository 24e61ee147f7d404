import logging
import httpx
import structlog
from typing import Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError
from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential, retry_if_exception_type, before_sleep_log

from ..config import InstanceConfig
from ..limits import LimitStore, build_limits
from ..policies import GeneralConfiguration, LimitsConfiguration
from .exceptions import (
    InstanceError,
    InstanceRequestError,
    InstanceTimeoutError,
    InstanceStatusError,
    InstanceServerError,
    PolicyDecodeError,
)

T = TypeVar("T", bound=BaseModel)

logger = structlog.get_logger(__name__)
retry_logger = logging.getLogger(__name__)

LIMITS_PATH = "/policies/instance/limits"
GENERAL_PATH = "/policies/instance/"


class PolicyClient:
    """
    Async HTTP client for an instance's policy endpoints.

    Features:
    - Retries on network errors and 5xx responses.
    - Pydantic decoding of policy documents.
    - Standardized exception mapping.

    Example:
        async with PolicyClient(InstanceConfig(api_url="chat.example.org/api")) as client:
            store = await client.check_limits()
    """

    def __init__(self, config: Optional[InstanceConfig] = None):
        self.config = config or InstanceConfig()
        self.base_url = self.config.urls.api
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._get_client()
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def aclose(self):
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _map_exception(self, exc: httpx.HTTPError, path: str) -> InstanceError:
        """Map httpx exceptions to instance exceptions."""
        url = self._url(path)
        if isinstance(exc, httpx.TimeoutException):
            return InstanceTimeoutError("Request timed out", url=url, details=str(exc))
        return InstanceRequestError(f"Request failed: {exc}", url=url, details=str(exc))

    def _check_status(self, response: httpx.Response, path: str) -> None:
        if response.is_success:
            return
        status = response.status_code
        cls = InstanceServerError if status >= 500 else InstanceStatusError
        raise cls(
            f"Received error code {status}",
            url=self._url(path),
            status_code=status,
            details=response.text,
        )

    async def _get(self, path: str, response_model: Type[T]) -> T:
        """Single GET attempt, decoded into response_model."""
        try:
            response = await self._get_client().get(path)
        except httpx.HTTPError as e:
            raise self._map_exception(e, path) from e

        self._check_status(response, path)

        try:
            return response_model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise PolicyDecodeError(
                f"Invalid {response_model.__name__} document",
                url=self._url(path),
                status_code=response.status_code,
                details=str(e),
            ) from e

    async def _request(self, path: str, response_model: Type[T]) -> T:
        """GET with retries on transport failures and server errors."""
        retrying = AsyncRetrying(
            retry=retry_if_exception_type((InstanceRequestError, InstanceServerError)),
            stop=stop_after_attempt(self.config.max_attempts),
            wait=wait_exponential(multiplier=1, min=self.config.backoff_min, max=self.config.backoff_max),
            before_sleep=before_sleep_log(retry_logger, logging.WARNING),
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    result = await self._get(path, response_model)
        except InstanceError as e:
            logger.warning(
                "policy_fetch_failed",
                url=e.url,
                status_code=e.status_code,
                error=e.message,
            )
            raise
        return result

    async def get_limits_configuration(self) -> LimitsConfiguration:
        """Fetch the instance's rate limit policy."""
        return await self._request(LIMITS_PATH, LimitsConfiguration)

    async def get_general_configuration(self) -> GeneralConfiguration:
        """Fetch the instance's general metadata."""
        return await self._request(GENERAL_PATH, GeneralConfiguration)

    async def check_limits(self) -> LimitStore:
        """Fetch the limits policy and build a fresh store from it."""
        config = await self.get_limits_configuration()
        return build_limits(config)
