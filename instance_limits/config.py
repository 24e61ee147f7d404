"""
Instance Configuration
======================
Connection settings for a chat instance.
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def parse_url(url: str) -> str:
    """
    Normalise an instance URL.

    Adds ``http://`` when no scheme is given and drops trailing slashes,
    so ``localhost:3001/api/`` becomes ``http://localhost:3001/api``.
    """
    url = url.strip()
    if "://" not in url:
        url = f"http://{url}"
    return url.rstrip("/")


@dataclass
class UrlBundle:
    """API, gateway and CDN URLs of one instance."""
    api: str
    wss: str
    cdn: str

    def __post_init__(self):
        self.api = parse_url(self.api)
        self.wss = parse_url(self.wss)
        self.cdn = parse_url(self.cdn)


@dataclass
class InstanceConfig:
    """Configuration for talking to an instance."""
    api_url: str = field(default_factory=lambda: os.environ.get(
        "INSTANCE_API_URL", "http://localhost:3001/api"
    ))
    wss_url: str = field(default_factory=lambda: os.environ.get(
        "INSTANCE_WSS_URL", "ws://localhost:3001"
    ))
    cdn_url: str = field(default_factory=lambda: os.environ.get(
        "INSTANCE_CDN_URL", "http://localhost:3001"
    ))
    timeout: float = field(default_factory=lambda: float(
        os.environ.get("INSTANCE_TIMEOUT", "10.0")
    ))
    verify_ssl: bool = field(default_factory=lambda: _env_bool("INSTANCE_VERIFY_SSL", True))
    max_attempts: int = field(default_factory=lambda: int(
        os.environ.get("INSTANCE_MAX_ATTEMPTS", "3")
    ))
    backoff_min: float = 1.0   # Seconds
    backoff_max: float = 10.0  # Seconds

    @property
    def urls(self) -> UrlBundle:
        return UrlBundle(api=self.api_url, wss=self.wss_url, cdn=self.cdn_url)
