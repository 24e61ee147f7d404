from typing import Optional, Any


class InstanceError(Exception):
    """Base exception for failed calls to an instance's policy endpoints."""
    def __init__(self, message: str, url: str, status_code: Optional[int] = None, details: Any = None):
        self.message = message
        self.url = url
        self.status_code = status_code
        self.details = details
        text = f"GET {url}: {message}"
        if status_code is not None:
            text = f"{text} [HTTP {status_code}]"
        super().__init__(text)


class InstanceRequestError(InstanceError):
    """Raised when the request could not be performed (connection, DNS, protocol)."""
    pass


class InstanceTimeoutError(InstanceRequestError):
    """Raised specifically on timeouts."""
    pass


class InstanceStatusError(InstanceError):
    """Raised when the instance answers with a non-2xx status."""
    pass


class InstanceServerError(InstanceStatusError):
    """Raised on 5xx responses."""
    pass


class PolicyDecodeError(InstanceError):
    """Raised when a policy document is not valid JSON or does not match its schema."""
    pass
