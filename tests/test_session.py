"""
Tests for InstanceSession, configuration and logging setup.
"""

import json
import logging

import pytest
from httpx import Response

API_URL = "http://instance.test/api"
LIMITS_URL = f"{API_URL}/policies/instance/limits"
GENERAL_URL = f"{API_URL}/policies/instance/"


class TestInstanceSession:
    """Tests for the connected session."""

    @pytest.mark.asyncio
    async def test_connect(self, instance_config, limits_payload, general_payload, respx_mock):
        """Should fetch both policies and build the store."""
        from instance_limits.limits import LimitType
        from instance_limits.session import InstanceSession

        respx_mock.get(GENERAL_URL).mock(return_value=Response(200, json=general_payload))
        respx_mock.get(LIMITS_URL).mock(return_value=Response(200, json=limits_payload))

        session = await InstanceSession.connect(instance_config)

        assert session.general.instance_name == "Test Instance"
        assert session.urls.api == API_URL
        assert session.limits.get(LimitType.CHANNEL).remaining == 10

    @pytest.mark.asyncio
    async def test_connect_fails_without_limits(self, instance_config, general_payload, respx_mock):
        """A failed limits fetch should surface and create no session."""
        from instance_limits.http import InstanceStatusError
        from instance_limits.session import InstanceSession

        respx_mock.get(GENERAL_URL).mock(return_value=Response(200, json=general_payload))
        respx_mock.get(LIMITS_URL).mock(return_value=Response(403))

        with pytest.raises(InstanceStatusError):
            await InstanceSession.connect(instance_config)

    @pytest.mark.asyncio
    async def test_consume_and_reset(self, instance_config, limits_payload, general_payload, respx_mock):
        from instance_limits.limits import LimitType
        from instance_limits.session import InstanceSession

        respx_mock.get(GENERAL_URL).mock(return_value=Response(200, json=general_payload))
        respx_mock.get(LIMITS_URL).mock(return_value=Response(200, json=limits_payload))
        session = await InstanceSession.connect(instance_config)

        for _ in range(5):
            assert session.can_request(LimitType.GUILD)
            session.consume(LimitType.GUILD)

        assert session.can_request(LimitType.GUILD) is False
        assert session.consume(LimitType.GUILD).remaining == 0

        session.reset_limit(LimitType.GUILD)
        assert session.can_request(LimitType.GUILD)

    @pytest.mark.asyncio
    async def test_refresh_replaces_store(self, instance_config, limits_payload, general_payload, respx_mock):
        """Refreshing should swap in a new store built from the new policy."""
        from instance_limits.limits import LimitType
        from instance_limits.session import InstanceSession

        disabled = json.loads(json.dumps(limits_payload))
        disabled["rate"]["enabled"] = False

        respx_mock.get(GENERAL_URL).mock(return_value=Response(200, json=general_payload))
        respx_mock.get(LIMITS_URL).mock(side_effect=[
            Response(200, json=limits_payload),
            Response(200, json=disabled),
        ])
        session = await InstanceSession.connect(instance_config)
        original = session.limits
        session.consume(LimitType.IP, 10)

        refreshed = await session.refresh_limits()

        assert refreshed is session.limits
        assert refreshed is not original
        assert refreshed.get(LimitType.IP).is_unlimited
        assert original.get(LimitType.IP).remaining == 40


class TestConfig:
    """Tests for instance configuration."""

    def test_parse_url_adds_scheme(self):
        from instance_limits.config import parse_url

        assert parse_url("localhost:3001/api/") == "http://localhost:3001/api"
        assert parse_url("https://chat.example.org/api") == "https://chat.example.org/api"

    def test_url_bundle_normalises(self):
        from instance_limits.config import UrlBundle

        urls = UrlBundle(api="localhost:3001/api/", wss="ws://localhost:3001/", cdn="localhost:3001")

        assert urls.api == "http://localhost:3001/api"
        assert urls.wss == "ws://localhost:3001"
        assert urls.cdn == "http://localhost:3001"

    def test_config_from_environment(self, monkeypatch):
        from instance_limits.config import InstanceConfig

        monkeypatch.setenv("INSTANCE_API_URL", "chat.example.org/api")
        monkeypatch.setenv("INSTANCE_TIMEOUT", "2.5")
        monkeypatch.setenv("INSTANCE_VERIFY_SSL", "false")
        monkeypatch.setenv("INSTANCE_MAX_ATTEMPTS", "5")

        config = InstanceConfig()

        assert config.urls.api == "http://chat.example.org/api"
        assert config.timeout == 2.5
        assert config.verify_ssl is False
        assert config.max_attempts == 5


class TestLogging:
    """Tests for logging setup."""

    def test_json_formatter_with_event_dict(self):
        from instance_limits.logging import JSONFormatter

        record = logging.LogRecord(
            name="instance_limits.limits.store",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg={"event": "limit_exhausted", "bucket": "channel", "reset": 5},
            args=(),
            exc_info=None,
        )

        data = json.loads(JSONFormatter().format(record))

        assert data["event"] == "limit_exhausted"
        assert data["bucket"] == "channel"
        assert data["level"] == "DEBUG"

    def test_setup_logging(self, capsys):
        import structlog
        from instance_limits.logging import get_logger, setup_logging

        try:
            setup_logging(service_name="limits-test", level="INFO")
            get_logger("tests").info("limits_built", rate_enabled=True)

            lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
            event = lines[-1]
            assert event["event"] == "limits_built"
            assert event["rate_enabled"] is True
            assert event["service"] == "limits-test"
        finally:
            structlog.reset_defaults()
            logging.getLogger().handlers.clear()
