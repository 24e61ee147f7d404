import copy

import pytest

LIMITS_PAYLOAD = {
    "user": {"maxGuilds": 1048576, "maxUsername": 32, "maxFriends": 5000},
    "guild": {
        "maxRoles": 1000,
        "maxEmojis": 2000,
        "maxMembers": 25000000,
        "maxChannels": 65535,
        "maxChannelsInCategory": 65535,
    },
    "message": {
        "maxCharacters": 1048576,
        "maxTTSCharacters": 160,
        "maxReactions": 2048,
        "maxAttachmentSize": 1073741824,
        "maxBulkDelete": 1000,
        "maxEmbedDownloadSize": 5242880,
    },
    "channel": {"maxPins": 500, "maxTopic": 1024, "maxWebhooks": 100},
    "rate": {
        "enabled": True,
        "ip": {"count": 50, "window": 10},
        "global": {"count": 500, "window": 5},
        "error": {"count": 10, "window": 5},
        "routes": {
            "guild": {"count": 5, "window": 5},
            "webhook": {"count": 10, "window": 5},
            "channel": {"count": 10, "window": 5},
            "auth": {
                "login": {"count": 5, "window": 60},
                "register": {"count": 2, "window": 43200},
            },
        },
    },
    "absoluteRate": {
        "register": {"limit": 25, "window": 3600000, "enabled": True},
        "sendMessage": {"limit": 200, "window": 60000, "enabled": True},
    },
}

GENERAL_PAYLOAD = {
    "instanceName": "Test Instance",
    "instanceDescription": "An instance for tests",
    "frontPage": None,
    "tosPage": None,
    "correspondenceEmail": None,
    "correspondenceUserID": None,
    "image": None,
    "instanceId": "1070727381587931136",
    "autoCreateBotUsers": False,
}

API_URL = "http://instance.test/api"


@pytest.fixture
def limits_payload():
    """Fresh, mutable copy of a policy with rate limiting enabled."""
    return copy.deepcopy(LIMITS_PAYLOAD)


@pytest.fixture
def general_payload():
    return copy.deepcopy(GENERAL_PAYLOAD)


@pytest.fixture
def limits_config(limits_payload):
    from instance_limits.policies import LimitsConfiguration

    return LimitsConfiguration.model_validate(limits_payload)


@pytest.fixture
def instance_config():
    from instance_limits.config import InstanceConfig

    return InstanceConfig(
        api_url=API_URL,
        timeout=1.0,
        max_attempts=3,
        backoff_min=0,
        backoff_max=0,
    )
