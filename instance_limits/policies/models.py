"""
Instance Policy Models
======================
Pydantic models for the documents served under /policies/instance.

Field names are snake_case in Python and camelCase on the wire. All models
are frozen: a decoded policy is a read-only snapshot.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..limits.models import UNLIMITED

# Counters are unsigned 64-bit on the wire
U64 = Annotated[int, Field(ge=0, le=UNLIMITED)]


class PolicyModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# Structural caps (informational, not tracked as quotas)

class UserLimits(PolicyModel):
    max_guilds: U64
    max_username: U64
    max_friends: U64


class GuildLimits(PolicyModel):
    max_roles: U64
    max_emojis: U64
    max_members: U64
    max_channels: U64
    max_channels_in_category: U64


class MessageLimits(PolicyModel):
    max_characters: U64
    max_tts_characters: U64 = Field(alias="maxTTSCharacters")
    max_reactions: U64
    max_attachment_size: U64
    max_bulk_delete: U64
    max_embed_download_size: U64


class ChannelLimits(PolicyModel):
    max_pins: U64
    max_topic: U64
    max_webhooks: U64


# Rate windows

class Window(PolicyModel):
    """`count` requests allowed every `window` seconds."""
    count: U64
    window: U64


class AuthRoutes(PolicyModel):
    login: Window
    register_: Window = Field(alias="register")


class Routes(PolicyModel):
    guild: Window
    webhook: Window
    channel: Window
    auth: AuthRoutes


class Rate(PolicyModel):
    enabled: bool
    ip: Window
    global_: Window = Field(alias="global")
    error: Window
    routes: Routes


class AbsoluteWindow(PolicyModel):
    limit: U64
    window: U64
    enabled: bool


class AbsoluteRate(PolicyModel):
    register_: AbsoluteWindow = Field(alias="register")
    send_message: AbsoluteWindow


class LimitsConfiguration(PolicyModel):
    """Body of GET /policies/instance/limits."""
    user: UserLimits
    guild: GuildLimits
    message: MessageLimits
    channel: ChannelLimits
    rate: Rate
    absolute_rate: AbsoluteRate


class GeneralConfiguration(PolicyModel):
    """Body of GET /policies/instance/. Unknown keys are kept."""
    model_config = ConfigDict(extra="allow")

    instance_name: str
    instance_description: Optional[str] = None
    front_page: Optional[str] = None
    tos_page: Optional[str] = None
    correspondence_email: Optional[str] = None
    correspondence_user_id: Optional[str] = Field(default=None, alias="correspondenceUserID")
    image: Optional[str] = None
    instance_id: Optional[str] = None
