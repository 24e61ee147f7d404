from .models import (
    AbsoluteRate,
    AbsoluteWindow,
    AuthRoutes,
    ChannelLimits,
    GeneralConfiguration,
    GuildLimits,
    LimitsConfiguration,
    MessageLimits,
    Rate,
    Routes,
    UserLimits,
    Window,
)

__all__ = [
    "AbsoluteRate",
    "AbsoluteWindow",
    "AuthRoutes",
    "ChannelLimits",
    "GeneralConfiguration",
    "GuildLimits",
    "LimitsConfiguration",
    "MessageLimits",
    "Rate",
    "Routes",
    "UserLimits",
    "Window",
]
