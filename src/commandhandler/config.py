from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HandlerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="COMMANDHANDLER_", extra="ignore")

    # Equivalent of the plugin config key "values.using-no-perm".
    # When false, permission failures are silent.
    using_no_perm: bool = Field(default=True)

    # Sent when a command has no permission message of its own.
    no_permission_message: str = Field(default="§cno permit!")

    # Prefix for the usage line sent after a failed command.
    usage_color: str = Field(default="§c")


def get_settings() -> HandlerSettings:
    return HandlerSettings()
