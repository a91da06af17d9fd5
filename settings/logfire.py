from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from settings.base import BaseSettings


class LogfireSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="logfire_")

    service_name: str = Field(default="summarizer-api", title="Service name")
    send_to_logfire: bool | Literal["if-token-present"] = Field(
        default="if-token-present", title="Export spans to Logfire"
    )


logfire_settings = LogfireSettings()
