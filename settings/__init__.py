from settings.auth import auth_settings
from settings.base import BASE_PATH
from settings.core import core_settings
from settings.huggingface import huggingface_settings
from settings.logfire import logfire_settings
from settings.postgres import postgres_settings

__all__ = [
    "auth_settings",
    "core_settings",
    "huggingface_settings",
    "logfire_settings",
    "postgres_settings",
    "BASE_PATH",
]
