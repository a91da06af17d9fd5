from pydantic import Field
from pydantic_settings import SettingsConfigDict

from settings.base import BaseSettings


class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="auth_")

    secret_key: str = Field(default=..., title="Token signing secret", min_length=1)
    algorithm: str = Field(default="HS256", title="Token signing algorithm")
    token_expire_minutes: int = Field(default=60, title="Token lifetime", gt=0)
    bcrypt_rounds: int = Field(default=10, title="Bcrypt cost factor", ge=4)


auth_settings = AuthSettings()
