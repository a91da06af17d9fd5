from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from .base import BASE_PATH, BaseSettings


class CoreSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="core_")

    max_file_size: int = Field(default=1024 * 1024 * 10, title="Max file size")
    upload_dir: Path = Field(
        default=BASE_PATH / "uploads", title="Transient upload directory"
    )
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"], title="Allowed CORS origins"
    )


core_settings = CoreSettings()
