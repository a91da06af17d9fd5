from pydantic import Field
from pydantic_settings import SettingsConfigDict

from settings.base import BaseSettings


class HuggingFaceSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="huggingface_")

    api_key: str = Field(default="", title="Hugging Face API key")
    url: str = Field(
        default="https://api-inference.huggingface.co/models",
        title="Inference API base URL",
    )
    model: str = Field(default="facebook/bart-large-cnn", title="Summarization model")
    timeout: float = Field(default=30.0, title="Request timeout in seconds", gt=0)

    @property
    def model_url(self) -> str:
        """Model url.

        Returns:
            Inference endpoint of the configured model.

        """
        return f"{self.url.rstrip('/')}/{self.model}"


huggingface_settings = HuggingFaceSettings()
