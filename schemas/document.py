from pydantic import Field

from schemas.base import CamelModel


class ExtractionResponse(CamelModel):
    text: str = Field(default=..., description="Extracted plain text")
