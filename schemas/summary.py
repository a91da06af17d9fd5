from datetime import datetime

from pydantic import AliasChoices, Field

from schemas.base import CamelModel


class TextRequest(CamelModel):
    text: str = Field(default=..., description="Text")


class SummarizeResponse(CamelModel):
    summary: str = Field(default=..., description="Summary")


class WordCountResponse(CamelModel):
    count: int = Field(default=..., description="Word count", ge=0)
    limit: int = Field(default=..., description="Word limit", gt=0)
    accepted: bool = Field(default=..., description="Within the word limit")


class SummaryCreateRequest(CamelModel):
    input_text: str = Field(default=..., description="Input text")
    summary: str = Field(default=..., description="Summary")


class SummaryResponse(CamelModel):
    id: int = Field(default=..., description="ID", gt=0)

    owner_id: int = Field(
        default=...,
        description="Owner ID",
        validation_alias=AliasChoices("user_id", "ownerId", "owner_id"),
        serialization_alias="ownerId",
    )
    input_text: str = Field(default=..., description="Input text")
    summary: str = Field(default=..., description="Summary")

    created_at: datetime = Field(default=..., description="Created at")
