from schemas.auth import (
    Identity,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from schemas.document import ExtractionResponse
from schemas.health import HealthResponse, ServiceHealthResponse, StatusResponse
from schemas.summary import (
    SummarizeResponse,
    SummaryCreateRequest,
    SummaryResponse,
    TextRequest,
    WordCountResponse,
)

__all__ = [
    "Identity",
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "UserResponse",
    "ExtractionResponse",
    "HealthResponse",
    "ServiceHealthResponse",
    "StatusResponse",
    "TextRequest",
    "SummarizeResponse",
    "WordCountResponse",
    "SummaryCreateRequest",
    "SummaryResponse",
]
