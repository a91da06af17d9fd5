from usecases.auth import AuthUsecase
from usecases.document import DocumentUsecase
from usecases.health import HealthUsecase
from usecases.summary import SummaryUsecase

__all__ = [
    "AuthUsecase",
    "DocumentUsecase",
    "HealthUsecase",
    "SummaryUsecase",
]
