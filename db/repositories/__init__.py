from db.repositories.summary import SummaryRepository
from db.repositories.user import UserRepository

__all__ = ["SummaryRepository", "UserRepository"]
