from db.models.base import Base
from db.models.summary import Summary
from db.models.user import User

__all__ = ["Base", "Summary", "User"]
