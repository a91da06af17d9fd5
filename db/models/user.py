from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Mapped, mapped_column

from db.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        primary_key=True, autoincrement=True, unique=True, comment="ID"
    )

    username: Mapped[str] = mapped_column(unique=True, index=True, comment="Username")
    password_hash: Mapped[str] = mapped_column(comment="Password hash")
    display_name: Mapped[str] = mapped_column(comment="Display name")

    created_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), comment="Created at"
    )
