"""User ORM model."""

from sqlalchemy.orm import Mapped, mapped_column

from release_catalog.database import Base


class User(Base):
    """User account that bearer tokens are issued for."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    is_active: Mapped[bool] = mapped_column(default=True)
