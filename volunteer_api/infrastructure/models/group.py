"""SQLAlchemy models for volunteer groups and their membership."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text, func
from sqlalchemy.orm import relationship

from volunteer_api.infrastructure.database import Base

user_group_table = Table(
    "user_group",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("user.id", ondelete="CASCADE"), primary_key=True),
    Column("group_id", Integer, ForeignKey("volunteer_group.id", ondelete="CASCADE"), primary_key=True),
)


class GroupModel(Base):
    """Database representation of a volunteer group (dogs, cats, ...)."""

    __tablename__ = "volunteer_group"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=False, default="")
    image_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    deleted_at = Column(DateTime, nullable=True)

    members = relationship(
        "UserModel",
        secondary=user_group_table,
        back_populates="groups",
    )


__all__ = ["GroupModel", "user_group_table"]
