"""SQLAlchemy model for animals cared for by a group."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import relationship

from volunteer_api.infrastructure.database import Base


class AnimalModel(Base):
    """Database representation of a shelter animal."""

    __tablename__ = "animal"
    __table_args__ = (Index("ix_animal_group_status", "group_id", "status"),)

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(Integer, ForeignKey("volunteer_group.id"), nullable=False)
    name = Column(String(100), nullable=False)
    species = Column(String(50), nullable=False, default="")
    status = Column(String(30), nullable=False, default="available")
    image_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    deleted_at = Column(DateTime, nullable=True)

    group = relationship("GroupModel", lazy="joined")


__all__ = ["AnimalModel"]
