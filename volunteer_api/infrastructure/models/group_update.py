"""SQLAlchemy model for group announcements (updates)."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.sql import expression
from sqlalchemy.orm import relationship

from volunteer_api.infrastructure.database import Base
from volunteer_api.utils import now_in_app_naive_datetime


class GroupUpdateModel(Base):
    """Announcement posted to every member of a group."""

    __tablename__ = "group_update"
    __table_args__ = (Index("ix_group_update_group_created", "group_id", "created_at"),)

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(Integer, ForeignKey("volunteer_group.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    image_url = Column(String(500), nullable=True)
    send_email = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True)
    deleted_at = Column(DateTime(), nullable=True)

    user = relationship("UserModel", lazy="joined")


__all__ = ["GroupUpdateModel"]
