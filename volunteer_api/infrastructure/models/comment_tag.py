"""SQLAlchemy model for group scoped comment tags."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.sql import expression

from volunteer_api.infrastructure.database import Base

DEFAULT_TAG_COLOR = "#6b7280"


class CommentTagModel(Base):
    """Label attached to animal comments (behavior, medical, ...)."""

    __tablename__ = "comment_tag"
    __table_args__ = (UniqueConstraint("group_id", "name", name="uq_comment_tag_group_name"),)

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(Integer, ForeignKey("volunteer_group.id"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    color = Column(String(7), nullable=False, default=DEFAULT_TAG_COLOR)
    is_system = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    deleted_at = Column(DateTime, nullable=True)


__all__ = ["CommentTagModel", "DEFAULT_TAG_COLOR"]
