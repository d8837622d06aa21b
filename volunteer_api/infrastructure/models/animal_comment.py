"""SQLAlchemy model for comments and session reports posted on animals."""

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import relationship

from volunteer_api.infrastructure.database import Base
from volunteer_api.utils import now_in_app_naive_datetime

animal_comment_tag_table = Table(
    "animal_comment_tag",
    Base.metadata,
    Column(
        "animal_comment_id",
        Integer,
        ForeignKey("animal_comment.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "comment_tag_id",
        Integer,
        ForeignKey("comment_tag.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class AnimalCommentModel(Base):
    """Database representation of a volunteer comment on an animal."""

    __tablename__ = "animal_comment"
    __table_args__ = (Index("ix_animal_comment_animal_created", "animal_id", "created_at"),)

    id = Column(Integer, primary_key=True, index=True)
    animal_id = Column(Integer, ForeignKey("animal.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    image_url = Column(String(500), nullable=True)
    session_metadata = Column(JSON(none_as_null=True), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True)
    deleted_at = Column(DateTime(), nullable=True)

    animal = relationship("AnimalModel")
    user = relationship("UserModel", lazy="joined")
    tags = relationship(
        "CommentTagModel",
        secondary=animal_comment_tag_table,
        lazy="selectin",
        order_by="CommentTagModel.name",
    )


__all__ = ["AnimalCommentModel", "animal_comment_tag_table"]
