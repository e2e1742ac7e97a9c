"""Codespace model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Codespace(Base, TimestampMixin):
    """A named, language-tagged code snippet owned by a user.

    ``code`` always holds the base64-encoded form; see ``src.utils.encode``.
    """

    __tablename__ = "codespaces"
    __table_args__ = (UniqueConstraint("title", "owner_id", name="uq_codespace_title_owner"),)

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(50), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    code = Column(Text, nullable=False)
    language = Column(String(50), nullable=False)
    owner_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    is_public = Column(Boolean, nullable=False, default=False)

    # Engagement counters
    stars = Column(Integer, nullable=False, default=0)
    views = Column(Integer, nullable=False, default=0)
    downloads = Column(Integer, nullable=False, default=0)
    contributors = Column(Integer, nullable=False, default=0)
    commits = Column(Integer, nullable=False, default=0)

    # Relationships
    owner = relationship("User", back_populates="codespaces")
