"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and codespace ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    username = Column(String(20), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    avatar = Column(String(2048), nullable=False)
    followers = Column(Integer, nullable=False, default=0)
    codespaces_count = Column(Integer, nullable=False, default=0)

    # Relationships
    codespaces = relationship("Codespace", back_populates="owner", cascade="all, delete-orphan")
