from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import Base, JSONType, new_id, utcnow


class Profile(Base):
    """
    Public user profile.

    ``experience`` and ``projects`` are free-text columns that usually hold
    JSON arrays written by the profile editor; see core.matcher.dto for
    the parse functions.
    """
    __tablename__ = 'profiles'

    id = Column(Text, primary_key=True, default=new_id)
    username = Column(Text)
    full_name = Column(Text)
    avatar_url = Column(Text)

    skills = Column(JSONType, default=list)
    interests = Column(JSONType, default=list)
    bio = Column(Text)
    experience = Column(Text)
    projects = Column(Text)

    college = Column(Text)
    branch = Column(Text)
    year = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    posts = relationship("Post", back_populates="author", cascade="all, delete-orphan")


class Post(Base):
    """Feed post; only content and tags are used for matching."""
    __tablename__ = 'posts'

    id = Column(Text, primary_key=True, default=new_id)
    user_id = Column(Text, ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    content = Column(Text, nullable=False, default="")
    tags = Column(JSONType, default=list)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    author = relationship("Profile", back_populates="posts")

    __table_args__ = (
        Index('idx_posts_user_created', 'user_id', 'created_at'),
    )
