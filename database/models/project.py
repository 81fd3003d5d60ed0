from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Float, UniqueConstraint, Index

from .base import Base, JSONType, new_id, utcnow


class Project(Base):
    """Project board entry owned by a user."""
    __tablename__ = 'projects'

    id = Column(Text, primary_key=True, default=new_id)
    owner_id = Column(Text, ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text, default="")
    required_skills = Column(JSONType, default=list)
    tags = Column(JSONType, default=list)
    status = Column(Text, default='open')
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index('idx_projects_owner_created', 'owner_id', 'created_at'),
    )


class ProjectMember(Base):
    __tablename__ = 'project_members'

    id = Column(Text, primary_key=True, default=new_id)
    project_id = Column(Text, ForeignKey('projects.id', ondelete='CASCADE'), nullable=False)
    user_id = Column(Text, ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    role = Column(Text, default='member')
    joined_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        UniqueConstraint('project_id', 'user_id', name='uq_project_member'),
    )


class TeamRecommendation(Base):
    """
    Candidate recommended for a project.

    Rows for a project are replaced wholesale on every generation run.
    """
    __tablename__ = 'team_recommendations'

    id = Column(Text, primary_key=True, default=new_id)
    project_id = Column(Text, ForeignKey('projects.id', ondelete='CASCADE'), nullable=False)
    recommended_user_id = Column(Text, ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    compatibility_score = Column(Float, nullable=False)
    matching_skills = Column(JSONType, default=list)
    reason = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        UniqueConstraint('project_id', 'recommended_user_id', name='uq_team_recommendation'),
        Index('idx_team_rec_project_score', 'project_id', 'compatibility_score'),
    )
