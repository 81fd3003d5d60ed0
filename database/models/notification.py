from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Boolean, Index

from .base import Base, JSONType, new_id, utcnow

NOTIFICATION_TEAMMATE_MATCH = 'teammate_match'
NOTIFICATION_TEAM_RECOMMENDATION = 'team_recommendation'


class Notification(Base):
    """
    In-app notification shown on the notifications page.

    Delivery is best-effort: a failed insert never undoes the match or
    recommendation that triggered it.
    """
    __tablename__ = 'notifications'

    id = Column(Text, primary_key=True, default=new_id)
    user_id = Column(Text, ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    type = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    link = Column(Text)
    # "metadata" is reserved on declarative classes
    details = Column('metadata', JSONType, default=dict)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index('idx_notifications_user_created', 'user_id', 'created_at'),
        Index('idx_notifications_user_unread', 'user_id', 'is_read'),
    )
