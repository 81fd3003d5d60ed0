from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, UniqueConstraint, Index

from .base import Base, new_id, utcnow


class Event(Base):
    __tablename__ = 'events'

    id = Column(Text, primary_key=True, default=new_id)
    title = Column(Text, nullable=False)
    description = Column(Text)
    event_type = Column(Text)  # hackathon, workshop, ... used for the matching bonus
    event_date = Column(TIMESTAMP(timezone=True))
    created_by = Column(Text, ForeignKey('profiles.id', ondelete='SET NULL'))
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)


class EventInterest(Base):
    """A user marked an event as interesting; the pool for teammate matching."""
    __tablename__ = 'event_interests'

    id = Column(Text, primary_key=True, default=new_id)
    event_id = Column(Text, ForeignKey('events.id', ondelete='CASCADE'), nullable=False)
    user_id = Column(Text, ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        UniqueConstraint('event_id', 'user_id', name='uq_event_interest'),
        Index('idx_event_interest_event', 'event_id', 'created_at'),
    )
