from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Float, UniqueConstraint, Index, CheckConstraint

from .base import Base, JSONType, new_id, utcnow

MATCH_STATUS_PENDING = 'pending'
MATCH_STATUS_ACCEPTED = 'accepted'
MATCH_STATUS_REJECTED = 'rejected'
MATCH_STATUSES = (MATCH_STATUS_PENDING, MATCH_STATUS_ACCEPTED, MATCH_STATUS_REJECTED)


def make_pair_key(user_a: str, user_b: str) -> str:
    """Order-independent key for an unordered pair of users."""
    first, second = sorted((str(user_a), str(user_b)))
    return f"{first}:{second}"


class TeammateMatch(Base):
    """
    Suggested teammate pair for an event.

    Tracks:
    - The pair in the order it was scored (user1_id, user2_id)
    - pair_key, the sorted pair, so (A, B) and (B, A) collide on the
      unique constraint
    - Score, overlaps and reasoning shown to both users
    - Status: pending -> accepted | rejected (terminal)
    """
    __tablename__ = 'teammate_matches'

    id = Column(Text, primary_key=True, default=new_id)
    event_id = Column(Text, ForeignKey('events.id', ondelete='CASCADE'), nullable=False)
    user1_id = Column(Text, ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    user2_id = Column(Text, ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    pair_key = Column(Text, nullable=False)

    compatibility_score = Column(Float, nullable=False)
    matching_skills = Column(JSONType, default=list)
    matching_interests = Column(JSONType, default=list)
    ai_reasoning = Column(Text)
    score_source = Column(Text, default='basic')  # basic | ai | fallback

    status = Column(Text, nullable=False, default=MATCH_STATUS_PENDING)
    responded_by = Column(Text, nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        UniqueConstraint('event_id', 'pair_key', name='uq_teammate_match_event_pair'),
        CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name='ck_teammate_match_status'
        ),
        Index('idx_teammate_match_user1', 'user1_id', 'status'),
        Index('idx_teammate_match_user2', 'user2_id', 'status'),
        Index('idx_teammate_match_created', 'created_at'),
    )
