from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from database.models import NOTIFICATION_TEAMMATE_MATCH, NOTIFICATION_TEAM_RECOMMENDATION

FALLBACK_EVENT_TITLE = "an event"
FALLBACK_PROJECT_TITLE = "the project"
FALLBACK_USER_NAME = "a user"


class NotificationContent(BaseModel):
    """One in-app notification ready to be stored."""
    user_id: str
    type: str
    title: str
    message: str
    link: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump()


class NotificationMessageBuilder:
    @staticmethod
    def teammate_match(
        recipient_id: str,
        other_name: Optional[str],
        event_id: str,
        event_title: Optional[str],
        match_id: str,
        score: float,
        reasoning: Optional[str]
    ) -> NotificationContent:
        reasoning = reasoning or ""
        return NotificationContent(
            user_id=recipient_id,
            type=NOTIFICATION_TEAMMATE_MATCH,
            title=f"New Teammate Match for {event_title or FALLBACK_EVENT_TITLE}!",
            message=(
                f"You have been matched with {other_name or FALLBACK_USER_NAME}. "
                f"AI Reasoning: \"{reasoning}\""
            ),
            link=f"/events/{event_id}",
            metadata={
                'match_id': match_id,
                'score': score,
                'reasoning': reasoning,
            },
        )

    @staticmethod
    def team_recommendation(
        recipient_id: str,
        project_id: str,
        project_title: Optional[str],
        recommendation_id: str,
        score: float,
        reasoning: Optional[str]
    ) -> NotificationContent:
        title = project_title or FALLBACK_PROJECT_TITLE
        message = f"Your profile matches {title}."
        if reasoning:
            message = f"{message} {reasoning}"
        return NotificationContent(
            user_id=recipient_id,
            type=NOTIFICATION_TEAM_RECOMMENDATION,
            title=f"You were recommended for {title}",
            message=message,
            link=f"/projects/{project_id}",
            metadata={
                'recommendation_id': recommendation_id,
                'project_id': project_id,
                'score': score,
                'reasoning': reasoning or "",
            },
        )
