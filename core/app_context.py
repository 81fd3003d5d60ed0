import logging
from dataclasses import dataclass
from typing import Optional

from core.config_loader import AppConfig, LlmConfig
from core.exceptions import ConfigurationError
from core.llm.interfaces import LLMProvider, UnavailableLLMProvider
from core.llm.openai_service import OpenAIService
from core.llm.gemini_service import GeminiService
from core.matcher.service import TeamRecommendationService, TeammateMatchService
from core.scorer.enriched import TeammateScorer
from database.repository import MatchingRepository
from notification.service import NotificationService

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    The LLM provider and scorer are built once per process. DB access is
    obtained via matching_uow() per run and passed to the service
    factories below.
    """
    config: AppConfig
    llm_provider: Optional[LLMProvider]
    teammate_scorer: TeammateScorer

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        A provider that cannot be built (missing credential) is reported
        here and replaced by one that raises the same ConfigurationError on
        every call: enriched pairs fall back, basic pairs score normally.
        """
        llm_provider = None
        if config.llm.enabled:
            try:
                llm_provider = cls._build_llm_provider(config.llm)
            except ConfigurationError as e:
                logger.error(f"LLM provider unavailable: {e}. Enriched teammate scoring will use the fallback score.")
                llm_provider = UnavailableLLMProvider(e)

        teammates = config.matching.teammates
        teammate_scorer = TeammateScorer(
            llm=llm_provider,
            min_activity=teammates.min_activity_for_ai,
            recent_limit=teammates.recent_limit
        )

        return cls(
            config=config,
            llm_provider=llm_provider,
            teammate_scorer=teammate_scorer
        )

    @staticmethod
    def _build_llm_provider(llm_config: LlmConfig) -> LLMProvider:
        """Build the configured LLM provider."""
        kwargs = {'model': llm_config.model} if llm_config.model else {}
        if llm_config.provider == "gemini":
            return GeminiService(
                api_key=llm_config.api_key,
                temperature=llm_config.temperature,
                timeout_seconds=llm_config.timeout_seconds,
                **kwargs
            )

        return OpenAIService(
            api_key=llm_config.api_key,
            base_url=llm_config.base_url,
            temperature=llm_config.temperature,
            timeout_seconds=llm_config.timeout_seconds,
            **kwargs
        )

    def notification_service(self, repo: MatchingRepository) -> NotificationService:
        return NotificationService(repo)

    def recommendation_service(self, repo: MatchingRepository) -> TeamRecommendationService:
        return TeamRecommendationService(
            repo,
            config=self.config.matching.recommendations,
            notifier=self.notification_service(repo)
        )

    def teammate_service(self, repo: MatchingRepository) -> TeammateMatchService:
        return TeammateMatchService(
            repo,
            scorer=self.teammate_scorer,
            notifier=self.notification_service(repo),
            config=self.config.matching.teammates
        )
