#!/usr/bin/env python3
"""
Matching Services - pairwise orchestration over the record store.

Two flows:
1. Team recommendations: score every eligible user against a project
   and replace the project's stored recommendations with the best ones.
2. Event teammates: score every unordered pair of users interested in an
   event and persist the pairs above the threshold as pending matches.

Both are request-driven and idempotent with respect to the store:
recommendations are replaced wholesale and matched pairs are skipped on
later runs.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from core.config_loader import RecommendationConfig, TeammateConfig
from core.exceptions import DuplicateMatchError, ProjectNotFoundError
from core.matcher.dto import EnhancedUserData, profile_from_orm, project_from_orm
from core.matcher.fetcher import EnhancedDataFetcher
from core.scorer.models import MatchResult
from core.scorer.project_fit import calculate_compatibility
from core.scorer.enriched import TeammateScorer
from database.models import TeamRecommendation
from database.repository import MatchingRepository
from notification.service import NotificationService

MIN_POOL_SIZE = 2


class TeamRecommendationService:
    """
    Generates team recommendations for a project.

    Project members and the owner are never recommended. Candidates
    must score strictly above ``config.min_score``; the best
    ``config.top_k`` are stored.
    """

    def __init__(
        self,
        repo: MatchingRepository,
        config: Optional[RecommendationConfig] = None,
        notifier: Optional[NotificationService] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.repo = repo
        self.config = config or RecommendationConfig()
        self.notifier = notifier
        self.logger = logger or logging.getLogger(__name__)

    def generate(self, project_id: str) -> List[TeamRecommendation]:
        """
        Replace the stored recommendations of a project.

        Returns:
            The newly stored recommendations, best first.

        Raises:
            ProjectNotFoundError: the project does not exist.
        """
        project_row = self.repo.get_project(project_id)
        if project_row is None:
            raise ProjectNotFoundError(f"Project {project_id} not found")

        project = project_from_orm(project_row)

        excluded = set(self.repo.list_project_members(project_id))
        if project.owner_id:
            excluded.add(project.owner_id)

        candidates = [profile_from_orm(row) for row in self.repo.list_candidates(excluded)]
        self.logger.info(
            f"Scoring {len(candidates)} candidates for project {project_id} "
            f"({len(excluded)} excluded)"
        )

        scored = []
        for candidate in candidates:
            compatibility = calculate_compatibility(project, candidate)
            if compatibility.score > self.config.min_score:
                scored.append((candidate, compatibility))

        # Stable sort keeps candidate order for equal scores
        scored.sort(key=lambda item: item[1].score, reverse=True)
        top = scored[:self.config.top_k]

        records = [
            {
                'recommended_user_id': candidate.id,
                'compatibility_score': compatibility.score,
                'matching_skills': compatibility.matching_skills,
                'reason': compatibility.reason,
            }
            for candidate, compatibility in top
        ]

        stored = self.repo.replace_recommendations(project_id, records)
        self.logger.info(f"Stored {len(stored)} recommendations for project {project_id}")

        if self.config.notify_candidates and self.notifier is not None:
            for recommendation in stored:
                self.notifier.notify_team_recommendation(recommendation, project_row)

        return stored


@dataclass
class TeammateMatchRunResult:
    """Summary of one teammate matching run for an event."""
    event_id: str
    pool_size: int = 0
    pairs_considered: int = 0
    skipped_existing: int = 0
    below_threshold: int = 0
    created: int = 0
    duplicates: int = 0
    errors: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'event_id': self.event_id,
            'pool_size': self.pool_size,
            'pairs_considered': self.pairs_considered,
            'skipped_existing': self.skipped_existing,
            'below_threshold': self.below_threshold,
            'created': self.created,
            'duplicates': self.duplicates,
            'errors': self.errors,
        }


class TeammateMatchService:
    """
    Finds teammate matches among users interested in an event.

    Existence checks and inserts run on the calling thread. Pair scoring
    runs on a thread pool when ``config.max_concurrency`` > 1; results
    are consumed in pair order so the outcome matches a sequential run.
    """

    def __init__(
        self,
        repo: MatchingRepository,
        scorer: TeammateScorer,
        notifier: Optional[NotificationService] = None,
        config: Optional[TeammateConfig] = None,
        fetcher: Optional[EnhancedDataFetcher] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.repo = repo
        self.scorer = scorer
        self.notifier = notifier
        self.config = config or TeammateConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.fetcher = fetcher or EnhancedDataFetcher(
            repo, recent_limit=self.config.recent_limit, logger=self.logger
        )

    def _event_type(self, event_id: str) -> Optional[str]:
        try:
            event = self.repo.get_event(event_id)
        except Exception as e:
            self.logger.warning(f"Could not load event {event_id}: {e}")
            self._rollback()
            return None
        return event.event_type if event is not None else None

    def _rollback(self) -> None:
        """Clear a failed transaction so the session stays usable for later pairs."""
        try:
            self.repo.rollback()
        except Exception as e:
            self.logger.warning(f"Rollback after a failed query did not complete: {e}")

    def _score_pairs(
        self,
        pairs: List[Tuple[EnhancedUserData, EnhancedUserData]],
        event_type: Optional[str]
    ) -> List[MatchResult]:
        workers = min(max(self.config.max_concurrency, 1), len(pairs))
        if workers <= 1:
            return [self.scorer.score(a, b, event_type) for a, b in pairs]

        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(lambda pair: self.scorer.score(pair[0], pair[1], event_type), pairs))

    def find_event_teammates(self, event_id: str) -> TeammateMatchRunResult:
        """
        Match every unordered pair of users interested in the event.

        Pools of fewer than two users are a no-op. Pairs that already have
        a match (in either order) are skipped. New matches are committed
        one by one and both users are notified.
        """
        result = TeammateMatchRunResult(event_id=event_id)
        event_type = self._event_type(event_id)

        user_ids = self.repo.list_event_interested_users(event_id)
        if len(user_ids) < MIN_POOL_SIZE:
            self.logger.info(f"Not enough users interested in event {event_id} to match")
            return result

        bundles = self.fetcher.fetch_many(user_ids)
        pool = [bundles[user_id] for user_id in user_ids if user_id in bundles]
        result.pool_size = len(pool)
        if len(pool) < MIN_POOL_SIZE:
            self.logger.info(f"Not enough user profiles available for event {event_id}")
            return result

        pending = []
        for i in range(len(pool)):
            for j in range(i + 1, len(pool)):
                user1 = pool[i].profile.id
                user2 = pool[j].profile.id
                result.pairs_considered += 1
                try:
                    existing = self.repo.find_existing_match(event_id, user1, user2)
                except Exception as e:
                    self.logger.error(f"Error checking existing match {user1} <-> {user2}: {e}")
                    self._rollback()
                    result.errors += 1
                    continue
                if existing is not None:
                    result.skipped_existing += 1
                    continue
                pending.append((pool[i], pool[j]))

        scores = self._score_pairs(pending, event_type)

        for (data1, data2), match_result in zip(pending, scores):
            if match_result.score < self.config.match_threshold:
                result.below_threshold += 1
                continue

            record = {
                'event_id': event_id,
                'user1_id': data1.profile.id,
                'user2_id': data2.profile.id,
                'compatibility_score': match_result.score,
                'matching_skills': match_result.matching_skills,
                'matching_interests': match_result.matching_interests,
                'ai_reasoning': match_result.reasoning,
                'score_source': match_result.source,
            }
            try:
                match = self.repo.insert_match(record)
            except DuplicateMatchError as e:
                self.logger.info(f"{e}; skipping")
                result.duplicates += 1
                continue
            except Exception as e:
                self.logger.error(f"Error creating match {data1.profile.id} <-> {data2.profile.id}: {e}")
                self._rollback()
                result.errors += 1
                continue

            result.created += 1
            self.logger.info(
                f"Created match {data1.profile.id} <-> {data2.profile.id} "
                f"for event {event_id} (score: {match_result.score:.2f}, {match_result.source})"
            )

            if self.notifier is not None:
                self.notifier.notify_teammate_match(match)

        self.logger.info(
            f"Event {event_id}: {result.created} matches created from "
            f"{result.pairs_considered} pairs ({result.skipped_existing} existing, "
            f"{result.below_threshold} below threshold, {result.duplicates} duplicates)"
        )
        return result
