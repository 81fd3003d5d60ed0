"""
Unit tests for TeammateMatchService (event teammate matching).

Tests cover:
1. Minimum pool guard
2. Threshold edge (exactly 0.3 persists, below does not)
3. Pair dedup across runs and in both orderings
4. Duplicate-key races reported by the store
5. Notification failures never undo a match
6. Pooled scoring produces the same outcome as sequential scoring
"""
import json
import logging
import unittest
from unittest.mock import MagicMock

from core.config_loader import TeammateConfig
from core.matcher.service import TeammateMatchService
from core.scorer.enriched import TeammateScorer
from core.scorer.models import MatchResult
from database.models import make_pair_key
from notification.service import NotificationService
from tests.mocks.store_mocks import FakeMatchingRepository, MockLLMProvider


class TestTeammateMatchService(unittest.TestCase):

    def setUp(self):
        self.repo = FakeMatchingRepository()
        self.logger = logging.getLogger("tests.teammate_service")
        self.scorer = TeammateScorer(llm=None, logger=self.logger)
        self.notifier = NotificationService(self.repo, logger=self.logger)

    def _service(self, **config):
        return TeammateMatchService(
            self.repo,
            scorer=self.scorer,
            notifier=self.notifier,
            config=TeammateConfig(**config),
            logger=self.logger
        )

    def test_pool_below_two_is_noop(self):
        self.repo.add_profile("alice", interests=["ai"])
        self.repo.add_event("e1", ["alice"])

        result = self._service().find_event_teammates("e1")

        self.assertEqual(result.pairs_considered, 0)
        self.assertEqual(self.repo.matches, [])
        self.assertEqual(self.repo.notifications, [])

    def test_pool_shrinks_below_two_after_fetch(self):
        self.repo.add_profile("alice", interests=["ai"])
        self.repo.add_event("e1", ["alice", "ghost"])

        with self.assertLogs(self.logger, level="INFO"):
            result = self._service().find_event_teammates("e1")

        self.assertEqual(result.pool_size, 1)
        self.assertEqual(self.repo.matches, [])

    def test_shared_interest_meets_threshold_exactly(self):
        self.repo.add_profile("alice", interests=["AI", "music"], full_name="Alice")
        self.repo.add_profile("bob", interests=["AI", "sports"], full_name="Bob")
        self.repo.add_event("e1", ["alice", "bob"], title="Spring Hack")

        result = self._service().find_event_teammates("e1")

        self.assertEqual(result.created, 1)
        match = self.repo.matches[0]
        self.assertEqual(match.status, "pending")
        self.assertEqual(match.compatibility_score, 0.3)
        self.assertEqual((match.user1_id, match.user2_id), ("alice", "bob"))
        self.assertEqual(match.matching_interests, ["AI"])

        recipients = sorted(n.user_id for n in self.repo.notifications)
        self.assertEqual(recipients, ["alice", "bob"])
        to_alice = next(n for n in self.repo.notifications if n.user_id == "alice")
        self.assertEqual(to_alice.title, "New Teammate Match for Spring Hack!")
        self.assertTrue(to_alice.message.startswith("You have been matched with Bob."))
        self.assertEqual(to_alice.link, "/events/e1")

    def test_no_overlap_creates_nothing(self):
        self.repo.add_profile("alice", skills=["go"], interests=["chess"])
        self.repo.add_profile("bob", skills=["figma"], interests=["dance"])
        self.repo.add_event("e1", ["alice", "bob"])

        result = self._service().find_event_teammates("e1")

        self.assertEqual(result.below_threshold, 1)
        self.assertEqual(self.repo.matches, [])
        self.assertEqual(self.repo.notifications, [])

    def test_threshold_edge(self):
        self.repo.add_profile("alice")
        self.repo.add_profile("bob")
        self.repo.add_profile("carol")
        self.repo.add_event("e1", ["alice", "bob", "carol"])

        scorer = MagicMock()
        scorer.score.side_effect = [
            MatchResult("alice", "bob", score=0.30, reasoning="edge"),
            MatchResult("alice", "carol", score=0.29999, reasoning="just below"),
            MatchResult("bob", "carol", score=0.9, reasoning="great"),
        ]
        service = TeammateMatchService(self.repo, scorer=scorer, notifier=None, logger=self.logger)

        result = service.find_event_teammates("e1")

        self.assertEqual(result.created, 2)
        self.assertEqual(result.below_threshold, 1)
        pairs = {(m.user1_id, m.user2_id) for m in self.repo.matches}
        self.assertEqual(pairs, {("alice", "bob"), ("bob", "carol")})

    def test_configurable_threshold(self):
        self.repo.add_profile("alice", interests=["AI", "music"])
        self.repo.add_profile("bob", interests=["AI", "sports"])
        self.repo.add_event("e1", ["alice", "bob"])

        result = self._service(match_threshold=0.5).find_event_teammates("e1")

        self.assertEqual(result.created, 0)

    def test_second_run_skips_existing_pairs(self):
        for user_id in ("alice", "bob", "carol"):
            self.repo.add_profile(user_id, interests=["ai"])
        self.repo.add_event("e1", ["alice", "bob", "carol"])
        service = self._service()

        first = service.find_event_teammates("e1")
        second = service.find_event_teammates("e1")

        self.assertEqual(first.created, 3)
        self.assertEqual(second.created, 0)
        self.assertEqual(second.skipped_existing, 3)
        self.assertEqual(len(self.repo.matches), 3)
        self.assertEqual(len(self.repo.notifications), 6)

    def test_existing_match_in_reverse_order_is_skipped(self):
        self.repo.add_profile("alice", interests=["ai"])
        self.repo.add_profile("bob", interests=["ai"])
        self.repo.add_event("e1", ["bob", "alice"])
        self.repo.insert_match({
            'event_id': "e1", 'user1_id': "alice", 'user2_id': "bob", 'compatibility_score': 0.5,
        })

        result = self._service().find_event_teammates("e1")

        self.assertEqual(result.skipped_existing, 1)
        self.assertEqual(self.repo.insert_match_calls, 1)

    def test_same_pair_on_other_event_is_matched(self):
        self.repo.add_profile("alice", interests=["ai"])
        self.repo.add_profile("bob", interests=["ai"])
        self.repo.add_event("e1", ["alice", "bob"])
        self.repo.add_event("e2", ["alice", "bob"])
        service = self._service()

        service.find_event_teammates("e1")
        result = service.find_event_teammates("e2")

        self.assertEqual(result.created, 1)
        self.assertEqual({m.pair_key for m in self.repo.matches}, {make_pair_key("alice", "bob")})
        self.assertEqual(len(self.repo.matches), 2)

    def test_duplicate_from_store_is_counted_not_raised(self):
        self.repo.add_profile("alice", interests=["ai"])
        self.repo.add_profile("bob", interests=["ai"])
        self.repo.add_event("e1", ["alice", "bob"])
        # A concurrent run inserts the pair after our existence check
        self.repo.find_existing_match = MagicMock(return_value=None)
        self.repo.insert_match({'event_id': "e1", 'user1_id': "bob", 'user2_id': "alice", 'compatibility_score': 0.4})

        with self.assertLogs(self.logger, level="INFO") as logs:
            result = self._service().find_event_teammates("e1")

        self.assertEqual(result.duplicates, 1)
        self.assertEqual(result.created, 0)
        self.assertEqual(len(self.repo.matches), 1)
        self.assertTrue(any("already exists" in line for line in logs.output))

    def test_failed_insert_rolls_back_and_continues(self):
        for user_id in ("alice", "bob", "carol"):
            self.repo.add_profile(user_id, interests=["ai"])
        self.repo.add_event("e1", ["alice", "bob", "carol"])
        self.repo.fail_insert_pairs.add(make_pair_key("alice", "bob"))

        with self.assertLogs(self.logger, level="ERROR"):
            result = self._service().find_event_teammates("e1")

        self.assertEqual(result.errors, 1)
        self.assertEqual(result.created, 2)
        self.assertEqual(self.repo.rollback_calls, 1)
        self.assertEqual(
            {m.pair_key for m in self.repo.matches},
            {make_pair_key("alice", "carol"), make_pair_key("bob", "carol")}
        )

    def test_failed_existence_check_rolls_back(self):
        self.repo.add_profile("alice", interests=["ai"])
        self.repo.add_profile("bob", interests=["ai"])
        self.repo.add_event("e1", ["alice", "bob"])
        self.repo.find_existing_match = MagicMock(side_effect=RuntimeError("query aborted"))

        with self.assertLogs(self.logger, level="ERROR"):
            result = self._service().find_event_teammates("e1")

        self.assertEqual(result.errors, 1)
        self.assertEqual(self.repo.rollback_calls, 1)

    def test_notification_failure_keeps_match(self):
        self.repo.add_profile("alice", interests=["ai"])
        self.repo.add_profile("bob", interests=["ai"])
        self.repo.add_event("e1", ["alice", "bob"])
        self.repo.fail_notifications = True

        with self.assertLogs(self.logger, level="ERROR"):
            result = self._service().find_event_teammates("e1")

        self.assertEqual(result.created, 1)
        self.assertEqual(len(self.repo.matches), 1)

    def test_event_lookup_failure_scores_without_event_type(self):
        self.repo.add_profile("alice", interests=["AI"])
        self.repo.add_profile("bob", interests=["ai"])
        self.repo.add_event("e1", ["alice", "bob"], event_type="hackathon")
        self.repo.get_event = MagicMock(side_effect=RuntimeError("db down"))

        with self.assertLogs(self.logger, level="WARNING"):
            result = self._service().find_event_teammates("e1")

        # Exact comparison without an event type: "AI" != "ai"
        self.assertEqual(result.created, 0)

    def test_rich_pairs_use_llm_and_failures_fall_back(self):
        for user_id in ("alice", "bob", "carol"):
            self.repo.add_profile(user_id, posts=2, projects=1, skills=["python"], interests=["ai"])
        self.repo.add_event("e1", ["alice", "bob", "carol"])
        llm = MockLLMProvider([
            json.dumps({"match_score": 0.9, "reasoning": "Great pair"}),
            TimeoutError("timed out"),
            json.dumps({"match_score": 0.1, "reasoning": "Weak pair"}),
        ])
        self.scorer = TeammateScorer(llm=llm, logger=self.logger)

        with self.assertLogs(self.logger, level="WARNING"):
            result = self._service().find_event_teammates("e1")

        self.assertEqual(len(llm.calls), 3)
        self.assertEqual(result.created, 2)
        self.assertEqual(result.below_threshold, 1)
        sources = sorted(m.score_source for m in self.repo.matches)
        self.assertEqual(sources, ["ai", "fallback"])

    def test_pooled_scoring_matches_sequential(self):
        users = {
            "alice": ["ai", "music"],
            "bob": ["ai", "sports"],
            "carol": ["chess"],
            "dave": ["music", "chess"],
        }
        for user_id, interests in users.items():
            self.repo.add_profile(user_id, interests=interests)
        self.repo.add_event("e1", list(users))

        sequential = self._service(max_concurrency=1).find_event_teammates("e1")
        sequential_pairs = sorted((m.user1_id, m.user2_id, m.compatibility_score) for m in self.repo.matches)

        self.repo.matches.clear()
        pooled = self._service(max_concurrency=4).find_event_teammates("e1")
        pooled_pairs = sorted((m.user1_id, m.user2_id, m.compatibility_score) for m in self.repo.matches)

        self.assertEqual(sequential.to_dict(), pooled.to_dict())
        self.assertEqual(sequential_pairs, pooled_pairs)


if __name__ == '__main__':
    unittest.main()
