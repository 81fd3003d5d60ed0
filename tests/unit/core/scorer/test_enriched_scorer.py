"""
Unit tests for the enriched (LLM) teammate scorer and its fallback.

Tests verify:
- Users below the activity threshold take the basic path
- Provider JSON is parsed after stripping fences and surrounding text
- Any provider failure yields the fallback score, never an exception
- Failures are reported on the injected logger
"""
import json
import logging
import unittest

from core.scorer.enriched import (
    TeammateScorer, build_teammate_prompt, parse_model_response, strip_code_fences
)
from core.scorer.models import SOURCE_AI, SOURCE_BASIC, SOURCE_FALLBACK
from core.scorer.teammate import AI_UNAVAILABLE_REASONING
from core.llm.system_prompts import TEAMMATE_MATCHING_SYSTEM_PROMPT
from tests.mocks.store_mocks import MockLLMProvider, make_profile, make_user_data


class TestResponseParsing(unittest.TestCase):

    def test_strip_code_fences(self):
        text = '```json\n{"match_score": 0.5}\n```'
        self.assertEqual(strip_code_fences(text), '{"match_score": 0.5}')

    def test_strip_surrounding_prose(self):
        text = 'Sure! Here is the analysis: {"match_score": 0.5, "x": {"y": 1}} Hope it helps.'
        self.assertEqual(json.loads(strip_code_fences(text)), {"match_score": 0.5, "x": {"y": 1}})

    def test_parse_clamps_score(self):
        self.assertEqual(parse_model_response('{"match_score": 1.7}')['match_score'], 1.0)
        self.assertEqual(parse_model_response('{"match_score": -0.2}')['match_score'], 0.0)

    def test_parse_defaults(self):
        parsed = parse_model_response('{"match_score": 0.4, "matching_skills": "python"}')
        self.assertEqual(parsed['matching_skills'], [])
        self.assertEqual(parsed['matching_interests'], [])
        self.assertEqual(parsed['reasoning'], 'No reasoning provided')

    def test_parse_rejects_missing_score(self):
        with self.assertRaises(KeyError):
            parse_model_response('{"reasoning": "great"}')

    def test_parse_rejects_non_numeric_score(self):
        with self.assertRaises(ValueError):
            parse_model_response('{"match_score": "high"}')

    def test_parse_rejects_nan(self):
        with self.assertRaises(ValueError):
            parse_model_response('{"match_score": NaN}')


class TestPrompt(unittest.TestCase):

    def test_prompt_contains_both_users_and_event(self):
        d1 = make_user_data(make_profile("alice", skills=["python"], interests=["ai"], college="MIT"), posts=2, projects=1)
        d2 = make_user_data(make_profile("bob", skills=["react"], interests=["web"]), posts=1, projects=2)

        prompt = build_teammate_prompt(d1, d2, event_type="hackathon")

        self.assertIn("USER 1 - alice", prompt)
        self.assertIn("USER 2 - bob", prompt)
        self.assertIn("- Skills: python", prompt)
        self.assertIn("- College: MIT", prompt)
        self.assertIn("- College: Not provided", prompt)
        self.assertIn("post 0 by alice | post 1 by alice", prompt)
        self.assertIn("project 0: a hackathon app", prompt)
        self.assertIn("for a hackathon event", prompt)

    def test_recent_limit_applies(self):
        d1 = make_user_data(make_profile("alice"), posts=5)
        d2 = make_user_data(make_profile("bob"))

        prompt = build_teammate_prompt(d1, d2, recent_limit=2)

        self.assertIn("post 1 by alice", prompt)
        self.assertNotIn("post 2 by alice", prompt)
        self.assertIn("No projects yet", prompt)


class TestTeammateScorer(unittest.TestCase):

    def setUp(self):
        self.logger = logging.getLogger("tests.enriched_scorer")
        self.alice = make_profile("alice", skills=["python", "sql"], interests=["ai"])
        self.bob = make_profile("bob", skills=["python"], interests=["ai", "music", "art"])
        self.rich_alice = make_user_data(self.alice, posts=2, projects=1)
        self.rich_bob = make_user_data(self.bob, posts=3)

    def test_minimal_activity_uses_basic_path(self):
        llm = MockLLMProvider()
        scorer = TeammateScorer(llm=llm, logger=self.logger)

        result = scorer.score(make_user_data(self.alice, posts=2), self.rich_bob)

        self.assertEqual(result.source, SOURCE_BASIC)
        self.assertEqual(llm.calls, [])

    def test_rich_pair_uses_provider(self):
        llm = MockLLMProvider([json.dumps({
            "match_score": 0.82,
            "matching_skills": ["python"],
            "matching_interests": ["ai"],
            "reasoning": "Both build ML side projects.",
        })])
        scorer = TeammateScorer(llm=llm, logger=self.logger)

        result = scorer.score(self.rich_alice, self.rich_bob, "hackathon")

        self.assertEqual(result.source, SOURCE_AI)
        self.assertEqual(result.score, 0.82)
        self.assertEqual(result.matching_skills, ["python"])
        self.assertEqual(result.reasoning, "Both build ML side projects.")
        self.assertEqual(len(llm.calls), 1)
        self.assertEqual(llm.calls[0]['system_prompt'], TEAMMATE_MATCHING_SYSTEM_PROMPT)

    def test_provider_timeout_falls_back(self):
        llm = MockLLMProvider([TimeoutError("request timed out")])
        scorer = TeammateScorer(llm=llm, logger=self.logger)

        with self.assertLogs(self.logger, level="WARNING") as logs:
            result = scorer.score(self.rich_alice, self.rich_bob)

        self.assertEqual(result.source, SOURCE_FALLBACK)
        self.assertEqual(result.reasoning, AI_UNAVAILABLE_REASONING)
        # (python + ai) / max(3, 4)
        self.assertAlmostEqual(result.score, 0.5)
        self.assertIn("request timed out", logs.output[0])

    def test_malformed_json_falls_back(self):
        scorer = TeammateScorer(llm=MockLLMProvider(["I think they match well"]), logger=self.logger)

        with self.assertLogs(self.logger, level="WARNING"):
            result = scorer.score(self.rich_alice, self.rich_bob)

        self.assertEqual(result.source, SOURCE_FALLBACK)

    def test_missing_provider_falls_back(self):
        scorer = TeammateScorer(llm=None, logger=self.logger)

        with self.assertLogs(self.logger, level="WARNING"):
            result = scorer.score(self.rich_alice, self.rich_bob)

        self.assertEqual(result.source, SOURCE_FALLBACK)

    def test_custom_activity_threshold(self):
        llm = MockLLMProvider()
        scorer = TeammateScorer(llm=llm, min_activity=1, logger=self.logger)

        result = scorer.score(make_user_data(self.alice, posts=1), make_user_data(self.bob, projects=1))

        self.assertEqual(result.source, SOURCE_AI)


if __name__ == '__main__':
    unittest.main()
