"""
Unit tests for project-to-candidate compatibility.
"""
import json
import unittest

from core.matcher.dto import Profile, ProjectInfo
from core.scorer.project_fit import (
    calculate_compatibility, find_matching_skills, has_relevant_experience, round_score
)


def _project(required, description=""):
    return ProjectInfo(id="p1", title="Campus App", description=description, required_skills=required, owner_id="owner")


def _profile(skills, projects=None):
    return Profile(
        id="u1",
        display_name="Candidate",
        skills=skills,
        projects=json.dumps(projects) if projects is not None else None,
    )


class TestFindMatchingSkills(unittest.TestCase):

    def test_case_insensitive(self):
        self.assertEqual(find_matching_skills(["React", "Python"], ["react", "node"]), ["react"])

    def test_substring_in_either_direction(self):
        self.assertEqual(find_matching_skills(["react native"], ["React"]), ["react native"])
        self.assertEqual(find_matching_skills(["js"], ["NodeJS"]), ["js"])

    def test_no_required_skills(self):
        self.assertEqual(find_matching_skills([], ["python"]), [])


class TestRelevantExperience(unittest.TestCase):

    def test_shared_long_keyword(self):
        project = _project([], "Build a campus marketplace for textbooks")
        profile = _profile([], [{"title": "Shop", "description": "An online Marketplace for students"}])
        self.assertTrue(has_relevant_experience(project, profile))

    def test_short_keywords_ignored(self):
        project = _project([], "an app for us")
        profile = _profile([], [{"description": "an app for everyone"}])
        self.assertFalse(has_relevant_experience(project, profile))

    def test_unparseable_projects_ignored(self):
        project = _project([], "Build a campus marketplace")
        profile = Profile(id="u1", projects="{not json")
        self.assertFalse(has_relevant_experience(project, profile))


class TestCalculateCompatibility(unittest.TestCase):

    def test_partial_skill_match_is_good_fit(self):
        result = calculate_compatibility(_project(["React", "Python"]), _profile(["react", "node"]))

        self.assertEqual(result.matching_skills, ["react"])
        self.assertEqual(result.score, 0.5)
        self.assertIn("1 of 2 required skills: react", result.reason)
        self.assertTrue(result.reason.startswith("✨ "))
        self.assertTrue(result.reason.endswith("Good fit!"))

    def test_breadth_bonus_when_more_skills_than_required(self):
        result = calculate_compatibility(_project(["python"]), _profile(["python", "sql"]))
        self.assertEqual(result.score, 1.0)
        self.assertTrue(result.reason.startswith("⭐ "))
        self.assertTrue(result.reason.endswith("Highly recommended!"))

    def test_experience_bonus(self):
        project = _project(["go", "rust", "c"], "Realtime telemetry dashboard")
        profile = _profile(["go"], [{"title": "Car", "description": "telemetry for a race car"}])
        result = calculate_compatibility(project, profile)
        # 1/3 + 0.15 = 0.4833 -> 0.48
        self.assertEqual(result.score, 0.48)

    def test_tier_uses_unrounded_score(self):
        required = [f"skill{i:02d}" for i in range(20)]
        candidate = required[:9] + [f"other{i:02d}" for i in range(12)]
        project = _project(required, "Realtime telemetry dashboard")
        profile = _profile(candidate, [{"title": "Car", "description": "telemetry for a race car"}])

        result = calculate_compatibility(project, profile)

        # 9/20 + 0.10 + 0.15 lands a hair above 0.7 before rounding
        self.assertEqual(result.score, 0.7)
        self.assertTrue(result.reason.startswith("⭐ "))
        self.assertTrue(result.reason.endswith("Highly recommended!"))

    def test_score_is_capped(self):
        project = _project(["python"], "machine learning platform")
        profile = _profile(["python", "pytorch", "sql"], [{"description": "machine vision"}])
        result = calculate_compatibility(project, profile)
        self.assertEqual(result.score, 1.0)

    def test_no_skills_reason(self):
        result = calculate_compatibility(_project(["python"]), _profile([]))
        self.assertEqual(result.score, 0.0)
        self.assertEqual(result.reason, "Enthusiastic member who can learn and contribute")

    def test_unrelated_skills_reason(self):
        result = calculate_compatibility(_project(["python", "sql"]), _profile(["figma"]))
        self.assertEqual(result.score, 0.0)
        self.assertEqual(result.reason, "Has 1 relevant skills that could complement the team")

    def test_lists_at_most_three_skills(self):
        required = ["a1", "b2", "c3", "d4"]
        result = calculate_compatibility(_project(required), _profile(required))
        self.assertIn("4 of 4 required skills: a1, b2, c3.", result.reason)

    def test_score_bounds(self):
        cases = [
            (_project([]), _profile([])),
            (_project([]), _profile(["x"])),
            (_project(["x"] * 5), _profile(["x"] * 9, [{"description": "xxxxx"}])),
        ]
        for project, profile in cases:
            score = calculate_compatibility(project, profile).score
            self.assertGreaterEqual(score, 0.0)
            self.assertLessEqual(score, 1.0)


class TestRoundScore(unittest.TestCase):

    def test_rounds_half_up(self):
        self.assertEqual(round_score(0.125), 0.13)
        self.assertEqual(round_score(1 / 3), 0.33)
        self.assertEqual(round_score(2 / 3), 0.67)


if __name__ == '__main__':
    unittest.main()
