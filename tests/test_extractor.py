"""
Unit tests for skill_matcher/core/extractor.py
"""

import pytest

from skill_matcher.core.extractor import SkillExtractor
from skill_matcher.core.taxonomy import CLOUD_DEVOPS, DEFAULT_TAXONOMY, FRAMEWORKS


@pytest.fixture
def extractor():
    return SkillExtractor()


class TestExtractionScenarios:
    """End-to-end extraction against the built-in taxonomy."""

    def test_experience_sentence(self, extractor):
        """Should find React, Node.js and AWS with boosted confidence."""
        skills = extractor.extract("5 years experience with React and Node.js, proficient in AWS")

        assert [s.name for s in skills] == ["React", "Node.js", "AWS"]
        by_name = {s.name: s for s in skills}
        assert by_name["React"].confidence == 90
        assert by_name["React"].category == FRAMEWORKS
        assert by_name["AWS"].category == CLOUD_DEVOPS
        assert "Kubernetes" not in by_name

    def test_empty_text_returns_empty_list(self, extractor):
        """Empty input is not an error."""
        assert extractor.extract("") == []
        assert extractor.extract("   ") == []

    def test_is_deterministic(self, extractor):
        """Identical input should give identical ordered output."""
        text = "Built services in Python, Go and Docker; Kubernetes and AWS in production."
        assert extractor.extract(text) == extractor.extract(text)

    def test_context_hint_is_searched(self, extractor):
        """Should find skills that only appear in the hint."""
        skills = extractor.extract("Looking for a strong engineer", context_hint="Python Developer")
        assert [s.name for s in skills] == ["Python"]

    def test_rejects_non_string_text(self, extractor):
        """Wrong input type should fail fast."""
        with pytest.raises(TypeError):
            extractor.extract(None)
        with pytest.raises(TypeError):
            extractor.extract("python", context_hint=3)


class TestMatchingPolicy:
    """Tests for whole-word and variant matching."""

    def test_whole_word_only(self, extractor):
        """'javascript' must not count as Java."""
        names = [s.name for s in extractor.extract("Senior JavaScript developer")]
        assert "JavaScript" in names
        assert "Java" not in names

    def test_js_suffix_variants(self, extractor):
        """Should match ReactJS and NodeJS spellings of framework names."""
        names = [s.name for s in extractor.extract("Worked with ReactJS and NodeJS")]
        assert "React" in names
        assert "Node.js" in names

    def test_dotted_framework_matches_base_name(self, small_taxonomy):
        """Should match 'vue' for Vue.js."""
        skills = SkillExtractor(small_taxonomy).extract("Our UI is written in Vue")
        assert [s.name for s in skills] == ["Vue.js"]

    def test_symbol_skills(self, extractor):
        """Should match names ending in symbols."""
        names = [s.name for s in extractor.extract("Strong C++ and C# background")]
        assert "C++" in names
        assert "C#" in names

    def test_slash_skill(self, small_taxonomy):
        """Should match CI/CD."""
        skills = SkillExtractor(small_taxonomy).extract("Owns the CI/CD pipelines")
        assert [s.name for s in skills] == ["CI/CD"]

    def test_skill_reported_once(self, small_taxonomy):
        """Several variants in one text still give one entry."""
        skills = SkillExtractor(small_taxonomy).extract("React, ReactJS and react.js")
        assert [s.name for s in skills] == ["React"]

    def test_variants_include_compact_and_js_forms(self, extractor):
        """Should generate dotted, compact and js-suffixed spellings."""
        variants = extractor.skill_variants("Node.js", FRAMEWORKS)
        assert {"node.js", "nodejs", "node", "node js"} <= set(variants)
        assert variants[-1] == "node"


class TestConfidence:
    """Tests for confidence scoring."""

    def test_single_mention(self, small_taxonomy):
        """One mention scores 80."""
        skills = SkillExtractor(small_taxonomy).extract("python")
        assert skills[0].confidence == 80

    def test_repeated_mentions_capped(self, small_taxonomy):
        """Frequency raises confidence up to 95."""
        skills = SkillExtractor(small_taxonomy).extract("Python python PYTHON")
        assert skills[0].confidence == 95

    def test_competency_boost_capped(self, small_taxonomy):
        """Competency language adds 10, capped at 98."""
        skills = SkillExtractor(small_taxonomy).extract("expert python python python")
        assert skills[0].confidence == 98

    def test_skill_before_marker_is_boosted(self, small_taxonomy):
        """Should boost '<skill> experience' as well."""
        skills = SkillExtractor(small_taxonomy).extract("AWS experience required")
        assert skills[0].confidence == 90

    def test_distant_marker_not_boosted(self, small_taxonomy):
        """A marker several words away should not boost."""
        skills = SkillExtractor(small_taxonomy).extract(
            "experience in many areas including python"
        )
        assert skills[0].confidence == 80


class TestOrderingAndLimits:
    """Tests for result ordering and caps."""

    def test_ties_follow_taxonomy_order(self, small_taxonomy):
        """Equal confidence keeps taxonomy declaration order."""
        skills = SkillExtractor(small_taxonomy).extract("AWS and Python")
        assert [s.name for s in skills] == ["Python", "AWS"]

    def test_higher_confidence_first(self, small_taxonomy):
        """Should sort by descending confidence."""
        skills = SkillExtractor(small_taxonomy).extract("Python. AWS, AWS, AWS.")
        assert [s.name for s in skills] == ["AWS", "Python"]

    def test_default_cap_is_15(self, extractor):
        """Should return at most 15 skills."""
        text = ", ".join(DEFAULT_TAXONOMY.skills[:20])
        assert len(extractor.extract(text)) == 15

    def test_uncapped_extractor(self):
        """limit=None returns every match."""
        text = ", ".join(DEFAULT_TAXONOMY.skills[:20])
        assert len(SkillExtractor(limit=None).extract(text)) >= 20

    def test_per_call_limit(self, extractor):
        """Should honour a per-call limit."""
        assert len(extractor.extract("Python, Java, Go, Rust", limit=2)) == 2
