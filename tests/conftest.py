"""
Shared fixtures for the skill matcher tests.

An autouse fixture removes ANTHROPIC_API_KEY so that no test can build a
live enhancer from the environment.
"""

from typing import Optional

import pytest

from skill_matcher.core.models import JobPosting
from skill_matcher.core.taxonomy import SkillTaxonomy
from skill_matcher.enhancers.base import SkillEnhancer


class FakeEnhancer(SkillEnhancer):
    """Enhancer returning a canned payload, or raising a canned error."""

    def __init__(self, payload=None, error: Optional[Exception] = None,
                 rewrite: str = "", api_key: Optional[str] = "test-key"):
        super().__init__(api_key=api_key)
        self.payload = payload
        self.error = error
        self.rewrite = rewrite
        self.calls = []

    @property
    def name(self) -> str:
        return "Fake"

    @property
    def requires_api_key(self) -> bool:
        return True

    def extract_skills(self, text, context_hint=None):
        self.calls.append(("extract_skills", text, context_hint))
        if self.error:
            raise self.error
        return self.payload

    def enhance_text(self, description, title, company):
        self.calls.append(("enhance_text", description, title, company))
        if self.error:
            raise self.error
        return self.rewrite


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Keep real credentials and the user's config file out of tests."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))


@pytest.fixture
def small_taxonomy():
    return SkillTaxonomy.from_categories({
        "Languages": ["Python", "Go"],
        "Frameworks & Libraries": ["React", "Vue.js", "Node.js"],
        "Cloud & DevOps": ["AWS", "CI/CD"],
    })


@pytest.fixture
def job_pool():
    return [
        JobPosting(id="1", title="Backend Engineer", company="Acme",
                   required_skills=["Python", "Django", "PostgreSQL"]),
        JobPosting(id="2", title="Frontend Engineer", company="Globex",
                   required_skills=["React", "TypeScript", "CSS"]),
        JobPosting(id="3", title="Full Stack Engineer", company="Initech",
                   required_skills=["React", "Node.js", "AWS"]),
        JobPosting(id="4", title="Data Engineer", company="Umbrella",
                   required_skills=["Spark", "Airflow", "Scala"]),
        JobPosting(id="5", title="Platform Engineer", company="Hooli",
                   required_skills=["React", "Node.js", "AWS"]),
    ]


@pytest.fixture
def fake_enhancer():
    """Factory for canned-response enhancers."""
    return FakeEnhancer
