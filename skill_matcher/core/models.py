"""
Core data models for skill extraction and job matching.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import uuid

from .normalize import split_skills, validate_skills


class ExtractionSource(Enum):
    """Which path produced an extraction result."""
    EXTERNAL = "external"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ExtractedSkill:
    """A skill found in a piece of text."""
    name: str
    category: str
    confidence: int  # 0-100

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "category": self.category,
            "confidence": self.confidence,
        }


@dataclass
class ExtractionResult:
    """Skills extracted from one text, tagged with the path that produced them."""
    source: ExtractionSource
    skills: list[ExtractedSkill] = field(default_factory=list)

    @property
    def skill_names(self) -> list[str]:
        return [skill.name for skill in self.skills]

    def to_dict(self) -> dict:
        return {
            "source": self.source.value,
            "skills": [s.to_dict() for s in self.skills],
            "count": len(self.skills),
        }


@dataclass
class MatchResult:
    """Compatibility between a candidate's skills and a job's requirements."""
    score: int = 0  # 0-100
    matched_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "matched_skills": self.matched_skills,
            "missing_skills": self.missing_skills,
        }


@dataclass
class JobPosting:
    """A job posting as read from the profile store."""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    title: str = ""
    company: str = ""
    location: str = ""
    description: str = ""
    required_skills: list[str] = field(default_factory=list)
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    status: str = "ACTIVE"

    @classmethod
    def from_dict(cls, data: dict) -> "JobPosting":
        """Build a posting from a plain dict (``skills_required`` is accepted too)."""
        skills = data.get("required_skills")
        if skills is None:
            skills = data.get("skills_required")
        if isinstance(skills, str):
            skills = split_skills(skills)

        company = data.get("company") or ""
        if isinstance(company, dict):
            company = company.get("name", "")

        return cls(
            id=str(data.get("id") or uuid.uuid4()),
            title=data.get("title") or "",
            company=company,
            location=data.get("location") or "",
            description=data.get("description") or "",
            required_skills=validate_skills(skills or [], "required_skills"),
            salary_min=data.get("salary_min"),
            salary_max=data.get("salary_max"),
            status=data.get("status") or "ACTIVE",
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "description": self.description,
            "required_skills": self.required_skills,
            "salary_min": self.salary_min,
            "salary_max": self.salary_max,
            "status": self.status,
        }


@dataclass
class Recommendation:
    """A job posting annotated with its match result."""
    job: JobPosting
    match: MatchResult

    @property
    def score(self) -> int:
        return self.match.score

    def to_dict(self) -> dict:
        data = self.job.to_dict()
        data.update({
            "match_score": self.match.score,
            "matched_skills": self.match.matched_skills,
            "missing_skills": self.match.missing_skills,
        })
        return data


@dataclass
class DescriptionEnhancement:
    """Outcome of asking the enhancer to rewrite a job description."""
    original: str
    enhanced: str

    @property
    def improved(self) -> bool:
        return self.enhanced != self.original

    def to_dict(self) -> dict:
        return {
            "original_description": self.original,
            "enhanced_description": self.enhanced,
            "improvement": self.improved,
        }


@dataclass
class SkillsAnalysis:
    """Assessment of a candidate's skill list."""
    count: int = 0
    assessment: str = "Limited"  # Limited, Good, Excellent
    suggestions: list[str] = field(default_factory=list)
    recommendations: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "assessment": self.assessment,
            "suggestions": self.suggestions,
            "recommendations": self.recommendations,
        }
