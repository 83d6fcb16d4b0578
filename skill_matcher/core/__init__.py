"""Core skill extraction, scoring and ranking."""

from .models import (
    ExtractedSkill,
    ExtractionResult,
    ExtractionSource,
    MatchResult,
    JobPosting,
    Recommendation,
    DescriptionEnhancement,
    SkillsAnalysis,
)
from .normalize import normalize
from .taxonomy import SkillTaxonomy, DEFAULT_TAXONOMY
from .extractor import SkillExtractor
from .matcher import CompatibilityScorer
from .ranker import RecommendationRanker
from .suggestions import SkillSuggester
from .document_reader import read_document

__all__ = [
    "ExtractedSkill",
    "ExtractionResult",
    "ExtractionSource",
    "MatchResult",
    "JobPosting",
    "Recommendation",
    "DescriptionEnhancement",
    "SkillsAnalysis",
    "normalize",
    "SkillTaxonomy",
    "DEFAULT_TAXONOMY",
    "SkillExtractor",
    "CompatibilityScorer",
    "RecommendationRanker",
    "SkillSuggester",
    "read_document",
]
