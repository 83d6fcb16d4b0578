"""
Skill Engine - the library entry point used by the request-handling layer.

Combines the deterministic extractor, compatibility scorer, recommendation
ranker and suggestion helper with an optional external enhancer. Enhancer
failures never reach the caller: any problem with the external call falls
back to the deterministic path, and the result records which path was used.
"""

from typing import Optional
import logging

from skill_matcher.core.extractor import SkillExtractor
from skill_matcher.core.matcher import CompatibilityScorer
from skill_matcher.core.models import (
    DescriptionEnhancement,
    ExtractedSkill,
    ExtractionResult,
    ExtractionSource,
    JobPosting,
    MatchResult,
    Recommendation,
    SkillsAnalysis,
)
from skill_matcher.core.normalize import normalize
from skill_matcher.core.ranker import RecommendationRanker
from skill_matcher.core.suggestions import SkillSuggester
from skill_matcher.core.taxonomy import DEFAULT_TAXONOMY, SkillTaxonomy
from skill_matcher.enhancers import AnthropicEnhancer, EnhancerResponseError, SkillEnhancer
from skill_matcher.utils.config import Config


class SkillEngine:
    """Skill extraction, job matching and recommendations behind one object."""

    # Enhancer-sourced skills carry no occurrence data; rate them like a single mention
    EXTERNAL_CONFIDENCE = 80
    OTHER_CATEGORY = "Other"
    EXTERNAL_LIMIT = 20

    # Rewrites this short are treated as failed
    MIN_REWRITE_LENGTH = 100

    def __init__(
        self,
        taxonomy: Optional[SkillTaxonomy] = None,
        enhancer: Optional[SkillEnhancer] = None,
        fallback_limit: Optional[int] = SkillExtractor.DEFAULT_LIMIT,
        external_limit: int = EXTERNAL_LIMIT,
        taxonomy_constrained: bool = False,
        min_score: int = RecommendationRanker.MIN_SCORE,
        default_limit: int = RecommendationRanker.DEFAULT_LIMIT,
        suggestion_limit: int = SkillSuggester.MAX_SUGGESTIONS,
    ):
        """
        Initialize the engine.

        Args:
            taxonomy: Skill catalog (default: built-in catalog)
            enhancer: Optional external service for extraction and rewriting
            fallback_limit: Cap on deterministic extraction results
            external_limit: Cap on enhancer extraction results
            taxonomy_constrained: Drop enhancer skills that are not in the taxonomy
            min_score: Recommendations below this score are discarded
            default_limit: Number of recommendations when no limit is given
            suggestion_limit: Cap on skill suggestions
        """
        self.taxonomy = taxonomy if taxonomy is not None else DEFAULT_TAXONOMY
        self.enhancer = enhancer
        self.external_limit = external_limit
        self.taxonomy_constrained = taxonomy_constrained

        self.extractor = SkillExtractor(self.taxonomy, limit=fallback_limit)
        self.scorer = CompatibilityScorer()
        self.ranker = RecommendationRanker(
            self.scorer, min_score=min_score, default_limit=default_limit
        )
        self.suggester = SkillSuggester(limit=suggestion_limit)

        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        taxonomy: Optional[SkillTaxonomy] = None,
        use_enhancer: bool = True,
    ) -> "SkillEngine":
        """Build an engine from a Config, wiring the Anthropic enhancer if a key is set."""
        config = config or Config()

        enhancer = None
        api_key = config.get_api_key("anthropic")
        if use_enhancer and config.get("enhancer.enabled", True) and api_key:
            enhancer = AnthropicEnhancer(
                api_key=api_key,
                model=config.get("enhancer.model", AnthropicEnhancer.DEFAULT_MODEL),
                timeout=float(config.get("enhancer.timeout", 5.0)),
                max_tokens=int(config.get("enhancer.max_tokens", 500)),
            )

        return cls(
            taxonomy=taxonomy,
            enhancer=enhancer,
            fallback_limit=config.get("extraction.fallback_limit", SkillExtractor.DEFAULT_LIMIT),
            external_limit=config.get("extraction.external_limit", cls.EXTERNAL_LIMIT),
            taxonomy_constrained=config.get("extraction.taxonomy_constrained", False),
            min_score=config.get("recommendations.min_score", RecommendationRanker.MIN_SCORE),
            default_limit=config.get(
                "recommendations.default_limit", RecommendationRanker.DEFAULT_LIMIT
            ),
            suggestion_limit=config.get("suggestions.limit", SkillSuggester.MAX_SUGGESTIONS),
        )

    @property
    def enhancer_available(self) -> bool:
        return self.enhancer is not None and self.enhancer.is_available()

    def extract_skills(
        self,
        text: str,
        context_hint: Optional[str] = None,
        taxonomy_constrained: Optional[bool] = None,
    ) -> ExtractionResult:
        """
        Extract skills from free text.

        Tries the enhancer first when one is configured, and falls back to
        taxonomy matching if it is missing, fails, or returns anything other
        than a list of strings.

        Args:
            text: Resume or job description text
            context_hint: Optional job title or similar, searched along with the text
            taxonomy_constrained: Keep only taxonomy skills from the enhancer
                                  (default: engine setting)

        Returns:
            ExtractionResult tagged with the path that produced it
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a string, got {type(text).__name__}")
        if context_hint is not None and not isinstance(context_hint, str):
            raise TypeError(
                f"context_hint must be a string, got {type(context_hint).__name__}"
            )

        if taxonomy_constrained is None:
            taxonomy_constrained = self.taxonomy_constrained

        if self.enhancer is not None and text.strip():
            if not self.enhancer.is_available():
                self.logger.warning(
                    f"{self.enhancer.name} not configured, using fallback skill extraction"
                )
            else:
                try:
                    payload = self.enhancer.extract_skills(text, context_hint)
                    skills = self._external_skills(payload, taxonomy_constrained)
                    self.logger.info(
                        f"Extracted {len(skills)} skills using {self.enhancer.name}"
                    )
                    return ExtractionResult(source=ExtractionSource.EXTERNAL, skills=skills)
                except EnhancerResponseError as e:
                    self.logger.warning(f"Unusable enhancer response, using fallback: {e}")
                except Exception as e:
                    self.logger.error(f"Enhancer skill extraction failed, using fallback: {e}")

        return ExtractionResult(
            source=ExtractionSource.FALLBACK,
            skills=self.extractor.extract(text, context_hint),
        )

    def _external_skills(self, payload: object, taxonomy_constrained: bool) -> list[ExtractedSkill]:
        """Validate an enhancer payload and turn it into ExtractedSkill objects."""
        if not isinstance(payload, list):
            raise EnhancerResponseError(
                f"Expected a JSON array of skills, got {type(payload).__name__}"
            )

        skills = []
        seen = set()
        for item in payload:
            if not isinstance(item, str):
                continue
            name = item.strip()
            if len(name) <= 1:
                continue

            canonical = self.taxonomy.canonical(name)
            if taxonomy_constrained:
                if canonical is None:
                    continue
                name = canonical

            key = normalize(name)
            if key in seen:
                continue
            seen.add(key)

            skills.append(ExtractedSkill(
                name=name,
                category=self.taxonomy.category_of(name) or self.OTHER_CATEGORY,
                confidence=self.EXTERNAL_CONFIDENCE,
            ))

            if len(skills) >= self.external_limit:
                break

        return skills

    def score_match(self, candidate_skills, job_skills) -> MatchResult:
        """Weighted compatibility between candidate skills and job requirements."""
        return self.scorer.score(candidate_skills, job_skills)

    def rank_recommendations(
        self,
        candidate_skills,
        jobs: list[JobPosting],
        limit: Optional[int] = None,
    ) -> list[Recommendation]:
        """Top job postings for a candidate, best match first."""
        return self.ranker.rank(candidate_skills, jobs, limit)

    def suggest_skills(self, current_skills, role_hint: Optional[str] = "") -> list[str]:
        """Skills worth adding to a profile for the given role."""
        return self.suggester.suggest(current_skills, role_hint)

    def analyze_skills(self, current_skills) -> SkillsAnalysis:
        """Assess the size of a skill list and suggest additions."""
        return self.suggester.analyze(current_skills)

    def enhance_job_description(
        self,
        description: str,
        title: str = "Position",
        company: str = "Company",
    ) -> DescriptionEnhancement:
        """
        Rewrite a job description with the enhancer.

        The original text is returned unchanged when no enhancer is available,
        when the call fails, or when the rewrite is too short to be useful.
        """
        if not isinstance(description, str):
            raise TypeError(
                f"description must be a string, got {type(description).__name__}"
            )
        if not description.strip():
            raise ValueError("Job description is required")

        if not self.enhancer_available:
            self.logger.warning("Enhancer not configured, returning original description")
            return DescriptionEnhancement(original=description, enhanced=description)

        try:
            enhanced = self.enhancer.enhance_text(description, title or "Position", company or "Company")
        except Exception as e:
            self.logger.error(f"Failed to enhance job description: {e}")
            return DescriptionEnhancement(original=description, enhanced=description)

        if not isinstance(enhanced, str) or len(enhanced.strip()) <= self.MIN_REWRITE_LENGTH:
            self.logger.warning("Enhanced description too short, returning original")
            return DescriptionEnhancement(original=description, enhanced=description)

        self.logger.info(f"Job description enhanced using {self.enhancer.name}")
        return DescriptionEnhancement(original=description, enhanced=enhanced.strip())
