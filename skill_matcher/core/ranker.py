"""
Recommendation Ranker - orders a pool of job postings for one candidate.
"""

from typing import Optional
import logging

from .matcher import CompatibilityScorer
from .models import JobPosting, Recommendation
from .normalize import validate_skills


class RecommendationRanker:
    """Scores every posting in a pool, drops weak matches and keeps the top N."""

    MIN_SCORE = 20
    DEFAULT_LIMIT = 10

    def __init__(
        self,
        scorer: Optional[CompatibilityScorer] = None,
        min_score: int = MIN_SCORE,
        default_limit: int = DEFAULT_LIMIT,
    ):
        self.scorer = scorer or CompatibilityScorer()
        self.min_score = min_score
        self.default_limit = default_limit
        self.logger = logging.getLogger(self.__class__.__name__)

    def rank(
        self,
        candidate_skills,
        jobs: list[JobPosting],
        limit: Optional[int] = None,
    ) -> list[Recommendation]:
        """
        Rank job postings by compatibility with the candidate's skills.

        Args:
            candidate_skills: Skill names the candidate has
            jobs: Job pool, in the order ties should be resolved
            limit: Maximum number of recommendations (default: 10)

        Returns:
            Recommendations sorted by descending score. Empty when the
            candidate has no skills (nothing to match on yet).
        """
        candidate_skills = validate_skills(candidate_skills, "candidate_skills")

        if limit is None:
            limit = self.default_limit
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise TypeError(f"limit must be an integer, got {type(limit).__name__}")

        if not isinstance(jobs, (list, tuple)):
            raise TypeError(f"jobs must be a list of JobPosting, got {type(jobs).__name__}")
        for job in jobs:
            if not isinstance(job, JobPosting):
                raise TypeError(
                    f"jobs must contain only JobPosting objects, found {type(job).__name__}"
                )

        if not candidate_skills:
            self.logger.info("Candidate has no skills; skipping recommendations")
            return []

        if limit <= 0:
            return []

        recommendations = []
        for job in jobs:
            match = self.scorer.score(candidate_skills, job.required_skills)
            if match.score >= self.min_score:
                recommendations.append(Recommendation(job=job, match=match))

        # Stable sort: equal scores keep the pool's order
        recommendations.sort(key=lambda r: r.score, reverse=True)

        self.logger.info(
            f"Ranked {len(jobs)} jobs: {len(recommendations)} above {self.min_score}, "
            f"returning {min(limit, len(recommendations))}"
        )

        return recommendations[:limit]
