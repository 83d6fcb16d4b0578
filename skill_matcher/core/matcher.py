"""
Compatibility Scorer - weighted match between candidate skills and job requirements.

Each required skill counts once; skills on the high-priority list (core
languages, major frameworks, major cloud/container platforms) count double.
The score is the matched share of the total weight, as an integer percentage.
"""

import logging

from .models import MatchResult
from .normalize import normalize, unique_skills, validate_skills


class CompatibilityScorer:
    """Scores how well a candidate's skill set covers a job's required skills."""

    HIGH_PRIORITY_SKILLS = frozenset({
        "javascript", "typescript", "python", "java", "react", "vue", "angular",
        "node.js", "express", "django", "spring", "aws", "azure", "docker",
        "kubernetes",
    })

    HIGH_PRIORITY_WEIGHT = 2
    DEFAULT_WEIGHT = 1

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def skill_weight(self, skill: str) -> int:
        """Weight of a single required skill."""
        if normalize(skill) in self.HIGH_PRIORITY_SKILLS:
            return self.HIGH_PRIORITY_WEIGHT
        return self.DEFAULT_WEIGHT

    def score(self, candidate_skills, job_skills) -> MatchResult:
        """
        Calculate the match between two skill sets.

        Args:
            candidate_skills: Skill names the candidate has
            job_skills: Skill names the job requires

        Returns:
            MatchResult with a 0-100 score; matched/missing keep the job's
            spelling and order
        """
        candidate_skills = validate_skills(candidate_skills, "candidate_skills")
        job_skills = validate_skills(job_skills, "job_skills")

        if not candidate_skills or not job_skills:
            return MatchResult(score=0, matched_skills=[], missing_skills=list(job_skills))

        candidate_keys = {normalize(s) for s in candidate_skills}

        matched = []
        missing = []
        matched_weight = 0
        total_weight = 0

        for skill in unique_skills(job_skills):
            weight = self.skill_weight(skill)
            total_weight += weight

            # A blank requirement can never be satisfied
            key = normalize(skill)
            if key and key in candidate_keys:
                matched_weight += weight
                matched.append(skill)
            else:
                missing.append(skill)

        # Half-up integer rounding: 12.5 -> 13
        score = 0
        if total_weight:
            score = (200 * matched_weight + total_weight) // (2 * total_weight)

        self.logger.debug(
            f"Match score {score}: {matched_weight}/{total_weight} weight matched "
            f"({len(candidate_skills)} candidate skills, {len(job_skills)} job skills)"
        )

        return MatchResult(score=score, matched_skills=matched, missing_skills=missing)
