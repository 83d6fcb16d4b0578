"""
Skill suggestions and skill-list assessment.
"""

from typing import Optional

from .models import SkillsAnalysis
from .normalize import normalize, validate_skills


class SkillSuggester:
    """Suggests skills to add to a profile based on a role hint."""

    # Tested in this order; first bucket whose name occurs in the hint wins
    ROLE_SKILLS = {
        "frontend": ["React", "Vue.js", "Angular", "TypeScript", "Tailwind CSS", "Next.js"],
        "backend": ["Node.js", "Express", "Django", "PostgreSQL", "MongoDB", "Redis"],
        "fullstack": ["React", "Node.js", "TypeScript", "PostgreSQL", "AWS", "Docker"],
        "mobile": ["React Native", "Flutter", "Swift", "Kotlin", "Firebase"],
        "devops": ["Docker", "Kubernetes", "AWS", "Jenkins", "Terraform", "Prometheus"],
        "data": ["Python", "Pandas", "NumPy", "SQL", "Tableau", "Machine Learning"],
    }

    POPULAR_SKILLS = ["JavaScript", "Python", "React", "Node.js", "SQL", "Git", "AWS", "Docker"]

    MAX_SUGGESTIONS = 8

    # Skill-count thresholds for analyze()
    LIMITED_BELOW = 5
    GOOD_BELOW = 10

    def __init__(self, limit: int = MAX_SUGGESTIONS):
        self.limit = limit

    def suggest(self, current_skills, role_hint: Optional[str] = "") -> list[str]:
        """
        Suggest skills the candidate does not list yet.

        Args:
            current_skills: Skills already on the profile
            role_hint: Free text such as a job title ("Senior Frontend Engineer")

        Returns:
            Up to ``limit`` skill names
        """
        current_skills = validate_skills(current_skills, "current_skills")
        if role_hint is not None and not isinstance(role_hint, str):
            raise TypeError(f"role_hint must be a string, got {type(role_hint).__name__}")

        have = {normalize(s) for s in current_skills}
        hint = (role_hint or "").lower()

        suggestions = []
        for bucket, skills in self.ROLE_SKILLS.items():
            if bucket in hint:
                suggestions = [s for s in skills if normalize(s) not in have]
                break

        # No bucket matched, or the bucket is already covered
        if not suggestions:
            suggestions = [s for s in self.POPULAR_SKILLS if normalize(s) not in have]

        return suggestions[:self.limit]

    def analyze(self, current_skills) -> SkillsAnalysis:
        """Rate the size of a skill list and suggest additions."""
        current_skills = validate_skills(current_skills, "current_skills")
        count = len(current_skills)

        if count < self.LIMITED_BELOW:
            assessment = "Limited"
        elif count < self.GOOD_BELOW:
            assessment = "Good"
        else:
            assessment = "Excellent"

        analysis = SkillsAnalysis(
            count=count,
            assessment=assessment,
            suggestions=self.suggest(current_skills) if count < self.GOOD_BELOW else [],
        )

        if count < self.LIMITED_BELOW:
            analysis.recommendations.append({
                "type": "skills",
                "priority": "high",
                "message": "Add more skills to improve job matching",
            })

        return analysis
