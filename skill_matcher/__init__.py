"""
Skill Matcher - Skill extraction and job matching engine

This library:
1. Extracts a normalized skill list from resumes and job descriptions
2. Scores how well a candidate's skills cover a job's requirements
3. Ranks a pool of job postings into a short list of recommendations
4. Suggests skills to add for a target role
5. Optionally delegates extraction and rewriting to an external LLM,
   falling back to deterministic matching whenever that fails
"""

from skill_matcher.engine import SkillEngine

__version__ = "1.0.0"
__author__ = "Skill Matcher"

__all__ = ["SkillEngine"]
