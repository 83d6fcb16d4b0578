"""
Skill name normalization.

Every comparison between skill names (extractor de-duplication, scorer
matching, suggestion filtering) goes through ``normalize`` so that case and
whitespace are handled identically everywhere.
"""

from typing import Iterable


def normalize(name: str) -> str:
    """Return the comparison key for a skill name."""
    if not isinstance(name, str):
        raise TypeError(f"Skill name must be a string, got {type(name).__name__}")
    return " ".join(name.split()).lower()


def validate_skills(skills, argument: str = "skills") -> list[str]:
    """
    Check that ``skills`` is a collection of skill name strings.

    Args:
        skills: list, tuple, set or frozenset of strings
        argument: Argument name used in the error message

    Returns:
        The skills as a list (original order for sequences)

    Raises:
        TypeError: If ``skills`` is not a collection of strings
    """
    if isinstance(skills, (str, bytes)) or not isinstance(
        skills, (list, tuple, set, frozenset)
    ):
        raise TypeError(
            f"{argument} must be a list of skill names, got {type(skills).__name__}"
        )

    for item in skills:
        if not isinstance(item, str):
            raise TypeError(
                f"{argument} must contain only strings, found {type(item).__name__}"
            )

    return list(skills)


def unique_skills(skills: Iterable[str]) -> list[str]:
    """Drop duplicate names (by normalized form), keeping the first spelling.

    Blank names are kept as given; they never equal a real skill.
    """
    seen = set()
    result = []
    for skill in skills:
        key = normalize(skill)
        if not key:
            result.append(skill)
        elif key not in seen:
            seen.add(key)
            result.append(skill)
    return result


def split_skills(value: str) -> list[str]:
    """Split a comma-separated skill list, dropping blank entries."""
    return [s.strip() for s in (value or "").split(",") if s.strip()]
