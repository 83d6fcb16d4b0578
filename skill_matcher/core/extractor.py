"""
Skill Extractor - Finds taxonomy skills in free text.

Each taxonomy skill is expanded into a few lexical variants (dotted, spaced
and hyphenated spellings, plus "js" suffix forms for frameworks). A skill is
reported once, with a confidence derived from how often it is mentioned and
whether it appears next to competency language ("5 years experience with
React", "proficient in AWS").
"""

from typing import Optional
import logging
import re

from .models import ExtractedSkill
from .taxonomy import DEFAULT_TAXONOMY, FRAMEWORKS, SkillTaxonomy


class SkillExtractor:
    """Deterministic, taxonomy-driven skill extraction."""

    # Words that signal hands-on competency when next to a skill
    COMPETENCY_MARKERS = (
        "experience", "proficient", "expert", "skilled",
        "years", "developed", "built", "created",
    )

    BASE_CONFIDENCE = 60
    OCCURRENCE_BONUS = 20
    MAX_BASE_CONFIDENCE = 95
    CONTEXT_BOOST = 10
    MAX_CONFIDENCE = 98

    DEFAULT_LIMIT = 15

    # Categories whose skills also match as "<name>js", "<name>.js", "<name> js"
    JS_SUFFIX_CATEGORIES = (FRAMEWORKS,)

    def __init__(
        self,
        taxonomy: Optional[SkillTaxonomy] = None,
        limit: Optional[int] = DEFAULT_LIMIT,
    ):
        """
        Initialize the extractor.

        Args:
            taxonomy: Skill catalog to match against (default: built-in catalog)
            limit: Maximum number of skills returned (None for no cap)
        """
        self.taxonomy = taxonomy if taxonomy is not None else DEFAULT_TAXONOMY
        self.limit = limit
        self.logger = logging.getLogger(self.__class__.__name__)

        markers = "|".join(re.escape(m) for m in self.COMPETENCY_MARKERS)
        self._matchers = []
        for category, name in self.taxonomy:
            variants = "|".join(
                re.escape(v) for v in self.skill_variants(name, category)
            )
            mention = re.compile(rf"(?<!\w)(?:{variants})(?!\w)", re.IGNORECASE)
            in_context = re.compile(
                rf"(?<!\w)(?:{markers})\W+(?:\w+\W+)?(?:{variants})(?!\w)"
                rf"|(?<!\w)(?:{variants})\W+(?:\w+\W+)?(?:{markers})(?!\w)",
                re.IGNORECASE,
            )
            self._matchers.append((category, name, mention, in_context))

    def skill_variants(self, name: str, category: str) -> list[str]:
        """
        Lexical variants of a skill name, longest first.

        Args:
            name: Canonical skill name (e.g. "Node.js")
            category: The skill's taxonomy category

        Returns:
            Lowercase spellings to search for
        """
        canonical = " ".join(name.lower().split())
        variants = {
            canonical,
            re.sub(r"[.\-\s]+", "", canonical),
            canonical.replace("-", " "),
        }

        if category in self.JS_SUFFIX_CATEGORIES:
            base = canonical[:-3] if canonical.endswith(".js") else canonical
            compact = re.sub(r"[.\-\s]+", "", base)
            variants.update({base, f"{base}.js", f"{compact}js", f"{base} js"})

        # Longest first so "node.js" wins over "node" at the same position
        return sorted((v for v in variants if v), key=lambda v: (-len(v), v))

    def extract(
        self,
        text: str,
        context_hint: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[ExtractedSkill]:
        """
        Extract skills from text.

        Args:
            text: Free text (resume, job description); may be empty
            context_hint: Optional extra text (e.g. a job title) searched with the text
            limit: Override for the result cap

        Returns:
            Skills ordered by descending confidence, then taxonomy order
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a string, got {type(text).__name__}")
        if context_hint is not None and not isinstance(context_hint, str):
            raise TypeError(
                f"context_hint must be a string, got {type(context_hint).__name__}"
            )

        corpus = f"{context_hint or ''} {text}".strip().lower()
        if not corpus:
            return []

        found = []
        for category, name, mention, in_context in self._matchers:
            occurrences = len(mention.findall(corpus))
            if not occurrences:
                continue

            confidence = min(
                self.BASE_CONFIDENCE + self.OCCURRENCE_BONUS * occurrences,
                self.MAX_BASE_CONFIDENCE,
            )
            if in_context.search(corpus):
                confidence = min(confidence + self.CONTEXT_BOOST, self.MAX_CONFIDENCE)

            found.append(ExtractedSkill(name=name, category=category, confidence=confidence))

        # sorted() is stable: equal confidence keeps taxonomy order
        found = sorted(found, key=lambda s: -s.confidence)

        cap = self.limit if limit is None else limit
        if cap is not None:
            found = found[:max(cap, 0)]

        self.logger.info(f"Extracted {len(found)} skills using taxonomy matching")
        return found
