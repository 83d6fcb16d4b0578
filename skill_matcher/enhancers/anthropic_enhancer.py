"""
Anthropic-backed enhancer: skill extraction and job description rewriting.
"""

from typing import Optional
import json
import re

import anthropic

from .base import EnhancerError, EnhancerResponseError, SkillEnhancer


class AnthropicEnhancer(SkillEnhancer):
    """Calls the Anthropic Messages API with a single, time-bounded attempt."""

    DEFAULT_MODEL = "claude-sonnet-4-20250514"

    SKILLS_SYSTEM_PROMPT = (
        "You are a technical recruiter expert at identifying skills from job "
        "descriptions. Return only valid JSON arrays."
    )

    REWRITE_SYSTEM_PROMPT = (
        "You are a professional job description writer who creates engaging "
        "and comprehensive job postings."
    )

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        timeout: float = 5.0,
        max_tokens: int = 500,
        rewrite_max_tokens: int = 800,
    ):
        super().__init__(api_key=api_key, timeout=timeout)
        self.model = model
        self.max_tokens = max_tokens
        self.rewrite_max_tokens = rewrite_max_tokens

        # Retries belong to the caller; one attempt, then fall back
        self.client = None
        if api_key:
            self.client = anthropic.Anthropic(
                api_key=api_key,
                timeout=timeout,
                max_retries=0,
            )

    @property
    def name(self) -> str:
        return "Anthropic"

    @property
    def requires_api_key(self) -> bool:
        return True

    def extract_skills(self, text: str, context_hint: Optional[str] = None) -> object:
        prompt = f"""Analyze this job description and extract the technical skills, tools, and technologies required.
Return only a JSON array of skills (no explanation).

Job Title: {context_hint or ''}
Job Description: {text}

Focus on:
- Programming languages
- Frameworks and libraries
- Databases
- Cloud platforms
- Tools and software
- Technical concepts

Example format: ["JavaScript", "React", "Node.js", "PostgreSQL", "AWS"]"""

        reply = self._complete(prompt, self.SKILLS_SYSTEM_PROMPT, self.max_tokens, 0.3)

        try:
            return json.loads(self._strip_code_fence(reply))
        except json.JSONDecodeError as e:
            raise EnhancerResponseError(f"Skill list is not valid JSON: {e}") from e

    def enhance_text(self, description: str, title: str, company: str) -> str:
        prompt = f"""Improve this job description to be more attractive and comprehensive while keeping the original requirements.
Make it more engaging and professional.

Job Title: {title}
Company: {company}
Original Description: {description}

Improve:
- Clarity and structure
- Benefits and opportunities
- Company culture hints
- Growth potential

Keep the same technical requirements and qualifications.
Return only the improved description (no explanations)."""

        return self._complete(
            prompt, self.REWRITE_SYSTEM_PROMPT, self.rewrite_max_tokens, 0.7
        ).strip()

    def _complete(self, prompt: str, system: str, max_tokens: int, temperature: float) -> str:
        """Send one message and return the reply text."""
        if self.client is None:
            raise EnhancerError(f"{self.name} API key not configured")

        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                system=system,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            raise EnhancerError(f"{self.name} request failed: {e}") from e

        texts = [
            block.text for block in (response.content or [])
            if getattr(block, "type", None) == "text"
        ]
        if not texts:
            raise EnhancerResponseError(f"{self.name} reply contained no text")

        return "".join(texts)

    @staticmethod
    def _strip_code_fence(reply: str) -> str:
        """Remove a surrounding ```json ... ``` fence, if any."""
        match = re.search(r"```(?:json)?\s*(.*?)\s*```", reply, re.DOTALL)
        return match.group(1) if match else reply.strip()
