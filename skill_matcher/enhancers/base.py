"""
Base class for external text-generation enhancers.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging


class EnhancerError(Exception):
    """The external service call failed."""


class EnhancerResponseError(EnhancerError):
    """The external service answered with an unusable payload."""


class SkillEnhancer(ABC):
    """Abstract base class for external skill-extraction / rewriting services."""

    def __init__(self, api_key: Optional[str] = None, timeout: float = 5.0):
        self.api_key = api_key
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Enhancer name."""
        pass

    @property
    @abstractmethod
    def requires_api_key(self) -> bool:
        """Whether this enhancer requires an API key."""
        pass

    @abstractmethod
    def extract_skills(self, text: str, context_hint: Optional[str] = None) -> object:
        """
        Ask the service for the skills mentioned in a text.

        The return value is the decoded payload exactly as received; callers
        must check that it is a list of strings before using it.

        Raises:
            EnhancerError: If the call fails or the reply is not JSON
        """
        pass

    @abstractmethod
    def enhance_text(self, description: str, title: str, company: str) -> str:
        """
        Ask the service to rewrite a job description.

        Raises:
            EnhancerError: If the call fails or the reply has no text
        """
        pass

    def is_available(self) -> bool:
        """Check if the enhancer is properly configured."""
        if self.requires_api_key and not self.api_key:
            return False
        return True
