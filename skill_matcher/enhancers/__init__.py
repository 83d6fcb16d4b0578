"""
External text-generation enhancers.
"""

from .base import EnhancerError, EnhancerResponseError, SkillEnhancer
from .anthropic_enhancer import AnthropicEnhancer

__all__ = [
    "EnhancerError",
    "EnhancerResponseError",
    "SkillEnhancer",
    "AnthropicEnhancer",
]
