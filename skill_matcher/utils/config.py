"""
Configuration for the skill engine.

Settings live in a JSON file (``~/.skill_matcher/config.json`` by default)
layered over built-in defaults. Keys are addressed with dot notation,
e.g. ``recommendations.min_score``.
"""

from pathlib import Path
from typing import Optional
import copy
import json
import os


def merge_settings(defaults: dict, overrides: dict) -> dict:
    """Overlay ``overrides`` on ``defaults``, descending into nested sections."""
    merged = dict(defaults)
    for name, value in overrides.items():
        current = merged.get(name)
        if isinstance(current, dict) and isinstance(value, dict):
            value = merge_settings(current, value)
        merged[name] = value
    return merged


class Config:
    """Engine settings and API keys."""

    DEFAULT_CONFIG = {
        "api_keys": {
            "anthropic": "",
        },
        "enhancer": {
            "enabled": True,
            "model": "claude-sonnet-4-20250514",
            "timeout": 5.0,
            "max_tokens": 500,
        },
        "extraction": {
            "fallback_limit": 15,
            "external_limit": 20,
            "taxonomy_constrained": False,
        },
        "recommendations": {
            "min_score": 20,
            "default_limit": 10,
        },
        "suggestions": {
            "limit": 8,
        },
    }

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = (
            Path(config_path) if config_path
            else Path.home() / ".skill_matcher" / "config.json"
        )
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path.exists():
            with open(self.config_path, "r") as f:
                self.config = merge_settings(self.config, json.load(f))

    def save(self) -> None:
        """Write the current settings, creating the directory if needed."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self.config, f, indent=2)

    def get(self, key: str, default=None):
        """
        Look up a dotted key.

        Args:
            key: Dotted path such as ``"enhancer.timeout"``
            default: Returned when any part of the path is missing
        """
        node = self.config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value) -> None:
        """Assign a dotted key, creating intermediate sections."""
        *sections, leaf = key.split(".")
        node = self.config
        for part in sections:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[leaf] = value

    def get_api_key(self, provider: str) -> str:
        """API key for ``provider``; ``<PROVIDER>_API_KEY`` in the environment wins."""
        return (
            os.environ.get(f"{provider.upper()}_API_KEY")
            or self.get(f"api_keys.{provider}", "")
        )

    def set_api_key(self, provider: str, key: str) -> None:
        """Store and persist an API key."""
        self.set(f"api_keys.{provider}", key)
        self.save()

    def masked(self) -> dict:
        """Settings with API keys shortened for display."""
        result = copy.deepcopy(self.config)
        keys = result.get("api_keys", {})
        for provider, key in keys.items():
            if not key:
                keys[provider] = "(not set)"
            elif len(key) > 8:
                keys[provider] = f"{key[:4]}...{key[-4:]}"
            else:
                keys[provider] = "****"
        return result
