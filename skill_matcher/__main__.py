"""
Main entry point for the skill_matcher package.

Usage:
    python -m skill_matcher [command] [options]

See 'python -m skill_matcher --help' for available commands.
"""

from skill_matcher.cli import main

if __name__ == "__main__":
    main()
