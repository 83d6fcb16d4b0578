"""
Skill Matcher CLI - Command line interface for the skill engine.

Usage:
    python -m skill_matcher [command] [options]

Commands:
    extract     Extract skills from text or a resume file
    match       Score candidate skills against a job's required skills
    recommend   Rank job postings for a candidate profile
    suggest     Suggest skills to add for a role
    analyze     Assess a skill list
    enhance     Rewrite a job description with the AI enhancer
    config      Manage configuration

Examples:
    python -m skill_matcher extract --file resume.pdf
    python -m skill_matcher match --skills "React,Node.js" --job-skills "React,Node.js,AWS"
    python -m skill_matcher recommend --profile profile.json --jobs jobs.json --limit 5
    python -m skill_matcher suggest --skills "HTML,CSS" --role "Frontend Developer"
"""

import argparse
import json
import logging
import sys

from skill_matcher.core import JobPosting, read_document
from skill_matcher.core.normalize import split_skills
from skill_matcher.engine import SkillEngine
from skill_matcher.utils import Config


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Skill Matcher - Skill extraction, job matching and recommendations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Extract command
    extract_parser = subparsers.add_parser("extract", help="Extract skills from text")
    extract_parser.add_argument("--text", "-t", help="Text to analyze")
    extract_parser.add_argument("--file", "-f", help="Resume or job description file")
    extract_parser.add_argument("--hint", help="Context hint, e.g. a job title")
    extract_parser.add_argument("--constrained", action="store_true",
                                help="Keep only taxonomy skills from the AI enhancer")
    extract_parser.add_argument("--no-ai", action="store_true", help="Disable AI enhancer")
    extract_parser.add_argument("--json", action="store_true", help="Print JSON output")

    # Match command
    match_parser = subparsers.add_parser("match", help="Score a candidate against a job")
    match_parser.add_argument("--skills", "-s", required=True, help="Comma-separated candidate skills")
    match_parser.add_argument("--job-skills", "-j", required=True, help="Comma-separated job skills")
    match_parser.add_argument("--json", action="store_true", help="Print JSON output")

    # Recommend command
    rec_parser = subparsers.add_parser("recommend", help="Rank jobs for a candidate")
    rec_parser.add_argument("--profile", "-p", required=True, help="Profile JSON with a 'skills' list")
    rec_parser.add_argument("--jobs", "-j", required=True, help="Jobs JSON file (list of postings)")
    rec_parser.add_argument("--limit", "-n", type=int, help="Max recommendations")
    rec_parser.add_argument("--json", action="store_true", help="Print JSON output")

    # Suggest command
    suggest_parser = subparsers.add_parser("suggest", help="Suggest skills for a role")
    suggest_parser.add_argument("--skills", "-s", default="", help="Comma-separated current skills")
    suggest_parser.add_argument("--role", "-r", default="", help="Target role or job title")

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Assess a skill list")
    analyze_parser.add_argument("--skills", "-s", default="", help="Comma-separated current skills")

    # Enhance command
    enhance_parser = subparsers.add_parser("enhance", help="Rewrite a job description")
    enhance_parser.add_argument("--description", "-d", help="Job description text")
    enhance_parser.add_argument("--file", "-f", help="Job description file")
    enhance_parser.add_argument("--title", default="Position", help="Job title")
    enhance_parser.add_argument("--company", default="Company", help="Company name")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"), help="Set a config value")
    config_parser.add_argument("--set-api-key", nargs=2, metavar=("PROVIDER", "KEY"), help="Set API key")
    config_parser.add_argument("--init", action="store_true", help="Initialize default config")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = Config(args.config)

    commands = {
        "extract": cmd_extract,
        "match": cmd_match,
        "recommend": cmd_recommend,
        "suggest": cmd_suggest,
        "analyze": cmd_analyze,
        "enhance": cmd_enhance,
        "config": cmd_config,
    }

    try:
        commands[args.command](args, config)
    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


def load_text(text, file_path) -> str:
    if file_path:
        return read_document(file_path)
    if text is None:
        raise ValueError("Provide --text or --file")
    return text


def cmd_extract(args, config: Config):
    """Execute extract command."""
    text = load_text(args.text, args.file)
    engine = SkillEngine.from_config(config, use_enhancer=not args.no_ai)

    result = engine.extract_skills(
        text,
        context_hint=args.hint,
        taxonomy_constrained=True if args.constrained else None,
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    print(f"🧠 Extracted {len(result.skills)} skills ({result.source.value})\n")
    for skill in result.skills:
        print(f"  {skill.confidence:3d}%  {skill.name}  [{skill.category}]")


def cmd_match(args, config: Config):
    """Execute match command."""
    engine = SkillEngine.from_config(config, use_enhancer=False)
    result = engine.score_match(split_skills(args.skills), split_skills(args.job_skills))

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    print(f"📈 Match Score: {result.score}%")
    print(f"   ✅ Matched Skills: {', '.join(result.matched_skills) or '-'}")
    print(f"   ❌ Missing Skills: {', '.join(result.missing_skills) or '-'}")


def cmd_recommend(args, config: Config):
    """Execute recommend command."""
    with open(args.profile, 'r') as f:
        profile = json.load(f)
    with open(args.jobs, 'r') as f:
        jobs_data = json.load(f)

    skills = profile.get("skills") or []
    if isinstance(skills, str):
        skills = split_skills(skills)

    jobs = [JobPosting.from_dict(j) for j in jobs_data]

    engine = SkillEngine.from_config(config, use_enhancer=False)
    recommendations = engine.rank_recommendations(skills, jobs, args.limit)

    if args.json:
        print(json.dumps([r.to_dict() for r in recommendations], indent=2, default=str))
        return

    if not skills:
        print("Please add skills to your profile to get personalized recommendations")
        return

    if not recommendations:
        print(f"No jobs matched your skills (checked {len(jobs)} postings).")
        return

    print(f"🎯 Top {len(recommendations)} of {len(jobs)} jobs:\n")
    for i, rec in enumerate(recommendations, 1):
        print(f"{i:2}. {rec.job.title} @ {rec.job.company}  ({rec.score}%)")
        print(f"    ✅ {', '.join(rec.match.matched_skills)}")
        if rec.match.missing_skills:
            print(f"    ❌ {', '.join(rec.match.missing_skills)}")


def cmd_suggest(args, config: Config):
    """Execute suggest command."""
    engine = SkillEngine.from_config(config, use_enhancer=False)
    suggestions = engine.suggest_skills(split_skills(args.skills), args.role)

    print("💡 Suggested skills:")
    for skill in suggestions:
        print(f"  - {skill}")


def cmd_analyze(args, config: Config):
    """Execute analyze command."""
    engine = SkillEngine.from_config(config, use_enhancer=False)
    analysis = engine.analyze_skills(split_skills(args.skills))
    print(json.dumps(analysis.to_dict(), indent=2))


def cmd_enhance(args, config: Config):
    """Execute enhance command."""
    description = load_text(args.description, args.file)
    engine = SkillEngine.from_config(config)

    result = engine.enhance_job_description(description, args.title, args.company)

    if not result.improved:
        print("(description unchanged)\n")
    print(result.enhanced)


def cmd_config(args, config: Config):
    """Execute config command."""
    if args.init:
        config.save()
        print(f"✅ Created config at: {config.config_path}")

    elif args.show:
        print("\n📋 Current Configuration\n")
        print(json.dumps(config.masked(), indent=2))

    elif args.set:
        key, value = args.set
        # Try to parse as JSON for numbers, booleans and lists
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            pass

        config.set(key, value)
        config.save()
        print(f"✅ Set {key} = {value}")

    elif args.set_api_key:
        provider, key = args.set_api_key
        config.set_api_key(provider, key)
        print(f"✅ Set API key for {provider}")

    else:
        print("Use --show, --set, --set-api-key, or --init")


if __name__ == "__main__":
    main()
