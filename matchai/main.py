"""Orchestrator - CLI entry point for event matching and profile insights."""

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path

from matchai.config import AppConfig, load_config, validate_config
from matchai.matching.matcher import score_candidates
from matchai.matching.models import MatchRecord
from matchai.profile.store import ProfileStore
from matchai.service import MatchingService
from matchai.storage.database import MatchDatabase
from matchai.utils.logging_config import setup_logging

logger = logging.getLogger("matchai")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="MatchAI - compatibility matching for event participants",
    )
    parser.add_argument(
        "--config", default="config.yaml",
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "--user",
        help="User id to match against the other participants of --event",
    )
    parser.add_argument(
        "--event",
        help="Event id whose participants are candidates",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Score and log matches but don't store them",
    )
    parser.add_argument(
        "--insights", metavar="USER",
        help="Print summary, enhanced summary and networking insights for a user, then exit",
    )
    parser.add_argument(
        "--stats", action="store_true",
        help="Print match database statistics and exit",
    )
    args = parser.parse_args(argv)

    if not (args.stats or args.insights) and not (args.user and args.event):
        parser.error("--user and --event are required unless --stats or --insights is given")

    return args


def database_path(config: AppConfig) -> str:
    return str(Path(config.data_dir) / "matches.db")


def load_store(config: AppConfig) -> ProfileStore:
    if not config.profiles.path:
        raise ValueError("No profile store configured. Set profiles.path in config.yaml")
    return ProfileStore.from_file(config.profiles.path)


def print_stats(db: MatchDatabase):
    """Print database statistics."""
    stats = db.get_stats()
    print("\n=== MatchAI Statistics ===")
    print(f"Total matches stored: {stats['total_matches']}")
    if stats["average_score"] is not None:
        print(f"Average match score: {stats['average_score']}")
    print(f"Total matching runs: {stats['total_runs']}")

    if stats.get("by_event"):
        print("\nMatches by event:")
        for event_id, count in stats["by_event"].items():
            print(f"  {event_id}: {count}")

    if stats.get("last_run"):
        run = stats["last_run"]
        print(f"\nLast run: {run['run_at']}")
        print(f"  User: {run['user_id']} @ event {run['event_id']}")
        print(f"  Candidates scored: {run['candidates_scored']}")
        print(f"  Matches: {run['matches_found']}")
        print(f"  AI used: {'Yes' if run['ai_used'] else 'No'}")
        if run["error_message"]:
            print(f"  Error: {run['error_message']}")
    print()


def build_insights(config: AppConfig, user_id: str, service: MatchingService | None = None) -> dict:
    """Collect every single-profile output for one user."""
    store = load_store(config)
    profile = store.get(user_id)
    service = service or MatchingService.from_config(config)

    return {
        "summary": service.generate_profile_summary(profile),
        "enhanced_summary": service.generate_enhanced_summary(profile).to_dict(),
        "insights": service.generate_networking_insights(profile),
        "ai_configured": service.ai_available,
    }


def run_matching(
    config: AppConfig,
    user_id: str,
    event_id: str,
    dry_run: bool = False,
    service: MatchingService | None = None,
) -> list[MatchRecord]:
    """Score a user against their event and store the qualifying matches."""
    service = service or MatchingService.from_config(config)

    with MatchDatabase(database_path(config)) as db:
        try:
            logger.info("Step 1: Loading profiles...")
            store = load_store(config)
            user = store.get(user_id)
            candidates = store.event_participants(event_id, exclude=user_id)
            logger.info(
                "Profile loaded: %s (%d interests, %d skills); %d candidates in event %s",
                user.full_name or user.id, len(user.interests), len(user.skills),
                len(candidates), event_id,
            )

            logger.info("Step 2: Scoring candidates...")
            matches = score_candidates(
                user,
                candidates,
                service,
                event_id=event_id,
                threshold=config.matching.match_threshold,
                max_workers=config.matching.max_workers,
            )

            if dry_run:
                logger.info("DRY RUN - Skipping storage. Would store %d matches:", len(matches))
                for i, match in enumerate(matches, 1):
                    logger.info(
                        "  #%d [%d] %s -> %s: %s",
                        i, match.match_score, match.user1_id, match.user2_id,
                        match.result.explanation,
                    )
            else:
                logger.info("Step 3: Storing %d matches...", len(matches))
                db.upsert_matches(matches)

            db.record_run(
                user_id=user_id,
                event_id=event_id,
                candidates_scored=len(candidates),
                matches_found=len(matches),
                ai_used=service.ai_available,
            )

            logger.info("Matching complete: %d candidates, %d matches", len(candidates), len(matches))
            return matches

        except Exception as e:
            error_msg = f"{type(e).__name__}: {e}"
            logger.error("Matching failed: %s\n%s", error_msg, traceback.format_exc())
            db.record_run(user_id=user_id, event_id=event_id, error_message=error_msg)
            raise


def main(argv: list[str] | None = None):
    args = parse_args(argv)

    # Load config
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Setup logging
    setup_logging(config.log_dir, config.logging.level, config.logging.loggers)

    # Validate config and print warnings
    warnings = validate_config(config)
    for w in warnings:
        logger.warning("Config: %s", w)

    # Handle --stats
    if args.stats:
        with MatchDatabase(database_path(config)) as db:
            print_stats(db)
        return

    # Handle --insights
    if args.insights:
        try:
            print(json.dumps(build_insights(config, args.insights), indent=2))
        except (FileNotFoundError, KeyError, ValueError) as e:
            logger.error("Insights failed: %s", e)
            sys.exit(1)
        return

    try:
        matches = run_matching(config, args.user, args.event, dry_run=args.dry_run)
    except Exception:
        sys.exit(1)

    print(json.dumps([m.to_dict() for m in matches], indent=2))


if __name__ == "__main__":
    main()
