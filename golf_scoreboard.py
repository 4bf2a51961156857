#!/usr/bin/env python3
"""
Golf Pool Scoreboard CLI

Scores the pool's team rosters against the current tournament leaderboard
and renders the static scoreboard page.
Rosters come from data/teams/<team>.json
The leaderboard snapshot lives in data/leaderboard.json

Usage:
    python golf_scoreboard.py
    python golf_scoreboard.py --refresh
    python golf_scoreboard.py --teams Matt JR --output docs/index.html
"""

import argparse
import json
import sys
from pathlib import Path

import requests
from jinja2 import TemplateError

from golfpool import (
    LeaderboardFetcher,
    build_scoreboard_from_config,
    rank_teams,
    render_scoreboard,
    save_scoreboard_json,
    validate_scoreboard,
)
from golfpool.config import get_config
from golfpool.constants import (
    CONFIG_FILENAME,
    DEFAULT_OUTPUT_PATH,
    SNAPSHOT_FILENAME,
)
from golfpool.logging_config import setup_logging
from golfpool.renderer import format_to_par


def main(argv=None):
    parser = argparse.ArgumentParser(description="Golf pool scoreboard generator")
    parser.add_argument(
        "--refresh", "-r",
        action="store_true",
        help="Fetch latest leaderboard from API before scoring",
    )
    parser.add_argument(
        "--data-dir", "-d",
        default="data",
        help="Path to data directory",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help=f"Path to league config (defaults to {{data-dir}}/{CONFIG_FILENAME})",
    )
    parser.add_argument(
        "--teams", "-t",
        nargs="+",
        default=None,
        help="Team identifiers to score, in display order (defaults to config teams)",
    )
    parser.add_argument(
        "--output", "-o",
        default=DEFAULT_OUTPUT_PATH,
        help="Output path for the rendered scoreboard",
    )
    parser.add_argument(
        "--json-output",
        default=None,
        help="Also write the scored teams as JSON to this path",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Write a log file to this directory",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )

    args = parser.parse_args(argv)

    logger = setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        verbose=args.verbose,
        quiet=args.quiet,
    )

    # Set up paths
    data_dir = Path(args.data_dir)
    config_path = Path(args.config) if args.config else data_dir / CONFIG_FILENAME
    snapshot_path = data_dir / SNAPSHOT_FILENAME

    try:
        config = get_config(config_path)
    except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
        logger.error(f"❌ Failed to load config: {e}")
        return 1

    if args.refresh:
        fetcher = LeaderboardFetcher(
            tourn_id=config.tourn_id, year=config.year, org_id=config.org_id
        )
        try:
            fetcher.refresh(snapshot_path)
        except (requests.RequestException, ValueError, OSError) as e:
            logger.error(f"❌ Failed to refresh leaderboard: {e}")
            return 1
        logger.info("✅ Fetched latest leaderboard")

    if args.teams:
        config = config.model_copy(update={"teams": args.teams})

    try:
        results = build_scoreboard_from_config(data_dir, config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
        logger.error(f"❌ Scoreboard build failed, nothing rendered: {e}")
        return 1

    for error in validate_scoreboard(results, config.squad_size):
        logger.warning(f"⚠️  {error}")

    try:
        render_scoreboard(results, args.output)
        if args.json_output:
            save_scoreboard_json(results, args.json_output)
    except (TemplateError, OSError, TypeError) as e:
        logger.error(f"❌ Render failed: {e}")
        return 1

    if not args.quiet:
        print("\n" + "="*60)
        print("STANDINGS")
        print("="*60)
        for rank, team in enumerate(rank_teams(results), 1):
            print(f"  {rank}. {team.team_name}: {format_to_par(team.total)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
