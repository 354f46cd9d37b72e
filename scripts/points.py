#!/usr/bin/env python3
"""
Compute the event points table of a Challonge tournament.

Usage:
    python scripts/points.py TOURNAMENT_ID [--community ID] [--api-key KEY]

Examples:
    # Print standings (API key from CHALLONGE_API_KEY or .env)
    python scripts/points.py my_weekly_12

    # Community tournament, write the points CSV
    python scripts/points.py weekly_12 --community mycommunity --output weekly_12.csv

    # Dump the normalized match list instead of points
    python scripts/points.py my_weekly_12 --matches --output matches.csv
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src import config
from src.challonge.client import ChallongeClient, ChallongeAPIError
from src.challonge.service import fetch_event
from src.export.csv_export import matches_to_csv, player_stats_to_csv
from src.scoring.engine import calculate_player_points
from src.scoring.display import format_leaderboard, format_event_header


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Compute event points from a Challonge tournament.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Points:
  Swiss win +3, close loss (<= 2) +1.5, loss +0.5, bye +3
  Streak +0.5 per consecutive win after the first
  Finals: 1st +6, 2nd +4, 3rd +3, 4th +2
'''
    )

    parser.add_argument(
        'tournament_id',
        type=str,
        help='Tournament id or URL slug'
    )
    parser.add_argument(
        '--community', '-c',
        type=str, default=None,
        help='Community subdomain for community tournaments'
    )
    parser.add_argument(
        '--api-key', '-k',
        type=str, default=None,
        help='Challonge API key (default: CHALLONGE_API_KEY)'
    )
    parser.add_argument(
        '--matches',
        action='store_true',
        help='Export the match list instead of the points table'
    )
    parser.add_argument(
        '--output', '-o',
        type=str, default=None,
        help='Write CSV to this file'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Do not print the leaderboard'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log HTTP requests'
    )

    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    api_key = args.api_key or config.API_KEY
    if not api_key:
        print("Error: API key is required (--api-key or CHALLONGE_API_KEY)")
        return 1

    try:
        tournament, matches = fetch_event(ChallongeClient(api_key), args.tournament_id, args.community)
    except ChallongeAPIError as e:
        print(f"Error: {e}")
        return 1

    if args.matches:
        content = matches_to_csv(matches)
    else:
        stats = calculate_player_points(tournament.id, matches)
        content = player_stats_to_csv(stats)

        if not args.quiet:
            print(format_event_header(tournament.id, tournament.name, len(matches), len(stats)))
            print(format_leaderboard(stats, tournament.name))

    if args.output:
        Path(args.output).write_text(content, encoding="utf-8")
        print(f"\nWrote {args.output}")
    elif args.matches or args.quiet:
        print(content, end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
