#!/usr/bin/env python3

import os
import sys
import json
import logging
import argparse

from playtime.errors import LogSourceError
from playtime.ingest import ingest_directory
from playtime.log_source import DEFAULT_PATTERNS
from playtime.report import export_player, export_registry, format_report


def build_parser():
    parser = argparse.ArgumentParser(description='Reconstruct player sessions from Minecraft server logs')
    parser.add_argument('--log-dir', required=True, help='Directory containing server logs')
    parser.add_argument('--pattern', action='append', dest='patterns',
                        help='Glob pattern for log files (repeatable, default: *.log.gz and *.log)')
    parser.add_argument('--workers', type=int, default=4, help='Number of parser threads')
    parser.add_argument('--player', help='Only report this player')
    parser.add_argument('--json', action='store_true', help='Print JSON instead of text')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose logging')
    return parser


def main(argv=None):
    """Main function to run the playtime report"""
    args = build_parser().parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    # Check if paths exist
    if not os.path.isdir(args.log_dir):
        print(f"Error: Log directory {args.log_dir} does not exist")
        return 1

    patterns = args.patterns or list(DEFAULT_PATTERNS)
    try:
        registry = ingest_directory(args.log_dir, patterns, workers=args.workers)
    except LogSourceError as e:
        print(f"Error: {e}")
        return 1

    if args.player and args.player not in registry:
        available_players = ', '.join(registry)
        print(f"Error: Player '{args.player}' not found in logs. Available players: {available_players}")
        return 1

    if args.json:
        if args.player:
            output = export_player(registry.get(args.player))
        else:
            output = export_registry(registry)
        print(json.dumps(output, indent=2))
    else:
        report = format_report(registry, args.player)
        print(report if report else "No player sessions found")

    return 0


if __name__ == '__main__':
    sys.exit(main())
