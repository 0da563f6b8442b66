"""
Command line entry point: compute a development report for one player.

Usage:
    python run.py player.json
    python run.py player.json --json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import LOG_LEVEL
from .models import Player
from .calculations import calculate_player_metrics
from .reports.text_report import render_text_report

logger = logging.getLogger(__name__)


def load_player(path: str) -> Player:
    """Read a Player record from a JSON file"""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return Player.model_validate(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Youth football player development report")
    parser.add_argument('player_file', help="JSON file with the player's measurements")
    parser.add_argument('--json', action='store_true', dest='as_json',
                        help="print calculated metrics as JSON instead of a text report")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        player = load_player(args.player_file)
    except (OSError, json.JSONDecodeError) as e:
        print(f"ERROR: Could not read {args.player_file}: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        logger.error(f"Invalid player record in {args.player_file}: {e}")
        print(f"ERROR: Invalid player record in {args.player_file}", file=sys.stderr)
        return 1

    results = calculate_player_metrics(player)

    if args.as_json:
        print(results.model_dump_json(indent=2))
    else:
        print(render_text_report(player, results), end="")
    return 0


if __name__ == '__main__':
    sys.exit(main())
