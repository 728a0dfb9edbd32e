"""
Entry point for Bug Crossing.

Run the game from the repository root:
    python -m games.BugCrossing.main
    python -m games.BugCrossing.main --config marathon --seed 7
    bug-crossing --lives 3 --mute
"""

import argparse
import sys
from typing import List, Optional

import yaml

from arcadekit.logging import configure_logging, get_logger
from games.BugCrossing.engine import GameEngine
from games.BugCrossing.game.config_loader import ConfigLoader

log = get_logger('main')

LOG_LEVELS = ['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF']


def build_parser(loader: ConfigLoader) -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog='bug-crossing',
        description='Bug Crossing - cross the road, grab the gems, reach the water',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available configs: {', '.join(loader.list_available()) or '(none)'}

Controls:
  Arrow keys   move one tile
  a            toggle background audio
  b            toggle bounding boxes (enemies hold still)
  c            switch character
  r / Enter    restart
  Esc          quit
        """
    )
    parser.add_argument(
        '--config', '-c',
        type=str,
        default='classic',
        help='Config name from modes/ or path to a YAML file (default: classic)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for enemy and prize placement'
    )
    parser.add_argument(
        '--lives',
        type=int,
        default=None,
        help='Override the number of starting lives'
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        default=None,
        choices=LOG_LEVELS,
        help='Default log level (overrides ARCADE_LOG_LEVEL)'
    )
    parser.add_argument(
        '--mute',
        action='store_true',
        help='Run without audio'
    )
    parser.add_argument(
        '--assets',
        type=str,
        default=None,
        help='Directory holding images/ and audio/ (default: current directory)'
    )
    return parser


def load_game_config(loader: ConfigLoader, args: argparse.Namespace):
    """Load the selected config and apply command line overrides.

    Raises:
        FileNotFoundError: If the config doesn't exist
        yaml.YAMLError: If the YAML syntax is malformed
        ValueError: If the config or an override is invalid
    """
    game_config = loader.load(args.config)
    if args.lives is not None:
        if args.lives < 1:
            raise ValueError(f"--lives must be at least 1, got {args.lives}")
        rules = game_config.rules.model_copy(update={'starting_lives': args.lives})
        game_config = game_config.model_copy(update={'rules': rules})
    return game_config


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, then initialize and run the game."""
    loader = ConfigLoader()
    args = build_parser(loader).parse_args(argv)

    if args.log_level is not None:
        configure_logging(level=args.log_level)

    try:
        game_config = load_game_config(loader, args)
    except (FileNotFoundError, yaml.YAMLError, ValueError) as e:
        log.error("%s", e)
        return 1

    engine = GameEngine(
        game_config,
        seed=args.seed,
        mute=args.mute,
        assets_dir=args.assets,
    )
    try:
        engine.run()
    finally:
        # Ensure pygame quits cleanly
        engine.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
