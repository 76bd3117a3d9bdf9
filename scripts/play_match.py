#!/usr/bin/env python3
"""Play automated Lines of Action games and print a JSON summary."""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, Tuple

import numpy as np
import yaml

from loa.evaluation import MatchConfig, Player, RandomPlayer, SearchPlayer, play_match
from loa.search import SearchConfig, SearchEngine

logger = logging.getLogger(__name__)


def load_yaml_config(path_str: str) -> Dict:
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def build_config(args: argparse.Namespace, cfg: Dict) -> MatchConfig:
    config = MatchConfig(**cfg)
    for name in ("games", "max_ply", "depth", "opponent", "opponent_depth", "seed"):
        value = getattr(args, name)
        if value is not None:
            setattr(config, name, value)
    if args.same_colours:
        config.alternate_colours = False
    return config


def build_players(config: MatchConfig) -> Tuple[Player, Player]:
    engine = SearchPlayer(SearchEngine(SearchConfig(max_depth=config.depth)))
    if config.opponent == "random":
        opponent: Player = RandomPlayer(np.random.default_rng(config.seed))
    elif config.opponent == "search":
        if config.seed is not None:
            logger.warning("seed=%d is ignored: the search opponent is deterministic", config.seed)
        opponent = SearchPlayer(SearchEngine(SearchConfig(max_depth=config.opponent_depth)))
    else:
        raise ValueError(f"Unknown opponent: {config.opponent!r}")
    return engine, opponent


def main() -> None:
    parser = argparse.ArgumentParser(description="Play the search engine against an opponent.")
    parser.add_argument("--config", type=str, default="configs/match.yaml")
    parser.add_argument("--games", type=int)
    parser.add_argument("--max-ply", type=int)
    parser.add_argument("--depth", type=int)
    parser.add_argument("--opponent", choices=["random", "search"])
    parser.add_argument("--opponent-depth", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--same-colours", action="store_true", help="Engine always plays dark")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = build_config(args, load_yaml_config(args.config))
    engine, opponent = build_players(config)
    result = play_match(
        engine,
        opponent,
        games=config.games,
        max_ply=config.max_ply,
        alternate_colours=config.alternate_colours,
        progress=True,
    )

    output = {
        "games": result.games_played,
        "engine_wins": result.player_a_wins,
        "opponent_wins": result.player_b_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "engine_winrate": result.winrate_a(),
        "opponent_winrate": result.winrate_b(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
