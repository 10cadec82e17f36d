# main.py
import argparse
import logging
import sys

from config import AppConfig, parse_resolution
from core.errors import SnakeError
from runners.run_snake import main as snake, print_scores

logger = logging.getLogger(__name__)

EXIT_FATAL = 2

def resolution(text):
    try:
        w, h = parse_resolution(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    cell = AppConfig().cell
    if w < cell or h < cell:
        raise argparse.ArgumentTypeError(f"resolution must be at least {cell}x{cell}")
    return w, h

def positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Snake with a local leaderboard.")
    p.add_argument("mode", nargs="?", default="play", choices=["play", "scores"])
    p.add_argument("--resolution", type=resolution, default=None, metavar="WIDTHxHEIGHT",
                   help="window size, e.g. 800x600 (default 640x480)")
    p.add_argument("--scores", default=None, metavar="PATH", help="leaderboard file")
    p.add_argument("--tick-ms", type=positive_int, default=None, help="milliseconds per tick")
    p.add_argument("--seed", type=int, default=None, help="food placement seed")
    p.add_argument("--keep-scores", action="store_true",
                   help="keep the previous run's leaderboard instead of clearing it")
    p.add_argument("-v", "--verbose", action="count", default=0)
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    cfg = AppConfig()
    overrides = {"seed": args.seed, "clear_scores_on_start": not args.keep_scores}
    if args.resolution is not None:
        overrides["screen_w"], overrides["screen_h"] = args.resolution
    if args.scores is not None:
        overrides["scores_path"] = args.scores
    if args.tick_ms is not None:
        overrides["tick_ms"] = args.tick_ms
    return cfg.with_(**overrides)

def main(argv=None) -> int:
    args = parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cfg = build_config(args)
    try:
        if args.mode == "scores":
            return print_scores(cfg)
        return snake(cfg)
    except SnakeError as e:
        logger.error("%s", e)
        return EXIT_FATAL

if __name__ == "__main__":
    sys.exit(main())
