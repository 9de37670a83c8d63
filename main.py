import argparse
import logging

from game import Game
from settings import FPS


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Vector-style Asteroids")
    parser.add_argument("--width", type=positive_int, help="Window width (default: fit to display)")
    parser.add_argument("--height", type=positive_int, help="Window height (default: fit to display)")
    parser.add_argument("--fps", type=positive_int, default=FPS, help="Frames per second")
    parser.add_argument("--seed", type=int, help="Seed for asteroid and particle randomness")
    parser.add_argument("--mute", action="store_true", help="Disable sound")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    args = parser.parse_args(argv)
    if (args.width is None) != (args.height is None):
        parser.error("--width and --height must be given together")
    return args


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    game = Game(args.width, args.height, fps=args.fps, seed=args.seed, mute=args.mute)
    game.run()


if __name__ == "__main__":
    main()
