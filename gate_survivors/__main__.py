# __main__.py
import argparse

from gate_survivors.core.log import setup_logging
from gate_survivors.core.settings import LOG_LEVEL


def main(argv=None):
    parser = argparse.ArgumentParser(prog="gate_survivors", description="Lane survival shooter.")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="DEBUG, INFO, WARNING (default %(default)s)")
    parser.add_argument("--seed", type=int, default=None, help="seed the spawn RNG")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    # pygame window only once we know we're really running
    from gate_survivors.core.game import Game
    Game(seed=args.seed).run()


if __name__ == "__main__":
    main()
