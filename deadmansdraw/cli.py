"""Command-line entry point."""

from __future__ import annotations

import argparse

from deadmansdraw.game import Game

GAME_TITLE = "\n".join(
    (
        r"______                  _   ___  ___              _     ",
        r"|  _  \                | |  |  \/  |             ( )    ",
        r"| | | | ___   __ _   __| |  | .  . |  __ _  _ __ |/ ___ ",
        r"| | | |/ _ \ / _` | / _` |  | |\/| | / _` || '_ \  / __|",
        r"| |/ /|  __/| (_| || (_| |  | |  | || (_| || | | | \__ \ ",
        r"______ \___| \__,_| \__,_|  \_|  |_/ \__,_||_| |_| |___/",
        r"|  _  \                         _      _",
        r"| | | | _ __  __ _ __      __ _| |_  _| |_",
        r"| | | || '__|/ _` |\ \ /\ / /|_   _||_   _|",
        r"| |/ / | |  | (_| | \ V  V /   |_|    |_|",
        r"|___/  |_|   \__,_|  \_/\_/",
    )
) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Print the title and play one game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="deadmansdraw", description="Play a two-player game of Dead Man's Draw++."
    )
    parser.parse_args(argv)
    print(GAME_TITLE)
    try:
        Game().start()
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())