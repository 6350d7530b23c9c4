"""Dead Man's Draw++, a two-player push-your-luck pirate card game for the terminal."""

__version__ = "0.1.0"