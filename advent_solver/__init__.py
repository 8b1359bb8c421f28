"""Solutions to daily programming puzzles (days 1 to 4) and a runner that times them."""

__version__ = "0.1.0"