"""Solutions to classic algorithmic puzzles, with a command line front end."""

__version__ = "0.1.0"
__all__ = ["anagrams", "cli", "counting", "grid", "sequences", "stacks"]