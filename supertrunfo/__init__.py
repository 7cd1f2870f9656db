"""Super Trunfo city card game: enter two cards and compare their attributes."""

__version__ = "1.0.0"
__all__ = ["card", "novice", "adventurer", "master"]