"""Terminal matchstick game against a simple AI, with its board and helpers."""

__version__ = "1.0.0"
__all__ = ["board", "game", "cli", "numbers", "textutil"]