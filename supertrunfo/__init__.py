"""Super Trunfo city card game: card model, comparisons, text rendering and terminal rounds."""

__version__ = "1.0.0"
__all__ = ["cards", "render", "game"]