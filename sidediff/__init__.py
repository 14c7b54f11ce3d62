"""Side-by-side curses diff viewer for two text files, with a reusable diff model."""

__version__ = "0.1.1"

__all__ = ["__version__"]