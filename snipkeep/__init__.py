"""snipkeep - personal code-snippet archive with interactive fuzzy search."""

__version__ = "0.1.0"
