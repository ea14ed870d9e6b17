"""chessrules — a two-player chess rules engine for any front-end."""

__version__ = "0.1.0"
