"""chessview - PGN game replayer built on a small chess rule engine."""

__version__ = "0.1.0"
